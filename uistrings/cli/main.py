"""CLI commands for inspecting the string catalog."""

from pathlib import Path

import click

from config.settings import settings
from uistrings.catalog import DEFAULT_RESOURCE_DIR, StringCatalog
from uistrings.errors import StoreUnavailableError
from uistrings.logger import setup_logging
from uistrings.models import Locale, StringKey
from uistrings.stores import YamlResourceStore


def _parse_locale(ctx: click.Context, param: click.Parameter, value):
    """Click callback turning tag strings into Locale values."""
    if value is None:
        return None
    try:
        if isinstance(value, tuple):
            return tuple(Locale.parse(v) for v in value)
        return Locale.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _catalog(ctx: click.Context) -> StringCatalog:
    catalog: StringCatalog = ctx.obj["catalog"]
    try:
        catalog.store
    except StoreUnavailableError as e:
        raise click.ClickException(str(e)) from e
    return catalog


@click.group()
@click.option(
    "--resource-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding the resource bundle (default: packaged bundle)",
)
@click.option(
    "--base-name",
    default=None,
    help="Bundle base name (default: ui_strings)",
)
@click.option(
    "--default-locale",
    default=None,
    help="Locale used when --locale is not given",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx, resource_dir, base_name, default_locale, log_level):
    """Look up and check localized UI strings."""
    setup_logging(log_level or settings.log_level)

    directory = resource_dir or settings.resource_dir or DEFAULT_RESOURCE_DIR
    name = base_name or settings.resource_base_name
    locale_tag = default_locale if default_locale is not None else settings.default_locale
    try:
        fallback = Locale.parse(locale_tag)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--default-locale") from e

    ctx.ensure_object(dict)
    ctx.obj["catalog"] = StringCatalog(
        lambda: YamlResourceStore(directory, name),
        fallback,
    )


@cli.command()
@click.argument("key")
@click.option("--locale", "locale", default=None, callback=_parse_locale, help="Locale tag, e.g. fr or fr-CA")
@click.pass_context
def lookup(ctx, key: str, locale: Locale | None):
    """Print the text for KEY (entry name, member name, or raw key)."""
    catalog = _catalog(ctx)
    resolved = StringKey.lookup(key) or key
    text = catalog.resolve(resolved, locale)
    if text is None:
        where = locale or catalog.default_locale
        click.echo(f"No string for '{key}' (locale: {where.tag or 'neutral'})", err=True)
        ctx.exit(1)
    click.echo(text)


@cli.command()
@click.option(
    "--locale",
    "locales",
    multiple=True,
    callback=_parse_locale,
    help="Also report translation coverage for this locale (repeatable)",
)
@click.pass_context
def check(ctx, locales: tuple[Locale, ...]):
    """Check that the bundle defines every known key."""
    catalog = _catalog(ctx)
    total = len(StringKey)

    missing = catalog.missing_keys(Locale.NEUTRAL)
    for key in missing:
        click.echo(f"missing: {key.value}")
    for name in catalog.extra_keys():
        click.echo(f"unused: {name}")

    for locale in locales:
        untranslated = catalog.untranslated_keys(locale)
        translated = total - len(untranslated)
        click.echo(f"{locale.tag or 'neutral'}: {translated}/{total} translated, {len(untranslated)} fall back")

    if missing:
        click.echo(f"{len(missing)} of {total} keys missing from the neutral table", err=True)
        ctx.exit(1)
    click.echo(f"OK: {total} keys")


@cli.command("locales")
@click.pass_context
def list_locales(ctx):
    """List the locales present in the bundle."""
    catalog = _catalog(ctx)
    tags = sorted(locale.tag for locale in catalog.store.locales())
    for tag in tags:
        click.echo(tag or "(neutral)")


if __name__ == "__main__":
    cli()
