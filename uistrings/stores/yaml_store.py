"""YAML-backed resource bundle."""

import logging
from pathlib import Path
from typing import Any

import yaml

from uistrings.errors import StoreUnavailableError
from uistrings.models import Locale
from uistrings.stores.base import ResourceStore

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class YamlResourceStore(ResourceStore):
    """A named bundle of YAML string tables in one directory.

    Layout for ``base_name="ui_strings"``::

        ui_strings.yaml        neutral table (required)
        ui_strings.fr.yaml     French
        ui_strings.fr-CA.yaml  Canadian French

    Every table is loaded when the store is constructed; the store is
    read-only afterwards.
    """

    def __init__(self, directory: str | Path, base_name: str = "ui_strings"):
        self.directory = Path(directory)
        self.base_name = base_name
        self._tables: dict[Locale, dict[str, str]] = {}
        self._load()

    def lookup(self, key: str, locale: Locale) -> str | None:
        table = self._tables.get(locale)
        if table is None:
            return None
        return table.get(key)

    def locales(self) -> list[Locale]:
        return list(self._tables.keys())

    def keys(self, locale: Locale) -> set[str]:
        return set(self._tables.get(locale, {}))

    def _load(self) -> None:
        if not self.directory.is_dir():
            raise StoreUnavailableError(
                f"Resource directory not found: {self.directory}",
                source=str(self.directory),
            )

        found_neutral = False
        for path in sorted(self.directory.iterdir()):
            locale = self._locale_for(path)
            if locale is None:
                continue
            if locale in self._tables:
                raise StoreUnavailableError(
                    f"Duplicate table for locale '{locale}' in bundle '{self.base_name}'",
                    source=str(path),
                )
            self._tables[locale] = self._read_table(path)
            found_neutral = found_neutral or locale.is_neutral
            logger.debug(
                "Loaded %d strings for locale '%s' from %s",
                len(self._tables[locale]),
                locale.tag or "neutral",
                path,
            )

        if not found_neutral:
            raise StoreUnavailableError(
                f"Neutral table '{self.base_name}.yaml' not found in {self.directory}",
                source=str(self.directory),
            )

    def _locale_for(self, path: Path) -> Locale | None:
        """Map a bundle file name to its locale, or None if it is not part of the bundle."""
        if path.suffix.lower() not in YAML_SUFFIXES or not path.is_file():
            return None
        stem = path.name[: -len(path.suffix)]
        if stem == self.base_name:
            return Locale.NEUTRAL
        prefix = f"{self.base_name}."
        if not stem.startswith(prefix):
            return None
        try:
            return Locale.parse(stem[len(prefix):])
        except ValueError:
            logger.warning("Skipping %s: file name does not end in a locale tag", path)
            return None

    def _read_table(self, path: Path) -> dict[str, str]:
        try:
            with open(path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise StoreUnavailableError(f"Cannot read {path}: {e}", source=str(path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreUnavailableError(
                f"{path} must contain a mapping of keys to strings",
                source=str(path),
            )

        table: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise StoreUnavailableError(
                    f"{path}: entry {key!r} must map a string key to a string",
                    source=str(path),
                )
            table[key] = value
        return table
