"""In-memory resource store."""

from collections.abc import Mapping

from uistrings.models import Locale
from uistrings.stores.base import ResourceStore


class DictResourceStore(ResourceStore):
    """Store backed by plain dictionaries.

    ``tables`` maps locale tags (``""`` for neutral) to ``{key: text}``.
    The tables are copied, so later changes to the caller's dicts are not
    visible through the store.

    Raises:
        ValueError: If two tags name the same locale, or an entry is not
            a string key mapped to a string.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None):
        self._tables: dict[Locale, dict[str, str]] = {}
        for tag, entries in (tables or {}).items():
            locale = Locale.parse(tag)
            if locale in self._tables:
                raise ValueError(f"Duplicate table for locale '{locale}' (tag {tag!r})")
            self._tables[locale] = self._copy_table(tag, entries)

    @staticmethod
    def _copy_table(tag: str, entries: Mapping[str, str]) -> dict[str, str]:
        table: dict[str, str] = {}
        for key, value in entries.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(f"Table {tag!r}: entry {key!r} must map a string key to a string")
            table[key] = value
        return table

    def lookup(self, key: str, locale: Locale) -> str | None:
        table = self._tables.get(locale)
        if table is None:
            return None
        return table.get(key)

    def locales(self) -> list[Locale]:
        return list(self._tables.keys())

    def keys(self, locale: Locale) -> set[str]:
        return set(self._tables.get(locale, {}))
