"""String catalog: resolves UI string keys to localized text."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from config.settings import settings
from uistrings.errors import MissingKeyError, StoreUnavailableError
from uistrings.models import Locale, StringKey
from uistrings.stores import ResourceStore, YamlResourceStore

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_DIR = Path(__file__).parent / "resources"

StoreFactory = Callable[[], ResourceStore]
LocaleLike = Locale | str | None


def _entry_name(key: StringKey | str) -> str:
    if isinstance(key, StringKey):
        return key.value
    return key


class StringCatalog:
    """Resolves string keys against a resource store with locale fallback.

    The store is created from ``store_factory`` on first use, exactly once
    even when several threads race on the first lookup. After that,
    lookups read the store without locking.

    A key that is missing from the requested locale and every fallback
    resolves to ``None``. Use ``require`` to get a ``MissingKeyError``
    instead.
    """

    def __init__(self, store_factory: StoreFactory, default_locale: LocaleLike = None):
        self._store_factory = store_factory
        self._store: ResourceStore | None = None
        self._lock = threading.Lock()
        self.default_locale = Locale.parse(default_locale)

    @classmethod
    def from_store(cls, store: ResourceStore, default_locale: LocaleLike = None) -> "StringCatalog":
        """Wrap an already constructed store."""
        return cls(lambda: store, default_locale)

    @property
    def store(self) -> ResourceStore:
        """The backing store, opened on first access.

        Raises:
            StoreUnavailableError: If the store cannot be opened. Nothing is
                cached on failure, so the next access tries again.
        """
        store = self._store
        if store is not None:
            return store
        with self._lock:
            if self._store is None:
                self._store = self._open_store()
            return self._store

    @property
    def is_loaded(self) -> bool:
        return self._store is not None

    def _open_store(self) -> ResourceStore:
        try:
            store = self._store_factory()
        except StoreUnavailableError:
            raise
        except Exception as e:
            raise StoreUnavailableError(f"Failed to open resource store: {e}") from e
        logger.debug("Opened resource store %s", type(store).__name__)
        return store

    def _target(self, locale: LocaleLike) -> Locale:
        if locale is None:
            return self.default_locale
        return Locale.parse(locale)

    def resolve(self, key: StringKey | str, locale: LocaleLike = None) -> str | None:
        """Look up the text for a key.

        Args:
            key: A StringKey, or any raw entry name. Raw names are passed
                to the store as-is.
            locale: Locale or tag to look in. Defaults to ``default_locale``.

        Returns:
            The text from the first locale in the fallback chain that
            defines the key, or None if none does.
        """
        name = _entry_name(key)
        store = self.store
        target = self._target(locale)
        for candidate in target.fallback_chain():
            text = store.lookup(name, candidate)
            if text is not None:
                return text
        return None

    def require(self, key: StringKey | str, locale: LocaleLike = None) -> str:
        """Like ``resolve`` but raises ``MissingKeyError`` on a miss."""
        text = self.resolve(key, locale)
        if text is None:
            target = self._target(locale)
            raise MissingKeyError(_entry_name(key), target)
        return text

    def missing_keys(self, locale: LocaleLike = None) -> list[StringKey]:
        """StringKey members that resolve to nothing for ``locale``."""
        return [key for key in StringKey if self.resolve(key, locale) is None]

    def untranslated_keys(self, locale: LocaleLike = None) -> list[StringKey]:
        """StringKey members that only resolve through the neutral table.

        Like every lookup here, ``locale=None`` means ``default_locale``.
        """
        target = self._target(locale)
        store = self.store
        chain = [loc for loc in target.fallback_chain() if not loc.is_neutral]
        if not chain:
            return []
        return [
            key
            for key in StringKey
            if all(store.lookup(key.value, loc) is None for loc in chain)
        ]

    def extra_keys(self) -> list[str]:
        """Neutral entries that no StringKey member refers to."""
        known = {key.value for key in StringKey}
        return sorted(self.store.keys(Locale.NEUTRAL) - known)


def default_store() -> ResourceStore:
    """Open the bundle configured in settings."""
    return YamlResourceStore(
        settings.resource_dir or DEFAULT_RESOURCE_DIR,
        settings.resource_base_name,
    )


# Process default catalog
_default_catalog: StringCatalog | None = None
_default_lock = threading.Lock()


def get_catalog() -> StringCatalog:
    """Get the process default catalog, creating it on first call."""
    global _default_catalog
    catalog = _default_catalog
    if catalog is None:
        with _default_lock:
            if _default_catalog is None:
                _default_catalog = StringCatalog(default_store, settings.default_locale)
            catalog = _default_catalog
    return catalog


def set_catalog(catalog: StringCatalog) -> None:
    """Install ``catalog`` as the process default."""
    global _default_catalog
    with _default_lock:
        _default_catalog = catalog


def reset_catalog() -> None:
    """Drop the process default so the next ``get_catalog`` builds a new one."""
    global _default_catalog
    with _default_lock:
        _default_catalog = None


def get_string(key: StringKey | str, locale: LocaleLike = None) -> str | None:
    """Resolve ``key`` with the process default catalog."""
    return get_catalog().resolve(key, locale)
