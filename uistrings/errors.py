"""Exceptions raised by the string catalog."""

from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base class for catalog errors."""

    pass


class MissingKeyError(CatalogError, KeyError):
    """Raised by ``StringCatalog.require`` when a key has no text in any fallback locale."""

    def __init__(self, key: str, locale: Any = None):
        self.key = key
        self.locale = locale
        super().__init__(key)

    def __str__(self) -> str:
        where = str(self.locale) if self.locale is not None and str(self.locale) else "neutral"
        return f"String '{self.key}' not found (locale: {where})"


class StoreUnavailableError(CatalogError):
    """Raised when the backing resource store cannot be opened."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)
