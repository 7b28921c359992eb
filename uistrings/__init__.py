"""Localized UI string catalog."""

from uistrings.catalog import (
    StringCatalog,
    get_catalog,
    get_string,
    reset_catalog,
    set_catalog,
)
from uistrings.errors import CatalogError, MissingKeyError, StoreUnavailableError
from uistrings.models import Locale, StringKey

__all__ = [
    "StringCatalog",
    "get_catalog",
    "get_string",
    "set_catalog",
    "reset_catalog",
    "StringKey",
    "Locale",
    "CatalogError",
    "MissingKeyError",
    "StoreUnavailableError",
]
