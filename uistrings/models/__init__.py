"""Domain models for the UI string catalog."""

from uistrings.models.keys import StringKey
from uistrings.models.locale import Locale

__all__ = [
    "StringKey",
    "Locale",
]
