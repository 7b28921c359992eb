"""Base interface for locale-partitioned string stores."""

from abc import ABC, abstractmethod

from uistrings.models import Locale


class ResourceStore(ABC):
    """Abstract key to text store, partitioned by locale.

    Stores answer for one exact locale only. Walking the fallback chain
    is the catalog's job.
    """

    @abstractmethod
    def lookup(self, key: str, locale: Locale) -> str | None:
        """Return the text for ``key`` in exactly ``locale``, or None."""

    @abstractmethod
    def locales(self) -> list[Locale]:
        """List the locales this store has a table for."""

    @abstractmethod
    def keys(self, locale: Locale) -> set[str]:
        """Return the keys defined for exactly ``locale``."""

    def __contains__(self, locale: Locale) -> bool:
        return locale in self.locales()
