"""Locale value type used to select a translation table."""

import re
from dataclasses import dataclass
from typing import ClassVar, Iterator

_TAG_PATTERN = re.compile(
    r"^([A-Za-z]{2,8})"
    r"(?:[-_]([A-Za-z]{4}))?"
    r"(?:[-_]([A-Za-z]{2}|[0-9]{3}))?$"
)


@dataclass(frozen=True)
class Locale:
    """A language with optional script and region subtags.

    The empty language is the neutral locale: the table every lookup
    falls back to. Fields are normalized on construction, so
    ``Locale("FR", "ca")`` equals ``Locale.parse("fr-CA")``.
    """

    language: str = ""
    region: str | None = None
    script: str | None = None

    NEUTRAL: ClassVar["Locale"]

    def __post_init__(self):
        language = (self.language or "").lower()
        region = self.region.upper() if self.region else None
        script = self.script.title() if self.script else None
        if not language and (region or script):
            raise ValueError("Locale subtags require a language")
        if language and not language.isalpha():
            raise ValueError(f"Invalid language subtag: {self.language!r}")
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "region", region)
        object.__setattr__(self, "script", script)

    @classmethod
    def parse(cls, tag: "str | Locale | None") -> "Locale":
        """Parse a tag such as ``fr``, ``fr-CA``, ``pt_br`` or ``zh-Hant-TW``.

        Args:
            tag: Tag string, an existing Locale, or None/"" for neutral.

        Returns:
            The normalized Locale.

        Raises:
            ValueError: If the tag is not a recognizable language tag.
        """
        if isinstance(tag, Locale):
            return tag
        if tag is None:
            return cls.NEUTRAL
        tag = tag.strip()
        if not tag:
            return cls.NEUTRAL

        match = _TAG_PATTERN.match(tag)
        if match is None:
            raise ValueError(f"Invalid locale tag: {tag!r}")

        language, script, region = match.groups()
        return cls(language, region, script)

    @property
    def is_neutral(self) -> bool:
        return not self.language

    @property
    def parent(self) -> "Locale | None":
        """The next locale to try, or None for the neutral locale.

        ``zh-Hant-TW`` -> ``zh-Hant`` -> ``zh`` -> neutral.
        """
        if self.is_neutral:
            return None
        if self.region:
            return Locale(self.language, script=self.script)
        if self.script:
            return Locale(self.language)
        return Locale.NEUTRAL

    def fallback_chain(self) -> Iterator["Locale"]:
        """Yield this locale, then each parent, ending with neutral."""
        locale: Locale | None = self
        while locale is not None:
            yield locale
            locale = locale.parent

    @property
    def tag(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.region) if part)

    def __str__(self) -> str:
        return self.tag


Locale.NEUTRAL = Locale()
