"""Locale value type and Accept-Language negotiation."""

import re
from dataclasses import dataclass

_TAG_SEPARATOR = re.compile(r"[-_]")


@dataclass(frozen=True)
class Locale:
    """Immutable language/country/variant triple, usable as a cache key.

    Language is stored lower case and country upper case, so ``en-us``,
    ``en_US`` and ``EN_us`` all compare equal.
    """

    language: str
    country: str = ""
    variant: str = ""

    def __post_init__(self):
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "country", self.country.upper())

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """Parse a tag such as ``fr``, ``pt-BR`` or ``de_DE_1901``.

        Raises:
            ValueError: If the tag is empty or its language part is not alphabetic
        """
        parts = _TAG_SEPARATOR.split(tag.strip())
        if not parts or not parts[0].isalpha():
            raise ValueError(f"Invalid locale tag: {tag!r}")
        language = parts[0]
        country = parts[1] if len(parts) > 1 else ""
        variant = "_".join(parts[2:])
        return cls(language, country, variant)

    def fallbacks(self) -> list["Locale"]:
        """Return this locale and its parents, most specific first."""
        chain = [self]
        if self.variant:
            chain.append(Locale(self.language, self.country))
        if self.country:
            chain.append(Locale(self.language))
        return chain

    def __str__(self) -> str:
        return "_".join(part for part in (self.language, self.country, self.variant) if part)


def resolve_locale(accept_language: str | None, default: Locale) -> Locale:
    """Pick the preferred locale from an Accept-Language header.

    Entries are ordered by their ``q`` weight; ties keep header order.
    Wildcards, zero weights and malformed entries are skipped.

    Args:
        accept_language: Raw header value (may be None or empty)
        default: Locale to use when the header yields nothing usable

    Returns:
        The highest weighted locale, or ``default``
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, int, Locale]] = []
    for position, entry in enumerate(accept_language.split(",")):
        tag, _, params = entry.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue

        try:
            locale = Locale.parse(tag)
        except ValueError:
            continue
        candidates.append((-quality, position, locale))

    if not candidates:
        return default
    return min(candidates)[2]
