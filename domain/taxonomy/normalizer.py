"""Tag normalization utilities."""

import re
from functools import cached_property, lru_cache

from pydantic import BaseModel, Field

from domain.taxonomy.aliases import DEFAULT_TAG_ALIASES

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9\s]+")
_WHITESPACE_RE = re.compile(r"\s+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def to_screaming_snake_case(raw: str) -> str:
    """
    Convert a free-form phrase to SCREAMING_SNAKE_CASE.

    Examples:
        >>> to_screaming_snake_case("fooBarBaz")
        'FOO_BAR_BAZ'
        >>> to_screaming_snake_case("xyz123!!")
        'XYZ123'
        >>> to_screaming_snake_case("Two Pointers")
        'TWO_POINTERS'
    """
    s = _NON_ALNUM_RE.sub(" ", raw.strip())
    s = _WHITESPACE_RE.sub("_", s)
    s = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", s)
    return s.upper().strip("_")


class TagNormalizer(BaseModel):
    """Map free-form topic phrases onto a closed vocabulary of canonical tags."""

    # (lower(phrase), canonical tag), in scan order
    aliases: list[tuple[str, str]] = Field(default_factory=lambda: list(DEFAULT_TAG_ALIASES))

    @cached_property
    def _lookup(self) -> dict[str, str]:
        """Exact-match table; the first declaration of a phrase wins."""
        lookup: dict[str, str] = {}
        for key, tag in self.aliases:
            lookup.setdefault(key, tag)
        return lookup

    @cached_property
    def _vocabulary(self) -> frozenset[str]:
        return frozenset(tag for _, tag in self.aliases)

    def normalize_tag(self, raw: object) -> str | None:
        """
        Normalize a single topic phrase to a canonical tag.

        Resolution order (first hit wins):
          1. exact alias match on the trimmed, lower-cased phrase
          2. substring match in either direction, scanning aliases in declaration order
          3. exact alias match on any whitespace-separated word
          4. SCREAMING_SNAKE_CASE transform of the raw phrase

        Examples:
            >>> normalizer = TagNormalizer()
            >>> normalizer.normalize_tag("  Two Pointers  ")
            'TWO_POINTERS'
            >>> normalizer.normalize_tag("fooBarBaz")
            'FOO_BAR_BAZ'

        Args:
            raw: Raw topic value (can be None, str, or other types)

        Returns:
            Canonical tag, or None for non-string or blank input
        """
        if not isinstance(raw, str):
            return None
        key = raw.strip().lower()
        if not key:
            return None

        if key in self._lookup:
            return self._lookup[key]

        for alias, tag in self.aliases:
            if alias in key or key in alias:
                return tag

        for word in key.split():
            if word in self._lookup:
                return self._lookup[word]

        return to_screaming_snake_case(raw)

    def normalize_tags(self, raw: object) -> set[str]:
        """Normalize a list of topic phrases; anything other than a list/tuple yields an empty set."""
        if not isinstance(raw, (list, tuple)):
            return set()
        tags: set[str] = set()
        for item in raw:
            tag = self.normalize_tag(item)
            if tag is not None:
                tags.add(tag)
        return tags

    def suggest_tags(self, raw: object) -> list[str]:
        """
        Collect every tag whose alias overlaps the phrase (substring in either direction).

        Unlike normalize_tag this does not stop at the first hit. Tags are
        returned once each, in the order first seen while scanning the table.
        """
        if not isinstance(raw, str):
            return []
        key = raw.strip().lower()
        if not key:
            return []

        suggestions: list[str] = []
        for alias, tag in self.aliases:
            if (alias in key or key in alias) and tag not in suggestions:
                suggestions.append(tag)
        return suggestions

    def is_valid_tag(self, tag: object) -> bool:
        """True iff tag is a canonical tag reachable from the alias table."""
        return isinstance(tag, str) and tag in self._vocabulary

    def available_tags(self) -> list[str]:
        """Distinct canonical tags in the order they are first declared."""
        return list(dict.fromkeys(tag for _, tag in self.aliases))


@lru_cache(maxsize=1)
def default_normalizer() -> TagNormalizer:
    """Process-wide normalizer backed by the shipped alias table."""
    return TagNormalizer()


def normalize_tag(raw: object) -> str | None:
    return default_normalizer().normalize_tag(raw)


def normalize_tags(raw: object) -> set[str]:
    return default_normalizer().normalize_tags(raw)


def suggest_tags(raw: object) -> list[str]:
    return default_normalizer().suggest_tags(raw)


def is_valid_tag(tag: object) -> bool:
    return default_normalizer().is_valid_tag(tag)
