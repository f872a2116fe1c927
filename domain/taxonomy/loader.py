"""Parse tag alias configuration from YAML dict."""

import re
from typing import Any

from domain.taxonomy.normalizer import TagNormalizer

_CANONICAL_TAG_RE = re.compile(r"^[A-Z0-9]+(?:_[A-Z0-9]+)*$")


def parse_tag_config(data: dict[str, Any]) -> TagNormalizer:
    """
    Parse pre-loaded YAML dict into a TagNormalizer.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected shape:
        canonical_tags: [LOOPS, STACK, ...]   # optional allow-list
        aliases:                               # ordered: phrase -> tag
          for loop: LOOPS
          lifo: STACK

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        TagNormalizer with trimmed, lower-cased alias keys in declaration order

    Raises:
        ValueError: If required keys are missing, have wrong types, or map to invalid tags
    """
    aliases_raw = data.get("aliases")
    canonical = data.get("canonical_tags")

    if not isinstance(aliases_raw, dict) or not aliases_raw:
        raise ValueError("aliases must be a non-empty mapping")
    if canonical is not None and not isinstance(canonical, list):
        raise ValueError("canonical_tags must be a list")

    allowed = {str(c).strip() for c in canonical} if canonical is not None else None

    aliases: list[tuple[str, str]] = []
    seen: dict[str, str] = {}
    for raw_key, raw_tag in aliases_raw.items():
        key = str(raw_key).strip().lower()
        tag = str(raw_tag).strip()
        if not key:
            raise ValueError("alias keys must be non-empty")
        if not _CANONICAL_TAG_RE.match(tag):
            raise ValueError(f"Tag {tag!r} for alias {key!r} is not SCREAMING_SNAKE_CASE")
        if allowed is not None and tag not in allowed:
            raise ValueError(f"Tag {tag!r} for alias {key!r} is not listed in canonical_tags")
        if key in seen:
            if seen[key] != tag:
                raise ValueError(f"Alias {key!r} maps to both {seen[key]!r} and {tag!r}")
            continue
        seen[key] = tag
        aliases.append((key, tag))

    return TagNormalizer(aliases=aliases)
