"""
Topic taxonomy: tag normalization and alias configuration.

Maps free-form topic phrases onto canonical SCREAMING_SNAKE_CASE tags.
All functions in this module are pure (no file I/O). Normalization never raises;
only parse_tag_config rejects malformed alias tables.
"""

from domain.taxonomy.aliases import DEFAULT_TAG_ALIASES
from domain.taxonomy.loader import parse_tag_config
from domain.taxonomy.normalizer import (
    TagNormalizer,
    default_normalizer,
    is_valid_tag,
    normalize_tag,
    normalize_tags,
    suggest_tags,
    to_screaming_snake_case,
)

__all__ = [
    "TagNormalizer",
    "DEFAULT_TAG_ALIASES",
    "default_normalizer",
    "normalize_tag",
    "normalize_tags",
    "suggest_tags",
    "is_valid_tag",
    "to_screaming_snake_case",
    "parse_tag_config",
]
