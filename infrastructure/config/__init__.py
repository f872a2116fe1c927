"""
Configuration management: models, loading, and validation.

Handles:
- SearchConfig: Main search configuration
- Column mapping for question/submission/bookmark tables
- Tag alias tables from YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_search_config, load_tag_config
from infrastructure.config.models import (
    # Column mapping
    DataColumnsConfig,
    # Limits
    LimitsConfig,
    # Main config
    SearchConfig,
)

__all__ = [
    # Main config (most commonly used)
    "SearchConfig",
    "load_search_config",
    # Data columns
    "DataColumnsConfig",
    # Limits
    "LimitsConfig",
    # Loaders
    "load_tag_config",
]
