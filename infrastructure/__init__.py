"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Dataset reading (CSV, Excel, JSON)
- Observability (logging)

This is the only layer that reads configuration or data files.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    LimitsConfig,
    SearchConfig,
    load_search_config,
    load_tag_config,
)
from infrastructure.io import read_table

__all__ = [
    # Configuration (most commonly used)
    "load_search_config",
    "load_tag_config",
    "SearchConfig",
    "LimitsConfig",
    # Data
    "read_table",
]
