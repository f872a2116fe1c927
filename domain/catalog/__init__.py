"""
Question catalog: in-memory filtering and tag coverage.

Pure functions over question records already loaded into memory.
"""

from domain.catalog.coverage import compute_tag_coverage_table, compute_tag_coverage_table_and_save
from domain.catalog.filters import (
    filter_questions,
    infer_platforms,
    list_tag_names,
    slug_from_url,
    slug_to_title,
)

__all__ = [
    "filter_questions",
    "infer_platforms",
    "list_tag_names",
    "slug_from_url",
    "slug_to_title",
    "compute_tag_coverage_table",
    "compute_tag_coverage_table_and_save",
]
