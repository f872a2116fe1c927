"""Human-readable summaries for search and coverage runs."""

import logging
from pathlib import Path

import pandas as pd

from domain.schemas import SearchResult

logger = logging.getLogger(__name__)


def log_search_summary(result: SearchResult, output_path: Path | None) -> None:
    """
    Log a concise, human-readable search summary.

    Args:
        result: Search result
        output_path: Path to the JSON artifact (optional)
    """
    logger.info("=== Search Summary ===")
    logger.info("Normalized topics: %s", result.normalized_topics or "(none)")
    logger.info("Platforms: %s", result.platforms or "(any)")
    logger.info("Matched: %d, returned: %d", result.total_matched, len(result.questions))

    for q in result.questions:
        flags = []
        if q.is_solved:
            flags.append("solved")
        if q.is_bookmarked:
            flags.append("bookmarked")
        logger.info(
            "  %-40s %-8s %4d pts %s",
            q.title,
            q.difficulty,
            q.points,
            f"[{', '.join(flags)}]" if flags else "",
        )

    if output_path is not None:
        logger.info("--- Artifacts ---")
        logger.info("Search results JSON: %s", output_path)


def log_coverage_summary(table: pd.DataFrame, output_path: Path) -> None:
    """Log the tag coverage table and where it was written."""
    logger.info("=== Tag Coverage ===")
    if table.empty:
        logger.info("No tagged questions found.")
    else:
        unrecognized = table.loc[~table["Recognized"].astype(bool), "Tag"].tolist()
        logger.info("%d tags, %d outside the canonical vocabulary", len(table), len(unrecognized))
        logger.debug("Coverage table:\n%s", table)
        if unrecognized:
            logger.info("Unrecognized tags: %s", unrecognized)

    logger.info("--- Artifacts ---")
    logger.info("Coverage CSV: %s", output_path)
