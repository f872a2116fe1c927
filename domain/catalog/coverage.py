"""Tag coverage table generation."""

from pathlib import Path

import pandas as pd

from domain.schemas import DIFFICULTIES, Question
from domain.taxonomy.normalizer import TagNormalizer, to_screaming_snake_case

COVERAGE_COLUMNS = ["Tag", "Recognized", *DIFFICULTIES, "Total"]


def compute_tag_coverage_table(questions: list[Question], normalizer: TagNormalizer) -> pd.DataFrame:
    """
    Count questions per canonical tag, broken down by difficulty.

    Columns in the result:
      - Tag: SCREAMING_SNAKE_CASE form of the stored tag name
      - Recognized: whether the tag belongs to the normalizer's vocabulary
      - one column per difficulty (BEGINNER .. VERYHARD): question counts
      - Total: questions carrying the tag

    A question whose stored names collapse to the same tag is counted once for it.

    Args:
        questions: Question bank
        normalizer: Normalizer whose vocabulary decides the Recognized column

    Returns:
        DataFrame sorted by Total (descending) then Tag
    """
    rows: list[dict[str, str]] = []
    for q in questions:
        tags = {to_screaming_snake_case(name) for name in q.tags if name}
        rows.extend({"Tag": tag, "difficulty": q.difficulty} for tag in tags if tag)

    if not rows:
        return pd.DataFrame(columns=COVERAGE_COLUMNS)

    long_df = pd.DataFrame(rows)
    table = pd.crosstab(long_df["Tag"], long_df["difficulty"])
    table = table.reindex(columns=list(DIFFICULTIES), fill_value=0)
    table["Total"] = table.sum(axis=1)
    table = table.reset_index()
    table.columns.name = None

    table.insert(1, "Recognized", table["Tag"].map(normalizer.is_valid_tag))
    table = table.sort_values(["Total", "Tag"], ascending=[False, True]).reset_index(drop=True)

    return table[COVERAGE_COLUMNS]


def compute_tag_coverage_table_and_save(
    questions: list[Question],
    normalizer: TagNormalizer,
    output_dir: Path,
    filename: str = "tag_coverage.csv",
) -> tuple[pd.DataFrame, Path]:
    """Compute the tag coverage table and save it as CSV; returns the table and its path."""
    table = compute_tag_coverage_table(questions, normalizer)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / filename
    table.to_csv(out_path, index=False)
    return table, out_path
