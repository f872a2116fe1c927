"""Question bank loading: DataFrames to domain records."""

import logging
import re
from datetime import datetime
from typing import Any

import pandas as pd

from application.constants import ACCEPTED_STATUSES, TAG_SEPARATORS
from domain.schemas import DIFFICULTIES, Question
from infrastructure.config.models import DataColumnsConfig

logger = logging.getLogger(__name__)

_TAG_SPLIT_RE = re.compile("|".join(re.escape(sep) for sep in TAG_SEPARATORS))
_TRUE_STRINGS = {"true", "1", "yes", "y", "t"}


def _cell(value: Any) -> Any:
    """Treat NaN/None/blank strings uniformly as missing."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if not isinstance(value, (list, tuple)) and pd.isna(value):
        return None
    return value


def _as_str(value: Any) -> str | None:
    value = _cell(value)
    if value is None:
        return None
    # Excel hands integral ids back as floats
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_int(value: Any) -> int:
    value = _cell(value)
    if value is None:
        return 0
    return int(float(value))


def _as_bool(value: Any) -> bool:
    value = _cell(value)
    if value is None:
        return False
    if isinstance(value, str):
        return value.lower() in _TRUE_STRINGS
    return bool(value)


def _as_datetime(value: Any) -> datetime | None:
    value = _cell(value)
    if value is None:
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def parse_tag_cell(value: Any) -> list[str]:
    """
    Split a tags cell into stored tag names.

    Examples:
        >>> parse_tag_cell("Two Pointers, Sliding Window")
        ['Two Pointers', 'Sliding Window']
        >>> parse_tag_cell(["Stack", " "])
        ['Stack']
    """
    value = _cell(value)
    if value is None:
        return []
    parts = value if isinstance(value, (list, tuple)) else _TAG_SPLIT_RE.split(str(value))
    return [str(p).strip() for p in parts if str(p).strip()]


def is_accepted_status(status: Any) -> bool:
    """Whether a submission status counts as an accepted solution."""
    value = _as_str(status)
    return value is not None and value.lower() in ACCEPTED_STATUSES


def _optional_col(df: pd.DataFrame, col: str | None, table: str) -> str | None:
    if col is None or not str(col).strip():
        return None
    if col not in df.columns:
        logger.warning("Configured column '%s' not found in %s table; treating it as empty.", col, table)
        return None
    return col


def _require_cols(df: pd.DataFrame, cols: list[str], table: str) -> None:
    for col in cols:
        if col not in df.columns:
            raise KeyError(f"Required column '{col}' not found in {table} table columns: {list(df.columns)}")


def build_questions(df: pd.DataFrame, columns: DataColumnsConfig) -> list[Question]:
    """
    Convert the question table into Question records.

    Args:
        df: Question bank DataFrame
        columns: Column mapping

    Returns:
        Questions in table order

    Raises:
        KeyError: If the id, slug or difficulty column is missing
        ValueError: If a row has no id/slug or an unknown difficulty
    """
    _require_cols(df, [columns.question_id_col, columns.slug_col, columns.difficulty_col], "questions")

    points_col = _optional_col(df, columns.points_col, "questions")
    tags_col = _optional_col(df, columns.tags_col, "questions")
    leetcode_col = _optional_col(df, columns.leetcode_url_col, "questions")
    codechef_col = _optional_col(df, columns.codechef_url_col, "questions")
    codeforces_col = _optional_col(df, columns.codeforces_url_col, "questions")
    in_arena_col = _optional_col(df, columns.in_arena_col, "questions")
    created_at_col = _optional_col(df, columns.created_at_col, "questions")

    questions: list[Question] = []
    for idx, row in df.iterrows():
        qid = _as_str(row[columns.question_id_col])
        slug = _as_str(row[columns.slug_col])
        if qid is None or slug is None:
            raise ValueError(f"Question row {idx} is missing an id or slug")

        difficulty = (_as_str(row[columns.difficulty_col]) or "").upper()
        if difficulty not in DIFFICULTIES:
            raise ValueError(
                f"Question {qid!r} has unknown difficulty {difficulty!r}; expected one of {list(DIFFICULTIES)}"
            )

        questions.append(
            Question(
                id=qid,
                slug=slug,
                difficulty=difficulty,
                points=_as_int(row[points_col]) if points_col else 0,
                leetcode_url=_as_str(row[leetcode_col]) if leetcode_col else None,
                codechef_url=_as_str(row[codechef_col]) if codechef_col else None,
                codeforces_url=_as_str(row[codeforces_col]) if codeforces_col else None,
                in_arena=_as_bool(row[in_arena_col]) if in_arena_col else False,
                created_at=_as_datetime(row[created_at_col]) if created_at_col else None,
                tags=parse_tag_cell(row[tags_col]) if tags_col else [],
            )
        )

    logger.debug("Built %d questions from %d rows", len(questions), len(df))
    return questions


def solved_question_ids(df: pd.DataFrame | None, user_id: str | None, columns: DataColumnsConfig) -> set[str]:
    """Question ids with an accepted submission by user_id (empty without a table or user)."""
    if df is None or user_id is None:
        return set()
    user_col = columns.submission_user_col
    question_col = columns.submission_question_col
    status_col = columns.submission_status_col
    _require_cols(df, [user_col, question_col, status_col], "submissions")

    solved: set[str] = set()
    for _, row in df.iterrows():
        if _as_str(row[user_col]) != user_id or not is_accepted_status(row[status_col]):
            continue
        qid = _as_str(row[question_col])
        if qid is not None:
            solved.add(qid)
    return solved


def bookmarked_question_ids(df: pd.DataFrame | None, user_id: str | None, columns: DataColumnsConfig) -> set[str]:
    """Question ids bookmarked by user_id (empty without a table or user)."""
    if df is None or user_id is None:
        return set()
    user_col = columns.bookmark_user_col
    question_col = columns.bookmark_question_col
    _require_cols(df, [user_col, question_col], "bookmarks")

    mask = df[user_col].map(_as_str) == user_id
    return {qid for qid in df.loc[mask, question_col].map(_as_str) if qid is not None}
