"""Question search workflow."""

import logging

import pandas as pd

from application.question_bank import bookmarked_question_ids, solved_question_ids
from domain.catalog.filters import filter_questions
from domain.schemas import Question, QuestionQuery, SearchResult
from infrastructure.config.models import SearchConfig

logger = logging.getLogger(__name__)


def search_questions(
    cfg: SearchConfig,
    questions: list[Question],
    query: QuestionQuery,
    *,
    user_id: str | None = None,
    submissions_df: pd.DataFrame | None = None,
    bookmarks_df: pd.DataFrame | None = None,
) -> SearchResult:
    """
    Run a filtered question search for one caller.

    Solved/bookmarked flags are only populated when both a user id and the
    corresponding table are available; otherwise every question reads as
    unsolved and not bookmarked.

    Args:
        cfg: SearchConfig instance (normalizer + limits)
        questions: Loaded question bank
        query: Search criteria
        user_id: Caller whose submissions/bookmarks decorate the results
        submissions_df: Optional submissions table
        bookmarks_df: Optional bookmarks table

    Returns:
        SearchResult
    """
    solved = solved_question_ids(submissions_df, user_id, cfg.columns)
    bookmarked = bookmarked_question_ids(bookmarks_df, user_id, cfg.columns)

    if query.unsolved_only and user_id is None:
        logger.warning("unsolved_only requested without a user id; no questions will be treated as solved.")

    result = filter_questions(
        questions,
        query,
        cfg.tag_normalizer,
        solved_ids=solved,
        bookmarked_ids=bookmarked,
        default_limit=cfg.limits.default_limit,
        max_limit=cfg.limits.max_limit,
        broad_pool_size=cfg.limits.broad_pool_size,
    )

    logger.info(
        "Search topics=%s -> tags=%s platforms=%s: %d matched, %d returned",
        query.topics,
        result.normalized_topics,
        result.platforms,
        result.total_matched,
        len(result.questions),
    )
    if query.topics and not result.normalized_topics:
        logger.debug("No topic survived normalization; searching without a topic filter.")
    unknown = [t for t in result.normalized_topics if not cfg.tag_normalizer.is_valid_tag(t)]
    if unknown:
        logger.debug("Topics outside the canonical vocabulary (fallback tags): %s", unknown)

    return result
