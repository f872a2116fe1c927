"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the question-bank loading and search workflows.
"""

from application.question_bank import (
    bookmarked_question_ids,
    build_questions,
    is_accepted_status,
    parse_tag_cell,
    solved_question_ids,
)
from application.search import search_questions
from application.serialize import serialize_search_result
from application.summary import log_coverage_summary, log_search_summary

__all__ = [
    # Main workflows
    "search_questions",
    "log_search_summary",
    "log_coverage_summary",
    # Data utilities
    "build_questions",
    "solved_question_ids",
    "bookmarked_question_ids",
    "parse_tag_cell",
    "is_accepted_status",
    "serialize_search_result",
]
