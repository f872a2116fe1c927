"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for questions, queries and search results
- taxonomy: Tag normalization and alias configuration
- catalog: Question filtering and tag coverage
"""

from domain.schemas import Question, QuestionQuery, QuestionView, SearchResult

__all__ = [
    "Question",
    "QuestionQuery",
    "QuestionView",
    "SearchResult",
]
