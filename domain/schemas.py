"""Pydantic models for question records and search results."""

from datetime import datetime
from typing import Literal, get_args

from pydantic import BaseModel, Field

Difficulty = Literal["BEGINNER", "EASY", "MEDIUM", "HARD", "VERYHARD"]
Platform = Literal["LEETCODE", "CODECHEF", "CODEFORCES"]

DIFFICULTIES: tuple[str, ...] = get_args(Difficulty)
PLATFORMS: tuple[str, ...] = get_args(Platform)


class Question(BaseModel):
    """Single question from the practice bank."""

    id: str
    slug: str
    difficulty: Difficulty
    points: int = 0
    leetcode_url: str | None = None
    codechef_url: str | None = None
    codeforces_url: str | None = None
    in_arena: bool = False
    created_at: datetime | None = None
    tags: list[str] = Field(
        default_factory=list,
        description="Tag names as stored alongside the question (not necessarily canonical).",
    )

    def url_for(self, platform: str) -> str | None:
        """Problem URL on the given platform, if the question is hosted there."""
        return {
            "LEETCODE": self.leetcode_url,
            "CODECHEF": self.codechef_url,
            "CODEFORCES": self.codeforces_url,
        }.get(platform)


class QuestionQuery(BaseModel):
    """Filter criteria for a question search."""

    topics: list[str] = Field(default_factory=list, description="Free-form topic phrases.")
    platform: Platform | None = Field(
        default=None,
        description="Explicit platform; overrides any platform inferred from topics.",
    )
    difficulty: Difficulty | list[Difficulty] | None = None
    slug: str | None = None
    url: str | None = Field(
        default=None,
        description="Problem URL; its last path segment is used as the slug when slug is not given.",
    )
    limit: int | None = Field(default=None, description="Maximum number of results; None uses the configured default.")
    unsolved_only: bool = False

    @property
    def difficulties(self) -> set[str]:
        if self.difficulty is None:
            return set()
        if isinstance(self.difficulty, list):
            return set(self.difficulty)
        return {self.difficulty}


class QuestionView(Question):
    """Question decorated with per-user state for display."""

    title: str
    is_solved: bool = False
    is_bookmarked: bool = False


class SearchResult(BaseModel):
    """Outcome of a filtered question search."""

    questions: list[QuestionView] = Field(default_factory=list)
    normalized_topics: list[str] = Field(default_factory=list)
    platforms: list[Platform] = Field(default_factory=list)
    total_matched: int = Field(default=0, description="Matches before the result limit was applied.")
