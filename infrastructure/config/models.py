"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.normalizer import TagNormalizer
from infrastructure.constants import DATA_DIR


class DataColumnsConfig(BaseModel):
    """Column name mapping for the question, submission and bookmark tables."""

    # Questions (id, slug and difficulty are always required)
    question_id_col: str = "id"
    slug_col: str = "slug"
    difficulty_col: str = "difficulty"
    points_col: str | None = "points"
    tags_col: str | None = "tags"
    leetcode_url_col: str | None = "leetcodeUrl"
    codechef_url_col: str | None = "codechefUrl"
    codeforces_url_col: str | None = "codeforcesUrl"
    in_arena_col: str | None = "inArena"
    created_at_col: str | None = "createdAt"

    # Submissions
    submission_user_col: str = "userId"
    submission_question_col: str = "questionId"
    submission_status_col: str = "status"

    # Bookmarks
    bookmark_user_col: str = "userId"
    bookmark_question_col: str = "questionId"


class LimitsConfig(BaseModel):
    """Result size limits. Defaults match the original search endpoint."""

    default_limit: int = Field(default=50, ge=1)
    max_limit: int = Field(default=100, ge=1)
    broad_pool_size: int = Field(
        default=500,
        ge=1,
        description="How many recent questions to consider when no tag matches (platform-only searches).",
    )

    @model_validator(mode="after")
    def _validate(self) -> "LimitsConfig":
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed max_limit ({self.max_limit})"
            )
        return self


class SearchConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from search.yaml
    - Validated and enriched by configuration loader
    - Consumed by the question bank loader and the search use case
    """

    data_dir: Path = Field(default_factory=lambda: DATA_DIR)

    questions_file_path: Path = Field(..., description="Path to the question bank (Excel or CSV).")
    submissions_file_path: Path | None = Field(
        default=None,
        description="Optional submissions table used to mark questions as solved.",
    )
    bookmarks_file_path: Path | None = Field(
        default=None,
        description="Optional bookmarks table used to flag bookmarked questions.",
    )

    columns: DataColumnsConfig = Field(default_factory=DataColumnsConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)

    # Tag aliases (resolved by loader; shipped defaults when tags_file is None)
    tags_file: Path | None = None
    tag_normalizer: TagNormalizer = Field(default_factory=TagNormalizer)

