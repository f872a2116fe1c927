from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import load_search_config
from infrastructure.config.models import LimitsConfig, SearchConfig


def test_default_limit_may_not_exceed_max_limit() -> None:
    with pytest.raises(ValidationError, match="default_limit"):
        LimitsConfig(default_limit=200, max_limit=100)


def test_limits_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        LimitsConfig(broad_pool_size=0)


def test_search_config_defaults_to_shipped_alias_table() -> None:
    cfg = SearchConfig(questions_file_path=Path("dataset/questions.csv"))
    assert cfg.tags_file is None
    assert cfg.tag_normalizer.normalize_tag("dp") == "DYNAMIC_PROGRAMMING"
    assert cfg.limits.default_limit == 50
    assert cfg.limits.max_limit == 100


def test_load_search_config_resolves_paths_and_tags(tmp_path: Path) -> None:
    tags = tmp_path / "tags.yaml"
    tags.write_text("aliases:\n  monotonic stack: STACK\n", encoding="utf-8")
    config = tmp_path / "search.yaml"
    config.write_text(
        f"data_dir: {tmp_path / 'data'}\n"
        "questions_file: questions.csv\n"
        "submissions_file: ''\n"
        "bookmarks_file: bookmarks.csv\n"
        f"tags_file: {tags}\n"
        "columns:\n"
        "  tags_col: topics\n"
        "limits:\n"
        "  default_limit: 5\n",
        encoding="utf-8",
    )

    cfg = load_search_config(config)

    assert cfg.questions_file_path == tmp_path / "data" / "questions.csv"
    assert cfg.submissions_file_path is None
    assert cfg.bookmarks_file_path == tmp_path / "data" / "bookmarks.csv"
    assert cfg.columns.tags_col == "topics"
    assert cfg.columns.slug_col == "slug"
    assert cfg.limits.default_limit == 5
    assert cfg.tags_file == tags
    assert cfg.tag_normalizer.normalize_tag("Monotonic Stack") == "STACK"
    assert not cfg.tag_normalizer.is_valid_tag("LOOPS")


def test_load_search_config_requires_questions_file(tmp_path: Path) -> None:
    config = tmp_path / "search.yaml"
    config.write_text("data_dir: data\n", encoding="utf-8")
    with pytest.raises(ValueError, match="questions_file"):
        load_search_config(config)


def test_load_search_config_rejects_non_mapping(tmp_path: Path) -> None:
    config = tmp_path / "search.yaml"
    config.write_text("- questions.csv\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_search_config(config)
