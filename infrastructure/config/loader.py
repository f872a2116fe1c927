"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from domain.taxonomy.loader import parse_tag_config
from domain.taxonomy.normalizer import TagNormalizer
from infrastructure.config.models import DataColumnsConfig, LimitsConfig, SearchConfig
from infrastructure.constants import DATA_DIR


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_tag_config(path: Path) -> TagNormalizer:
    """
    Load a tag alias table from YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    Alias order in the file is preserved and becomes the substring scan order.
    """
    data = _load_yaml(path)
    try:
        return parse_tag_config(data)
    except ValueError as e:
        raise ValueError(f"Invalid tag config in {path}: {e}") from e


def _optional_path(data_dir: Path, value: Any) -> Path | None:
    if value is None or not str(value).strip():
        return None
    return data_dir / str(value).strip()


def load_search_config(config_path: Path) -> SearchConfig:
    """
    Load search.yaml and construct a fully-resolved SearchConfig.

    File names are resolved against `data_dir`; `tags_file`, when present, is
    loaded immediately so that a broken alias table fails at startup rather
    than on the first query.
    """
    raw = _load_yaml(config_path)

    if not raw.get("questions_file"):
        raise ValueError(f"{config_path} missing required key: questions_file")

    data_dir = Path(raw.get("data_dir", str(DATA_DIR)))

    columns_raw = raw.get("columns") or {}
    if not isinstance(columns_raw, dict):
        raise ValueError(f"'columns' must be a mapping in {config_path}")
    limits_raw = raw.get("limits") or {}
    if not isinstance(limits_raw, dict):
        raise ValueError(f"'limits' must be a mapping in {config_path}")

    tags_file_raw = raw.get("tags_file")
    tags_file = Path(str(tags_file_raw)) if tags_file_raw else None
    tag_normalizer = load_tag_config(tags_file) if tags_file is not None else TagNormalizer()

    return SearchConfig(
        data_dir=data_dir,
        questions_file_path=data_dir / str(raw["questions_file"]).strip(),
        submissions_file_path=_optional_path(data_dir, raw.get("submissions_file")),
        bookmarks_file_path=_optional_path(data_dir, raw.get("bookmarks_file")),
        columns=DataColumnsConfig(**columns_raw),
        limits=LimitsConfig(**limits_raw),
        tags_file=tags_file,
        tag_normalizer=tag_normalizer,
    )
