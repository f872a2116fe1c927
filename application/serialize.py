"""Search result serialization utilities."""

import json
import logging
from pathlib import Path

from domain.schemas import SearchResult
from infrastructure.observability import get_log_context

logger = logging.getLogger(__name__)


def serialize_search_result(result: SearchResult, output_path: Path) -> Path:
    """
    Write a search result as indented JSON, with the logging context attached
    under "meta" so artifacts can be matched back to log lines.
    """
    payload = result.model_dump(mode="json")
    payload["meta"] = get_log_context()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

    logger.info("Saved search results JSON: %s", output_path)
    return output_path
