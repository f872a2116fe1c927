"""
CLI entrypoint for the practice-question search tools.

Commands:
- normalize: map topic phrases to canonical tags
- suggest:   list every canonical tag whose aliases overlap a phrase
- search:    filter the question bank (topics, platform, difficulty, slug/url, solved state)
- coverage:  count questions per canonical tag and difficulty
- tags:      list stored tag names with their canonical form

Every command loads .env (if present). tags/search/coverage also read
configs/search.yaml and the configured tables; search/coverage log a
human-readable summary and write an artifact under outputs/.
"""

import argparse
import logging
import os
import uuid
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    build_questions,
    log_coverage_summary,
    log_search_summary,
    search_questions,
    serialize_search_result,
)
from application.constants import COVERAGE_FILENAME, LOG_FILENAME, OUTPUT_ROOT, SEARCH_RESULT_FILENAME
from domain.catalog import compute_tag_coverage_table_and_save, list_tag_names
from domain.schemas import DIFFICULTIES, PLATFORMS, QuestionQuery
from domain.taxonomy import TagNormalizer, default_normalizer, to_screaming_snake_case
from infrastructure.config import SearchConfig, load_search_config, load_tag_config
from infrastructure.constants import ENV_LOG_LEVEL, ENV_SEARCH_CONFIG, SEARCH_CONFIG_FILE
from infrastructure.io import ensure_exists, read_optional_table, read_table
from infrastructure.observability import configure_logging, make_request_tag, set_log_context

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Practice-question tag normalization and search")
    p.add_argument(
        "--config",
        type=str,
        default=os.getenv(ENV_SEARCH_CONFIG, str(SEARCH_CONFIG_FILE)),
        help=f"Path to search.yaml (default: ${ENV_SEARCH_CONFIG} or {SEARCH_CONFIG_FILE})",
    )
    p.add_argument(
        "--tags-file",
        type=str,
        default=None,
        help="Alias table YAML for normalize/suggest (default: shipped table)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=os.getenv(ENV_LOG_LEVEL, "INFO"),
        choices=LOG_LEVELS,
        help=f"Console log level (default: ${ENV_LOG_LEVEL} or INFO)",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=LOG_LEVELS,
        help="File log level",
    )

    sub = p.add_subparsers(dest="command", required=True)

    normalize = sub.add_parser("normalize", help="Normalize topic phrases to canonical tags")
    normalize.add_argument("topics", nargs="+", help="Topic phrases, e.g. 'two pointers' dp")

    suggest = sub.add_parser("suggest", help="Suggest canonical tags for a phrase")
    suggest.add_argument("text", help="Partial topic phrase, e.g. array")

    search = sub.add_parser("search", help="Filter the question bank")
    search.add_argument("--topics", nargs="*", default=[], help="Topic phrases")
    search.add_argument("--platform", choices=list(PLATFORMS), default=None)
    search.add_argument("--difficulty", nargs="*", choices=list(DIFFICULTIES), default=None)
    match = search.add_mutually_exclusive_group()
    match.add_argument("--slug", default=None, help="Exact problem slug")
    match.add_argument("--url", default=None, help="Problem URL (its last path segment is used as slug)")
    search.add_argument("--limit", type=int, default=None, help="Max results (default from config)")
    search.add_argument("--unsolved-only", action="store_true", help="Drop questions the user already solved")
    search.add_argument("--user-id", default=None, help="User whose submissions/bookmarks decorate results")
    search.add_argument("--output", type=str, default=None, help="Result JSON path (default: run folder)")

    sub.add_parser("tags", help="List stored tag names and the canonical tag each maps to")

    coverage = sub.add_parser("coverage", help="Write a per-tag coverage table")
    coverage.add_argument("--output", type=str, default=None, help="CSV path (default: run folder)")

    return p.parse_args()


def _resolve_normalizer(tags_file: str | None) -> TagNormalizer:
    if tags_file is None:
        return default_normalizer()
    path = Path(tags_file)
    ensure_exists(path, "tag alias table")
    return load_tag_config(path)


def _run_normalize(args: argparse.Namespace) -> None:
    normalizer = _resolve_normalizer(args.tags_file)
    for topic in args.topics:
        tag = normalizer.normalize_tag(topic)
        marker = "" if normalizer.is_valid_tag(tag) else "  (fallback)"
        print(f"{topic!r} -> {tag}{marker}")
    print("tags:", sorted(normalizer.normalize_tags(list(args.topics))))


def _run_suggest(args: argparse.Namespace) -> None:
    normalizer = _resolve_normalizer(args.tags_file)
    suggestions = normalizer.suggest_tags(args.text)
    if not suggestions:
        print(f"No suggestions for {args.text!r}")
        return
    for tag in suggestions:
        print(tag)


def _start_run(args: argparse.Namespace, cfg: SearchConfig) -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{args.command}_{uuid.uuid4().hex[:6]}"
    run_dir = OUTPUT_ROOT / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    configure_logging(
        log_file=run_dir / LOG_FILENAME,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(request_id_full=run_id, user_id=getattr(args, "user_id", None))

    logger.info("Starting run: run_id=%s (tag=%s)", run_id, make_request_tag(run_id))
    logger.info("Run output directory: %s", run_dir)
    logger.info(
        "Alias table: %s (%d aliases)",
        cfg.tags_file or "shipped defaults",
        len(cfg.tag_normalizer.aliases),
    )
    return run_dir


def _run_search(args: argparse.Namespace, cfg: SearchConfig) -> None:
    run_dir = _start_run(args, cfg)

    logger.info("Loading question bank from %s...", cfg.questions_file_path)
    questions_df = read_table(cfg.questions_file_path)
    questions = build_questions(questions_df, cfg.columns)
    logger.info("Question bank loaded: %d questions", len(questions))

    submissions_df = read_optional_table(cfg.submissions_file_path) if args.user_id else None
    bookmarks_df = read_optional_table(cfg.bookmarks_file_path) if args.user_id else None

    query = QuestionQuery(
        topics=list(args.topics),
        platform=args.platform,
        difficulty=list(args.difficulty) if args.difficulty else None,
        slug=args.slug,
        url=args.url,
        limit=args.limit,
        unsolved_only=bool(args.unsolved_only),
    )

    result = search_questions(
        cfg,
        questions,
        query,
        user_id=args.user_id,
        submissions_df=submissions_df,
        bookmarks_df=bookmarks_df,
    )

    output_path = Path(args.output) if args.output else run_dir / SEARCH_RESULT_FILENAME
    serialize_search_result(result, output_path)
    log_search_summary(result, output_path)


def _run_coverage(args: argparse.Namespace, cfg: SearchConfig) -> None:
    run_dir = _start_run(args, cfg)

    logger.info("Loading question bank from %s...", cfg.questions_file_path)
    questions = build_questions(read_table(cfg.questions_file_path), cfg.columns)

    output_path = Path(args.output) if args.output else run_dir / COVERAGE_FILENAME
    table, output_path = compute_tag_coverage_table_and_save(
        questions,
        cfg.tag_normalizer,
        output_dir=output_path.parent,
        filename=output_path.name,
    )

    log_coverage_summary(table, output_path)


def _run_tags(cfg: SearchConfig) -> None:
    questions = build_questions(read_table(cfg.questions_file_path), cfg.columns)
    for name in list_tag_names(questions):
        tag = to_screaming_snake_case(name)
        marker = "" if cfg.tag_normalizer.is_valid_tag(tag) else "  (not in vocabulary)"
        print(f"{name} -> {tag}{marker}")


def main() -> None:
    load_dotenv(Path(".env"), override=False)
    args = _parse_args()

    if args.command == "normalize":
        _run_normalize(args)
        return
    if args.command == "suggest":
        _run_suggest(args)
        return

    config_path = Path(args.config)
    ensure_exists(config_path, "search.yaml")
    cfg = load_search_config(config_path)

    if args.command == "tags":
        _run_tags(cfg)
    elif args.command == "search":
        _run_search(args, cfg)
    else:
        _run_coverage(args, cfg)


if __name__ == "__main__":
    main()
