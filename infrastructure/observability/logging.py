"""
Logging setup with contextvars-based metadata injection.

- Adds request_tag and user_id into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_request_tag = contextvars.ContextVar("request_tag", default="-")
cv_user_id = contextvars.ContextVar("user_id", default="-")

# Full request id kept for metadata (not printed every line)
cv_request_id_full = contextvars.ContextVar("request_id_full", default="-")


def make_request_tag(request_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full request id.
    Uses BLAKE2s so the tag is reproducible across processes.
    """
    h = hashlib.blake2s(request_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.req = cv_request_tag.get() or "-"
        record.user = cv_user_id.get() or "-"
        return True


def set_log_context(
    *,
    request_id_full: str | None = None,
    user_id: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if request_id_full is not None:
        cv_request_id_full.set(str(request_id_full))
        cv_request_tag.set(make_request_tag(str(request_id_full)))

    if user_id is not None:
        cv_user_id.set(str(user_id))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form (e.g. for JSON artifacts)."""
    return {
        "request_tag": str(cv_request_tag.get() or "-"),
        "request_id_full": str(cv_request_id_full.get() or "-"),
        "user_id": str(cv_user_id.get() or "-"),
    }


def clear_user_context() -> None:
    """Reset user context to default (keep request info)."""
    cv_user_id.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] r=%(req)s u=%(user)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | r=%(req)s u=%(user)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler (human-readable)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # pandas/openpyxl can be chatty when reading spreadsheets
    logging.getLogger("openpyxl").setLevel(logging.WARNING)
    logging.getLogger("fsspec").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
