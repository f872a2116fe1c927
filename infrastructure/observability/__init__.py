"""
Observability: structured logging and context management.

Provides:
- Contextual logging with request/user IDs
- Log rotation and file management
- Third-party library log level control
"""

from infrastructure.observability.logging import (
    clear_user_context,
    configure_logging,
    get_log_context,
    make_request_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_user_context",
    "make_request_tag",
]
