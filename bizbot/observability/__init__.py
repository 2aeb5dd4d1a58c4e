"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from bizbot.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    preview,
    safe_log_value,
)
from bizbot.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
    "preview",
]
