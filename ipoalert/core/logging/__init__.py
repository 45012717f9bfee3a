"""Logging utilities for monitoring and debugging."""

from ipoalert.core.logging.config import LogConfig
from ipoalert.core.logging.logger import (
    configure_logging,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "log_context",
    "logger",
]
