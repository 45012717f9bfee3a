"""Configuration management module."""

from ipoalert.core.config.settings import (
    DEFAULT_USER_AGENT,
    IPOAlertSettings,
    SourceConfig,
    parse_recipients,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "IPOAlertSettings",
    "SourceConfig",
    "parse_recipients",
]
