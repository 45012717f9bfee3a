"""Exception handling module."""

from ipoalert.core.exceptions.base import (
    ConfigValidationError,
    DateParseError,
    DeliveryError,
    FetchError,
    HTMLParseError,
    IPOAlertError,
    NoDataError,
    SourceError,
)

__all__ = [
    "IPOAlertError",
    "SourceError",
    "FetchError",
    "HTMLParseError",
    "NoDataError",
    "DateParseError",
    "ConfigValidationError",
    "DeliveryError",
]
