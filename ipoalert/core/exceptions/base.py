"""ipoalert core exception classes."""

from typing import Any


class IPOAlertError(Exception):
    """Base class for every ipoalert error."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: Human readable message
            error_code: Stable error code
            details: Extra structured details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.error_code,
            "message": self.message,
            "details": dict(self.details),
        }


class SourceError(IPOAlertError):
    """Failure raised while reading one listing source."""

    def __init__(
        self,
        message: str,
        source_name: str,
        error_code: str = "SOURCE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["source"] = source_name
        super().__init__(message, error_code, super_details)
        self.source_name = source_name


class FetchError(SourceError):
    """Transport failure or non-200 response from a source."""

    def __init__(
        self,
        message: str,
        source_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, source_name, "FETCH_ERROR", super_details)
        self.status_code = status_code


class HTMLParseError(SourceError):
    """Document could not be parsed into records."""

    def __init__(
        self,
        message: str,
        source_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, source_name, "HTML_PARSE_ERROR", details)


class NoDataError(SourceError):
    """Every extraction strategy yielded zero usable records."""

    def __init__(
        self,
        message: str,
        source_name: str,
        strategies_tried: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if strategies_tried is not None:
            super_details["strategies_tried"] = strategies_tried
        super().__init__(message, source_name, "NO_DATA", super_details)


class DateParseError(IPOAlertError):
    """Date text matched none of the recognised formats."""

    def __init__(self, value: str, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details["value"] = value
        super().__init__(f"unable to parse date: {value!r}", "DATE_PARSE_ERROR", super_details)
        self.value = value


class ConfigValidationError(IPOAlertError):
    """A required configuration value is missing."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field:
            super_details["field"] = field
        super().__init__(message, "CONFIG_VALIDATION_ERROR", super_details)
        self.field = field


class DeliveryError(IPOAlertError):
    """Notifier failed to deliver a message to one recipient."""

    def __init__(
        self,
        message: str,
        recipient: str,
        status_code: int | None = None,
        provider_code: int | str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["recipient"] = recipient
        if status_code is not None:
            super_details["status_code"] = status_code
        if provider_code is not None:
            super_details["provider_code"] = provider_code
        super().__init__(message, "DELIVERY_ERROR", super_details)
        self.recipient = recipient
        self.status_code = status_code
        self.provider_code = provider_code
