"""
Configuration management for ipoalert.

Settings are read from environment variables (and an optional ``.env`` file)
and then handed explicitly to the pipeline and notifier constructors.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ipoalert.core.exceptions import ConfigValidationError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class SourceConfig(BaseModel):
    """HTTP settings shared by every source adapter."""

    timeout: float = Field(30.0, description="Request timeout in seconds")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="Browser-like User-Agent")
    accept: str = Field(DEFAULT_ACCEPT, description="Accept header")
    accept_language: str = Field("en-US,en;q=0.5", description="Accept-Language header")

    def headers(self) -> dict[str, str]:
        """Return the request headers sent to every source."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }


def parse_recipients(raw: str | None) -> list[str]:
    """Split a comma separated recipient list, dropping blanks."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class IPOAlertSettings(BaseSettings):
    """Process-wide settings for an ipoalert run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    twilio_account_sid: str = Field("", validation_alias="TWILIO_ACCOUNT_SID")
    twilio_auth_token: str = Field("", validation_alias="TWILIO_AUTH_TOKEN")
    twilio_whatsapp_from: str = Field("", validation_alias="TWILIO_WHATSAPP_FROM")
    whatsapp_recipients: str = Field(
        "",
        validation_alias="WHATSAPP_RECIPIENTS",
        description="Comma separated recipient addresses",
    )

    log_level: str = Field("INFO", validation_alias="IPOALERT_LOG_LEVEL")
    log_file: str = Field(
        "",
        validation_alias="IPOALERT_LOG_FILE",
        description="Optional path receiving a copy of the JSON log lines",
    )
    request_timeout: float = Field(30.0, validation_alias="IPOALERT_REQUEST_TIMEOUT")

    @property
    def recipients(self) -> list[str]:
        """Recipient addresses in configured order."""
        return parse_recipients(self.whatsapp_recipients)

    def source_config(self) -> SourceConfig:
        """Build the adapter HTTP settings from this configuration."""
        return SourceConfig(timeout=self.request_timeout)

    def validate_required(self) -> None:
        """Raise ``ConfigValidationError`` for the first missing required value."""
        required = (
            ("TWILIO_ACCOUNT_SID", self.twilio_account_sid),
            ("TWILIO_AUTH_TOKEN", self.twilio_auth_token),
            ("TWILIO_WHATSAPP_FROM", self.twilio_whatsapp_from),
        )
        for env_name, value in required:
            if not value.strip():
                raise ConfigValidationError(f"{env_name} is required", field=env_name)
        if not self.recipients:
            raise ConfigValidationError("WHATSAPP_RECIPIENTS is required", field="WHATSAPP_RECIPIENTS")
