"""
Date parsing for Indian IPO listings.

Listing sites print dates in many shapes ("15 Jan 2024", "15/01/24",
"2024-01-15", ...). Every parsed value is normalised to midnight in India
Standard Time; only the calendar date matters downstream.
"""

from __future__ import annotations

from datetime import datetime

import pytz

from ipoalert.core.exceptions import DateParseError

IST = pytz.timezone("Asia/Kolkata")

LABEL_PREFIXES = ("Opens:", "Closes:")

# Priority order matters: the first format that matches wins.
DATE_FORMATS = (
    "%d %b %Y",
    "%d-%b-%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%Y-%m-%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %B %Y",
    "%d %b %y",
    "%d-%b-%y",
    "%d/%m/%y",
)


def ist_midnight(year: int, month: int, day: int) -> datetime:
    """Return an aware datetime at 00:00 IST for the given calendar date."""
    return IST.localize(datetime(year, month, day))


def _clean(text: str) -> str:
    cleaned = text.strip()
    for prefix in LABEL_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]
    return cleaned.strip()


def _parse_strict(text: str) -> datetime | None:
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return ist_midnight(parsed.year, parsed.month, parsed.day)
    return None


def _parse_naive(text: str) -> datetime | None:
    # Timestamps such as "2024-01-15T10:30:00+05:30": keep only the date part.
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return ist_midnight(parsed.year, parsed.month, parsed.day)


def parse_date(text: str) -> datetime:
    """Parse a listing date into midnight IST.

    Args:
        text: Date text as scraped, optionally prefixed with "Opens:" or "Closes:"

    Returns:
        Timezone-aware ``datetime`` at 00:00 Asia/Kolkata

    Raises:
        DateParseError: If the text is empty or matches no known format
    """
    if text is None or not text.strip():
        raise DateParseError(text or "")

    cleaned = _clean(text)
    if cleaned:
        parsed = _parse_strict(cleaned) or _parse_naive(cleaned)
        if parsed is not None:
            return parsed

    raise DateParseError(text)


__all__ = ["IST", "DATE_FORMATS", "parse_date", "ist_midnight"]
