"""Subscription window checks."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ipoalert.core.dates import IST, parse_date
from ipoalert.core.exceptions import DateParseError
from ipoalert.core.logging import logger
from ipoalert.core.models import IPO


def to_ist(reference: datetime | None = None) -> datetime:
    """Return ``reference`` (default: now) as an IST-aware datetime.

    Naive values are taken to already be IST wall-clock time.
    """
    if reference is None:
        return datetime.now(IST)
    if reference.tzinfo is None:
        return IST.localize(reference)
    return reference.astimezone(IST)


def is_open(ipo: IPO, reference: datetime | None = None) -> bool:
    """True when ``reference`` falls inside the IPO's subscription window.

    Both bounds are inclusive and compared by IST calendar date. Records with
    an unparseable open or close date are treated as not open.
    """
    try:
        opens = parse_date(ipo.open_date)
        closes = parse_date(ipo.close_date)
    except DateParseError as exc:
        logger.debug("skipping IPO with unknown dates", ipo=ipo.name, value=exc.value)
        return False

    today = to_ist(reference).date()
    return opens.date() <= today <= closes.date()


def filter_open(ipos: Iterable[IPO], reference: datetime | None = None) -> list[IPO]:
    """Return the IPOs open for subscription at ``reference``."""
    reference = to_ist(reference)
    return [ipo for ipo in ipos if is_open(ipo, reference)]


__all__ = ["filter_open", "is_open", "to_ist"]
