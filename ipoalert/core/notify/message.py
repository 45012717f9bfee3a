"""Plain-text WhatsApp message for open IPOs."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from ipoalert.core.models import IPO
from ipoalert.core.window import to_ist

# (label, field) pairs printed under each IPO when the field is known.
DETAIL_LINES = (
    ("Price", "price_range"),
    ("Lot size", "lot_size"),
    ("Exchange", "exchange"),
    ("GMP", "gmp"),
    ("Subscription", "subscription_details"),
    ("About", "company_info"),
)


def format_ipo(index: int, ipo: IPO) -> str:
    lines = [f"{index}. *{ipo.name}*"]
    if ipo.open_date or ipo.close_date:
        lines.append(f"   Dates: {ipo.open_date or '?'} to {ipo.close_date or '?'}")
    for label, field in DETAIL_LINES:
        value = getattr(ipo, field)
        if value:
            lines.append(f"   {label}: {value}")
    return "\n".join(lines)


def format_message(ipos: Sequence[IPO], today: datetime | None = None) -> str:
    """Build the notification text for ``ipos`` open on ``today`` (default now, IST)."""
    day = to_ist(today).strftime("%d %b %Y")
    if not ipos:
        return f"No IPOs are open for subscription today ({day})."

    header = f"IPOs open for subscription today ({day}): {len(ipos)}"
    body = "\n\n".join(format_ipo(index, ipo) for index, ipo in enumerate(ipos, start=1))
    return f"{header}\n\n{body}"


__all__ = ["format_message", "format_ipo"]
