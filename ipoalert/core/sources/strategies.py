"""
Row extraction strategies for loosely structured listing pages.

A strategy is a pure callable taking a parsed document and returning a
non-empty list of records, or ``None`` when it finds nothing usable.
Adapters hold an ordered tuple of strategies, most specific first, and keep
the result of the first one that yields anything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from bs4 import BeautifulSoup, Tag

from ipoalert.core.logging import logger
from ipoalert.core.models import IPO

Strategy = Callable[[BeautifulSoup], "list[IPO] | None"]

HEADER_KEYWORDS = ("company",)
MIN_DATA_CELLS = 3

# Positional column layout of listing tables, after name (0) and dates (1).
OPTIONAL_COLUMNS = (
    (2, "price_range"),
    (3, "lot_size"),
    (4, "exchange"),
    (5, "subscription_details"),
)


def clean_text(node: Tag | None) -> str:
    """Collapse the text of ``node`` to single-spaced, stripped form."""
    if node is None:
        return ""
    return " ".join(node.get_text(" ").split())


def split_date_range(text: str) -> tuple[str, str]:
    """Split "open to close" (or "open-close") text into two dates.

    Returns two empty strings when neither separator yields exactly two parts.
    """
    for separator in (" to ", "-"):
        parts = text.split(separator)
        if len(parts) == 2:
            return parts[0].strip(), parts[1].strip()
    return "", ""


def is_header_row(row: Tag) -> bool:
    first_cell = row.find(["td", "th"])
    text = clean_text(first_cell).lower()
    return any(keyword in text for keyword in HEADER_KEYWORDS)


def row_to_ipo(cells: Sequence[Tag]) -> IPO | None:
    """Map table cells positionally onto an IPO, or ``None`` for unusable rows."""
    if len(cells) < MIN_DATA_CELLS:
        return None

    name = clean_text(cells[0])
    if not name or name.lower() == "company name":
        return None

    open_date, close_date = "", ""
    dates = clean_text(cells[1])
    if dates:
        open_date, close_date = split_date_range(dates)

    record = IPO(name=name, open_date=open_date, close_date=close_date)
    for index, field in OPTIONAL_COLUMNS:
        if len(cells) > index:
            setattr(record, field, clean_text(cells[index]))
    return record


def table_rows(selector: str) -> Strategy:
    """Strategy reading listing rows matched by a CSS ``selector``."""

    def strategy(doc: BeautifulSoup) -> list[IPO] | None:
        records: list[IPO] = []
        for index, row in enumerate(doc.select(selector)):
            if index == 0 and is_header_row(row):
                continue
            record = row_to_ipo(row.find_all("td"))
            if record is not None:
                records.append(record)
        return records or None

    strategy.__name__ = f"table_rows({selector!r})"
    return strategy


def gmp_items(selector: str) -> Strategy:
    """Strategy reading only name and grey market premium per item."""

    def strategy(doc: BeautifulSoup) -> list[IPO] | None:
        records: list[IPO] = []
        for item in doc.select(selector):
            name = clean_text(item.select_one("td:first-child, .ipo-name, .company-name"))
            if not name:
                continue
            gmp = clean_text(item.select_one("td:nth-child(2), .gmp-value"))
            records.append(IPO(name=name, gmp=gmp))
        return records or None

    strategy.__name__ = f"gmp_items({selector!r})"
    return strategy


def first_match(strategies: Iterable[Strategy], doc: BeautifulSoup) -> list[IPO] | None:
    """Return the records of the first strategy that yields any, else ``None``."""
    for strategy in strategies:
        records = strategy(doc)
        if records:
            logger.debug(
                "strategy matched",
                strategy=getattr(strategy, "__name__", repr(strategy)),
                records=len(records),
            )
            return records
    return None


__all__ = [
    "Strategy",
    "clean_text",
    "first_match",
    "gmp_items",
    "is_header_row",
    "row_to_ipo",
    "split_date_range",
    "table_rows",
]
