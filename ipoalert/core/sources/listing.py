"""Primary IPO listing source (chittorgarh.com mainboard IPO list)."""

from __future__ import annotations

from bs4 import BeautifulSoup

from ipoalert.core.exceptions import NoDataError
from ipoalert.core.models import IPO
from ipoalert.core.sources.base import SourceAdapter
from ipoalert.core.sources.strategies import first_match, table_rows


class ChittorgarhSource(SourceAdapter):
    """Mainboard IPO table scraped positionally.

    The page layout is not stable, so rows are located with progressively
    more generic selectors and the first selector that produces records wins.
    """

    name = "chittorgarh"
    url = "https://www.chittorgarh.com/report/ipo_list_main/ipo_list_main.asp"

    strategies = (
        table_rows("#ipo-table tr"),
        table_rows(".ipo-table tr"),
        table_rows("table tbody tr"),
        table_rows("table tr"),
    )

    def extract(self, doc: BeautifulSoup) -> list[IPO]:
        records = first_match(self.strategies, doc)
        if not records:
            raise NoDataError(
                "no IPO data found on page",
                self.name,
                strategies_tried=len(self.strategies),
            )
        return records
