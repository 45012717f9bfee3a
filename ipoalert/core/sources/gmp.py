"""Grey market premium enrichment source."""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from ipoalert.core.exceptions import SourceError
from ipoalert.core.logging import logger
from ipoalert.core.models import IPO
from ipoalert.core.sources.base import SourceAdapter
from ipoalert.core.sources.strategies import first_match, gmp_items


class GMPSource(SourceAdapter):
    """Name and GMP pairs from gmpshare.com.

    GMP data only enriches the primary listing, so any failure here yields an
    empty result instead of an error.
    """

    name = "gmpshare"
    url = "https://www.gmpshare.com/"

    strategies = (gmp_items("table tr, .ipo-item, .gmp-item"),)

    async def fetch(self, client: httpx.AsyncClient) -> list[IPO]:
        try:
            return await super().fetch(client)
        except SourceError as exc:
            logger.bind(source=self.name, error_code=exc.error_code).warning(
                "GMP source unavailable, continuing without premium data: {}", exc.message
            )
            return []

    def extract(self, doc: BeautifulSoup) -> list[IPO]:
        return first_match(self.strategies, doc) or []
