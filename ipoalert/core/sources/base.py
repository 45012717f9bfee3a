"""
Base class for IPO listing sources.

Each adapter performs one HTTP GET against a fixed URL, parses the body as
HTML and extracts a best-effort list of :class:`IPO` records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx
from bs4 import BeautifulSoup

from ipoalert.core.config import SourceConfig
from ipoalert.core.exceptions import FetchError, HTMLParseError, IPOAlertError
from ipoalert.core.logging import logger
from ipoalert.core.models import IPO


class SourceAdapter(ABC):
    """One external listing source."""

    name: str = "source"
    url: str = ""

    def __init__(self, config: SourceConfig | None = None, url: str | None = None):
        """Initialise the adapter.

        Args:
            config: Shared HTTP settings (timeout, browser headers)
            url: Override for the source URL
        """
        self.config = config or SourceConfig()
        if url is not None:
            self.url = url
        if not self.url:
            raise ValueError(f"{type(self).__name__} requires a url")

    async def fetch_html(self, client: httpx.AsyncClient) -> str:
        """GET the source page, raising ``FetchError`` on any transport or status failure."""
        try:
            response = await client.get(
                self.url,
                headers=self.config.headers(),
                timeout=self.config.timeout,
            )
        except httpx.HTTPError as exc:
            raise FetchError(f"failed to fetch from {self.name}: {exc}", self.name) from exc

        if response.status_code != 200:
            raise FetchError(
                f"unexpected status code: {response.status_code}",
                self.name,
                status_code=response.status_code,
            )
        return response.text

    def parse(self, html: str) -> list[IPO]:
        """Parse ``html`` and extract records."""
        try:
            doc = BeautifulSoup(html, "html.parser")
            return self.extract(doc)
        except IPOAlertError:
            raise
        except Exception as exc:
            raise HTMLParseError(f"failed to parse HTML: {exc}", self.name) from exc

    async def fetch(self, client: httpx.AsyncClient) -> list[IPO]:
        """Fetch and extract this source's records."""
        html = await self.fetch_html(client)
        records = self.parse(html)
        logger.bind(source=self.name).info("source parsed", records=len(records))
        return records

    @abstractmethod
    def extract(self, doc: BeautifulSoup) -> list[IPO]:
        """Extract records from a parsed document."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"
