"""
IPO discovery pipeline.

Runs every source adapter, merges their records in declared priority order
and keeps the IPOs whose subscription window contains the reference time.
A failing source is logged and skipped; it never aborts the run.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

import httpx

from ipoalert.core.config import SourceConfig
from ipoalert.core.exceptions import IPOAlertError, SourceError
from ipoalert.core.logging import log_context, logger
from ipoalert.core.merge import merge_ipos
from ipoalert.core.models import IPO
from ipoalert.core.sources import SourceAdapter, create_default_sources
from ipoalert.core.window import filter_open, to_ist


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""

    reference: datetime
    open_ipos: list[IPO] = field(default_factory=list)
    merged: list[IPO] = field(default_factory=list)
    failures: dict[str, IPOAlertError] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return bool(self.merged)


class IPOPipeline:
    """Sequence sources, merge and open-window filtering."""

    def __init__(
        self,
        sources: Sequence[SourceAdapter] | None = None,
        config: SourceConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            sources: Adapters in merge priority order; defaults to listing then GMP
            config: HTTP settings used for the default adapters and the client
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or SourceConfig()
        self.sources = list(sources) if sources is not None else create_default_sources(self.config)
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            follow_redirects=True,
            transport=self.transport,
        )

    async def _run_source(
        self, source: SourceAdapter, client: httpx.AsyncClient
    ) -> list[IPO] | IPOAlertError:
        try:
            return await source.fetch(client)
        except IPOAlertError as exc:
            logger.bind(source=source.name, error_code=exc.error_code).error(
                "error fetching from source: {}", exc.message
            )
            return exc
        except Exception as exc:
            logger.bind(source=source.name, error_code="SOURCE_ERROR").exception(
                "unexpected error from source: {}", exc
            )
            return SourceError(str(exc), source.name)

    async def collect(self) -> tuple[list[IPO], dict[str, IPOAlertError]]:
        """Run all sources and concatenate their records in priority order.

        Sources run concurrently, but results are consumed in the declared
        order so merge priority never depends on completion order.
        """
        async with self._client() as client:
            outcomes = await asyncio.gather(
                *(self._run_source(source, client) for source in self.sources)
            )

        records: list[IPO] = []
        failures: dict[str, IPOAlertError] = {}
        for source, outcome in zip(self.sources, outcomes):
            if isinstance(outcome, IPOAlertError):
                failures[source.name] = outcome
            else:
                records.extend(outcome)
        return records, failures

    async def run(self, reference: datetime | None = None) -> PipelineResult:
        """Fetch, merge and filter; returns the IPOs open at ``reference`` (default now)."""
        reference = to_ist(reference)
        with log_context(reference=reference.date().isoformat()):
            records, failures = await self.collect()
            merged = merge_ipos(records)
            if not merged:
                logger.warning("no IPO data available from any source", failed_sources=sorted(failures))
                return PipelineResult(reference=reference, failures=failures)

            open_ipos = filter_open(merged, reference)
            logger.info(
                "pipeline complete",
                merged=len(merged),
                open=len(open_ipos),
                failed_sources=sorted(failures),
            )
            return PipelineResult(
                reference=reference,
                open_ipos=open_ipos,
                merged=merged,
                failures=failures,
            )

    def run_sync(self, reference: datetime | None = None) -> PipelineResult:
        """Blocking wrapper around :meth:`run`."""
        return asyncio.run(self.run(reference))


async def fetch_open_ipos(
    reference: datetime | None = None,
    config: SourceConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[IPO]:
    """Return the IPOs open for subscription using the default sources."""
    result = await IPOPipeline(config=config, transport=transport).run(reference)
    return result.open_ipos


__all__ = ["IPOPipeline", "PipelineResult", "fetch_open_ipos"]
