"""Consolidate IPO records reported by several sources."""

from __future__ import annotations

from collections.abc import Iterable

from ipoalert.core.logging import logger
from ipoalert.core.models import IPO

# Fields that commonly arrive partially from different sources.
ENRICHABLE_FIELDS = ("gmp", "subscription_details", "lot_size")


class IPOMerger:
    """Merge records by case-insensitive name.

    The first record seen for a name owns every field; later records may only
    fill empty enrichable fields. A populated field is never overwritten.
    """

    def __init__(self, enrichable_fields: tuple[str, ...] = ENRICHABLE_FIELDS):
        self.enrichable_fields = enrichable_fields
        self._merged: dict[str, IPO] = {}

    def add(self, record: IPO) -> None:
        key = record.key
        existing = self._merged.get(key)
        if existing is None:
            self._merged[key] = record.model_copy()
            return

        for field in self.enrichable_fields:
            incoming = getattr(record, field)
            if incoming and existing.is_empty(field):
                setattr(existing, field, incoming)

    def add_all(self, records: Iterable[IPO]) -> None:
        for record in records:
            self.add(record)

    def results(self) -> list[IPO]:
        return list(self._merged.values())

    def __len__(self) -> int:
        return len(self._merged)


def merge_ipos(records: Iterable[IPO]) -> list[IPO]:
    """Merge records given in source priority order into one per distinct name."""
    merger = IPOMerger()
    merger.add_all(records)
    logger.debug("merged IPO records", distinct=len(merger))
    return merger.results()


__all__ = ["ENRICHABLE_FIELDS", "IPOMerger", "merge_ipos"]
