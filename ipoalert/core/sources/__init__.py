"""IPO listing source adapters."""

from ipoalert.core.config import SourceConfig
from ipoalert.core.sources.base import SourceAdapter
from ipoalert.core.sources.gmp import GMPSource
from ipoalert.core.sources.listing import ChittorgarhSource


def create_default_sources(config: SourceConfig | None = None) -> list[SourceAdapter]:
    """Adapters in merge priority order: primary listing first, enrichment after."""
    return [ChittorgarhSource(config), GMPSource(config)]


__all__ = [
    "SourceAdapter",
    "ChittorgarhSource",
    "GMPSource",
    "create_default_sources",
]
