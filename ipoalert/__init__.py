"""ipoalert - open IPO discovery and WhatsApp alerts.

Scrapes Indian IPO listings from public sources, merges duplicates, keeps the
issues open for subscription today and notifies a list of recipients.

Examples:
    >>> import ipoalert
    >>> result = ipoalert.IPOPipeline().run_sync()
    >>> print(ipoalert.format_message(result.open_ipos, result.reference))
"""

from ipoalert.core import (
    IPO,
    IPOPipeline,
    PipelineResult,
    fetch_open_ipos,
    filter_open,
    merge_ipos,
    parse_date,
)
from ipoalert.core.notify import WhatsAppNotifier, format_message

__version__ = "0.1.0"

__all__ = [
    "IPO",
    "IPOPipeline",
    "PipelineResult",
    "WhatsAppNotifier",
    "__version__",
    "fetch_open_ipos",
    "filter_open",
    "format_message",
    "merge_ipos",
    "parse_date",
]
