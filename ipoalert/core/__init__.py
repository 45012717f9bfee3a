"""Core IPO discovery, merge and filtering components."""

from ipoalert.core.dates import IST, parse_date
from ipoalert.core.merge import IPOMerger, merge_ipos
from ipoalert.core.models import IPO
from ipoalert.core.pipeline import IPOPipeline, PipelineResult, fetch_open_ipos
from ipoalert.core.window import filter_open, is_open

__all__ = [
    "IPO",
    "IST",
    "IPOMerger",
    "IPOPipeline",
    "PipelineResult",
    "fetch_open_ipos",
    "filter_open",
    "is_open",
    "merge_ipos",
    "parse_date",
]
