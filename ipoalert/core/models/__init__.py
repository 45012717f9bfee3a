"""Data models."""

from ipoalert.core.models.ipo import IPO

__all__ = ["IPO"]
