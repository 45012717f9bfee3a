"""Tests for subscription window filtering."""

from datetime import datetime, timezone

from ipoalert.core.dates import IST
from ipoalert.core.models import IPO
from ipoalert.core.window import filter_open, is_open, to_ist

FOO = IPO(name="Foo", open_date="01 Jan 2025", close_date="05 Jan 2025")


def _ist(year, month, day, hour=12):
    return IST.localize(datetime(year, month, day, hour))


class TestIsOpen:
    """Test is_open boundaries."""

    def test_inside_window(self):
        assert is_open(FOO, _ist(2025, 1, 3))

    def test_open_day_inclusive(self):
        assert is_open(FOO, _ist(2025, 1, 1, hour=0))
        assert is_open(FOO, _ist(2025, 1, 1, hour=23))

    def test_close_day_inclusive(self):
        """The whole closing day counts, not just its first instant."""
        assert is_open(FOO, _ist(2025, 1, 5, hour=0))
        assert is_open(FOO, _ist(2025, 1, 5, hour=18))

    def test_day_before_open_excluded(self):
        assert not is_open(FOO, _ist(2024, 12, 31))

    def test_day_after_close_excluded(self):
        assert not is_open(FOO, _ist(2025, 1, 6))

    def test_unparseable_dates_excluded(self):
        assert not is_open(IPO(name="Bad", open_date="soon", close_date="05 Jan 2025"), _ist(2025, 1, 3))
        assert not is_open(IPO(name="Blank"), _ist(2025, 1, 3))

    def test_reference_converted_to_ist_calendar_day(self):
        # 2025-01-05 20:00 UTC is already 2025-01-06 in India.
        assert not is_open(FOO, datetime(2025, 1, 5, 20, 0, tzinfo=timezone.utc))
        # 2024-12-31 19:00 UTC is 2025-01-01 00:30 IST.
        assert is_open(FOO, datetime(2024, 12, 31, 19, 0, tzinfo=timezone.utc))

    def test_naive_reference_treated_as_ist(self):
        assert is_open(FOO, datetime(2025, 1, 5, 23, 59))


class TestFilterOpen:
    """Test filter_open over a record set."""

    def test_keeps_only_open(self):
        records = [
            FOO,
            IPO(name="Later", open_date="10 Jan 2025", close_date="14 Jan 2025"),
            IPO(name="Unknown", open_date="TBA", close_date="TBA"),
        ]

        open_ipos = filter_open(records, _ist(2025, 1, 3))

        assert [ipo.name for ipo in open_ipos] == ["Foo"]

    def test_defaults_to_now(self):
        today = datetime.now(IST).strftime("%d %b %Y")
        record = IPO(name="Today", open_date=today, close_date=today)

        assert filter_open([record]) == [record]

    def test_empty_input(self):
        assert filter_open([], _ist(2025, 1, 3)) == []


def test_to_ist_default_is_aware():
    assert to_ist().tzinfo is not None
