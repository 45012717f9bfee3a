"""Tests for row extraction strategies."""

from bs4 import BeautifulSoup

from ipoalert.core.models import IPO
from ipoalert.core.sources.strategies import (
    first_match,
    gmp_items,
    row_to_ipo,
    split_date_range,
    table_rows,
)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _cells(html: str):
    return _soup(f"<table><tr>{html}</tr></table>").find_all("td")


class TestSplitDateRange:
    """Test split_date_range."""

    def test_to_separator(self):
        assert split_date_range("01 Jan 2025 to 05 Jan 2025") == ("01 Jan 2025", "05 Jan 2025")

    def test_hyphen_separator(self):
        assert split_date_range("Jan 1 - Jan 5") == ("Jan 1", "Jan 5")

    def test_to_preferred_over_hyphen(self):
        assert split_date_range("01-Jan-2025 to 05-Jan-2025") == ("01-Jan-2025", "05-Jan-2025")

    def test_ambiguous_text_leaves_dates_empty(self):
        assert split_date_range("01-01-2025 - 05-01-2025") == ("", "")
        assert split_date_range("TBA") == ("", "")


class TestRowToIpo:
    """Test positional column mapping."""

    def test_full_row(self):
        record = row_to_ipo(
            _cells(
                "<td>Foo</td><td>01 Jan 2025 to 05 Jan 2025</td><td>Rs 100</td>"
                "<td>130</td><td>NSE</td><td>2.3x</td>"
            )
        )

        assert record == IPO(
            name="Foo",
            open_date="01 Jan 2025",
            close_date="05 Jan 2025",
            price_range="Rs 100",
            lot_size="130",
            exchange="NSE",
            subscription_details="2.3x",
        )

    def test_narrow_row_degrades(self):
        record = row_to_ipo(_cells("<td>Foo</td><td>01 Jan 2025 to 05 Jan 2025</td><td>Rs 100</td>"))

        assert record.price_range == "Rs 100"
        assert record.lot_size == ""
        assert record.exchange == ""

    def test_too_few_cells(self):
        assert row_to_ipo(_cells("<td>Foo</td><td>01 Jan 2025</td>")) is None

    def test_empty_name_skipped(self):
        assert row_to_ipo(_cells("<td> </td><td>x</td><td>y</td>")) is None

    def test_company_name_label_skipped(self):
        assert row_to_ipo(_cells("<td>Company Name</td><td>x</td><td>y</td>")) is None

    def test_whitespace_collapsed(self):
        record = row_to_ipo(_cells("<td>\n  Foo\n  Ltd </td><td>01 Jan 2025<br/>to<br/>05 Jan 2025</td><td>1</td>"))

        assert record.name == "Foo Ltd"
        assert (record.open_date, record.close_date) == ("01 Jan 2025", "05 Jan 2025")


class TestTableRows:
    """Test the table_rows strategy."""

    def test_header_row_skipped(self):
        doc = _soup(
            "<table>"
            "<tr><td>Company</td><td>Dates</td><td>Price</td></tr>"
            "<tr><td>Foo</td><td>a to b</td><td>1</td></tr>"
            "</table>"
        )

        records = table_rows("table tr")(doc)

        assert [record.name for record in records] == ["Foo"]

    def test_header_keyword_only_checked_on_first_row(self):
        doc = _soup(
            "<table>"
            "<tr><td>Foo</td><td>a to b</td><td>1</td></tr>"
            "<tr><td>Company Two Ltd</td><td>a to b</td><td>1</td></tr>"
            "</table>"
        )

        records = table_rows("table tr")(doc)

        assert [record.name for record in records] == ["Foo", "Company Two Ltd"]

    def test_no_rows_returns_none(self):
        assert table_rows("#missing tr")(_soup("<p>nothing</p>")) is None


class TestGmpItems:
    """Test the gmp_items strategy."""

    def test_table_and_card_layouts(self, gmp_html):
        records = gmp_items("table tr, .ipo-item, .gmp-item")(_soup(gmp_html))

        assert [(record.name, record.gmp) for record in records] == [
            ("foo industries ltd", "Rs 120"),
            ("Baz Foods", "Rs 8"),
            ("Qux Tech", "Rs 15"),
        ]

    def test_only_name_and_gmp_extracted(self):
        doc = _soup("<table><tr><td>Foo</td><td>Rs 5</td><td>01 Jan 2025 to 05 Jan 2025</td></tr></table>")

        [record] = gmp_items("table tr")(doc)

        assert record == IPO(name="Foo", gmp="Rs 5")


class TestFirstMatch:
    """Test short-circuiting over ordered strategies."""

    def test_stops_at_first_success(self):
        calls = []

        def empty(doc):
            calls.append("empty")
            return None

        def found(doc):
            calls.append("found")
            return [IPO(name="A")]

        def never(doc):
            calls.append("never")
            return [IPO(name="B"), IPO(name="C")]

        records = first_match([empty, found, never], _soup(""))

        assert [record.name for record in records] == ["A"]
        assert calls == ["empty", "found"]

    def test_all_empty(self):
        assert first_match([lambda doc: None, lambda doc: []], _soup("")) is None
