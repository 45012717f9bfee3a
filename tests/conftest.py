"""Pytest configuration and shared fixtures for the ipoalert test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest


LISTING_HTML = """
<html><body>
<table id="ipo-table">
  <tr><th>Company Name</th><th>Dates</th><th>Price</th><th>Lot</th><th>Exchange</th><th>Subscription</th></tr>
  <tr>
    <td>Foo Industries Ltd</td><td>01 Jan 2025 to 05 Jan 2025</td><td>Rs 100 to 110</td>
    <td>130</td><td>NSE, BSE</td><td>2.3x</td>
  </tr>
  <tr>
    <td>Bar Power Ltd</td><td>10-Jan-2025 to 14-Jan-2025</td><td>Rs 45 to 48</td>
  </tr>
  <tr><td></td><td>01 Jan 2025 to 05 Jan 2025</td><td>Rs 1</td></tr>
</table>
</body></html>
"""

GENERIC_LISTING_HTML = """
<html><body>
<table>
  <tr><td>Company</td><td>Open - Close</td><td>Price</td></tr>
  <tr><td>Generic Co</td><td>02 Jan 2025 to 04 Jan 2025</td><td>Rs 10</td><td>1500</td></tr>
</table>
</body></html>
"""

GMP_HTML = """
<html><body>
<table>
  <tr><th>IPO</th><th>GMP</th></tr>
  <tr><td>foo industries ltd</td><td>Rs 120</td></tr>
  <tr><td>Baz Foods</td><td>Rs 8</td></tr>
</table>
<div class="gmp-item"><span class="ipo-name">Qux Tech</span><span class="gmp-value">Rs 15</span></div>
</body></html>
"""


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--ipoalert-run-integration",
        action="store_true",
        default=False,
        help="Run ipoalert integration tests that hit the live listing sites.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker."""

    config.addinivalue_line(
        "markers",
        "integration: marks tests requiring network access to the live sources",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--ipoalert-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --ipoalert-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


Handler = Callable[[httpx.Request], httpx.Response]


def route(responses: dict[str, Handler | httpx.Response]) -> httpx.MockTransport:
    """MockTransport answering by exact URL; unknown URLs get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        answer = responses.get(str(request.url))
        if answer is None:
            return httpx.Response(404, text="not found")
        if isinstance(answer, httpx.Response):
            return answer
        return answer(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_transport() -> Callable[[dict[str, Handler | httpx.Response]], httpx.MockTransport]:
    return route


@pytest.fixture
def listing_html() -> str:
    return LISTING_HTML


@pytest.fixture
def generic_listing_html() -> str:
    return GENERIC_LISTING_HTML


@pytest.fixture
def gmp_html() -> str:
    return GMP_HTML
