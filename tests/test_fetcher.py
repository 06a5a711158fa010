"""Tests for metagen.services.fetcher.fetch_page.

Outbound HTTP is intercepted with respx and DNS-based address checks are
patched out, so no test touches the network.
"""

import threading
from unittest.mock import patch

import httpx
import pytest
import respx

from metagen.services.fetcher import MAX_REDIRECTS, fetch_page

_HTML = """
<html>
<head>
  <title>Cold Brew Guide</title>
  <meta name="description" content="How to make cold brew.">
</head>
<body>
  <h1>Cold Brew at Home</h1>
  <h2>Ratio</h2>
  <p>Steep coarse grounds overnight.</p>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def public_addresses():
    """Treat every hostname as public so no DNS lookup happens."""
    with patch("metagen.services.fetcher._is_private_address", return_value=False):
        yield


class TestFetchPageSuccess:
    @respx.mock
    async def test_extracts_page_content(self):
        respx.get("https://example.com/cold-brew").mock(
            return_value=httpx.Response(200, html=_HTML)
        )

        page = await fetch_page("https://example.com/cold-brew")

        assert page.error is None
        assert page.title == "Cold Brew Guide"
        assert page.heading == "Cold Brew at Home"
        assert page.subheadings == "Ratio"
        assert page.meta_description == "How to make cold brew."
        assert page.body_excerpt == "Steep coarse grounds overnight."

    @respx.mock
    async def test_missing_scheme_gets_https(self):
        route = respx.get("https://example.com/page").mock(
            return_value=httpx.Response(200, html=_HTML)
        )

        page = await fetch_page("example.com/page")

        assert route.called
        assert page.url == "https://example.com/page"

    @respx.mock
    async def test_sends_browser_user_agent(self):
        route = respx.get("https://example.com/page").mock(
            return_value=httpx.Response(200, html=_HTML)
        )

        await fetch_page("https://example.com/page")

        user_agent = route.calls.last.request.headers["user-agent"]
        assert user_agent.startswith("Mozilla/5.0")
        assert "Chrome" in user_agent

    @respx.mock
    async def test_follows_redirects(self):
        respx.get("https://example.com/old").mock(
            return_value=httpx.Response(301, headers={"location": "/new"})
        )
        respx.get("https://example.com/new").mock(return_value=httpx.Response(200, html=_HTML))

        page = await fetch_page("https://example.com/old")

        assert page.error is None
        assert page.heading == "Cold Brew at Home"

    @respx.mock
    async def test_address_check_runs_off_the_event_loop(self):
        respx.get("https://example.com/page").mock(return_value=httpx.Response(200, html=_HTML))
        checked_in = []

        def record_thread(hostname):
            checked_in.append(threading.current_thread())
            return False

        with patch("metagen.services.fetcher._is_private_address", side_effect=record_thread):
            await fetch_page("https://example.com/page")

        assert checked_in
        assert threading.main_thread() not in checked_in


class TestFetchPageFailure:
    @respx.mock
    async def test_non_2xx_becomes_error(self):
        respx.get("https://example.com/missing").mock(return_value=httpx.Response(404))

        page = await fetch_page("https://example.com/missing")

        assert page.error == "Target URL returned HTTP 404."
        assert page.url == "https://example.com/missing"
        assert page.title == page.heading == page.body_excerpt == ""

    @respx.mock
    async def test_timeout_becomes_error(self):
        respx.get("https://example.com/slow").mock(side_effect=httpx.ConnectTimeout("timed out"))

        page = await fetch_page("https://example.com/slow")

        assert page.error == "The target URL timed out."

    @respx.mock
    async def test_connection_error_becomes_error(self):
        respx.get("https://nowhere.invalid/").mock(side_effect=httpx.ConnectError("dns failure"))

        page = await fetch_page("https://nowhere.invalid/")

        assert page.error == "dns failure"
        assert page.subheadings == ""

    @respx.mock
    async def test_too_many_redirects_becomes_error(self):
        route = respx.get("https://example.com/loop").mock(
            return_value=httpx.Response(302, headers={"location": "/loop"})
        )

        page = await fetch_page("https://example.com/loop")

        assert page.error == "Too many redirects."
        assert route.call_count == MAX_REDIRECTS + 1

    async def test_private_address_is_blocked(self):
        with patch("metagen.services.fetcher._is_private_address", return_value=True):
            page = await fetch_page("http://internal.example")

        assert page.error == "Requests to private/internal addresses are not allowed."
        assert page.body_excerpt == ""

    async def test_parse_failure_becomes_error(self):
        with (
            patch("metagen.services.fetcher.fetch_html", return_value="<html></html>"),
            patch("metagen.services.fetcher.extract", side_effect=RuntimeError("bad markup")),
        ):
            page = await fetch_page("https://example.com/")

        assert page.error == "Failed to parse page: bad markup"
