"""
Tests for HttpResourceFetcher against httpx.MockTransport.
"""

import httpx
import pytest

from core.config import settings
from syndication.net import LoadState, WebRequestOptions
from syndication.specialized.blogml.document import BlogMLDocument
from tools.resource_fetch.base import ResourceFetchError, ResourceNotFoundError
from tools.resource_fetch.http_client import HttpResourceFetcher

URL = "https://example.org/blog.xml"


def make_fetcher(handler) -> HttpResourceFetcher:
    return HttpResourceFetcher(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_returns_body_and_metadata():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            content=b"<blog/>",
            headers={"Content-Type": "application/xml; charset=iso-8859-1"},
        )

    resource = await make_fetcher(handler).fetch(URL)

    assert resource.content == b"<blog/>"
    assert resource.status_code == 200
    assert resource.encoding == "iso-8859-1"
    assert resource.content_type.startswith("application/xml")
    assert seen[0].headers["User-Agent"] == settings.http_user_agent


@pytest.mark.asyncio
async def test_request_options_are_applied():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"<blog/>")

    options = WebRequestOptions(
        headers={"X-Trace": "abc"},
        user_agent="feed-reader/2.0",
        auth=("user", "secret"),
    )
    await make_fetcher(handler).fetch(URL, options)

    request = seen[0]
    assert request.headers["X-Trace"] == "abc"
    assert request.headers["User-Agent"] == "feed-reader/2.0"
    assert request.headers["Authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_not_found():
    fetcher = make_fetcher(lambda request: httpx.Response(404))
    with pytest.raises(ResourceNotFoundError):
        await fetcher.fetch(URL)


@pytest.mark.asyncio
async def test_server_error():
    fetcher = make_fetcher(lambda request: httpx.Response(503))
    with pytest.raises(ResourceFetchError, match="503"):
        await fetcher.fetch(URL)


@pytest.mark.asyncio
async def test_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ResourceFetchError, match="connection refused"):
        await make_fetcher(handler).fetch(URL)


@pytest.mark.asyncio
async def test_document_loads_over_http(blogml_payload):
    """End to end: async load through the HTTP fetcher."""
    fetcher = make_fetcher(lambda request: httpx.Response(200, content=blogml_payload))
    document = BlogMLDocument()
    document.use_fetcher(fetcher)

    outcome = await document.load_async(URL)

    assert outcome == LoadState.COMPLETED
    assert document.title.content == "Example Weblog"
