"""
HTTP implementation of ResourceFetcher built on httpx.

One AsyncClient is opened per fetch so that per-request options (proxy,
auth, TLS verification) can differ between calls. Cancelling the
awaiting task aborts the request.
"""

from typing import Optional

import httpx

from core.config import settings
from core.logging import get_logger
from syndication.net.options import WebRequestOptions
from tools.resource_fetch.base import (
    FetchedResource,
    ResourceFetchError,
    ResourceFetcher,
    ResourceNotFoundError,
)

logger = get_logger(__name__)


class HttpResourceFetcher(ResourceFetcher):
    """
    Fetch documents over HTTP(S).

    Usage:
        fetcher = HttpResourceFetcher()
        resource = await fetcher.fetch("https://example.org/blog.xml")

        # Tests inject a transport instead of touching the network
        fetcher = HttpResourceFetcher(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize HTTP fetcher.

        Args:
            transport: Custom httpx transport (mainly for tests)
            timeout: Per-request timeout in seconds. Defaults to config value.
        """
        self._transport = transport
        self._timeout = timeout or settings.load_timeout_seconds

    def _client(self, options: WebRequestOptions) -> httpx.AsyncClient:
        headers = {"User-Agent": options.user_agent or settings.http_user_agent}
        headers.update(options.headers)
        follow_redirects = (
            settings.http_follow_redirects
            if options.follow_redirects is None
            else options.follow_redirects
        )
        return httpx.AsyncClient(
            headers=headers,
            cookies=options.cookies or None,
            auth=options.auth,
            proxy=options.proxy,
            verify=options.verify,
            follow_redirects=follow_redirects,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def fetch(
        self,
        source: str,
        options: Optional[WebRequestOptions] = None,
    ) -> FetchedResource:
        """Issue a GET for source and return the response body."""
        options = options or WebRequestOptions()

        async with self._client(options) as client:
            try:
                response = await client.get(source)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Fetch returned error status",
                    source=source,
                    status_code=e.response.status_code,
                )
                if e.response.status_code == 404:
                    raise ResourceNotFoundError(f"Resource {source} not found") from e
                raise ResourceFetchError(
                    f"Fetching {source} failed with status {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                logger.error("Fetch failed", source=source, error=str(e))
                raise ResourceFetchError(f"Fetching {source} failed: {e}") from e

        content_type = response.headers.get("content-type")
        return FetchedResource(
            source=str(response.url),
            content=response.content,
            status_code=response.status_code,
            content_type=content_type,
            encoding=response.charset_encoding,
            headers=dict(response.headers),
        )
