"""
Mock resource fetcher for tests and local development.

Serves registered payloads from memory after a configurable delay, so
the asynchronous loader's timeout and cancellation paths can be driven
deterministically.

Key features:
- Configurable latency (global and per resource)
- Controllable failure modes for testing error handling
- Request log for asserting how many fetches were issued
"""

import asyncio
from typing import Optional

from core.config import settings
from syndication.net.options import WebRequestOptions
from tools.resource_fetch.base import (
    FetchedResource,
    ResourceFetchError,
    ResourceFetcher,
    ResourceNotFoundError,
)


class MockResource:
    """Internal representation of a registered payload."""

    def __init__(
        self,
        source: str,
        content: bytes,
        content_type: str,
        latency_seconds: Optional[float],
    ):
        self.source = source
        self.content = content
        self.content_type = content_type
        self.latency_seconds = latency_seconds
        self._error: Optional[str] = None

    def force_fail(self, error: str) -> None:
        """Force every fetch of this resource to fail (for testing)."""
        self._error = error


class MockResourceFetcher(ResourceFetcher):
    """
    Mock implementation of ResourceFetcher for testing.

    Maintains an in-memory store of payloads keyed by source locator.
    Safe for concurrent fetches.

    Usage:
        fetcher = MockResourceFetcher(latency=0.01)
        await fetcher.register_resource("https://example.org/blog.xml", payload)

        resource = await fetcher.fetch("https://example.org/blog.xml")
    """

    def __init__(self, latency: Optional[float] = None):
        """
        Initialize mock fetcher.

        Args:
            latency: Seconds to wait before answering. Defaults to config value.
        """
        self._resources: dict[str, MockResource] = {}
        self._latency = settings.mock_fetch_latency_seconds if latency is None else latency
        self._lock = asyncio.Lock()
        self.requests: list[tuple[str, Optional[WebRequestOptions]]] = []

    async def fetch(
        self,
        source: str,
        options: Optional[WebRequestOptions] = None,
    ) -> FetchedResource:
        """Serve a registered payload after the configured latency."""
        async with self._lock:
            self.requests.append((source, options))
            resource = self._resources.get(source)
            if not resource:
                raise ResourceNotFoundError(f"Resource {source} not found")

        # Simulate network latency
        latency = self._latency if resource.latency_seconds is None else resource.latency_seconds
        await asyncio.sleep(latency)

        if resource._error:
            raise ResourceFetchError(resource._error)

        return FetchedResource(
            source=source,
            content=resource.content,
            content_type=resource.content_type,
        )

    # =========================================
    # Testing utilities
    # =========================================

    async def register_resource(
        self,
        source: str,
        content: bytes | str,
        content_type: str = "application/xml",
        latency: Optional[float] = None,
    ) -> None:
        """Serve content for source (str content is UTF-8 encoded)."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        async with self._lock:
            self._resources[source] = MockResource(source, content, content_type, latency)

    async def force_resource_failure(self, source: str, error: str) -> None:
        """Force fetches of source to fail (for testing error handling)."""
        async with self._lock:
            resource = self._resources.get(source)
            if resource:
                resource.force_fail(error)

    async def set_latency(self, seconds: float) -> None:
        """Change the default latency for subsequent fetches."""
        self._latency = seconds

    async def clear_all_resources(self) -> None:
        """Clear all registered resources and the request log (for testing)."""
        async with self._lock:
            self._resources.clear()
            self.requests.clear()
