"""
Abstract base class for resource fetchers.

This defines the contract every transport must follow, whether an
in-memory mock or a real HTTP client.

Design principles:
- Format agnostic: fetchers return raw bytes, parsing happens elsewhere
- Async-first: fetch is a coroutine and must honour task cancellation
- Result objects: return structured data, not raw tuples
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from syndication.net.options import WebRequestOptions


@dataclass
class FetchedResource:
    """
    Raw payload returned by a fetcher.

    Returned by fetch(); decoding is left to the caller.
    """
    source: str
    content: bytes
    status_code: int = 200
    content_type: Optional[str] = None
    encoding: Optional[str] = None  # charset announced by the transport, if any
    headers: dict[str, str] = field(default_factory=dict)


class ResourceFetcher(ABC):
    """
    Abstract interface for resource fetchers.

    Implementations handle the specifics of retrieving a document from a
    source locator (HTTP, in-memory fixtures, ...).

    Usage:
        fetcher = HttpResourceFetcher()

        resource = await fetcher.fetch(
            "https://example.org/blog.xml",
            WebRequestOptions(auth=("user", "secret")),
        )
        navigator = XmlNavigator.from_bytes(resource.content)
    """

    @abstractmethod
    async def fetch(
        self,
        source: str,
        options: Optional[WebRequestOptions] = None,
    ) -> FetchedResource:
        """
        Retrieve the raw bytes behind a source locator.

        Args:
            source: Absolute URL (or fixture key for mocks)
            options: Transport options, passed through opaquely

        Returns:
            FetchedResource with the payload

        Raises:
            ResourceNotFoundError: If nothing exists at source
            ResourceFetchError: If retrieval fails for any other reason
        """
        pass


class ResourceFetchError(Exception):
    """Base exception for fetch operations."""
    pass


class ResourceNotFoundError(ResourceFetchError):
    """Nothing exists at the requested source."""
    pass
