"""
Resource fetch tools for retrieving syndication documents.

Exports the abstract interface and implementations.
"""

from tools.resource_fetch.base import (
    FetchedResource,
    ResourceFetchError,
    ResourceFetcher,
    ResourceNotFoundError,
)
from tools.resource_fetch.http_client import HttpResourceFetcher
from tools.resource_fetch.mock_client import MockResourceFetcher

__all__ = [
    "FetchedResource",
    "HttpResourceFetcher",
    "MockResourceFetcher",
    "ResourceFetchError",
    "ResourceFetcher",
    "ResourceNotFoundError",
]
