"""Asynchronous network loading of syndication resources."""

from syndication.net.events import ResourceLoadedEvent
from syndication.net.loader import AsyncResourceLoader, LoadState
from syndication.net.options import WebRequestOptions

__all__ = [
    "AsyncResourceLoader",
    "LoadState",
    "ResourceLoadedEvent",
    "WebRequestOptions",
]
