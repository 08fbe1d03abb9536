"""Notification raised once a resource has been populated."""

from dataclasses import dataclass
from typing import Any, Optional

from syndication.common.xml import XmlNavigator
from syndication.net.options import WebRequestOptions


@dataclass(frozen=True)
class ResourceLoadedEvent:
    """
    Raised at most once per load() or load_async() call.

    Attributes:
        resource: The populated resource
        navigator: Parsed document the resource was filled from
        source: Where the document came from (URL, path, or None for in-memory data)
        options: Transport options of an asynchronous load
        user_token: Opaque value supplied by the caller of load_async()
    """
    resource: Any
    navigator: XmlNavigator
    source: Optional[str] = None
    options: Optional[WebRequestOptions] = None
    user_token: Any = None
