"""Options passed through to the transport for a network load."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WebRequestOptions:
    """
    Transport options for one request.

    The syndication layer never interprets these; fetchers apply them.
    """
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    auth: Optional[tuple[str, str]] = None  # (username, password) for basic auth
    proxy: Optional[str] = None
    user_agent: Optional[str] = None  # None uses the configured default
    verify: bool = True
    follow_redirects: Optional[bool] = None  # None uses the configured default
