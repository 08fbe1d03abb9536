"""
Asynchronous fetch-and-parse for one resource.

Each resource owns its own loader, and each loader holds at most one
in-flight request. A load races the fetch against the configured timeout;
exactly one of three outcomes wins:

    IDLE -> LOADING -> COMPLETED | CANCELLED | TIMED_OUT -> IDLE

Only the completed path touches the resource. Timeout and cancellation
abort the fetch before any bytes are parsed.
"""

import asyncio
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from core.logging import get_logger
from syndication.common.guard import argument_not_empty, argument_not_none
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator
from syndication.data.adapter import ResourceAdapter
from syndication.errors import LoadInProgressError
from syndication.net.events import ResourceLoadedEvent
from syndication.net.options import WebRequestOptions

if TYPE_CHECKING:
    from tools.resource_fetch.base import ResourceFetcher

logger = get_logger(__name__)


class LoadState(str, Enum):
    """Lifecycle of an asynchronous load."""
    IDLE = "idle"
    LOADING = "loading"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"


class AsyncResourceLoader:
    """
    Drives one network load at a time for a single resource.

    Usage:
        loader = AsyncResourceLoader(document, MockResourceFetcher())
        task = loader.load_async("https://example.org/blog.xml")
        outcome = await task   # LoadState.COMPLETED on success

        # From elsewhere, before the response arrives
        loader.cancel()
    """

    def __init__(self, resource: Any, fetcher: Optional["ResourceFetcher"] = None):
        argument_not_none(resource, "resource")
        if fetcher is None:
            # Imported here: the fetchers depend on syndication.net.options.
            from tools.resource_fetch.http_client import HttpResourceFetcher

            fetcher = HttpResourceFetcher()
        self._resource = resource
        self._fetcher = fetcher
        self._state = LoadState.IDLE
        self._cancelled = False
        self._request: Optional[asyncio.Task] = None
        self._task: Optional[asyncio.Task] = None
        self.last_outcome: Optional[LoadState] = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state in (LoadState.LOADING, LoadState.CANCELLED)

    @property
    def fetcher(self) -> "ResourceFetcher":
        return self._fetcher

    def load_async(
        self,
        source: str,
        settings: Optional[LoadSettings] = None,
        options: Optional[WebRequestOptions] = None,
        user_token: Any = None,
    ) -> "asyncio.Task[LoadState]":
        """
        Start a load and return its task immediately.

        Must be called with an event loop running. The task resolves to
        the terminal LoadState; fetch failures surface as the task's
        exception.

        Raises:
            LoadInProgressError: If a load is already in flight
        """
        argument_not_empty(source, "source")
        if self.is_loading:
            raise LoadInProgressError(
                f"An asynchronous load is already in progress for {type(self._resource).__name__}"
            )

        settings = settings or LoadSettings()
        loop = asyncio.get_running_loop()

        self._cancelled = False
        self._state = LoadState.LOADING
        self._request = loop.create_task(self._fetcher.fetch(source, options))
        self._task = loop.create_task(self._run(source, settings, options, user_token))

        logger.info("Asynchronous load started", source=source, resource=type(self._resource).__name__)
        return self._task

    def cancel(self) -> None:
        """Abort the in-flight load; no-op when idle or already cancelled."""
        if self._state != LoadState.LOADING or self._cancelled:
            return
        self._cancelled = True
        self._state = LoadState.CANCELLED
        if self._request is not None:
            self._request.cancel()

    async def _run(
        self,
        source: str,
        settings: LoadSettings,
        options: Optional[WebRequestOptions],
        user_token: Any,
    ) -> LoadState:
        request = self._request
        timeout = settings.timeout.total_seconds() or None
        outcome = LoadState.IDLE

        try:
            try:
                done, _ = await asyncio.wait({request}, timeout=timeout)
            except asyncio.CancelledError:
                request.cancel()
                raise

            if self._cancelled:
                outcome = LoadState.CANCELLED
                await self._settle(request)
                logger.info("Asynchronous load cancelled", source=source)
                return outcome

            if request not in done:
                request.cancel()
                await self._settle(request)
                outcome = LoadState.TIMED_OUT
                logger.warning("Asynchronous load timed out", source=source, timeout=timeout)
                return outcome

            fetched = request.result()
            encoding = None if settings.uses_default_encoding else settings.character_encoding
            navigator = XmlNavigator.from_bytes(fetched.content, encoding)

            ResourceAdapter.load(self._resource, navigator, settings)
            outcome = LoadState.COMPLETED
            self._state = outcome
            self._resource.on_loaded(
                ResourceLoadedEvent(self._resource, navigator, source, options, user_token)
            )
            logger.info("Asynchronous load completed", source=source, bytes=len(fetched.content))
            return outcome
        finally:
            if outcome != LoadState.IDLE:
                self.last_outcome = outcome
            self._request = None
            self._cancelled = False
            self._state = LoadState.IDLE

    @staticmethod
    async def _settle(request: asyncio.Task) -> None:
        # Let the aborted fetch unwind; its result or error is discarded.
        await asyncio.gather(request, return_exceptions=True)
