"""
Load/save behaviour shared by every top-level syndication document.

A concrete document mixes in SyndicationResource, declares its content
format and version, and gets:

- load() from a navigator, bytes, a path or a binary stream
- save() / dumps() through the format's structural adapter
- Loaded notifications, fired at most once per load call
- load_async() / load_async_cancel() through a loader owned by the instance
"""

import asyncio
from os import PathLike
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional, Union

from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings, SaveSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.net.events import ResourceLoadedEvent
from syndication.net.options import WebRequestOptions

if TYPE_CHECKING:
    from syndication.data.metadata import ContentFormat
    from syndication.net.loader import AsyncResourceLoader, LoadState
    from tools.resource_fetch.base import ResourceFetcher

LoadedHandler = Callable[[ResourceLoadedEvent], None]
Source = Union[XmlNavigator, bytes, str, PathLike]


class SyndicationResource:
    """
    Trait for documents that can be loaded and saved as a whole.

    Subclasses must define:
        format: ContentFormat the document is written in
        version: Format version string
    """

    format: ClassVar["ContentFormat"]
    version: ClassVar[str]

    def __init__(self):
        super().__init__()
        self._loaded_handlers: list[LoadedHandler] = []
        self._loader: Optional["AsyncResourceLoader"] = None

    # -------------------------------------------------------------------------
    # Loaded notification
    # -------------------------------------------------------------------------

    def add_loaded_handler(self, handler: LoadedHandler) -> None:
        argument_not_none(handler, "handler")
        self._loaded_handlers.append(handler)

    def remove_loaded_handler(self, handler: LoadedHandler) -> None:
        if handler in self._loaded_handlers:
            self._loaded_handlers.remove(handler)

    def on_loaded(self, event: ResourceLoadedEvent) -> None:
        for handler in list(self._loaded_handlers):
            handler(event)

    # -------------------------------------------------------------------------
    # Synchronous load / save
    # -------------------------------------------------------------------------

    def load(self, source: Source, settings: Optional[LoadSettings] = None) -> bool:
        """
        Populate this document.

        Args:
            source: XmlNavigator, raw bytes, a filesystem path or a binary stream
            settings: Load settings (defaults from configuration)

        Returns:
            True if anything was populated

        Raises:
            SyndicationFormatError: If the document is not in this resource's format
            xml.etree.ElementTree.ParseError: If the XML is malformed
        """
        from syndication.data.adapter import ResourceAdapter

        argument_not_none(source, "source")
        settings = settings or LoadSettings()
        navigator = self._navigator_from(source, settings)

        populated = ResourceAdapter.load(self, navigator, settings)
        locator = None if isinstance(source, (XmlNavigator, bytes)) or hasattr(source, "read") else str(source)
        self.on_loaded(ResourceLoadedEvent(self, navigator, source=locator))
        return populated

    def loads(self, text: str, settings: Optional[LoadSettings] = None) -> bool:
        """Populate this document from an XML string."""
        return self.load(XmlNavigator.from_string(text), settings)

    @classmethod
    def create(cls, source: Source, settings: Optional[LoadSettings] = None):
        """Construct and load a new document in one call."""
        resource = cls()
        resource.load(source, settings)
        return resource

    @staticmethod
    def _navigator_from(source: Source, settings: LoadSettings) -> XmlNavigator:
        encoding = None if settings.uses_default_encoding else settings.character_encoding
        if isinstance(source, XmlNavigator):
            return source
        if isinstance(source, bytes):
            return XmlNavigator.from_bytes(source, encoding)
        return XmlNavigator.from_file(source, encoding)

    def write_to(self, writer: XmlWriter, settings: Optional[SaveSettings] = None) -> None:
        from syndication.data.adapter import ResourceAdapter

        ResourceAdapter.save(self, writer, settings or SaveSettings())

    def dumps(self, settings: Optional[SaveSettings] = None) -> str:
        """Serialize to an XML string, including the XML declaration."""
        settings = settings or SaveSettings()
        writer = XmlWriter(minimize_output=settings.minimize_output)
        self.write_to(writer, settings)
        return writer.to_string(xml_declaration=True, encoding=settings.character_encoding)

    def save(self, destination: Any, settings: Optional[SaveSettings] = None) -> None:
        """Write the document to a path or a binary stream."""
        argument_not_none(destination, "destination")
        settings = settings or SaveSettings()
        writer = XmlWriter(minimize_output=settings.minimize_output)
        self.write_to(writer, settings)

        if hasattr(destination, "write"):
            writer.write_to(destination, settings.character_encoding)
        else:
            with open(destination, "wb") as handle:
                writer.write_to(handle, settings.character_encoding)

    def to_xml(self) -> str:
        writer = XmlWriter(minimize_output=True)
        self.write_to(writer, SaveSettings(minimize_output=True))
        return writer.to_string()

    # -------------------------------------------------------------------------
    # Asynchronous load
    # -------------------------------------------------------------------------

    @property
    def loader(self) -> "AsyncResourceLoader":
        """Loader owned by this document; created on first use."""
        if self._loader is None:
            from syndication.net.loader import AsyncResourceLoader

            self._loader = AsyncResourceLoader(self)
        return self._loader

    def use_fetcher(self, fetcher: "ResourceFetcher") -> None:
        """Replace the transport used by load_async()."""
        from syndication.net.loader import AsyncResourceLoader

        argument_not_none(fetcher, "fetcher")
        if self._loader is not None and self._loader.is_loading:
            self._loader.cancel()
        self._loader = AsyncResourceLoader(self, fetcher)

    @property
    def is_loading(self) -> bool:
        return self._loader is not None and self._loader.is_loading

    def load_async(
        self,
        source: str,
        settings: Optional[LoadSettings] = None,
        options: Optional[WebRequestOptions] = None,
        user_token: Any = None,
    ) -> "asyncio.Task[LoadState]":
        """
        Start loading from a network source; returns immediately.

        Raises:
            LoadInProgressError: If a load on this document is in flight
        """
        return self.loader.load_async(source, settings, options, user_token)

    def load_async_cancel(self) -> None:
        if self._loader is not None:
            self._loader.cancel()
