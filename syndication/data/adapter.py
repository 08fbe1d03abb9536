"""
Top-level load/save orchestration.

ResourceAdapter checks that a parsed document matches the resource's
declared format, then hands it to the structural adapter registered for
that format and version. Saving runs the extension pre-pass and lets the
structural adapter write the tree.
"""

from typing import Any

from core.logging import get_logger
from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings, SaveSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.data.apml06 import Apml06ResourceAdapter
from syndication.data.blogml20 import BlogML20ResourceAdapter
from syndication.data.metadata import ContentFormat, ResourceMetadata
from syndication.errors import InvalidArgumentError, SyndicationFormatError
from syndication.extensions.adapter import ExtensionAdapter

logger = get_logger(__name__)

# (format, version) -> structural adapter
FORMAT_ADAPTERS = {
    (ContentFormat.BLOGML, "2.0"): BlogML20ResourceAdapter,
    (ContentFormat.APML, "0.6"): Apml06ResourceAdapter,
}


class ResourceAdapter:
    """Stateless helpers; every method is a static method."""

    @staticmethod
    def load(resource: Any, navigator: XmlNavigator, settings: LoadSettings) -> bool:
        """
        Fill a resource from a parsed document.

        Args:
            resource: Document to populate (declares format and version)
            navigator: Parsed document
            settings: Load settings

        Returns:
            True if the resource ended up with any content

        Raises:
            InvalidArgumentError: If the resource declares no format
            SyndicationFormatError: If the document is in another format or
                an unsupported version; the resource is left untouched
        """
        argument_not_none(resource, "resource")
        argument_not_none(navigator, "navigator")
        argument_not_none(settings, "settings")

        expected = resource.format
        if expected == ContentFormat.NONE:
            raise InvalidArgumentError("resource must declare a content format")

        metadata = ResourceMetadata(navigator)
        if metadata.format != expected:
            raise SyndicationFormatError(
                f"Expected a {expected.name} document but found {metadata.format.name} "
                f"(root element {navigator.root.local_name!r})"
            )

        adapter_type = FORMAT_ADAPTERS.get((metadata.format, metadata.version))
        if adapter_type is None:
            raise SyndicationFormatError(
                f"{metadata.format.name} version {metadata.version} is not supported"
            )

        logger.debug(
            "Dispatching to format adapter",
            format=metadata.format.name,
            version=metadata.version,
            adapter=adapter_type.__name__,
        )
        return adapter_type(navigator, settings).fill(resource)

    @staticmethod
    def fill(resource: Any, navigator: XmlNavigator, settings: LoadSettings) -> bool:
        return ResourceAdapter.load(resource, navigator, settings)

    @staticmethod
    def save(resource: Any, writer: XmlWriter, settings: SaveSettings) -> None:
        """
        Write a resource, declaring every extension namespace on the root.

        With auto_detect_extensions set, the whole graph is walked first and
        the types found are declared alongside settings.supported_extensions.
        The settings object itself is not modified.
        """
        argument_not_none(resource, "resource")
        argument_not_none(writer, "writer")
        argument_not_none(settings, "settings")

        extension_types = list(settings.supported_extensions)
        if settings.auto_detect_extensions:
            for extension_type in ExtensionAdapter.collect_extension_types(resource):
                if extension_type not in extension_types:
                    extension_types.append(extension_type)

        adapter_type = FORMAT_ADAPTERS.get((resource.format, resource.version))
        if adapter_type is None:
            raise SyndicationFormatError(
                f"No writer for {resource.format.name} version {resource.version}"
            )
        adapter_type.write(resource, writer, extension_types)
