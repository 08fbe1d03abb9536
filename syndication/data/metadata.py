"""
Content format detection.

Inspects the root element of a parsed document and reports which
syndication format and version it claims to be.
"""

from enum import IntEnum
from typing import Optional

from syndication.common.enumeration import EnumerationCodec
from syndication.common.guard import argument_not_none
from syndication.common.xml import XmlNavigator
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_VERSION
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_VERSION


class ContentFormat(IntEnum):
    """Syndication formats a resource can be loaded from."""
    NONE = 0
    APML = 1
    BLOGML = 2


CONTENT_FORMAT = EnumerationCodec(
    ContentFormat,
    [
        (ContentFormat.NONE, "", "None"),
        (ContentFormat.APML, "apml", "Attention Profiling Markup Language"),
        (ContentFormat.BLOGML, "blogml", "BlogML"),
    ],
    unspecified=ContentFormat.NONE,
)


class ResourceMetadata:
    """
    Format, version and root namespaces of a parsed resource.

    Usage:
        metadata = ResourceMetadata(XmlNavigator.from_bytes(payload))
        if metadata.format == ContentFormat.BLOGML:
            ...
    """

    def __init__(self, navigator: XmlNavigator):
        argument_not_none(navigator, "navigator")
        root = navigator.root
        self.format = ContentFormat.NONE
        self.version: Optional[str] = None
        self.namespaces = root.namespaces_in_scope

        namespace = root.namespace_uri
        local_name = root.local_name.lower()

        if local_name == "blog" and namespace == BLOGML_NAMESPACE:
            self.format = ContentFormat.BLOGML
            self.version = BLOGML_VERSION
        elif local_name == "apml":
            version = root.get_attribute("version").strip()
            if namespace == APML_NAMESPACE or version == APML_VERSION:
                self.format = ContentFormat.APML
                self.version = version or APML_VERSION

    def __repr__(self) -> str:
        return f"<ResourceMetadata format={self.format.name} version={self.version}>"
