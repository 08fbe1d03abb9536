"""BlogML attachment: a file referenced or embedded by a post."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text, compare_values
from syndication.common.guard import argument_in_range, argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX

_BOOLEANS = {"true": True, "false": False}


class BlogMLAttachment(ExtensibleObject, ComparableEntity):
    """
    Attachment metadata plus, when embedded, its encoded content.

    Attachments do not carry the shared id/title/date fields.
    """

    def __init__(self):
        super().__init__()
        self.is_embedded = False
        self._mime_type = ""
        self._size: Optional[int] = None
        self._external_uri = ""
        self._url = ""
        self._content = ""

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @mime_type.setter
    def mime_type(self, value: Optional[str]) -> None:
        self._mime_type = normalize_text(value)

    @property
    def size(self) -> Optional[int]:
        """Size in bytes, None when unknown."""
        return self._size

    @size.setter
    def size(self, value: Optional[int]) -> None:
        if value is not None:
            argument_in_range(value, "size", minimum=0)
        self._size = value

    @property
    def external_uri(self) -> str:
        return self._external_uri

    @external_uri.setter
    def external_uri(self, value: Optional[str]) -> None:
        self._external_uri = normalize_text(value)

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: Optional[str]) -> None:
        self._url = normalize_text(value)

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = normalize_text(value)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = False

        if navigator.has_attributes:
            embedded = _BOOLEANS.get(navigator.get_attribute("embedded").strip().lower())
            mime_type = navigator.get_attribute("mime-type")
            size = navigator.get_attribute("size")
            external_uri = navigator.get_attribute("external-uri")
            url = navigator.get_attribute("url")

            if embedded is not None:
                self.is_embedded = embedded
                loaded = True
            if mime_type:
                self.mime_type = mime_type
                loaded = True
            if size:
                try:
                    parsed = int(size.strip())
                except ValueError:
                    parsed = None
                if parsed is not None and parsed >= 0:
                    self.size = parsed
                    loaded = True
            if external_uri:
                self.external_uri = external_uri
                loaded = True
            if url:
                self.url = url
                loaded = True

        text = navigator.element.text or ""
        if text.strip():
            self.content = text
            loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("attachment", BLOGML_NAMESPACE, BLOGML_PREFIX)
        writer.write_attribute("embedded", "true" if self.is_embedded else "false")
        writer.write_attribute("mime-type", self.mime_type)
        if self.size is not None:
            writer.write_attribute("size", str(self.size))
        if self.external_uri:
            writer.write_attribute("external-uri", self.external_uri)
        if self.url:
            writer.write_attribute("url", self.url)
        writer.write_string(self.content)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLAttachment"):
        yield compare_text(self.content, other.content)
        yield compare_text(self.external_uri, other.external_uri)
        yield compare_values(self.is_embedded, other.is_embedded)
        yield compare_text(self.mime_type, other.mime_type)
        yield compare_values(self.size, other.size)
        yield compare_text(self.url, other.url)
        yield compare_sequence(self.extensions, other.extensions)
