"""APML source: a weighted feed or site, with the authors followed in it."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.apml.attention import AttentionFieldAdapter, AttentionFieldsMixin
from syndication.specialized.apml.author import ApmlAuthor
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX, create_namespace_map


class ApmlSource(AttentionFieldsMixin, ExtensibleObject, ComparableEntity):
    """
    A source of content; the key is usually the feed URL.

    Usage:
        source = ApmlSource("http://feeds.feedburner.com/apmlspec", "0.6", "APML", "application/rss+xml")
        source.authors.append(ApmlAuthor("Sample", "0.5"))
    """

    def __init__(
        self,
        key: Optional[str] = None,
        value=0,
        name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ):
        super().__init__()
        self.key = key
        self.value = value
        self._name = normalize_text(name)
        self._mime_type = normalize_text(mime_type)
        self.authors: list[ApmlAuthor] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = normalize_text(value)

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @mime_type.setter
    def mime_type(self, value: Optional[str]) -> None:
        self._mime_type = normalize_text(value)

    def extensible_children(self):
        return tuple(self.authors)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = AttentionFieldAdapter.fill(self, navigator)

        if navigator.has_attributes:
            name = navigator.get_attribute("name")
            mime_type = navigator.get_attribute("type")
            if name:
                self.name = name
                loaded = True
            if mime_type:
                self.mime_type = mime_type
                loaded = True

        for child in navigator.select("apml:Author", create_namespace_map()):
            author = ApmlAuthor()
            if author.load(child, settings):
                self.authors.append(author)
                loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, APML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("Source", APML_NAMESPACE, APML_PREFIX)
        AttentionFieldAdapter.write_key(self, writer)
        writer.write_attribute("name", self.name)
        AttentionFieldAdapter.write_value(self, writer)
        writer.write_attribute("type", self.mime_type)
        AttentionFieldAdapter.write_provenance(self, writer)

        for author in self.authors:
            author.write_to(writer)

        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "ApmlSource"):
        yield compare_sequence(self.authors, other.authors)
        yield AttentionFieldAdapter.compare(self, other)
        yield compare_text(self.mime_type, other.mime_type)
        yield compare_text(self.name, other.name)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<ApmlSource {self.key!r} authors={len(self.authors)}>"
