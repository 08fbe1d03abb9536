"""APML concept: a weighted keyword the user pays attention to."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence
from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.apml.attention import AttentionFieldAdapter, AttentionFieldsMixin
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX


class ApmlConcept(AttentionFieldsMixin, ExtensibleObject, ComparableEntity):
    """
    Usage:
        concept = ApmlConcept("attention", "0.99", origin="GatheringTool.com")
        profile.explicit_concepts.append(concept)
    """

    def __init__(self, key: Optional[str] = None, value=0, origin: Optional[str] = None):
        super().__init__()
        self.key = key
        self.value = value
        self.origin = origin

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = AttentionFieldAdapter.fill(self, navigator)
        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, APML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("Concept", APML_NAMESPACE, APML_PREFIX)
        AttentionFieldAdapter.write_key(self, writer)
        AttentionFieldAdapter.write_value(self, writer)
        AttentionFieldAdapter.write_provenance(self, writer)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "ApmlConcept"):
        yield AttentionFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<ApmlConcept {self.key!r}={self.value}>"
