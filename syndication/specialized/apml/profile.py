"""APML profile: a named set of implicit and explicit attention data."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.apml.concept import ApmlConcept
from syndication.specialized.apml.source import ApmlSource
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX, create_namespace_map


class ApmlProfile(ExtensibleObject, ComparableEntity):
    """
    Attention data grouped under a profile name such as "Home" or "Work".

    Implicit data is gathered by software watching the user; explicit data
    is stated by the user.
    """

    def __init__(self, name: Optional[str] = None):
        super().__init__()
        self._name = normalize_text(name)
        self.implicit_concepts: list[ApmlConcept] = []
        self.implicit_sources: list[ApmlSource] = []
        self.explicit_concepts: list[ApmlConcept] = []
        self.explicit_sources: list[ApmlSource] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = normalize_text(value)

    def extensible_children(self):
        yield from self.explicit_concepts
        yield from self.explicit_sources
        yield from self.implicit_concepts
        yield from self.implicit_sources

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        namespaces = create_namespace_map()
        loaded = False

        name = navigator.get_attribute("name")
        if name:
            self.name = name
            loaded = True

        implicit = navigator.select_single("apml:ImplicitData", namespaces)
        explicit = navigator.select_single("apml:ExplicitData", namespaces)
        if implicit is not None:
            if _load_data(implicit, self.implicit_concepts, self.implicit_sources, settings):
                loaded = True
        if explicit is not None:
            if _load_data(explicit, self.explicit_concepts, self.explicit_sources, settings):
                loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, APML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("Profile", APML_NAMESPACE, APML_PREFIX)
        writer.write_attribute("name", self.name)

        _write_data(writer, "ImplicitData", self.implicit_concepts, self.implicit_sources)
        _write_data(writer, "ExplicitData", self.explicit_concepts, self.explicit_sources)

        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "ApmlProfile"):
        yield compare_sequence(self.explicit_concepts, other.explicit_concepts)
        yield compare_sequence(self.explicit_sources, other.explicit_sources)
        yield compare_sequence(self.implicit_concepts, other.implicit_concepts)
        yield compare_sequence(self.implicit_sources, other.implicit_sources)
        yield compare_text(self.name, other.name)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<ApmlProfile {self.name!r}>"


def _load_data(
    navigator: XmlNavigator,
    concepts: list[ApmlConcept],
    sources: list[ApmlSource],
    settings: Optional[LoadSettings],
) -> bool:
    namespaces = create_namespace_map()
    loaded = False

    for child in navigator.select("apml:Concepts/apml:Concept", namespaces):
        concept = ApmlConcept()
        if concept.load(child, settings):
            concepts.append(concept)
            loaded = True

    for child in navigator.select("apml:Sources/apml:Source", namespaces):
        source = ApmlSource()
        if source.load(child, settings):
            sources.append(source)
            loaded = True

    return loaded


def _write_data(
    writer: XmlWriter,
    container: str,
    concepts: list[ApmlConcept],
    sources: list[ApmlSource],
) -> None:
    if not concepts and not sources:
        return
    writer.start_element(container, APML_NAMESPACE, APML_PREFIX)
    for element_name, items in (("Concepts", concepts), ("Sources", sources)):
        if items:
            writer.start_element(element_name, APML_NAMESPACE, APML_PREFIX)
            for item in items:
                item.write_to(writer)
            writer.end_element()
    writer.end_element()
