"""APML application: settings block owned by one consuming application."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX


class ApmlApplication(ExtensibleObject, ComparableEntity):
    """Identified by name; application-specific payload travels as extensions."""

    def __init__(self, name: Optional[str] = None):
        super().__init__()
        self._name = normalize_text(name)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = normalize_text(value)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = False
        name = navigator.get_attribute("name")
        if name:
            self.name = name
            loaded = True
        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, APML_NAMESPACE)
        return loaded or self.has_extensions

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("Application", APML_NAMESPACE, APML_PREFIX)
        writer.write_attribute("name", self.name)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "ApmlApplication"):
        yield compare_text(self.name, other.name)
        yield compare_sequence(self.extensions, other.extensions)
