"""BlogML category, optionally nested under a parent category."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.common import CommonFieldAdapter, CommonFieldsMixin
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX


class BlogMLCategory(CommonFieldsMixin, ExtensibleObject, ComparableEntity):
    """A category posts refer to by id."""

    def __init__(self):
        super().__init__()
        self._description = ""
        self._parent_id = ""

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = normalize_text(value)

    @property
    def parent_id(self) -> str:
        """Id of the parent category ("" for a top-level category)."""
        return self._parent_id

    @parent_id.setter
    def parent_id(self, value: Optional[str]) -> None:
        self._parent_id = normalize_text(value)

    def extensible_children(self):
        return (self.title,)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = CommonFieldAdapter.fill(self, navigator, settings)

        description = navigator.get_attribute("description")
        parent = navigator.get_attribute("parentref")
        if description:
            self.description = description
            loaded = True
        if parent:
            self.parent_id = parent
            loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("category", BLOGML_NAMESPACE, BLOGML_PREFIX)
        CommonFieldAdapter.write_attributes(self, writer)
        if self.description:
            writer.write_attribute("description", self.description)
        if self.parent_id:
            writer.write_attribute("parentref", self.parent_id)
        CommonFieldAdapter.write_elements(self, writer)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLCategory"):
        yield compare_text(self.description, other.description)
        yield compare_text(self.parent_id, other.parent_id)
        yield CommonFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)
