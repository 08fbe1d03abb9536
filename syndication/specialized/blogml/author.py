"""BlogML author."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.common import CommonFieldAdapter, CommonFieldsMixin
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX


class BlogMLAuthor(CommonFieldsMixin, ExtensibleObject, ComparableEntity):
    """A person who authored weblog content; the title holds the display name."""

    def __init__(self):
        super().__init__()
        self._email_address = ""

    @property
    def email_address(self) -> str:
        return self._email_address

    @email_address.setter
    def email_address(self, value: Optional[str]) -> None:
        self._email_address = normalize_text(value)

    def extensible_children(self):
        return (self.title,)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = CommonFieldAdapter.fill(self, navigator, settings)

        email = navigator.get_attribute("email")
        if email:
            self.email_address = email
            loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("author", BLOGML_NAMESPACE, BLOGML_PREFIX)
        CommonFieldAdapter.write_attributes(self, writer)
        if self.email_address:
            writer.write_attribute("email", self.email_address)
        CommonFieldAdapter.write_elements(self, writer)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLAuthor"):
        yield compare_text(self.email_address, other.email_address)
        yield CommonFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<BlogMLAuthor id={self.id!r} email={self.email_address!r}>"
