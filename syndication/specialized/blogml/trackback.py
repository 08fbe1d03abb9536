"""BlogML trackback: a ping from another site linking to a post."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.common import CommonFieldAdapter, CommonFieldsMixin
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX


class BlogMLTrackback(CommonFieldsMixin, ExtensibleObject, ComparableEntity):

    def __init__(self):
        super().__init__()
        self._url = ""

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: Optional[str]) -> None:
        self._url = normalize_text(value)

    def extensible_children(self):
        return (self.title,)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = CommonFieldAdapter.fill(self, navigator, settings)

        url = navigator.get_attribute("url")
        if url:
            self.url = url
            loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("trackback", BLOGML_NAMESPACE, BLOGML_PREFIX)
        CommonFieldAdapter.write_attributes(self, writer)
        if self.url:
            writer.write_attribute("url", self.url)
        CommonFieldAdapter.write_elements(self, writer)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLTrackback"):
        yield compare_text(self.url, other.url)
        yield CommonFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)
