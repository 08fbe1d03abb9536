"""BlogML text construct: titles, post content, excerpts and similar text nodes."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text, compare_values
from syndication.common.guard import argument_not_empty, argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml, split_qualified_name
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.enums import CONTENT_TYPE, BlogMLContentType
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX


class BlogMLTextConstruct(ExtensibleObject, ComparableEntity):
    """
    Human-readable text with an optional content type.

    The element name is chosen by the owner ("title", "content",
    "excerpt", ...), so write_to takes it as an argument.
    """

    element_name = "text"

    def __init__(self, content: Optional[str] = None,
                 content_type: BlogMLContentType = BlogMLContentType.NONE):
        super().__init__()
        self.content = content
        self.content_type = content_type

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = normalize_text(value)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = False

        content_type = CONTENT_TYPE.from_wire(navigator.get_attribute("type"))
        if content_type != BlogMLContentType.NONE:
            self.content_type = content_type
            loaded = True

        text = _content_text(navigator, settings)
        if text.strip():
            self.content = text
            loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter, element_name: Optional[str] = None) -> None:
        argument_not_none(writer, "writer")
        element_name = element_name or self.element_name
        argument_not_empty(element_name, "element_name")

        writer.start_element(element_name, BLOGML_NAMESPACE, BLOGML_PREFIX)
        if self.content_type != BlogMLContentType.NONE:
            writer.write_attribute("type", CONTENT_TYPE.to_wire(self.content_type))
        writer.write_string(self.content)
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLTextConstruct"):
        yield compare_text(self.content, other.content)
        yield compare_values(self.content_type, other.content_type)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<BlogMLTextConstruct type={self.content_type.name} {self.content[:40]!r}>"


def _content_text(navigator: XmlNavigator, settings: Optional[LoadSettings]) -> str:
    """
    All descendant text, so markup such as type="xhtml" content keeps its words.

    Children in a recognized extension namespace belong to the extension,
    not to the content.
    """
    excluded = set()
    if settings is not None:
        for extension_type in settings.recognized_extensions:
            extension = extension_type()
            excluded.add(extension.resolve_namespace(navigator, BLOGML_NAMESPACE))

    element = navigator.element
    parts = [element.text or ""]
    for child in element:
        if split_qualified_name(child.tag)[0] not in excluded:
            parts.append("".join(child.itertext()))
        parts.append(child.tail or "")
    return "".join(parts)
