"""BlogML comment left on a post."""

from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_nested, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.common import CommonFieldAdapter, CommonFieldsMixin
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX, create_namespace_map


class BlogMLComment(CommonFieldsMixin, ExtensibleObject, ComparableEntity):
    """A reader comment: who wrote it and what they said."""

    def __init__(self):
        super().__init__()
        self._content = BlogMLTextConstruct()
        self._user_name = ""
        self._user_email_address = ""
        self._user_url = ""

    @property
    def content(self) -> BlogMLTextConstruct:
        return self._content

    @content.setter
    def content(self, value: BlogMLTextConstruct) -> None:
        argument_not_none(value, "content")
        self._content = value

    @property
    def user_name(self) -> str:
        return self._user_name

    @user_name.setter
    def user_name(self, value: Optional[str]) -> None:
        self._user_name = normalize_text(value)

    @property
    def user_email_address(self) -> str:
        return self._user_email_address

    @user_email_address.setter
    def user_email_address(self, value: Optional[str]) -> None:
        self._user_email_address = normalize_text(value)

    @property
    def user_url(self) -> str:
        return self._user_url

    @user_url.setter
    def user_url(self, value: Optional[str]) -> None:
        self._user_url = normalize_text(value)

    def extensible_children(self):
        return (self.title, self.content)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        loaded = CommonFieldAdapter.fill(self, navigator, settings)

        if navigator.has_attributes:
            user_name = navigator.get_attribute("user-name")
            user_email = navigator.get_attribute("user-email")
            user_url = navigator.get_attribute("user-url")

            if user_name:
                self.user_name = user_name
                loaded = True
            if user_email:
                self.user_email_address = user_email
                loaded = True
            if user_url:
                self.user_url = user_url
                loaded = True

        if navigator.has_children:
            content_navigator = navigator.select_single("blog:content", create_namespace_map())
            if content_navigator is not None:
                content = BlogMLTextConstruct()
                if content.load(content_navigator, settings):
                    self.content = content
                    loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("comment", BLOGML_NAMESPACE, BLOGML_PREFIX)
        CommonFieldAdapter.write_attributes(self, writer)
        writer.write_attribute("user-name", self.user_name)
        if self.user_email_address:
            writer.write_attribute("user-email", self.user_email_address)
        if self.user_url:
            writer.write_attribute("user-url", self.user_url)

        CommonFieldAdapter.write_elements(self, writer)
        self.content.write_to(writer, "content")
        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLComment"):
        yield compare_nested(self.content, other.content)
        yield compare_text(self.user_email_address, other.user_email_address)
        yield compare_text(self.user_name, other.user_name)
        yield compare_text(self.user_url, other.user_url)
        yield CommonFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<BlogMLComment id={self.id!r} user={self.user_name!r}>"
