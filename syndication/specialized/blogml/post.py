"""BlogML post with its comments, trackbacks, attachments and references."""

from typing import Optional

from syndication.common.comparison import (
    ComparableEntity,
    compare_nested,
    compare_sequence,
    compare_text,
    compare_values,
)
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.blogml.attachment import BlogMLAttachment
from syndication.specialized.blogml.comment import BlogMLComment
from syndication.specialized.blogml.common import CommonFieldAdapter, CommonFieldsMixin
from syndication.specialized.blogml.enums import POST_TYPE, BlogMLPostType
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.trackback import BlogMLTrackback
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX, create_namespace_map


class BlogMLPost(CommonFieldsMixin, ExtensibleObject, ComparableEntity):
    """
    A weblog entry.

    Categories and authors are held as id references into the owning
    document's categories and authors; comments, trackbacks and
    attachments are owned by the post.
    """

    def __init__(self):
        super().__init__()
        self._url = ""
        self.post_type = BlogMLPostType.NONE
        self._views = ""
        self._content = BlogMLTextConstruct()
        self.name: Optional[BlogMLTextConstruct] = None
        self.excerpt: Optional[BlogMLTextConstruct] = None
        self.categories: list[str] = []
        self.comments: list[BlogMLComment] = []
        self.trackbacks: list[BlogMLTrackback] = []
        self.attachments: list[BlogMLAttachment] = []
        self.authors: list[str] = []

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: Optional[str]) -> None:
        self._url = normalize_text(value)

    @property
    def views(self) -> str:
        return self._views

    @views.setter
    def views(self, value: Optional[str]) -> None:
        self._views = normalize_text(value)

    @property
    def content(self) -> BlogMLTextConstruct:
        return self._content

    @content.setter
    def content(self, value: BlogMLTextConstruct) -> None:
        argument_not_none(value, "content")
        self._content = value

    @property
    def has_excerpt(self) -> bool:
        return self.excerpt is not None

    def extensible_children(self):
        yield self.title
        yield self.content
        if self.name is not None:
            yield self.name
        if self.excerpt is not None:
            yield self.excerpt
        yield from self.attachments
        yield from self.comments
        yield from self.trackbacks

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        namespaces = create_namespace_map()
        loaded = CommonFieldAdapter.fill(self, navigator, settings)

        if navigator.has_attributes:
            url = navigator.get_attribute("post-url")
            post_type = POST_TYPE.from_wire(navigator.get_attribute("type"))
            views = navigator.get_attribute("views")

            if url:
                self.url = url
                loaded = True
            if post_type != BlogMLPostType.NONE:
                self.post_type = post_type
                loaded = True
            if views:
                self.views = views
                loaded = True

        if navigator.has_children:
            content = self._load_text(navigator.select_single("blog:content", namespaces), settings)
            name = self._load_text(navigator.select_single("blog:post-name", namespaces), settings)
            excerpt = self._load_text(navigator.select_single("blog:excerpt", namespaces), settings)

            if content is not None:
                self.content = content
                loaded = True
            if name is not None:
                self.name = name
                loaded = True
            if excerpt is not None:
                self.excerpt = excerpt
                loaded = True

            if self._load_collections(navigator, namespaces, settings):
                loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, BLOGML_NAMESPACE)
        return loaded

    @staticmethod
    def _load_text(navigator: Optional[XmlNavigator],
                   settings: Optional[LoadSettings]) -> Optional[BlogMLTextConstruct]:
        if navigator is None:
            return None
        construct = BlogMLTextConstruct()
        return construct if construct.load(navigator, settings) else None

    def _load_collections(self, navigator: XmlNavigator, namespaces: dict[str, str],
                          settings: Optional[LoadSettings]) -> bool:
        loaded = False

        for reference in navigator.select("blog:categories/blog:category", namespaces):
            category_id = reference.get_attribute("ref")
            if category_id:
                self.categories.append(category_id)
                loaded = True

        for child in navigator.select("blog:comments/blog:comment", namespaces):
            comment = BlogMLComment()
            if comment.load(child, settings):
                self.comments.append(comment)
                loaded = True

        for child in navigator.select("blog:trackbacks/blog:trackback", namespaces):
            trackback = BlogMLTrackback()
            if trackback.load(child, settings):
                self.trackbacks.append(trackback)
                loaded = True

        for child in navigator.select("blog:attachments/blog:attachment", namespaces):
            attachment = BlogMLAttachment()
            if attachment.load(child, settings):
                self.attachments.append(attachment)
                loaded = True

        for reference in navigator.select("blog:authors/blog:author", namespaces):
            author_id = reference.get_attribute("ref")
            if author_id:
                self.authors.append(author_id)
                loaded = True

        return loaded

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("post", BLOGML_NAMESPACE, BLOGML_PREFIX)

        CommonFieldAdapter.write_attributes(self, writer)
        if self.url:
            writer.write_attribute("post-url", self.url)
        if self.post_type != BlogMLPostType.NONE:
            writer.write_attribute("type", POST_TYPE.to_wire(self.post_type))
        writer.write_attribute("hasexcerpt", "true" if self.has_excerpt else "false")
        if self.views:
            writer.write_attribute("views", self.views)

        CommonFieldAdapter.write_elements(self, writer)
        self.content.write_to(writer, "content")
        if self.name is not None:
            self.name.write_to(writer, "post-name")
        if self.excerpt is not None:
            self.excerpt.write_to(writer, "excerpt")

        self._write_references(writer, "categories", "category", self.categories)
        self._write_collection(writer, "comments", self.comments)
        self._write_collection(writer, "trackbacks", self.trackbacks)
        self._write_collection(writer, "attachments", self.attachments)
        self._write_references(writer, "authors", "author", self.authors)

        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    @staticmethod
    def _write_collection(writer: XmlWriter, container: str, items: list) -> None:
        if not items:
            return
        writer.start_element(container, BLOGML_NAMESPACE, BLOGML_PREFIX)
        for item in items:
            item.write_to(writer)
        writer.end_element()

    @staticmethod
    def _write_references(writer: XmlWriter, container: str, element: str, references: list[str]) -> None:
        if not references:
            return
        writer.start_element(container, BLOGML_NAMESPACE, BLOGML_PREFIX)
        for reference in references:
            writer.start_element(element, BLOGML_NAMESPACE, BLOGML_PREFIX)
            writer.write_attribute("ref", reference)
            writer.end_element()
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "BlogMLPost"):
        yield compare_sequence(self.attachments, other.attachments)
        yield compare_sequence(self.authors, other.authors, compare_text)
        yield compare_sequence(self.categories, other.categories, compare_text)
        yield compare_sequence(self.comments, other.comments)
        yield compare_nested(self.content, other.content)
        yield compare_nested(self.excerpt, other.excerpt)
        yield compare_nested(self.name, other.name)
        yield compare_values(self.post_type, other.post_type)
        yield compare_sequence(self.trackbacks, other.trackbacks)
        yield compare_text(self.url, other.url)
        yield compare_text(self.views, other.views)
        yield CommonFieldAdapter.compare(self, other)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<BlogMLPost id={self.id!r} comments={len(self.comments)}>"
