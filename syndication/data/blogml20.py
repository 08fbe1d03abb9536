"""Structural adapter for BlogML 2.0 documents."""

from typing import Any

from core.logging import get_logger
from syndication.common.dates import format_datetime, is_unset, try_parse_datetime
from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.extensions.adapter import ExtensionAdapter
from syndication.specialized.blogml.author import BlogMLAuthor
from syndication.specialized.blogml.category import BlogMLCategory
from syndication.specialized.blogml.post import BlogMLPost
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE, BLOGML_PREFIX, create_namespace_map

logger = get_logger(__name__)


class BlogML20ResourceAdapter:
    """
    Fills a BlogMLDocument from a navigator and writes one back out.

    The document's own attributes and children are handled here; every
    nested entity loads and writes itself.
    """

    def __init__(self, navigator: XmlNavigator, settings: LoadSettings):
        argument_not_none(navigator, "navigator")
        argument_not_none(settings, "settings")
        self.navigator = navigator
        self.settings = settings

    def fill(self, document: Any) -> bool:
        argument_not_none(document, "document")
        namespaces = create_namespace_map()
        blog = self.navigator.select_single("blog:blog", namespaces)
        if blog is None:
            return False

        loaded = False
        if blog.has_attributes:
            created = try_parse_datetime(blog.get_attribute("date-created"))
            root_url = blog.get_attribute("root-url")
            if created is not None:
                document.generated_on = created
                loaded = True
            if root_url:
                document.root_url = root_url
                loaded = True

        if blog.has_children:
            title_navigator = blog.select_single("blog:title", namespaces)
            subtitle_navigator = blog.select_single("blog:sub-title", namespaces)

            if title_navigator is not None:
                title = BlogMLTextConstruct()
                if title.load(title_navigator, self.settings):
                    document.title = title
                    loaded = True
            if subtitle_navigator is not None:
                subtitle = BlogMLTextConstruct()
                if subtitle.load(subtitle_navigator, self.settings):
                    document.subtitle = subtitle
                    loaded = True

            if self._fill_collections(document, blog, namespaces):
                loaded = True

        ExtensionAdapter.fill(document, blog, self.settings, BLOGML_NAMESPACE)
        return loaded or document.has_extensions

    def _fill_collections(self, document: Any, blog: XmlNavigator, namespaces: dict[str, str]) -> bool:
        loaded = False

        for child in blog.select("blog:authors/blog:author", namespaces):
            author = BlogMLAuthor()
            if author.load(child, self.settings):
                document.authors.append(author)
                loaded = True

        for child in blog.select("blog:extended-properties/blog:property", namespaces):
            name = child.get_attribute("name")
            if name and name not in document.extended_properties:
                document.extended_properties[name] = child.get_attribute("value")
                loaded = True

        for child in blog.select("blog:categories/blog:category", namespaces):
            category = BlogMLCategory()
            if category.load(child, self.settings):
                document.categories.append(category)
                loaded = True

        limit = self.settings.retrieval_limit
        for counter, child in enumerate(blog.select("blog:posts/blog:post", namespaces), start=1):
            if limit and counter > limit:
                logger.debug("Retrieval limit reached", limit=limit)
                break
            post = BlogMLPost()
            if post.load(child, self.settings):
                document.posts.append(post)
                loaded = True

        return loaded

    @staticmethod
    def write(document: Any, writer: XmlWriter, extension_types: list[type]) -> None:
        """Write the document; extension namespaces are declared before any child."""
        argument_not_none(document, "document")
        argument_not_none(writer, "writer")

        writer.start_element("blog", BLOGML_NAMESPACE, BLOGML_PREFIX)
        ExtensionAdapter.write_namespace_declarations(extension_types, writer)

        if not is_unset(document.generated_on):
            writer.write_attribute("date-created", format_datetime(document.generated_on))
        if document.root_url:
            writer.write_attribute("root-url", document.root_url)

        document.title.write_to(writer, "title")
        if document.subtitle is not None:
            document.subtitle.write_to(writer, "sub-title")

        _write_collection(writer, "authors", document.authors)

        if document.extended_properties:
            writer.start_element("extended-properties", BLOGML_NAMESPACE, BLOGML_PREFIX)
            # Key order, matching how documents compare
            for name, value in sorted(document.extended_properties.items()):
                writer.start_element("property", BLOGML_NAMESPACE, BLOGML_PREFIX)
                writer.write_attribute("name", name)
                writer.write_attribute("value", value)
                writer.end_element()
            writer.end_element()

        _write_collection(writer, "categories", document.categories)
        _write_collection(writer, "posts", document.posts)

        ExtensionAdapter.write_extensions_to(document.extensions, writer)
        writer.end_element()


def _write_collection(writer: XmlWriter, container: str, items: list) -> None:
    if not items:
        return
    writer.start_element(container, BLOGML_NAMESPACE, BLOGML_PREFIX)
    for item in items:
        item.write_to(writer)
    writer.end_element()
