"""BlogML 2.0 document: a complete weblog export."""

from datetime import datetime
from typing import ClassVar, Optional

from syndication.common.comparison import (
    ComparableEntity,
    compare_nested,
    compare_sequence,
    compare_text,
    compare_values,
)
from syndication.common.dates import DATETIME_UNSET
from syndication.common.guard import argument_not_none, normalize_text
from syndication.data.metadata import ContentFormat
from syndication.extensions.base import ExtensibleObject
from syndication.resource import SyndicationResource
from syndication.specialized.blogml.author import BlogMLAuthor
from syndication.specialized.blogml.category import BlogMLCategory
from syndication.specialized.blogml.post import BlogMLPost
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.utility import BLOGML_VERSION


class BlogMLDocument(SyndicationResource, ExtensibleObject, ComparableEntity):
    """
    Top-level BlogML resource.

    Usage:
        document = BlogMLDocument.create("export.xml")
        for post in document.posts:
            print(post.title.content, len(post.comments))

        document.save("copy.xml")
    """

    format: ClassVar[ContentFormat] = ContentFormat.BLOGML
    version: ClassVar[str] = BLOGML_VERSION

    def __init__(self):
        super().__init__()
        self.generated_on: datetime = DATETIME_UNSET
        self._root_url = ""
        self._title = BlogMLTextConstruct()
        self.subtitle: Optional[BlogMLTextConstruct] = None
        self.authors: list[BlogMLAuthor] = []
        self.extended_properties: dict[str, str] = {}
        self.categories: list[BlogMLCategory] = []
        self.posts: list[BlogMLPost] = []

    @property
    def root_url(self) -> str:
        return self._root_url

    @root_url.setter
    def root_url(self, value: Optional[str]) -> None:
        self._root_url = normalize_text(value)

    @property
    def title(self) -> BlogMLTextConstruct:
        return self._title

    @title.setter
    def title(self, value: BlogMLTextConstruct) -> None:
        argument_not_none(value, "title")
        self._title = value

    def extensible_children(self):
        yield self.title
        if self.subtitle is not None:
            yield self.subtitle
        yield from self.authors
        yield from self.categories
        yield from self.posts

    def _comparison_results(self, other: "BlogMLDocument"):
        yield compare_sequence(self.authors, other.authors)
        yield compare_sequence(self.categories, other.categories)
        yield compare_sequence(
            sorted(self.extended_properties.items()),
            sorted(other.extended_properties.items()),
            compare_values,
        )
        yield compare_values(self.generated_on, other.generated_on)
        yield compare_sequence(self.posts, other.posts)
        yield compare_text(self.root_url, other.root_url)
        yield compare_nested(self.subtitle, other.subtitle)
        yield compare_nested(self.title, other.title)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<BlogMLDocument {self.title.content!r} posts={len(self.posts)}>"
