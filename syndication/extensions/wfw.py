"""Well-Formed Web Comment API extension (comment endpoint and comment feed)."""

from typing import Optional

from syndication.common.comparison import compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.extensions.base import SyndicationExtension


class WellFormedWebCommentsSyndicationExtension(SyndicationExtension):
    """Where comments on an item are posted and where they are syndicated."""

    namespace = "http://wellformedweb.org/CommentAPI/"
    prefix = "wfw"
    name = "Well-Formed Web Comment API"
    description = "Extends syndication feeds to provide a means of posting and discovering comments."
    documentation = "http://wellformedweb.org/news/wfw_namespace_elements/"

    def __init__(self):
        super().__init__()
        self._comments = ""
        self._comments_feed = ""

    @property
    def comments(self) -> str:
        """URI that comment entries are posted to."""
        return self._comments

    @comments.setter
    def comments(self, value: Optional[str]) -> None:
        self._comments = normalize_text(value)

    @property
    def comments_feed(self) -> str:
        """URI of the syndication feed for comment entries."""
        return self._comments_feed

    @comments_feed.setter
    def comments_feed(self, value: Optional[str]) -> None:
        self._comments_feed = normalize_text(value)

    def _load(self, navigator: XmlNavigator, namespaces: dict[str, str]) -> bool:
        loaded = False
        if not navigator.has_children:
            return loaded

        comment = navigator.select_single("wfw:comment", namespaces)
        comment_feed = navigator.select_single("wfw:commentRss", namespaces)
        if comment_feed is None:
            comment_feed = navigator.select_single("wfw:commentRSS", namespaces)

        if comment is not None and comment.value.strip():
            self.comments = comment.value
            loaded = True
        if comment_feed is not None and comment_feed.value.strip():
            self.comments_feed = comment_feed.value
            loaded = True
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        if self.comments:
            writer.write_element_string("comment", self.comments, self.namespace_uri, self.prefix)
        if self.comments_feed:
            writer.write_element_string("commentRss", self.comments_feed, self.namespace_uri, self.prefix)

    def _comparison_results(self, other: "WellFormedWebCommentsSyndicationExtension"):
        yield compare_text(self.namespace_uri, other.namespace_uri)
        yield compare_text(self.comments, other.comments)
        yield compare_text(self.comments_feed, other.comments_feed)
