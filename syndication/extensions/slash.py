"""RDF Site Summary 1.0 Slash module (section, department, comment count, hit parade)."""

from typing import Optional

from syndication.common.comparison import compare_sequence, compare_text, compare_values
from syndication.common.guard import argument_not_none, argument_in_range, normalize_text
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.extensions.base import SyndicationExtension


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


class SlashSyndicationExtension(SyndicationExtension):
    """Slash-based site metadata for an item."""

    namespace = "http://purl.org/rss/1.0/modules/slash/"
    prefix = "slash"
    name = "RDF Site Summary (Slash)"
    description = "Extends syndication feeds to provide a means of describing Slash-based site meta-data."
    documentation = "http://web.resource.org/rss/1.0/modules/slash/"

    def __init__(self):
        super().__init__()
        self._section = ""
        self._department = ""
        self._comments: Optional[int] = None
        self.hit_parade: list[int] = []

    @property
    def section(self) -> str:
        return self._section

    @section.setter
    def section(self, value: Optional[str]) -> None:
        self._section = normalize_text(value)

    @property
    def department(self) -> str:
        return self._department

    @department.setter
    def department(self, value: Optional[str]) -> None:
        self._department = normalize_text(value)

    @property
    def comments(self) -> Optional[int]:
        """Number of comments, None when unset."""
        return self._comments

    @comments.setter
    def comments(self, value: Optional[int]) -> None:
        if value is not None:
            argument_in_range(value, "comments", minimum=0)
        self._comments = value

    def _load(self, navigator: XmlNavigator, namespaces: dict[str, str]) -> bool:
        loaded = False
        if not navigator.has_children:
            return loaded

        section = navigator.select_single("slash:section", namespaces)
        department = navigator.select_single("slash:department", namespaces)
        comments = navigator.select_single("slash:comments", namespaces)
        hit_parade = navigator.select_single("slash:hit_parade", namespaces)

        if section is not None and section.value:
            self.section = section.value
            loaded = True
        if department is not None and department.value:
            self.department = department.value
            loaded = True
        if comments is not None:
            count = _parse_int(comments.value)
            if count is not None and count >= 0:
                self.comments = count
                loaded = True
        if hit_parade is not None and hit_parade.value:
            for identifier in hit_parade.value.split(","):
                parsed = _parse_int(identifier)
                if parsed is not None:
                    self.hit_parade.append(parsed)
                    loaded = True
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        if self.section:
            writer.write_element_string("section", self.section, self.namespace_uri, self.prefix)
        if self.department:
            writer.write_element_string("department", self.department, self.namespace_uri, self.prefix)
        if self.comments is not None:
            writer.write_element_string("comments", str(self.comments), self.namespace_uri, self.prefix)
        if self.hit_parade:
            writer.write_element_string(
                "hit_parade", ",".join(str(i) for i in self.hit_parade), self.namespace_uri, self.prefix
            )

    def _comparison_results(self, other: "SlashSyndicationExtension"):
        yield compare_text(self.namespace_uri, other.namespace_uri)
        yield compare_text(self.section, other.section)
        yield compare_text(self.department, other.department)
        yield compare_values(self.comments, other.comments)
        yield compare_sequence(self.hit_parade, other.hit_parade, compare_values)
