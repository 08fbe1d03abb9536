"""
Fields shared by otherwise unrelated BlogML entities.

Authors, categories, posts, comments and trackbacks all carry an id, a
title, creation/modification timestamps and an approval status. They do
not share a base class; each mixes in CommonFieldsMixin and the loading,
writing and comparison of those fields lives once in CommonFieldAdapter.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from syndication.common.comparison import combine, compare_nested, compare_text, compare_values
from syndication.common.dates import DATETIME_UNSET, format_datetime, is_unset, try_parse_datetime
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.specialized.blogml.enums import APPROVAL_STATUS, BlogMLApprovalStatus
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.utility import create_namespace_map


@runtime_checkable
class BlogMLCommonObject(Protocol):
    """Structural type for anything carrying the shared BlogML fields."""

    id: str
    title: BlogMLTextConstruct
    created_on: datetime
    last_modified_on: datetime
    approval_status: BlogMLApprovalStatus


class CommonFieldsMixin:
    """Storage and normalization for the shared fields."""

    def __init__(self):
        super().__init__()
        self._id = ""
        self._title = BlogMLTextConstruct()
        self.created_on: datetime = DATETIME_UNSET
        self.last_modified_on: datetime = DATETIME_UNSET
        self.approval_status = BlogMLApprovalStatus.NONE

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: Optional[str]) -> None:
        self._id = normalize_text(value)

    @property
    def title(self) -> BlogMLTextConstruct:
        return self._title

    @title.setter
    def title(self, value: BlogMLTextConstruct) -> None:
        argument_not_none(value, "title")
        self._title = value


class CommonFieldAdapter:
    """Load, write and compare the shared fields of any BlogMLCommonObject."""

    @staticmethod
    def fill(
        target: BlogMLCommonObject,
        navigator: XmlNavigator,
        settings: Optional[LoadSettings] = None,
    ) -> bool:
        """
        Read id/date-created/date-modified/approved and the title child.

        Each field is optional: one that is absent or fails to parse is
        skipped and keeps its current value.

        Returns:
            True if any field was read
        """
        argument_not_none(target, "target")
        argument_not_none(navigator, "navigator")
        populated = False

        if navigator.has_attributes:
            identifier = navigator.get_attribute("id")
            created = try_parse_datetime(navigator.get_attribute("date-created"))
            modified = try_parse_datetime(navigator.get_attribute("date-modified"))
            approval = APPROVAL_STATUS.from_wire(navigator.get_attribute("approved"))

            if identifier:
                target.id = identifier
                populated = True
            if created is not None:
                target.created_on = created
                populated = True
            if modified is not None:
                target.last_modified_on = modified
                populated = True
            if approval != BlogMLApprovalStatus.NONE:
                target.approval_status = approval
                populated = True

        if navigator.has_children:
            title_navigator = navigator.select_single("blog:title", create_namespace_map())
            if title_navigator is not None:
                title = BlogMLTextConstruct()
                if title.load(title_navigator, settings):
                    target.title = title
                    populated = True

        return populated

    @staticmethod
    def write_attributes(source: BlogMLCommonObject, writer: XmlWriter) -> None:
        argument_not_none(source, "source")
        argument_not_none(writer, "writer")

        if source.id:
            writer.write_attribute("id", source.id)
        if not is_unset(source.created_on):
            writer.write_attribute("date-created", format_datetime(source.created_on))
        if not is_unset(source.last_modified_on):
            writer.write_attribute("date-modified", format_datetime(source.last_modified_on))
        if source.approval_status != BlogMLApprovalStatus.NONE:
            writer.write_attribute("approved", APPROVAL_STATUS.to_wire(source.approval_status))

    @staticmethod
    def write_elements(source: BlogMLCommonObject, writer: XmlWriter) -> None:
        argument_not_none(source, "source")
        argument_not_none(writer, "writer")

        title = source.title
        if title is not None and (title.content or title.content_type or title.has_extensions):
            title.write_to(writer, "title")

    @staticmethod
    def compare(first: Optional[BlogMLCommonObject], second: Optional[BlogMLCommonObject]) -> int:
        if first is None and second is None:
            return 0
        if first is None:
            return -1
        if second is None:
            return 1

        return combine(
            compare_values(first.approval_status, second.approval_status),
            compare_values(first.created_on, second.created_on),
            compare_text(first.id, second.id),
            compare_values(first.last_modified_on, second.last_modified_on),
            compare_nested(first.title, second.title),
        )
