"""
Tests for the shared BlogML fields and CommonFieldAdapter.
"""

from datetime import datetime, timezone

import pytest

from syndication.common.dates import DATETIME_UNSET
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.errors import InvalidArgumentError
from syndication.specialized.blogml.author import BlogMLAuthor
from syndication.specialized.blogml.category import BlogMLCategory
from syndication.specialized.blogml.comment import BlogMLComment
from syndication.specialized.blogml.common import BlogMLCommonObject, CommonFieldAdapter
from syndication.specialized.blogml.enums import BlogMLApprovalStatus
from syndication.specialized.blogml.post import BlogMLPost
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.trackback import BlogMLTrackback
from syndication.specialized.blogml.utility import BLOGML_NAMESPACE


def fragment(attributes: str, body: str = "") -> XmlNavigator:
    xml = f'<category xmlns="{BLOGML_NAMESPACE}" {attributes}>{body}</category>'
    return XmlNavigator.from_string(xml).root


@pytest.mark.parametrize(
    "entity_type", [BlogMLAuthor, BlogMLCategory, BlogMLComment, BlogMLPost, BlogMLTrackback]
)
def test_leaf_types_share_the_trait(entity_type):
    entity = entity_type()
    assert isinstance(entity, BlogMLCommonObject)
    assert entity.id == ""
    assert entity.title.content == ""
    assert entity.created_on == DATETIME_UNSET
    assert entity.approval_status == BlogMLApprovalStatus.NONE


def test_fill_reads_every_field():
    category = BlogMLCategory()
    populated = CommonFieldAdapter.fill(
        category,
        fragment(
            'id="7" date-created="2006-09-05T11:35:00Z" date-modified="2006-09-06T11:35:00Z" approved="true"',
            '<title type="text">News</title>',
        ),
    )
    assert populated
    assert category.id == "7"
    assert category.created_on == datetime(2006, 9, 5, 11, 35, tzinfo=timezone.utc)
    assert category.last_modified_on == datetime(2006, 9, 6, 11, 35, tzinfo=timezone.utc)
    assert category.approval_status == BlogMLApprovalStatus.APPROVED
    assert category.title.content == "News"


def test_bad_fields_are_skipped():
    """A field that fails to parse keeps its default; the rest still load."""
    category = BlogMLCategory()
    populated = CommonFieldAdapter.fill(
        category, fragment('id="7" date-created="not a date" approved="maybe"')
    )
    assert populated
    assert category.id == "7"
    assert category.created_on == DATETIME_UNSET
    assert category.approval_status == BlogMLApprovalStatus.NONE


def test_nothing_to_read():
    assert not CommonFieldAdapter.fill(BlogMLCategory(), fragment('date-created="garbage"'))


def test_write_omits_defaults():
    author = BlogMLAuthor()
    author.id = "3"
    writer = XmlWriter(minimize_output=True)
    writer.start_element("author", BLOGML_NAMESPACE, "blog")
    CommonFieldAdapter.write_attributes(author, writer)
    CommonFieldAdapter.write_elements(author, writer)
    writer.end_element()

    xml = writer.to_string()
    assert 'id="3"' in xml
    assert "date-created" not in xml
    assert "approved" not in xml
    assert "title" not in xml


def test_compare_handles_absence():
    author = BlogMLAuthor()
    assert CommonFieldAdapter.compare(None, None) == 0
    assert CommonFieldAdapter.compare(author, None) == 1
    assert CommonFieldAdapter.compare(None, author) == -1


def test_compare_detects_each_field():
    first = BlogMLAuthor()
    second = BlogMLAuthor()
    assert CommonFieldAdapter.compare(first, second) == 0

    second.approval_status = BlogMLApprovalStatus.NOT_APPROVED
    assert CommonFieldAdapter.compare(first, second) != 0
    second.approval_status = BlogMLApprovalStatus.NONE

    second.title = BlogMLTextConstruct("Other")
    assert CommonFieldAdapter.compare(first, second) != 0


def test_string_fields_normalize_none():
    """Setting a string field to None or empty reads back as ""."""
    comment = BlogMLComment()
    comment.id = None
    comment.user_name = None
    comment.user_email_address = ""
    comment.user_url = "  http://example.org/  "
    assert comment.id == ""
    assert comment.user_name == ""
    assert comment.user_email_address == ""
    assert comment.user_url == "http://example.org/"

    category = BlogMLCategory()
    category.description = None
    category.parent_id = None
    assert category.description == ""
    assert category.parent_id == ""


def test_title_cannot_be_none():
    with pytest.raises(InvalidArgumentError):
        BlogMLAuthor().title = None
