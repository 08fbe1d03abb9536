"""
Tests for EnumerationCodec and the BlogML/format tables built on it.
"""

from enum import Enum

import pytest

from syndication.common.enumeration import EnumerationCodec
from syndication.data.metadata import CONTENT_FORMAT, ContentFormat
from syndication.errors import InvalidArgumentError
from syndication.specialized.blogml.enums import (
    APPROVAL_STATUS,
    CONTENT_TYPE,
    POST_TYPE,
    BlogMLApprovalStatus,
    BlogMLContentType,
    BlogMLPostType,
)


class Colour(Enum):
    NONE = 0
    RED = 1
    BLUE = 2


def test_to_wire_and_back():
    """Every variant survives encode/decode through its table."""
    for variant in BlogMLContentType:
        assert CONTENT_TYPE.from_wire(CONTENT_TYPE.to_wire(variant)) == variant
    for variant in BlogMLPostType:
        assert POST_TYPE.from_wire(POST_TYPE.to_wire(variant)) == variant


def test_from_wire_is_case_insensitive():
    assert APPROVAL_STATUS.from_wire("TRUE") == BlogMLApprovalStatus.APPROVED
    assert CONTENT_TYPE.from_wire(" XHTML ") == BlogMLContentType.XHTML
    assert CONTENT_FORMAT.from_wire("BlogML") == ContentFormat.BLOGML


def test_unknown_or_empty_token_yields_unspecified():
    assert CONTENT_TYPE.from_wire("markdown") == BlogMLContentType.NONE
    assert POST_TYPE.from_wire("") == BlogMLPostType.NONE
    assert POST_TYPE.from_wire(None) == BlogMLPostType.NONE
    # No partial matches
    assert POST_TYPE.from_wire("art") == BlogMLPostType.NONE


def test_display_name():
    assert APPROVAL_STATUS.display_name(BlogMLApprovalStatus.NOT_APPROVED) == "Not Approved"
    assert CONTENT_FORMAT.display_name(ContentFormat.APML) == "Attention Profiling Markup Language"


def test_table_must_be_total():
    """A table that leaves a variant unmapped is rejected at construction."""
    with pytest.raises(InvalidArgumentError):
        EnumerationCodec(
            Colour,
            [(Colour.NONE, "", ""), (Colour.RED, "red", "Red")],
            unspecified=Colour.NONE,
        )


def test_table_must_be_injective_on_token():
    with pytest.raises(InvalidArgumentError):
        EnumerationCodec(
            Colour,
            [
                (Colour.NONE, "", ""),
                (Colour.RED, "red", "Red"),
                (Colour.BLUE, "RED", "Blue"),
            ],
            unspecified=Colour.NONE,
        )


def test_table_rejects_foreign_variant():
    with pytest.raises(InvalidArgumentError):
        EnumerationCodec(
            Colour,
            [
                (Colour.NONE, "", ""),
                (Colour.RED, "red", "Red"),
                (BlogMLPostType.ARTICLE, "blue", "Blue"),
            ],
            unspecified=Colour.NONE,
        )
