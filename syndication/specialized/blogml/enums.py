"""
BlogML enumerations and their wire tables.

Members are ordered so that comparison by value gives the ordinal
ordering used when entities are compared.
"""

from enum import IntEnum

from syndication.common.enumeration import EnumerationCodec


class BlogMLApprovalStatus(IntEnum):
    """Moderation state carried by the "approved" attribute."""
    NONE = 0
    APPROVED = 1
    NOT_APPROVED = 2


class BlogMLContentType(IntEnum):
    """Encoding of a text construct's content."""
    NONE = 0
    BASE64 = 1
    HTML = 2
    TEXT = 3
    XHTML = 4


class BlogMLPostType(IntEnum):
    NONE = 0
    ARTICLE = 1
    NORMAL = 2


APPROVAL_STATUS = EnumerationCodec(
    BlogMLApprovalStatus,
    [
        (BlogMLApprovalStatus.NONE, "", "None"),
        (BlogMLApprovalStatus.APPROVED, "true", "Approved"),
        (BlogMLApprovalStatus.NOT_APPROVED, "false", "Not Approved"),
    ],
    unspecified=BlogMLApprovalStatus.NONE,
)

CONTENT_TYPE = EnumerationCodec(
    BlogMLContentType,
    [
        (BlogMLContentType.NONE, "", "None"),
        (BlogMLContentType.BASE64, "base64", "Base64"),
        (BlogMLContentType.HTML, "html", "HTML"),
        (BlogMLContentType.TEXT, "text", "Text"),
        (BlogMLContentType.XHTML, "xhtml", "XHTML"),
    ],
    unspecified=BlogMLContentType.NONE,
)

POST_TYPE = EnumerationCodec(
    BlogMLPostType,
    [
        (BlogMLPostType.NONE, "", "None"),
        (BlogMLPostType.ARTICLE, "article", "Article"),
        (BlogMLPostType.NORMAL, "normal", "Normal"),
    ],
    unspecified=BlogMLPostType.NONE,
)
