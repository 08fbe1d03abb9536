"""
Tests for BlogML 2.0 documents and entities.
"""

import io
from datetime import datetime, timezone

import pytest

from syndication.common.settings import LoadSettings, SaveSettings
from syndication.common.xml import XmlNavigator
from syndication.errors import OutOfRangeError
from syndication.extensions import SlashSyndicationExtension
from syndication.specialized.blogml.attachment import BlogMLAttachment
from syndication.specialized.blogml.author import BlogMLAuthor
from syndication.specialized.blogml.category import BlogMLCategory
from syndication.specialized.blogml.comment import BlogMLComment
from syndication.specialized.blogml.document import BlogMLDocument
from syndication.specialized.blogml.enums import BlogMLApprovalStatus, BlogMLContentType, BlogMLPostType
from syndication.specialized.blogml.post import BlogMLPost
from syndication.specialized.blogml.text import BlogMLTextConstruct
from syndication.specialized.blogml.trackback import BlogMLTrackback


@pytest.fixture
def document(blogml_payload):
    return BlogMLDocument.create(blogml_payload)


def reparse(entity, entity_type, element_name=None):
    """Serialize an entity alone and load it into a fresh instance."""
    xml = entity.to_xml() if element_name is None else _text_xml(entity, element_name)
    fresh = entity_type()
    fresh.load(XmlNavigator.from_string(xml).root)
    return fresh


def _text_xml(construct, element_name):
    from syndication.common.xml import canonical_xml

    return canonical_xml(lambda writer: construct.write_to(writer, element_name))


def test_document_fields(document):
    assert document.generated_on == datetime(2006, 9, 5, 11, 35, tzinfo=timezone.utc)
    assert document.root_url == "http://example.org/weblog/"
    assert document.title.content == "Example Weblog"
    assert document.title.content_type == BlogMLContentType.TEXT
    assert document.subtitle.content == "Notes on syndication"
    assert document.extended_properties == {
        "CommentModeration": "Anonymous",
        "SendTrackback": "yes",
    }


def test_document_collections(document):
    author = document.authors[0]
    assert author.id == "2100"
    assert author.email_address == "jane@example.org"
    assert author.title.content == "Jane Doe"
    assert author.approval_status == BlogMLApprovalStatus.APPROVED

    category = document.categories[0]
    assert category.description == "General"
    assert category.parent_id == "0"

    post = document.posts[0]
    assert post.url == "http://example.org/weblog/34"
    assert post.post_type == BlogMLPostType.NORMAL
    assert post.views == "12"
    assert post.content.content == "<p>Hello</p>"
    assert post.content.content_type == BlogMLContentType.HTML
    assert post.name.content == "first-post"
    assert post.has_excerpt
    assert post.categories == ["1018"]
    assert post.authors == ["2100"]

    comment = post.comments[0]
    assert comment.approval_status == BlogMLApprovalStatus.NOT_APPROVED
    assert comment.user_email_address == "reader@example.org"
    assert comment.user_url == "http://reader.example.org/"

    assert post.trackbacks[0].url == "http://other.example.org/post"

    attachment = post.attachments[0]
    assert not attachment.is_embedded
    assert attachment.mime_type == "image/png"
    assert attachment.size == 2048


def test_unregistered_extension_elements_are_ignored(document):
    assert not document.posts[0].has_extensions


def test_registered_extension_is_attached(blogml_payload):
    settings = LoadSettings(recognized_extensions=[SlashSyndicationExtension])
    document = BlogMLDocument.create(blogml_payload, settings)
    (extension,) = document.posts[0].extensions
    assert extension.section == "articles"
    assert extension.comments == 1


def test_document_round_trip(blogml_payload):
    settings = LoadSettings(recognized_extensions=[SlashSyndicationExtension])
    original = BlogMLDocument.create(blogml_payload, settings)

    copy = BlogMLDocument()
    copy.loads(original.dumps(), settings)

    assert copy.compare_to(original) == 0
    assert copy == original
    assert hash(copy) == hash(original)


def test_minimized_round_trip(document):
    xml = document.dumps(SaveSettings(minimize_output=True))
    assert "\n  " not in xml
    assert BlogMLDocument.create(xml.encode("utf-8")) == document


def test_save_to_path_and_stream(document, tmp_path):
    path = tmp_path / "blog.xml"
    document.save(path)
    assert BlogMLDocument.create(path) == document

    stream = io.BytesIO()
    document.save(stream)
    stream.seek(0)
    assert BlogMLDocument.create(stream) == document


def test_changed_document_is_unequal(document, blogml_payload):
    other = BlogMLDocument.create(blogml_payload)
    assert other == document
    other.posts[0].comments[0].user_name = "Someone else"
    assert other != document


@pytest.mark.parametrize(
    "locate, entity_type",
    [
        (lambda d: d.authors[0], BlogMLAuthor),
        (lambda d: d.categories[0], BlogMLCategory),
        (lambda d: d.posts[0].trackbacks[0], BlogMLTrackback),
        (lambda d: d.posts[0].comments[0], BlogMLComment),
    ],
)
def test_leaf_round_trip(document, locate, entity_type):
    """Each leaf type loaded from the sample survives a serialize/parse cycle."""
    original = locate(document)
    assert reparse(original, entity_type) == original


def test_post_and_attachment_round_trip(document):
    post = document.posts[0]
    assert reparse(post, BlogMLPost) == post
    assert reparse(post.attachments[0], BlogMLAttachment) == post.attachments[0]


def test_text_construct_round_trip():
    construct = BlogMLTextConstruct("<b>bold</b> & more", BlogMLContentType.HTML)
    assert reparse(construct, BlogMLTextConstruct, "title") == construct


def test_text_content_is_trimmed():
    construct = BlogMLTextConstruct("  Hello  ")
    assert construct.content == "Hello"

    construct.content = "\n\t  "
    assert construct.content == ""


def test_whitespace_only_comment_content_round_trips():
    comment = BlogMLComment()
    comment.id = "c1"
    comment.content = BlogMLTextConstruct("   ")

    reloaded = reparse(comment, BlogMLComment)
    assert reloaded.compare_to(comment) == 0
    assert reloaded == comment


def test_xhtml_content_keeps_descendant_text():
    navigator = XmlNavigator.from_string(
        '<content xmlns="http://www.blogml.com/2006/09/BlogML" type="xhtml"'
        ' xmlns:slash="http://purl.org/rss/1.0/modules/slash/">'
        "<div><p>Hello <b>there</b></p> world</div>"
        "<slash:section>articles</slash:section>"
        "</content>"
    ).root
    construct = BlogMLTextConstruct()
    assert construct.load(navigator, LoadSettings(recognized_extensions=[SlashSyndicationExtension]))

    assert construct.content == "Hello there world"
    assert construct.content_type == BlogMLContentType.XHTML
    assert construct.find_extensions(SlashSyndicationExtension)[0].section == "articles"


def test_retrieval_limit_caps_posts():
    source = BlogMLDocument()
    source.title.content = "Many posts"
    for index in range(3):
        post = BlogMLPost()
        post.id = str(index)
        source.posts.append(post)
    payload = source.dumps().encode("utf-8")

    limited = BlogMLDocument.create(payload, LoadSettings(retrieval_limit=2))
    assert [post.id for post in limited.posts] == ["0", "1"]
    assert len(BlogMLDocument.create(payload).posts) == 3


def test_loaded_event_fires_once(blogml_payload):
    document = BlogMLDocument()
    events = []
    document.add_loaded_handler(events.append)

    document.load(blogml_payload)

    assert len(events) == 1
    assert events[0].resource is document
    assert events[0].navigator.root.local_name == "blog"

    document.remove_loaded_handler(events.append)
    document.load(blogml_payload)
    assert len(events) == 1


def test_attachment_size_must_be_positive():
    with pytest.raises(OutOfRangeError):
        BlogMLAttachment().size = -5


def test_default_values_are_written():
    comment = BlogMLComment()
    xml = comment.to_xml()
    assert 'user-name=""' in xml

    attachment = BlogMLAttachment()
    xml = attachment.to_xml()
    assert 'embedded="false"' in xml
    assert 'mime-type=""' in xml
