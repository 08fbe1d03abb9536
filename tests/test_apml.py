"""
Tests for APML 0.6 documents and entities.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator
from syndication.errors import OutOfRangeError
from syndication.extensions import WellFormedWebCommentsSyndicationExtension
from syndication.specialized.apml.application import ApmlApplication
from syndication.specialized.apml.attention import format_weight, parse_weight
from syndication.specialized.apml.author import ApmlAuthor
from syndication.specialized.apml.concept import ApmlConcept
from syndication.specialized.apml.document import ApmlDocument
from syndication.specialized.apml.profile import ApmlProfile
from syndication.specialized.apml.source import ApmlSource


@pytest.fixture
def document(apml_payload):
    return ApmlDocument.create(apml_payload)


def test_head(document):
    head = document.head
    assert head.title == "Example APML file for apml.org"
    assert head.generator == "Written by Hand"
    assert head.email_address == "sample@apml.org"
    assert head.created_on == datetime(2007, 3, 11, 1, 55, tzinfo=timezone.utc)


def test_profiles(document):
    assert [profile.name for profile in document.profiles] == ["Home", "Work"]
    assert document.default_profile_name == "Work"
    assert document.default_profile is document.profiles[1]
    assert document.find_profile("home") is document.profiles[0]

    home = document.profiles[0]
    assert [c.key for c in home.implicit_concepts] == ["attention", "content distribution"]
    assert home.implicit_concepts[0].value == Decimal("0.99")
    assert home.implicit_concepts[0].origin == "GatheringTool.com"
    assert home.explicit_concepts[0].key == "direct attention"

    source = home.implicit_sources[0]
    assert source.key == "http://feeds.feedburner.com/apmlspec"
    assert source.name == "APML.org"
    assert source.mime_type == "application/rss+xml"
    assert source.value == Decimal("1.00")
    assert [author.key for author in source.authors] == ["Sample"]

    assert home.explicit_sources[0].authors[0].key == "ExplicitSample"
    assert document.profiles[1].explicit_concepts[0].value == Decimal("-0.20")


def test_applications(document):
    assert [application.name for application in document.applications] == ["sample.com"]


def test_document_round_trip(document):
    copy = ApmlDocument()
    copy.loads(document.dumps())
    assert copy == document
    assert hash(copy) == hash(document)


def test_written_layout(document):
    xml = document.dumps()
    assert "<apml:APML" in xml
    assert 'version="0.6"' in xml
    assert 'defaultprofile="Work"' in xml
    assert 'value="0.99"' in xml
    assert "<apml:DateCreated>2007-03-11T01:55:00.00Z</apml:DateCreated>" in xml


def test_retrieval_limit_caps_profiles(apml_payload):
    document = ApmlDocument.create(apml_payload, LoadSettings(retrieval_limit=1))
    assert [profile.name for profile in document.profiles] == ["Home"]


def test_concept_value_range():
    concept = ApmlConcept("golf")
    concept.value = "-1"
    concept.value = 1
    concept.value = Decimal("0.5")
    with pytest.raises(OutOfRangeError):
        concept.value = Decimal("1.01")
    with pytest.raises(OutOfRangeError):
        ApmlSource("http://example.org/feed", -2)
    with pytest.raises(OutOfRangeError):
        ApmlAuthor("someone", 3)


def test_out_of_range_value_is_skipped_on_load():
    navigator = XmlNavigator.from_string(
        '<Concept xmlns="http://www.apml.org/apml-0.6" key="golf" value="4.5" />'
    ).root
    concept = ApmlConcept()
    assert concept.load(navigator)
    assert concept.key == "golf"
    assert concept.value == Decimal(0)


def test_weight_formatting():
    assert format_weight(Decimal("0.5")) == "0.50"
    assert format_weight(Decimal(1)) == "1.00"
    assert format_weight(Decimal("-0.125")) == "-0.125"
    assert parse_weight("0.25") == Decimal("0.25")
    assert parse_weight("NaN") is None
    assert parse_weight("abc") is None
    assert parse_weight("2") is None


def test_entities_compare_keys_ignoring_case():
    assert ApmlConcept("Golf", "0.5") == ApmlConcept("golf", "0.50")
    assert hash(ApmlConcept("Golf", "0.5")) == hash(ApmlConcept("golf", "0.50"))
    assert ApmlConcept("golf", "0.5") != ApmlConcept("golf", "0.6")


def test_built_document_round_trip():
    document = ApmlDocument()
    document.head.title = "Built"
    profile = ApmlProfile("Home")
    profile.explicit_concepts.append(ApmlConcept("attention", "0.99", origin="example.org"))
    source = ApmlSource("http://example.org/feed", "0.4", "Example", "application/atom+xml")
    source.authors.append(ApmlAuthor("Writer", "-0.333"))
    profile.implicit_sources.append(source)
    document.add_profile(profile, default=True)
    document.applications.append(ApmlApplication("example.org"))

    copy = ApmlDocument.create(document.dumps().encode("utf-8"))
    assert copy.default_profile_name == "Home"
    assert copy.profiles[0].implicit_sources[0].authors[0].value == Decimal("-0.333")
    assert copy == document


def test_extension_on_nested_source_round_trips():
    document = ApmlDocument()
    profile = ApmlProfile("Home")
    source = ApmlSource("http://example.org/feed", "0.4", "Example", "application/atom+xml")
    extension = WellFormedWebCommentsSyndicationExtension()
    extension.comments = "http://example.org/comments"
    source.add_extension(extension)
    profile.explicit_sources.append(source)
    document.add_profile(profile)

    xml = document.dumps()
    assert xml.count("xmlns:wfw=") == 1

    settings = LoadSettings(recognized_extensions=[WellFormedWebCommentsSyndicationExtension])
    copy = ApmlDocument()
    copy.loads(xml, settings)
    assert copy.profiles[0].explicit_sources[0].extensions == (extension,)
    assert copy == document
