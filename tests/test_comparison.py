"""
Tests for the comparison engine: combinator, sequences and entity equality.
"""

import pytest

from syndication.common.comparison import (
    combine,
    compare_nested,
    compare_sequence,
    compare_text,
    compare_values,
)
from syndication.extensions import WellFormedWebCommentsSyndicationExtension
from syndication.specialized.blogml.author import BlogMLAuthor
from syndication.specialized.blogml.category import BlogMLCategory
from syndication.specialized.blogml.document import BlogMLDocument
from syndication.specialized.blogml.text import BlogMLTextConstruct


def make_author(identifier: str, email: str = "someone@example.org") -> BlogMLAuthor:
    author = BlogMLAuthor()
    author.id = identifier
    author.email_address = email
    author.title = BlogMLTextConstruct(f"Author {identifier}")
    return author


def test_combine_is_zero_only_when_all_equal():
    assert combine(0, 0, 0) == 0
    assert combine(0, -1, 0) != 0
    assert combine(1, 0) != 0
    assert combine() == 0


def test_compare_values_none_sorts_least():
    assert compare_values(None, None) == 0
    assert compare_values(None, 1) == -1
    assert compare_values(1, None) == 1
    assert compare_values(2, 3) == -1


def test_compare_text_ignores_case():
    assert compare_text("Hello", "hELLO") == 0
    assert compare_text("a", "b") == -1
    assert compare_text(None, "") == -1


def test_compare_nested_handles_absence():
    author = make_author("1")
    assert compare_nested(None, None) == 0
    assert compare_nested(None, author) == -1
    assert compare_nested(author, None) == 1


class TestSequenceBoundary:
    """Length differences short-circuit; equal lengths compare pairwise."""

    def test_three_versus_five(self):
        three = [make_author(str(i)) for i in range(3)]
        five = [make_author(str(i)) for i in range(5)]
        assert compare_sequence(three, five) == -1
        assert compare_sequence(five, three) == 1

    def test_length_wins_over_content(self):
        three = [make_author("z") for _ in range(3)]
        five = [make_author("a") for _ in range(5)]
        assert compare_sequence(three, five) == -1

    def test_single_difference_is_nonzero(self):
        first = [make_author(str(i)) for i in range(4)]
        second = [make_author(str(i)) for i in range(4)]
        second[2].email_address = "other@example.org"
        assert compare_sequence(first, second) != 0

    def test_custom_comparer(self):
        assert compare_sequence([1, 2], [1, 2], compare_values) == 0
        assert compare_sequence([1, 2], [1, 3], compare_values) != 0


class TestEntityComparison:
    def test_compare_to_absent_is_positive(self):
        assert make_author("1").compare_to(None) > 0

    def test_compare_to_self_is_zero(self):
        author = make_author("1")
        assert author.compare_to(author) == 0

    def test_equality_matches_compare_to(self):
        first = make_author("1")
        second = make_author("1")
        third = make_author("2")

        assert first == second
        assert first.compare_to(second) == 0
        assert first != third
        assert first.compare_to(third) != 0

    def test_equal_entities_hash_equal(self):
        first = make_author("1")
        second = make_author("1")
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_case_variant_entities_hash_equal(self):
        first = make_author("ABC", "Someone@Example.org")
        second = make_author("abc", "someone@example.org")
        assert first == second
        assert hash(first) == hash(second)

    def test_reordered_extended_properties_hash_equal(self):
        first = BlogMLDocument()
        first.extended_properties["a"] = "1"
        first.extended_properties["b"] = "2"
        second = BlogMLDocument()
        second.extended_properties["b"] = "2"
        second.extended_properties["a"] = "1"

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_extensions_in_different_namespaces_are_unequal(self):
        first = WellFormedWebCommentsSyndicationExtension()
        first.comments = "http://example.org/c"
        second = WellFormedWebCommentsSyndicationExtension()
        second.comments = "http://example.org/c"
        second.namespace_uri = "http://example.org/legacy-wfw"
        assert first != second

    def test_different_types_are_never_equal(self):
        category = BlogMLCategory()
        category.id = "1"
        assert make_author("1") != category
        with pytest.raises(TypeError):
            make_author("1").compare_to(category)

    def test_none_sorts_least(self):
        author = make_author("1")
        assert author > None
        assert not author < None

    def test_extensions_take_part_in_equality(self):
        from syndication.extensions.slash import SlashSyndicationExtension

        first = make_author("1")
        second = make_author("1")
        extension = SlashSyndicationExtension()
        extension.section = "news"
        second.add_extension(extension)
        assert first != second
