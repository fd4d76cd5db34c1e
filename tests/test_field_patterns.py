"""Tests for metadata label recognition."""

import pytest

from seo_draft_extractor.field_patterns import FIELD_RULES, PatternRule, match_field_line


class TestMatchFieldLine:
    """Tests for match_field_line."""

    @pytest.mark.parametrize("line,expected", [
        ("Meta-Description: A great post", ("metaDescription", "A great post")),
        ("metaDescription = A great post", ("metaDescription", "A great post")),
        ("Meta Description | A great post", ("metaDescription", "A great post")),
        ("META TITLE: Best Guide", ("metaTitle", "Best Guide")),
        ("MetaTitle - Best Guide", ("metaTitle", "Best Guide")),
        ("Meta Keywords: widgets, gadgets", ("metaKeywords", "widgets, gadgets")),
        ("Title: My Post", ("title", "My Post")),
        ("URL: https://example.com/post", ("canonicalUrl", "https://example.com/post")),
        ("Canonical URL: https://example.com/a", ("canonicalUrl", "https://example.com/a")),
        ("canonicalurl=https://example.com/b", ("canonicalUrl", "https://example.com/b")),
    ])
    def test_recognized_labels(self, line: str, expected: tuple):
        """Test the accepted label spellings and separators."""
        assert match_field_line(line) == expected

    @pytest.mark.parametrize("key,alias", [
        (rule.key, alias) for rule in FIELD_RULES for alias in rule.aliases
    ])
    @pytest.mark.parametrize("separator", [":", "-", "=", "|"])
    @pytest.mark.parametrize("casing", [str.lower, str.upper, str.title])
    def test_every_alias_separator_and_casing(self, key: str, alias: str, separator: str, casing):
        """Test each alias with each separator in lower, upper and title case."""
        line = f"{casing(alias)}{separator} Example Value"
        assert match_field_line(line) == (key, "Example Value")

    def test_specific_alias_beats_title(self):
        """Test that "meta title" is never read as a plain title."""
        assert match_field_line("Meta Title: Best Guide")[0] == "metaTitle"

    def test_value_is_trimmed(self):
        """Test that surrounding whitespace is removed from the value."""
        assert match_field_line("  Title :   Spaced Out   ") == ("title", "Spaced Out")

    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "Just a sentence about titles.",
        "The title: not at line start",
        "Title:",
        "Subtitle: not a title",
    ])
    def test_no_match(self, line: str):
        """Test lines that carry no metadata field."""
        assert match_field_line(line) is None

    def test_value_does_not_span_lines(self):
        """Test that a value never continues onto the next line."""
        assert match_field_line("Title: One\nMeta Title: Two") is None

    def test_rule_order(self):
        """Test that the url rule is tried first and title last."""
        assert FIELD_RULES[0].key == "canonicalUrl"
        assert FIELD_RULES[-1].key == "title"


class TestPatternRule:
    """Tests for individual rules."""

    def test_custom_rule(self):
        """Test a rule built from custom aliases."""
        rule = PatternRule("metaKeywords", ("tags",))
        assert rule.match("Tags: a, b") == "a, b"
        assert rule.match("Tag: a") is None

    def test_custom_rule_table(self):
        """Test passing a custom rule table to the matcher."""
        rules = (PatternRule("title", ("headline",)),)
        assert match_field_line("Headline: Big News", rules) == ("title", "Big News")
        assert match_field_line("Title: Big News", rules) is None
