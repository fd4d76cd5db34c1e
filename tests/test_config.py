"""Tests for extraction configuration."""

import pytest

from seo_draft_extractor.config import ExtractionConfig


class TestExtractionConfig:
    """Tests for ExtractionConfig defaults and validation."""

    def test_defaults(self):
        """Test the default scan limits."""
        config = ExtractionConfig()
        assert config.metadata_block_limit == 50
        assert config.raw_line_limit == 100
        assert config.metadata_rescan_limit == 100
        assert config.faq_region_limit == 200
        assert config.disclaimer_part_limit == 20
        assert config.default_title == "Untitled Post"
        assert config.use_schema_faqs is True

    def test_without_schema(self):
        """Test the content-only preset."""
        config = ExtractionConfig.without_schema()
        assert config.use_schema_faqs is False

    def test_without_schema_overrides(self):
        """Test that overrides apply on top of the preset."""
        config = ExtractionConfig.without_schema(default_title="Draft")
        assert config.use_schema_faqs is False
        assert config.default_title == "Draft"

    @pytest.mark.parametrize("name", [
        "metadata_block_limit",
        "raw_line_limit",
        "metadata_rescan_limit",
        "faq_region_limit",
        "disclaimer_part_limit",
    ])
    def test_limits_must_be_positive(self, name: str):
        """Test that zero limits are rejected."""
        with pytest.raises(ValueError, match=name):
            ExtractionConfig(**{name: 0})

    def test_heading_level_range(self):
        """Test that the title heading level must be 1-6."""
        with pytest.raises(ValueError, match="title_heading_max_level"):
            ExtractionConfig(title_heading_max_level=7)

    def test_negative_min_title_length(self):
        """Test that a negative minimum title length is rejected."""
        with pytest.raises(ValueError, match="min_title_length"):
            ExtractionConfig(min_title_length=-1)

    def test_empty_default_title(self):
        """Test that the default title must not be blank."""
        with pytest.raises(ValueError, match="default_title"):
            ExtractionConfig(default_title="  ")
