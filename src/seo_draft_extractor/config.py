# -*- coding: utf-8 -*-
"""
Centralized configuration for SEO Draft Extractor.

This module provides a unified configuration dataclass that controls
extraction behavior: how far into a document each pass looks, the
title fallback rules, and whether embedded FAQ schema is consulted.
"""

from dataclasses import dataclass


@dataclass
class ExtractionConfig:
    """
    Central configuration for extraction behavior.

    Attributes:
        metadata_block_limit: Paragraphs scanned by the first metadata pass.
        raw_line_limit: Raw text lines scanned by the second metadata pass.
            Blank lines count towards the limit.
        metadata_rescan_limit: Paragraphs scanned by the third metadata pass,
            which only fills fields the first two passes left empty.

        title_heading_max_level: Deepest heading level considered by the
            title fallback (default: H1-H3).
        min_title_length: A heading must be longer than this to be used
            as a fallback title.
        default_title: Title used when neither the document nor the
            filename yields one.

        faq_region_limit: Maximum blocks visited between the FAQ and
            Disclaimer markers.
        disclaimer_part_limit: Maximum paragraphs joined into the disclaimer.

        use_schema_faqs: Whether embedded FAQPage JSON-LD may replace the
            FAQ list parsed from content.

    Metadata is expected near the top of a document. The limits keep an
    FAQ answer that mentions "title" deep in the body from being read as
    a field, and bound the work done on pathological documents.
    """

    # Metadata passes
    metadata_block_limit: int = 50
    raw_line_limit: int = 100
    metadata_rescan_limit: int = 100

    # Title fallback
    title_heading_max_level: int = 3
    min_title_length: int = 5
    default_title: str = "Untitled Post"

    # Section limits
    faq_region_limit: int = 200
    disclaimer_part_limit: int = 20

    # FAQ schema
    use_schema_faqs: bool = True

    def __post_init__(self):
        """Validate configuration values."""
        for name in (
            "metadata_block_limit",
            "raw_line_limit",
            "metadata_rescan_limit",
            "faq_region_limit",
            "disclaimer_part_limit",
        ):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if not 1 <= self.title_heading_max_level <= 6:
            raise ValueError(
                f"title_heading_max_level must be between 1 and 6, "
                f"got {self.title_heading_max_level}"
            )
        if self.min_title_length < 0:
            raise ValueError(f"min_title_length must be >= 0, got {self.min_title_length}")
        if not self.default_title.strip():
            raise ValueError("default_title must not be empty")

    @classmethod
    def without_schema(cls, **overrides) -> "ExtractionConfig":
        """Create config that only trusts FAQs written in the content.

        Args:
            **overrides: Override any config values

        Returns:
            ExtractionConfig with FAQ schema extraction disabled
        """
        defaults = {"use_schema_faqs": False}
        defaults.update(overrides)
        return cls(**defaults)
