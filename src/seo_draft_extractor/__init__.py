"""
SEO Draft Extractor

Pulls structured draft data out of free-form Word documents:
- Page metadata (title, meta title/description/keywords, canonical URL)
- FAQ question/answer pairs, from the content or embedded FAQPage schema
- The disclaimer passage
"""

__version__ = "1.0.0"
__author__ = "SEO Draft Extractor Team"

from .config import ExtractionConfig

from .models import (
    Block,
    BlockKind,
    ContentTree,
    ExtractedMetadata,
    ExtractionResult,
    FAQEntry,
    FAQList,
    SectionBoundaries,
)

from .content_sources import (
    ContentExtractionError,
    load_docx_as_tree,
    load_html_as_tree,
    load_tree,
    parse_html_to_tree,
)

from .field_patterns import (
    FIELD_RULES,
    PatternRule,
    match_field_line,
)

from .metadata_extractor import (
    apply_title_fallback,
    extract_metadata,
    find_heading_title,
    title_from_filename,
)

from .section_locator import (
    find_disclaimer_start,
    find_faq_start,
    locate_sections,
)

from .faq_parser import (
    FAQParser,
    ParserState,
    parse_faqs,
)

from .schema_faq import (
    extract_schema_faqs,
    parse_faq_schema,
    resolve_faqs,
    should_use_schema,
)

from .disclaimer import extract_disclaimer

from .extractor import (
    extract_document,
    extract_from_file,
)

__all__ = [
    # Configuration
    "ExtractionConfig",
    # Models
    "Block",
    "BlockKind",
    "ContentTree",
    "ExtractedMetadata",
    "ExtractionResult",
    "FAQEntry",
    "FAQList",
    "SectionBoundaries",
    # Loading
    "ContentExtractionError",
    "load_docx_as_tree",
    "load_html_as_tree",
    "load_tree",
    "parse_html_to_tree",
    # Field patterns
    "FIELD_RULES",
    "PatternRule",
    "match_field_line",
    # Metadata
    "apply_title_fallback",
    "extract_metadata",
    "find_heading_title",
    "title_from_filename",
    # Sections
    "find_disclaimer_start",
    "find_faq_start",
    "locate_sections",
    # FAQ
    "FAQParser",
    "ParserState",
    "parse_faqs",
    "extract_schema_faqs",
    "parse_faq_schema",
    "resolve_faqs",
    "should_use_schema",
    # Disclaimer
    "extract_disclaimer",
    # Pipeline
    "extract_document",
    "extract_from_file",
]
