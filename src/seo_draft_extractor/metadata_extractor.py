"""
Page metadata extraction.

Runs the field matcher over the top of a document in three passes:

1. The first paragraphs (block structure)
2. The first raw text lines (catches "label: value" lines joined into one
   paragraph by soft line breaks)
3. A wider paragraph rescan for fields still missing

Every pass only fills fields that are still empty, so the earliest value
found for each field wins. When no explicit title exists, the first
suitable H1-H3 heading is used, and callers can finally fall back to the
source filename.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import ExtractionConfig
from .field_patterns import match_field_line
from .models import Block, ContentTree, ExtractedMetadata

logger = logging.getLogger(__name__)

# Headings that mark sections rather than naming the post
SECTION_MARKER_TITLES = ("introduction", "disclaimer", "faq")
SECTION_MARKER_PREFIXES = ("url:", "meta-")


def scan_lines(
    lines: Iterable[str],
    metadata: Optional[ExtractedMetadata] = None,
    source: str = "text",
) -> ExtractedMetadata:
    """
    Fill empty metadata fields from "label: value" lines.

    Args:
        lines: Lines to scan, in document order.
        metadata: Record to fill. Populated fields are never overwritten.
        source: Pass name used in debug logging.

    Returns:
        A new ExtractedMetadata with any newly found fields set.
    """
    result = metadata or ExtractedMetadata()

    for index, line in enumerate(lines):
        if not line or not line.strip():
            continue
        found = match_field_line(line)
        if not found:
            continue
        key, value = found
        if result.get(key):
            continue
        result = result.with_field(key, value)
        logger.debug(f"Found {key} ({source} {index}): {value}")

    return result


def scan_blocks(
    blocks: Iterable[Block],
    metadata: Optional[ExtractedMetadata] = None,
    source: str = "paragraph",
) -> ExtractedMetadata:
    """Fill empty metadata fields from whole block texts."""
    return scan_lines((block.text for block in blocks), metadata, source)


def is_section_marker(text: str) -> bool:
    """Check if a heading text marks a section (FAQ, Disclaimer, field label)."""
    lowered = text.strip().lower()
    return lowered in SECTION_MARKER_TITLES or lowered.startswith(SECTION_MARKER_PREFIXES)


def find_heading_title(tree: ContentTree, config: Optional[ExtractionConfig] = None) -> str:
    """
    Pick a title from the document headings.

    Returns the first H1-H3 heading (document order) that is longer than
    the configured minimum and is not a section marker, or "" if none.
    """
    config = config or ExtractionConfig()

    for heading in tree.headings(max_level=config.title_heading_max_level):
        text = heading.text.strip()
        if is_section_marker(text):
            continue
        if len(text) > config.min_title_length:
            logger.debug(f"Extracted title from heading: {text}")
            return text
    return ""


def extract_metadata(
    tree: ContentTree,
    config: Optional[ExtractionConfig] = None,
) -> ExtractedMetadata:
    """
    Extract page metadata fields from a content tree.

    Args:
        tree: Converted document.
        config: Scan limits and title rules.

    Returns:
        ExtractedMetadata. Fields not found are "". Re-running over the
        same tree yields the same record.
    """
    config = config or ExtractionConfig()
    paragraphs = tree.paragraphs

    # Each pass builds its own record; merge only fills still-empty fields
    metadata = scan_blocks(paragraphs[:config.metadata_block_limit], source="paragraph")
    metadata = metadata.merge(
        scan_lines(tree.raw_lines()[:config.raw_line_limit], source="raw line")
    )
    if not metadata.is_complete:
        metadata = metadata.merge(
            scan_blocks(paragraphs[:config.metadata_rescan_limit], source="paragraph rescan")
        )

    if not metadata.title:
        metadata = metadata.with_field("title", find_heading_title(tree, config))

    logger.info(
        f"Metadata extraction: {5 - len(metadata.missing_fields)}/5 fields found"
        + (f", missing {', '.join(metadata.missing_fields)}" if metadata.missing_fields else "")
    )
    return metadata


def title_from_filename(filename: Union[str, Path, None]) -> str:
    """
    Derive a post title from a document filename.

    Examples:
        >>> title_from_filename("My Great Post.docx")
        'My Great Post'
        >>> title_from_filename("/tmp/uploads/draft.DOC")
        'draft'
    """
    if not filename:
        return ""
    name = Path(str(filename)).name
    return re.sub(r"\.docx?$", "", name, flags=re.IGNORECASE).strip()


def apply_title_fallback(
    metadata: ExtractedMetadata,
    filename: Union[str, Path, None],
    default_title: str = "Untitled Post",
) -> ExtractedMetadata:
    """
    Fill a missing title from the filename, then from ``default_title``.

    An existing title is always kept.
    """
    if metadata.title.strip():
        return metadata

    title = title_from_filename(filename)
    if title:
        logger.debug(f"Using filename as title: {title}")
        return metadata.with_field("title", title)

    logger.debug(f"No title found, using default: {default_title}")
    return metadata.with_field("title", default_title)
