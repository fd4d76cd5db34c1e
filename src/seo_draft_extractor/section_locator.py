"""
FAQ and Disclaimer section detection.

Sections are only delimited by loosely worded headings ("FAQs",
"Frequently Asked Questions (FAQ)") or lead-in paragraphs ("FAQs: ...").
Headings are searched first; paragraphs use a stricter rule so that an
incidental mention of "FAQ" inside a sentence does not start a section.
"""

import logging
from typing import Optional

from .models import Block, ContentTree, SectionBoundaries

logger = logging.getLogger(__name__)


def _is_faq_heading(text: str) -> bool:
    return "faq" in text or text in ("faqs:", "faq:") or text.startswith("faqs")


def _is_faq_paragraph(text: str) -> bool:
    return "faq" in text and (
        text.startswith("faq") or "faqs:" in text or text.startswith("faqs")
    )


def _is_disclaimer_heading(text: str) -> bool:
    return "disclaimer" in text or text.startswith("disclaimer")


def _is_disclaimer_paragraph(text: str) -> bool:
    return "disclaimer" in text and text.startswith("disclaimer")


def _first_match(blocks: list[Block], predicate) -> Optional[Block]:
    for block in blocks:
        if predicate(block.text.strip().lower()):
            return block
    return None


def find_faq_start(tree: ContentTree) -> Optional[Block]:
    """Find the first block that starts the FAQ section, if any."""
    block = _first_match(tree.headings(), _is_faq_heading)
    if block is None:
        block = _first_match(tree.paragraphs, _is_faq_paragraph)
    if block is not None:
        logger.debug(f"Found FAQ section at {block.kind.value} {block.order}: {block.text}")
    return block


def find_disclaimer_start(tree: ContentTree) -> Optional[Block]:
    """Find the first block that starts the Disclaimer section, if any."""
    block = _first_match(tree.headings(), _is_disclaimer_heading)
    if block is None:
        block = _first_match(tree.paragraphs, _is_disclaimer_paragraph)
    if block is not None:
        logger.debug(f"Found Disclaimer section at {block.kind.value} {block.order}: {block.text}")
    return block


def locate_sections(tree: ContentTree) -> SectionBoundaries:
    """Find the FAQ and Disclaimer boundaries independently."""
    boundaries = SectionBoundaries(
        faq_start=find_faq_start(tree),
        disclaimer_start=find_disclaimer_start(tree),
    )
    if boundaries.faq_start is None:
        logger.debug("No FAQ section found")
    if boundaries.disclaimer_start is None:
        logger.debug("No Disclaimer section found")
    return boundaries
