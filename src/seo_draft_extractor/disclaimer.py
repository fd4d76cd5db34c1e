"""
Disclaimer extraction.

Joins the paragraphs that follow the Disclaimer marker until the text runs
into an FAQ section.
"""

import logging
from typing import Optional

from .config import ExtractionConfig
from .models import Block, BlockKind, ContentTree
from .text_repair import collapse_whitespace

logger = logging.getLogger(__name__)

DISCLAIMER_KINDS = (BlockKind.PARAGRAPH, BlockKind.CONTAINER)
MIN_PART_LENGTH = 10


def extract_disclaimer(
    tree: ContentTree,
    disclaimer_start: Optional[Block],
    config: Optional[ExtractionConfig] = None,
) -> str:
    """
    Collect the disclaimer text after its marker block.

    Paragraph and container blocks longer than 10 characters are kept.
    The walk stops at the first block mentioning "faq" or once the part
    limit is reached. Another "disclaimer" block does not stop it.

    Returns:
        The joined disclaimer, or "" when there is no marker or no text.
    """
    if disclaimer_start is None:
        return ""

    config = config or ExtractionConfig()
    parts: list[str] = []

    for block in tree.following(disclaimer_start):
        if "faq" in block.lowered:
            break
        text = block.text.strip()
        if block.kind in DISCLAIMER_KINDS and len(text) > MIN_PART_LENGTH:
            parts.append(text)
            if len(parts) >= config.disclaimer_part_limit:
                break

    disclaimer = collapse_whitespace(" ".join(parts))
    if disclaimer:
        logger.debug(f"Extracted disclaimer: {disclaimer[:50]}...")
    return disclaimer
