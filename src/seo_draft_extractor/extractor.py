"""
Document extraction pipeline.

Runs every extractor over one content tree and returns a single
ExtractionResult. Each call is independent: nothing is cached or shared
between documents.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ExtractionConfig
from .content_sources import load_tree
from .disclaimer import extract_disclaimer
from .faq_parser import parse_faqs
from .metadata_extractor import apply_title_fallback, extract_metadata
from .models import ContentTree, ExtractionResult
from .schema_faq import resolve_faqs
from .section_locator import locate_sections

logger = logging.getLogger(__name__)


def extract_document(
    tree: ContentTree,
    config: Optional[ExtractionConfig] = None,
    source_name: Optional[Union[str, Path]] = None,
) -> ExtractionResult:
    """
    Extract metadata, FAQs and the disclaimer from a converted document.

    Args:
        tree: Converted document.
        config: Extraction settings.
        source_name: Original filename. When given, a missing title falls
            back to the filename and then to the configured default title.
            When omitted, a missing title stays "".

    Returns:
        ExtractionResult with best-effort partial results. Never raises
        on malformed content.
    """
    config = config or ExtractionConfig()

    metadata = extract_metadata(tree, config)

    boundaries = locate_sections(tree)
    faqs = parse_faqs(tree, boundaries, config)
    if config.use_schema_faqs:
        faqs, faq_source = resolve_faqs(tree, faqs)
    else:
        faq_source = "content" if faqs else "none"
    disclaimer = extract_disclaimer(tree, boundaries.disclaimer_start, config)

    if source_name is not None:
        metadata = apply_title_fallback(metadata, source_name, config.default_title)

    logger.info(
        f"Extraction complete: title={metadata.title!r}, "
        f"{len(faqs)} FAQs ({faq_source}), disclaimer={'yes' if disclaimer else 'no'}"
    )
    return ExtractionResult(
        metadata=metadata,
        faqs=faqs,
        disclaimer=disclaimer,
        faq_source=faq_source,
    )


def extract_from_file(
    file_path: Union[str, Path],
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Load a .docx or converted .html file and extract from it.

    The filename is used as the title fallback.

    Raises:
        ContentExtractionError: If the file cannot be loaded.
    """
    path = Path(file_path)
    tree = load_tree(path)
    return extract_document(tree, config=config, source_name=path.name)
