"""
FAQ extraction from embedded FAQPage structured data (JSON-LD).

Drafts often carry the FAQ twice: once as readable content and once as a
pasted ``<script type="application/ld+json">`` block. The schema copy is
used when it is more complete than what the content parser found.

Malformed structured data never raises; the block simply contributes
nothing.
"""

import json
import logging
from typing import Any, Optional

from .models import Block, ContentTree, FAQEntry, FAQList
from .text_repair import collapse_whitespace, normalize_quotes, unescape_schema_entities

logger = logging.getLogger(__name__)


def is_faq_schema_candidate(raw: str) -> bool:
    """Check if a structured-data block may hold an FAQ schema."""
    return "FAQPage" in raw or ("@type" in raw and "Question" in raw)


def find_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced ``{...}`` substring of ``text``.

    Braces inside JSON strings are ignored. Returns None when no object
    starts or the first one is never closed.

    Examples:
        >>> find_json_object('<script>{"a": {"b": "}"}}</script>')
        '{"a": {"b": "}"}}'
    """
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def _load_schema_object(raw: str) -> Any:
    """Parse the first JSON object in ``raw``, retrying with ASCII quotes."""
    text = unescape_schema_entities(raw.strip())
    error: Exception = ValueError("no JSON object found")

    # Word autocorrect turns pasted straight quotes typographic
    for attempt in (text, normalize_quotes(text)):
        candidate = find_json_object(attempt)
        if candidate is None:
            continue
        try:
            return json.loads(candidate)
        except ValueError as e:
            error = e
    raise error


def _answer_text(accepted: Any) -> str:
    if isinstance(accepted, dict):
        text = accepted.get("text")
        return text if isinstance(text, str) else ""
    if isinstance(accepted, str):
        return accepted
    return ""


def parse_faq_schema(data: Any) -> FAQList:
    """
    Read FAQ entries from a parsed FAQPage object.

    Args:
        data: Parsed JSON. Anything other than an FAQPage object with a
            ``mainEntity`` list yields no entries.

    Returns:
        Entries for each Question with a name and resolvable answer text.
    """
    if not isinstance(data, dict) or data.get("@type") != "FAQPage":
        return []
    main_entity = data.get("mainEntity")
    if not isinstance(main_entity, list):
        return []

    entries: FAQList = []
    for item in main_entity:
        if not isinstance(item, dict) or item.get("@type") != "Question":
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            continue
        answer = collapse_whitespace(_answer_text(item.get("acceptedAnswer")))
        if not answer:
            continue
        entries.append(FAQEntry(question=collapse_whitespace(name), answer=answer))
    return entries


def extract_schema_faqs(block: Block) -> FAQList:
    """Extract FAQ entries from one structured-data block. Never raises."""
    raw = block.raw or block.text
    if not raw or not is_faq_schema_candidate(raw):
        return []
    try:
        data = _load_schema_object(raw)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Error parsing FAQ schema in block {block.order}: {e}")
        return []
    return parse_faq_schema(data)


def should_use_schema(current: FAQList, schema: FAQList) -> bool:
    """
    Decide whether a schema-derived list replaces the current one.

    The schema wins only when it is non-empty and the current list is
    empty or strictly shorter. On a tie the current list is kept.
    """
    return bool(schema) and (not current or len(schema) > len(current))


def resolve_faqs(tree: ContentTree, content_faqs: FAQList) -> tuple[FAQList, str]:
    """
    Resolve content FAQs against every FAQ schema block in the document.

    Schema blocks are considered in document order, each against the
    running winner. Lists are never merged entry by entry.

    Returns:
        ``(faqs, source)`` where source is "schema", "content" or "none".
    """
    faqs = content_faqs
    source = "content" if content_faqs else "none"

    for block in tree.structured_data:
        schema_faqs = extract_schema_faqs(block)
        if should_use_schema(faqs, schema_faqs):
            logger.info(f"Using FAQ schema from block {block.order} ({len(schema_faqs)} FAQs)")
            faqs = schema_faqs
            source = "schema"

    return faqs, source
