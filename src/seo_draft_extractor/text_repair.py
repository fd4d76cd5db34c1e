# -*- coding: utf-8 -*-
"""
Text normalization helpers.

Handles:
- Whitespace normalization for block text (soft line breaks preserved)
- Whitespace collapsing for emitted FAQ and disclaimer text
- Typographic quote normalization (Word autocorrect in pasted JSON-LD)
- The small set of HTML entity escapes found in embedded schema blocks
"""

import re

# Smart quotes to normalize (using Unicode code points)
SMART_QUOTE_MAP = {
    '\u2018': "'",   # Left single quotation mark
    '\u2019': "'",   # Right single quotation mark
    '\u201a': "'",   # Single low-9 quotation mark
    '\u201b': "'",   # Single high-reversed-9 quotation mark
    '\u201c': '"',   # Left double quotation mark
    '\u201d': '"',   # Right double quotation mark
    '\u201e': '"',   # Double low-9 quotation mark
    '\u201f': '"',   # Double high-reversed-9 quotation mark
    '\u00ab': '"',   # Left-pointing double angle quotation mark
    '\u00bb': '"',   # Right-pointing double angle quotation mark
}

# Entities a docx->HTML conversion leaves inside script bodies
SCHEMA_ENTITY_MAP = {
    "&quot;": '"',
    "&amp;": "&",
}


def normalize_quotes(text: str) -> str:
    """
    Normalize smart quotes to their ASCII equivalents.

    Args:
        text: Text to normalize.

    Returns:
        Normalized text.
    """
    if not text:
        return text

    result = text
    for smart, ascii_char in SMART_QUOTE_MAP.items():
        result = result.replace(smart, ascii_char)
    return result


def unescape_schema_entities(text: str) -> str:
    """Unescape the quote and ampersand entities found in converted schema blocks."""
    if not text:
        return text

    result = text
    for entity, char in SCHEMA_ENTITY_MAP.items():
        result = result.replace(entity, char)
    return result


def normalize_whitespace(text: str) -> str:
    """
    Normalize whitespace in block text.

    Fixes:
    - Non-breaking and typographic spaces -> regular spaces
    - Zero-width characters and BOM removed
    - U+2028 LINE SEPARATOR / vertical tab -> newline (Word soft line break)
    - Runs of spaces -> single space, each line trimmed

    Line breaks are kept so that "label: value" lines inside one
    paragraph can still be told apart.

    Args:
        text: Text to normalize.

    Returns:
        Normalized text.
    """
    if not text:
        return ""

    result = text

    # Word soft breaks arrive as U+2028 or \v depending on the converter
    result = result.replace('\u2028', '\n')
    result = result.replace('\u2029', '\n')
    result = result.replace('\v', '\n')
    result = result.replace('\r\n', '\n')
    result = result.replace('\r', '\n')

    # Convert non-breaking spaces and other space variants
    result = result.replace('\u00a0', ' ')  # Non-breaking space
    result = result.replace('\u2002', ' ')  # En space
    result = result.replace('\u2003', ' ')  # Em space
    result = result.replace('\u2009', ' ')  # Thin space
    result = result.replace('\u200a', ' ')  # Hair space
    result = result.replace('\u200b', '')   # Zero-width space (remove)
    result = result.replace('\ufeff', '')   # BOM (remove)
    result = result.replace('\u200c', '')   # Zero-width non-joiner
    result = result.replace('\u200d', '')   # Zero-width joiner
    result = result.replace('\u2060', '')   # Word joiner
    result = result.replace('\t', ' ')

    lines = [re.sub(r' {2,}', ' ', line).strip() for line in result.split('\n')]
    return '\n'.join(line for line in lines if line)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) into one space."""
    if not text:
        return ""
    return " ".join(text.split())
