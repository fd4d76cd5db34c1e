"""
Content tree loading from Word documents and converted HTML.

This module builds the read-only ContentTree the extractors walk from:
- Word documents (.docx files using python-docx)
- HTML produced by a docx-to-HTML converter (BeautifulSoup with lxml)

Blocks keep document order, including tables and pasted JSON-LD
``<script>`` blocks, so that section boundaries and sibling walks see the
document the way the author wrote it.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from .models import BlockKind, BlockSpec, ContentTree

logger = logging.getLogger(__name__)


class ContentExtractionError(Exception):
    """Raised when a document cannot be loaded."""
    pass


HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
LIST_TAGS = ("ul", "ol")
SECTION_TAGS = ("div", "section", "article", "main", "header", "footer", "body")
BLOCK_TAGS = HEADING_TAGS + LIST_TAGS + SECTION_TAGS + ("p", "table", "script", "blockquote")
SKIPPED_TAGS = ("style", "noscript", "template")

SCRIPT_OPEN = re.compile(r"^\s*<script\b", re.IGNORECASE)
SCRIPT_CLOSE = re.compile(r"</script\s*>", re.IGNORECASE)


# =============================================================================
# Word documents
# =============================================================================


def _docx_style_to_kind(style_name: Optional[str]) -> tuple[BlockKind, int]:
    """
    Map Word document style name to a block kind and heading level.

    Args:
        style_name: Word style name.

    Returns:
        ``(kind, level)``; level is 0 for non-headings.
    """
    if not style_name:
        return BlockKind.PARAGRAPH, 0

    style_lower = style_name.lower()

    # Handle heading styles
    if style_lower.startswith("heading"):
        try:
            level = int(style_lower.replace("heading", "").strip())
            if 1 <= level <= 6:
                return BlockKind.HEADING, level
        except ValueError:
            pass
        return BlockKind.HEADING, 2  # Default for unrecognized heading

    if style_lower == "title":
        return BlockKind.HEADING, 1

    if "list" in style_lower or "bullet" in style_lower:
        return BlockKind.LIST_ITEM, 0

    return BlockKind.PARAGRAPH, 0


def _script_body(markup: str) -> str:
    """Get the body of a pasted ``<script>`` block."""
    soup = BeautifulSoup(markup, "lxml")
    script = soup.find("script")
    if script is None:
        return markup
    return script.string or script.get_text()


def _docx_table_items(table: Table) -> list[BlockSpec]:
    """Turn each non-empty table cell into a generic container block."""
    items: list[BlockSpec] = []
    seen = set()

    for row in table.rows:
        for cell in row.cells:
            # Merged cells are returned once per grid position
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            text = "\n".join(p.text for p in cell.paragraphs).strip()
            if text:
                items.append((BlockKind.CONTAINER, text))

    return items


def load_docx_as_tree(file_path: Union[str, Path]) -> ContentTree:
    """
    Load a Word document into a ContentTree.

    Paragraphs and tables are read in document order. Heading styles
    map to heading levels, list styles to list items, table cells to
    generic containers. A ``<script>`` block pasted as text (possibly
    spanning several paragraphs) becomes one structured-data block.

    Args:
        file_path: Path to the .docx file.

    Returns:
        ContentTree with the raw text of every paragraph attached.

    Raises:
        ContentExtractionError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    if not path.suffix.lower() == ".docx":
        raise ContentExtractionError(f"File must be a .docx file: {file_path}")

    try:
        doc = Document(str(path))
    except Exception as e:
        raise ContentExtractionError(f"Failed to open Word document: {e}")

    items: list[BlockSpec] = []
    raw_parts: list[str] = []
    script_lines: Optional[list[str]] = None

    for element in doc.iter_inner_content():
        if isinstance(element, Table):
            for item in _docx_table_items(element):
                items.append(item)
                raw_parts.append(item[1])
            continue

        if not isinstance(element, Paragraph):
            continue
        text = element.text

        # Fold pasted script markup into one structured-data block
        if script_lines is None and SCRIPT_OPEN.match(text):
            script_lines = []
        if script_lines is not None:
            script_lines.append(text)
            if SCRIPT_CLOSE.search(text):
                items.append((BlockKind.STRUCTURED_DATA, _script_body("\n".join(script_lines))))
                script_lines = None
            continue

        if not text.strip():
            continue

        kind, level = _docx_style_to_kind(element.style.name if element.style else None)
        items.append((kind, text, level))
        raw_parts.append(text)

    if script_lines is not None:
        logger.debug("Unterminated <script> block at end of document")
        items.append((BlockKind.STRUCTURED_DATA, _script_body("\n".join(script_lines))))

    tree = ContentTree.build(items, raw_text="\n\n".join(raw_parts), source_path=str(path))
    logger.debug(f"Loaded {len(tree)} blocks from {path.name}")
    return tree


# =============================================================================
# Converted HTML
# =============================================================================


def _element_text(element: Tag) -> str:
    """
    Get an element's text with ``<br>`` kept as a line break.

    Source formatting whitespace is collapsed so that only real soft
    line breaks survive.
    """
    parts: list[str] = []
    for node in element.descendants:
        if isinstance(node, Tag):
            if node.name == "br":
                parts.append("\n")
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(re.sub(r"\s+", " ", str(node)))
    return "".join(parts)


def _has_block_children(element: Tag) -> bool:
    return element.find(list(BLOCK_TAGS), recursive=False) is not None


def _collect_list(list_element: Tag, items: list[BlockSpec]) -> None:
    """Flatten a (possibly nested) list into list-item blocks."""
    for li in list_element.find_all("li", recursive=False):
        own_text: list[str] = []
        nested: list[Tag] = []
        for child in li.children:
            if isinstance(child, Tag) and child.name in LIST_TAGS:
                nested.append(child)
            elif isinstance(child, Tag):
                own_text.append(_element_text(child))
            elif isinstance(child, NavigableString) and not isinstance(child, Comment):
                own_text.append(re.sub(r"\s+", " ", str(child)))
        text = "".join(own_text).strip()
        if text:
            items.append(("li", text))
        for sublist in nested:
            _collect_list(sublist, items)


def _collect_blocks(container: Tag, items: list[BlockSpec]) -> None:
    """Walk the children of ``container`` and append block specs in order."""
    for child in container.children:
        if isinstance(child, Comment):
            continue

        if isinstance(child, NavigableString):
            text = str(child).strip()
            if text:
                items.append((BlockKind.OTHER, text))
            continue

        if not isinstance(child, Tag) or child.name in SKIPPED_TAGS:
            continue

        name = child.name.lower()

        if name == "script":
            items.append(("script", child.string or child.get_text()))
        elif name in HEADING_TAGS or name == "p":
            items.append((name, _element_text(child)))
        elif name in LIST_TAGS:
            _collect_list(child, items)
        elif name == "table":
            for cell in child.find_all(["td", "th"]):
                text = _element_text(cell).strip()
                if text:
                    items.append(("div", text))
        elif name in SECTION_TAGS:
            if _has_block_children(child):
                _collect_blocks(child, items)
            else:
                text = _element_text(child).strip()
                if text:
                    items.append(("div", text))
        else:
            text = _element_text(child).strip()
            if text:
                items.append((name, text))


def parse_html_to_tree(html: str, source_path: Optional[str] = None) -> ContentTree:
    """
    Parse converted document HTML into a ContentTree.

    Expects the flat shape produced by docx-to-HTML converters (headings,
    paragraphs, lists, tables) but tolerates wrapper ``div``/``section``
    elements. No raw text is attached, so the raw-line metadata pass
    reads the block texts.

    Args:
        html: HTML markup (a fragment or a full page).
        source_path: Optional source file path for reference.

    Returns:
        ContentTree of the markup's block-level elements.
    """
    soup = BeautifulSoup(html or "", "lxml")
    root = soup.body or soup

    items: list[BlockSpec] = []
    # Scripts in <head> may still carry FAQ schema
    if soup.head is not None:
        for script in soup.head.find_all("script"):
            items.append(("script", script.string or script.get_text()))
    _collect_blocks(root, items)

    return ContentTree.build(items, source_path=source_path)


def load_html_as_tree(file_path: Union[str, Path]) -> ContentTree:
    """
    Load a converted HTML file into a ContentTree.

    Raises:
        ContentExtractionError: If the file cannot be read.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    try:
        html = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContentExtractionError(f"Failed to read HTML file: {e}")

    return parse_html_to_tree(html, source_path=str(path))


def load_tree(source: Union[str, Path]) -> ContentTree:
    """
    Load a ContentTree from a .docx or .html file path.

    Args:
        source: File path to load content from.

    Returns:
        ContentTree for the document.

    Raises:
        ContentExtractionError: If the source is invalid or cannot be loaded.
    """
    path = Path(source)
    suffix = path.suffix.lower()

    if suffix == ".docx":
        return load_docx_as_tree(path)
    if suffix in (".html", ".htm"):
        return load_html_as_tree(path)

    raise ContentExtractionError(
        f"Invalid source: {source}. Must be a .docx or .html file path."
    )
