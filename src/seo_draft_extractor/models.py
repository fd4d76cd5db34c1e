"""
Data models for SEO Draft Extractor.

This module defines the content tree the extractors walk and the result
records they return.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

from .text_repair import normalize_whitespace


class BlockKind(Enum):
    """Kinds of block-level content elements."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
    CONTAINER = "container"  # Generic container (HTML div)
    STRUCTURED_DATA = "structured_data"  # Script / JSON-LD
    OTHER = "other"


# Mapping of HTML tag names to (kind, heading level)
TAG_KIND_MAP: dict[str, tuple[BlockKind, int]] = {
    "h1": (BlockKind.HEADING, 1),
    "h2": (BlockKind.HEADING, 2),
    "h3": (BlockKind.HEADING, 3),
    "h4": (BlockKind.HEADING, 4),
    "h5": (BlockKind.HEADING, 5),
    "h6": (BlockKind.HEADING, 6),
    "p": (BlockKind.PARAGRAPH, 0),
    "li": (BlockKind.LIST_ITEM, 0),
    "div": (BlockKind.CONTAINER, 0),
    "script": (BlockKind.STRUCTURED_DATA, 0),
}


def kind_for_tag(tag_name: str) -> tuple[BlockKind, int]:
    """Map an HTML tag name to its block kind and heading level."""
    return TAG_KIND_MAP.get(tag_name.lower(), (BlockKind.OTHER, 0))


@dataclass(frozen=True)
class Block:
    """
    A single block-level element of a converted document.

    Blocks never hold references to their neighbours. Sibling traversal
    goes through the owning ContentTree using ``order``.
    """
    kind: BlockKind
    text: str
    order: int
    level: int = 0  # 1-6 for headings, 0 otherwise
    raw: str = ""  # Unnormalized source text (script body for structured data)

    @property
    def is_heading(self) -> bool:
        """Check if this block is a heading."""
        return self.kind == BlockKind.HEADING

    @property
    def lowered(self) -> str:
        """Get the lowercased text, used by the marker checks."""
        return self.text.lower()

    @property
    def lines(self) -> list[str]:
        """Get the non-empty lines of this block (split on soft line breaks)."""
        return [line for line in self.text.split("\n") if line.strip()]


BlockSpec = Union[tuple[str, str], tuple[BlockKind, str], tuple[BlockKind, str, int]]


@dataclass(frozen=True)
class ContentTree:
    """
    Read-only ordered view over a converted document.

    Built once per document and never mutated. Blocks are stored in
    document order and ``blocks[i].order == i``.
    """
    blocks: tuple[Block, ...] = ()
    raw_text: Optional[str] = None
    source_path: Optional[str] = None

    @classmethod
    def build(
        cls,
        items: Iterable[BlockSpec],
        raw_text: Optional[str] = None,
        source_path: Optional[str] = None,
    ) -> "ContentTree":
        """
        Build a tree from ``(tag, text)`` or ``(kind, text[, level])`` items.

        Tags are HTML tag names ("h2", "p", "li", "div", "script").
        Text is whitespace-normalized; the raw text is kept on the block.

        Examples:
            >>> tree = ContentTree.build([("h2", "FAQ"), ("p", "Question: Why?")])
            >>> tree.blocks[0].level
            2
        """
        blocks: list[Block] = []
        for item in items:
            if isinstance(item[0], BlockKind):
                kind = item[0]
                level = item[2] if len(item) > 2 else 0
            else:
                kind, level = kind_for_tag(item[0])
            source = item[1] or ""
            blocks.append(Block(
                kind=kind,
                text=normalize_whitespace(source),
                order=len(blocks),
                level=level,
                raw=source,
            ))
        return cls(blocks=tuple(blocks), raw_text=raw_text, source_path=source_path)

    def __len__(self) -> int:
        return len(self.blocks)

    def of_kind(self, *kinds: BlockKind) -> list[Block]:
        """Get all blocks of the given kinds in document order."""
        return [b for b in self.blocks if b.kind in kinds]

    @property
    def paragraphs(self) -> list[Block]:
        """Get all paragraph blocks."""
        return self.of_kind(BlockKind.PARAGRAPH)

    @property
    def structured_data(self) -> list[Block]:
        """Get all structured-data (script) blocks."""
        return self.of_kind(BlockKind.STRUCTURED_DATA)

    def headings(self, min_level: int = 1, max_level: int = 6) -> list[Block]:
        """Get heading blocks within a level range, in document order."""
        return [
            b for b in self.blocks
            if b.is_heading and min_level <= b.level <= max_level
        ]

    def next_block(self, block: Block) -> Optional[Block]:
        """Get the block following ``block``, or None at the end."""
        index = block.order + 1
        return self.blocks[index] if index < len(self.blocks) else None

    def previous_block(self, block: Block) -> Optional[Block]:
        """Get the block preceding ``block``, or None at the start."""
        index = block.order - 1
        return self.blocks[index] if index >= 0 else None

    def following(self, block: Block) -> Iterator[Block]:
        """Iterate over the blocks after ``block`` in document order."""
        for index in range(block.order + 1, len(self.blocks)):
            yield self.blocks[index]

    def between(self, start: Block, end: Optional[Block], limit: Optional[int] = None) -> list[Block]:
        """
        Get the blocks strictly between ``start`` and ``end``.

        The region is empty when ``end`` is ``start``. If ``end`` precedes
        ``start`` the walk runs to the end of the document. At most
        ``limit`` blocks are returned.
        """
        result: list[Block] = []
        if end is not None and end.order == start.order:
            return result
        for block in self.following(start):
            if end is not None and block.order == end.order:
                break
            if limit is not None and len(result) >= limit:
                break
            result.append(block)
        return result

    def raw_lines(self) -> list[str]:
        """
        Get the raw text lines of the document, blank lines included.

        Falls back to the block texts when no raw text was supplied.
        """
        if self.raw_text is not None:
            return [line.strip() for line in self.raw_text.splitlines()]
        lines: list[str] = []
        for block in self.blocks:
            if block.kind == BlockKind.STRUCTURED_DATA:
                continue
            lines.extend(block.text.split("\n"))
        return lines


# Canonical key -> ExtractedMetadata attribute
CANONICAL_FIELDS: dict[str, str] = {
    "title": "title",
    "metaTitle": "meta_title",
    "metaDescription": "meta_description",
    "metaKeywords": "meta_keywords",
    "canonicalUrl": "canonical_url",
}


@dataclass(frozen=True)
class ExtractedMetadata:
    """Page metadata fields. An empty string means "not found"."""
    title: str = ""
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    canonical_url: str = ""

    def get(self, key: str) -> str:
        """Get a field by canonical key (e.g. "metaDescription")."""
        return getattr(self, CANONICAL_FIELDS[key])

    def with_field(self, key: str, value: str) -> "ExtractedMetadata":
        """
        Return a copy with ``key`` set, unless it is already populated.

        Populated fields are never overwritten.
        """
        if self.get(key) or not value:
            return self
        return replace(self, **{CANONICAL_FIELDS[key]: value})

    def merge(self, other: "ExtractedMetadata") -> "ExtractedMetadata":
        """Fill this record's empty fields from ``other`` (first match wins)."""
        result = self
        for key in CANONICAL_FIELDS:
            result = result.with_field(key, other.get(key))
        return result

    @property
    def missing_fields(self) -> list[str]:
        """Get the canonical keys still empty."""
        return [key for key in CANONICAL_FIELDS if not self.get(key)]

    @property
    def is_complete(self) -> bool:
        """Check if every field has been found."""
        return not self.missing_fields

    def to_dict(self) -> dict[str, str]:
        """Get the fields keyed by canonical key."""
        return {key: self.get(key) for key in CANONICAL_FIELDS}


@dataclass(frozen=True)
class FAQEntry:
    """A single FAQ question and answer."""
    question: str
    answer: str

    def to_dict(self) -> dict[str, str]:
        return {"question": self.question, "answer": self.answer}


FAQList = list[FAQEntry]


@dataclass(frozen=True)
class SectionBoundaries:
    """The first blocks marking the FAQ and Disclaimer sections."""
    faq_start: Optional[Block] = None
    disclaimer_start: Optional[Block] = None

    @property
    def has_faq_region(self) -> bool:
        """Check if both boundaries needed by the FAQ parser were found."""
        return self.faq_start is not None and self.disclaimer_start is not None


@dataclass
class ExtractionResult:
    """Everything extracted from one document."""
    metadata: ExtractedMetadata = field(default_factory=ExtractedMetadata)
    faqs: FAQList = field(default_factory=list)
    disclaimer: str = ""
    faq_source: str = "none"  # "content", "schema" or "none"

    def to_dict(self) -> dict:
        """Get a JSON-serialisable view of the result."""
        return {
            "metadata": self.metadata.to_dict(),
            "faqs": [faq.to_dict() for faq in self.faqs],
            "disclaimer": self.disclaimer,
            "faqSource": self.faq_source,
        }

    def to_draft_payload(self, default_title: str = "Untitled Post") -> dict:
        """
        Build the request body for creating an unpublished CMS draft.

        The title is always present. Optional fields are only included
        when non-empty, and ``publishedAt`` is null so the entry stays a
        draft.
        """
        data: dict = {"title": self.metadata.title.strip() or default_title}
        for key in ("metaTitle", "metaDescription", "metaKeywords", "canonicalUrl"):
            value = self.metadata.get(key).strip()
            if value:
                data[key] = value
        if self.disclaimer.strip():
            data["disclaimer"] = self.disclaimer.strip()
        if self.faqs:
            data["FAQs"] = [faq.to_dict() for faq in self.faqs]
        data["publishedAt"] = None
        return {"data": data}

