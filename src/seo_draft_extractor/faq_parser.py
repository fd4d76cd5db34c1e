"""
FAQ extraction from document content.

Walks the blocks between the FAQ marker and the Disclaimer marker and
pairs questions with their answers. Two authoring styles are handled:

- Labelled:   "Question: ..." followed by "Answer: ..." (and optional
              extra answer paragraphs)
- Unlabelled: an H3 heading or a question-like paragraph ("How do I ...?")
              followed by answer paragraphs

A question that never receives an answer is dropped.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .config import ExtractionConfig
from .models import Block, BlockKind, ContentTree, FAQEntry, FAQList, SectionBoundaries
from .text_repair import collapse_whitespace

logger = logging.getLogger(__name__)

QUESTION_LABEL = re.compile(r"^Question:\s*(.+)$", re.IGNORECASE)
ANSWER_LABEL = re.compile(r"^Answer:\s*(.+)$", re.IGNORECASE)
INTERROGATIVE_START = re.compile(
    r"^(?:What|How|Why|When|Where|Who|Which|Is|Are|Can|Do|Does|Will|Should|Would|Could)\b",
    re.IGNORECASE,
)

# Label text left behind by embedded schema markup
SCHEMA_NOISE = "faq schema"

ANSWER_KINDS = (BlockKind.PARAGRAPH, BlockKind.CONTAINER, BlockKind.LIST_ITEM)
MIN_LINE_LENGTH = 5  # Answer lines and question paragraphs must be longer
MAX_QUESTION_LENGTH = 200  # Question paragraphs must be shorter


class ParserState(Enum):
    """FAQ parser states."""
    NO_QUESTION = "no_question"
    IN_QUESTION = "in_question"


@dataclass
class PendingQuestion:
    """A question whose answer lines are still being collected."""
    question: str
    answer_lines: list[str] = field(default_factory=list)

    def to_entry(self) -> Optional[FAQEntry]:
        """Build the entry, or None when no answer was collected."""
        question = collapse_whitespace(self.question)
        answer = collapse_whitespace(" ".join(self.answer_lines))
        if not question or not answer:
            return None
        return FAQEntry(question=question, answer=answer)


def looks_like_question(block: Block, line: str) -> bool:
    """
    Check if an unlabelled line can open a new question.

    H3 headings always qualify. Paragraphs qualify when they are
    reasonably short and end with "?" or start with a question word.
    """
    if block.kind == BlockKind.HEADING and block.level == 3:
        return True
    if block.kind != BlockKind.PARAGRAPH:
        return False
    if not MIN_LINE_LENGTH < len(line) < MAX_QUESTION_LENGTH:
        return False
    return line.endswith("?") or bool(INTERROGATIVE_START.match(line))


class FAQParser:
    """
    State machine pairing questions with answers.

    Feed blocks in document order, then call ``finish``.
    """

    def __init__(self) -> None:
        self.entries: FAQList = []
        self._pending: Optional[PendingQuestion] = None

    @property
    def state(self) -> ParserState:
        """Current parser state."""
        if self._pending is None:
            return ParserState.NO_QUESTION
        return ParserState.IN_QUESTION

    def feed(self, block: Block) -> None:
        """
        Process one block.

        Labelled blocks are handled line by line across soft breaks. An
        unlabelled block that continues an open answer is kept or skipped
        as a whole.
        """
        if block.kind == BlockKind.STRUCTURED_DATA or not block.text:
            return
        if SCHEMA_NOISE in block.lowered:
            return
        lines = [line.strip() for line in block.lines]
        # An unlabelled block continuing an answer is filtered as a whole
        if self._pending is not None and not any(
            QUESTION_LABEL.match(line) or ANSWER_LABEL.match(line) for line in lines
        ):
            self._add_answer_text(block, collapse_whitespace(block.text))
            return
        for line in lines:
            self._feed_line(block, line)

    def _feed_line(self, block: Block, line: str) -> None:
        question_match = QUESTION_LABEL.match(line)
        if question_match:
            self._emit_pending()
            self._pending = PendingQuestion(question=question_match.group(1).strip())
            return

        answer_match = ANSWER_LABEL.match(line)
        if answer_match:
            answer = answer_match.group(1).strip()
            if self._pending is not None and len(answer) > MIN_LINE_LENGTH:
                self._pending.answer_lines.append(answer)
            return

        if self._pending is not None:
            self._add_answer_text(block, line)
            return

        if looks_like_question(block, line):
            self._pending = PendingQuestion(question=line)

    def _add_answer_text(self, block: Block, text: str) -> None:
        lowered = text.lower()
        if (
            block.kind in ANSWER_KINDS
            and len(text) > MIN_LINE_LENGTH
            and SCHEMA_NOISE not in lowered
            and "disclaimer" not in lowered
        ):
            self._pending.answer_lines.append(text)

    def _emit_pending(self) -> None:
        if self._pending is None:
            return
        entry = self._pending.to_entry()
        if entry is not None:
            self.entries.append(entry)
        else:
            logger.debug(f"Dropping unanswered question: {self._pending.question}")
        self._pending = None

    def finish(self) -> FAQList:
        """Emit the last pending question and return all entries."""
        self._emit_pending()
        return self.entries


def parse_faqs(
    tree: ContentTree,
    boundaries: SectionBoundaries,
    config: Optional[ExtractionConfig] = None,
) -> FAQList:
    """
    Extract FAQ entries written in the document content.

    Args:
        tree: Converted document.
        boundaries: FAQ and Disclaimer start blocks. Both are required;
            without them no content FAQs are extracted.
        config: Provides the maximum number of blocks visited.

    Returns:
        FAQ entries in source order.
    """
    if not boundaries.has_faq_region:
        return []

    config = config or ExtractionConfig()
    region = tree.between(
        boundaries.faq_start,
        boundaries.disclaimer_start,
        limit=config.faq_region_limit,
    )

    parser = FAQParser()
    for block in region:
        # Safety net when the Disclaimer marker was detected elsewhere
        if block.lowered.startswith("disclaimer"):
            break
        parser.feed(block)

    entries = parser.finish()
    logger.info(f"Extracted {len(entries)} FAQs from content ({len(region)} blocks scanned)")
    return entries
