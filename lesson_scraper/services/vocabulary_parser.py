"""Service for turning a lesson's vocabulary paragraph into term/definition pairs"""

import logging
import re
from dataclasses import dataclass, replace
from functools import reduce
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from lesson_scraper.core.models import VocabEntry
from lesson_scraper.core.nodes import Emphasis, LineBreak, Node, OtherElement, Text, child_nodes
from lesson_scraper.services.field_extractors import next_paragraph
from lesson_scraper.utils.text import clean_text

logger = logging.getLogger(__name__)

VOCABULARY_HEADING_RE = re.compile(r"^Vocabulary$", re.IGNORECASE)

# Bold runs inside the vocabulary paragraph that label other sections
SECTION_HEADER_TERMS = frozenset({"TRANSCRIPT", "INTRODUCTION", "VOCABULARY", "NEXT"})
NOTE_PREFIX = "NOTE:"


@dataclass(frozen=True)
class VocabularyState:
    """Accumulator threaded through the fold over the paragraph's children."""

    term: str = ""
    definition: str = ""
    entries: Tuple[VocabEntry, ...] = ()

    def commit(self) -> "VocabularyState":
        """Emit the pending pair (if complete) and clear it."""
        if not (self.term and self.definition):
            return replace(self, term="", definition="")
        entry = VocabEntry(term=self.term, definition=self.definition)
        return VocabularyState(entries=self.entries + (entry,))


def is_section_header(term: str) -> bool:
    upper = term.upper()
    return upper in SECTION_HEADER_TERMS or upper.startswith(NOTE_PREFIX)


def step(state: VocabularyState, node: Node) -> VocabularyState:
    """Advance the vocabulary state machine by one child node."""
    if isinstance(node, Emphasis):
        state = state.commit()
        term = node.text.strip()
        if is_section_header(term):
            term = ""
        return replace(state, term=term, definition="")
    if isinstance(node, LineBreak):
        return state
    if isinstance(node, Text):
        text = clean_text(node.text)
        if state.term and text:
            return replace(state, definition=text)
        return state
    if isinstance(node, OtherElement):
        return state
    raise TypeError(f"Unhandled node kind: {node!r}")


def parse_vocabulary(paragraph: Optional[Tag]) -> List[VocabEntry]:
    """
    Parse the vocabulary paragraph.

    Expected shape is ``<strong>term</strong><br>definition<br>`` repeated.
    A term only becomes an entry once some non-blank text follows it.

    Args:
        paragraph: The <p> holding the vocabulary list (None if not found)

    Returns:
        Entries in document order
    """
    if paragraph is None:
        return []
    final = reduce(step, child_nodes(paragraph), VocabularyState()).commit()
    return list(final.entries)


def find_vocabulary_paragraph(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the <p> right after the "Vocabulary" heading, if any."""
    for heading in soup.find_all("h3"):
        if VOCABULARY_HEADING_RE.match(heading.get_text().strip()):
            return next_paragraph(heading)
    return None


def extract_vocabulary(soup: BeautifulSoup) -> List[VocabEntry]:
    paragraph = find_vocabulary_paragraph(soup)
    if paragraph is None:
        logger.debug("No vocabulary section found")
        return []
    entries = parse_vocabulary(paragraph)
    logger.info(f"Parsed {len(entries)} vocabulary entries")
    return entries
