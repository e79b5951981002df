"""Service for encoding a lesson page's transcript section as canonical markup.

Output grammar, one item per line::

    [SPEAKER]Name[/SPEAKER]
    text with **inline emphasis**

Paragraphs are separated by a single blank line.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from lesson_scraper.core.nodes import (
    Emphasis,
    LineBreak,
    Node,
    OtherElement,
    Text,
    child_nodes,
    is_blank_text,
)
from lesson_scraper.utils.text import normalize_nbsp

logger = logging.getLogger(__name__)

SPEAKER_OPEN = "[SPEAKER]"
SPEAKER_CLOSE = "[/SPEAKER]"
BOLD = "**"

SPEAKER_LABEL_MAX_LENGTH = 30
# Bold runs containing a dash are glosses ("word – meaning"), not names
LABEL_DASHES = ("–", "—")

TRANSCRIPT_RE = re.compile(r"TRANSCRIPT", re.IGNORECASE)
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
TRANSCRIPT_HEADING_TAGS = ["h2", "h3", "h4"]
SECTION_END_PREFIX = "Next"
# Inline emphasis directly followed by one of these needs no space after it
NO_SPACE_AFTER_RE = re.compile(r"^[\s.,;:!?'\"\-–—)/]")

CARRIAGE_RETURN_RE = re.compile(r"\r\n?")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
# Any whitespace except the line break itself
LEADING_SPACE_RE = re.compile(r"^[^\S\n]+", re.MULTILINE)
TRAILING_SPACE_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)


def speaker_line(name: str) -> str:
    return f"{SPEAKER_OPEN}{name}{SPEAKER_CLOSE}"


def is_speaker_label(text: str, following: Sequence[Node]) -> bool:
    """
    Decide whether a bold run is a speaker label or inline emphasis.

    A label is short, does not start lowercase, contains no dash and is
    immediately followed by a line break (a whitespace-only text node in
    between is tolerated). Bold vocabulary words that happen to end a line
    start lowercase and stay inline.

    Args:
        text: Trimmed text of the bold element
        following: The element's next siblings, in order

    Returns:
        True for a speaker label
    """
    if not text or len(text) >= SPEAKER_LABEL_MAX_LENGTH:
        return False
    if text[0].islower():
        return False
    if any(dash in text for dash in LABEL_DASHES):
        return False
    if not following:
        return False
    if isinstance(following[0], LineBreak):
        return True
    return (
        is_blank_text(following[0])
        and len(following) > 1
        and isinstance(following[1], LineBreak)
    )


@dataclass(frozen=True)
class EncoderState:
    """Accumulated markup for the paragraph being encoded."""

    buffer: str = ""

    def append(self, text: str) -> "EncoderState":
        return EncoderState(self.buffer + text)

    def ends_with_space(self) -> bool:
        return bool(self.buffer) and self.buffer[-1].isspace()


def _encode_emphasis(state: EncoderState, text: str, following: Sequence[Node]) -> EncoderState:
    if is_speaker_label(text, following):
        if state.buffer and not state.buffer.endswith("\n"):
            state = state.append("\n")
        return state.append(speaker_line(text) + "\n")

    if state.buffer and not state.ends_with_space():
        state = state.append(" ")
    state = state.append(f"{BOLD}{text}{BOLD}")
    if following and isinstance(following[0], Text):
        next_text = following[0].text
        if next_text and not NO_SPACE_AFTER_RE.match(next_text):
            state = state.append(" ")
    return state


def step(state: EncoderState, node: Node, following: Sequence[Node]) -> EncoderState:
    """Advance the encoder by one child node; ``following`` is the lookahead."""
    if isinstance(node, Emphasis):
        text = node.text.strip()
        if not text:
            return state
        return _encode_emphasis(state, text, following)
    if isinstance(node, LineBreak):
        return state.append("\n")
    if isinstance(node, Text):
        return state.append(normalize_nbsp(node.text))
    if isinstance(node, OtherElement):
        return state
    raise TypeError(f"Unhandled node kind: {node!r}")


def encode_nodes(nodes: List[Node]) -> str:
    state = EncoderState()
    for index, node in enumerate(nodes):
        state = step(state, node, nodes[index + 1:])
    return state.buffer


def encode_paragraph(paragraph: Tag) -> str:
    """Encode one transcript <p>, which may hold several speaker turns."""
    return encode_nodes(child_nodes(paragraph))


def normalize_markup(raw: str) -> str:
    """Strip per-line whitespace, collapse runs of blank lines and trim."""
    text = CARRIAGE_RETURN_RE.sub("\n", raw)
    text = LEADING_SPACE_RE.sub("", text)
    text = TRAILING_SPACE_RE.sub("", text)
    text = EXCESS_NEWLINES_RE.sub("\n\n", text)
    return text.strip()


def is_boilerplate(paragraph: Tag) -> bool:
    """The "Note: This is not a word-for-word transcript" disclaimer."""
    text = paragraph.get_text().strip()
    return "Note:" in text and "word-for-word" in text


def find_transcript_start(soup: BeautifulSoup) -> Optional[Tag]:
    """
    Locate the element the transcript paragraphs follow.

    Usually a <p><strong>TRANSCRIPT</strong></p>; some pages use a heading.
    """
    for strong in soup.find_all(["strong", "b"]):
        if TRANSCRIPT_RE.search(strong.get_text()):
            parent = strong.parent
            if parent is not None and parent.name == "p":
                return parent
            break
    for heading in soup.find_all(TRANSCRIPT_HEADING_TAGS):
        if TRANSCRIPT_RE.search(heading.get_text()):
            return heading
    return None


def iter_transcript_paragraphs(start: Tag) -> Iterator[Tag]:
    """Yield the <p> siblings after ``start`` up to the next section."""
    for sibling in start.find_next_siblings():
        text = sibling.get_text().strip()
        if sibling.name in HEADING_TAGS or text.startswith(SECTION_END_PREFIX):
            break
        if sibling.name != "p":
            continue
        if is_boilerplate(sibling):
            continue
        yield sibling


def encode_transcript(paragraphs: Sequence[Tag]) -> str:
    raw = "".join(encode_paragraph(paragraph) + "\n\n" for paragraph in paragraphs)
    return normalize_markup(raw)


def extract_transcript(soup: BeautifulSoup) -> str:
    start = find_transcript_start(soup)
    if start is None:
        logger.debug("No transcript section found")
        return ""
    paragraphs = list(iter_transcript_paragraphs(start))
    transcript = encode_transcript(paragraphs)
    logger.info(f"Encoded transcript from {len(paragraphs)} paragraphs ({len(transcript)} chars)")
    return transcript
