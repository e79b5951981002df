"""Service for decoding, re-encoding and rendering transcript markup.

Accepts both the scraper's paragraph-spaced output and the editor's
one-block-per-line output: blank lines are ignored on the way in.
"""

import html
import logging
import re
from typing import List, Optional, Sequence, Tuple

from lesson_scraper.core.models import Block, ParsedTranscript, SpeakerBlock, TextBlock
from lesson_scraper.services.transcript_encoder import speaker_line

logger = logging.getLogger(__name__)

SPEAKER_LINE_RE = re.compile(r"^\[SPEAKER\](.+?)\[/SPEAKER\]$")
BOLD_RUN_RE = re.compile(r"\*\*(.+?)\*\*")


def match_speaker(line: str) -> Optional[str]:
    """Return the speaker name if ``line`` (already trimmed) is a speaker line."""
    match = SPEAKER_LINE_RE.match(line)
    return match.group(1) if match else None


def parse_markup(markup: Optional[str]) -> ParsedTranscript:
    """
    Parse transcript markup into editor blocks.

    Never raises: anything that is not a speaker line becomes a text block.

    Args:
        markup: Transcript markup (None is treated as empty)

    Returns:
        Blocks in order plus the distinct speaker names, first-seen order
    """
    blocks: List[Block] = []
    speakers: List[str] = []
    current_speaker = ""

    for line in (markup or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        name = match_speaker(trimmed)
        if name is not None:
            current_speaker = name
            if name not in speakers:
                speakers.append(name)
            blocks.append(SpeakerBlock(speaker=name))
        else:
            blocks.append(TextBlock(content=trimmed, speaker=current_speaker))

    logger.debug(f"Parsed transcript into {len(blocks)} blocks, {len(speakers)} speakers")
    return ParsedTranscript(blocks=blocks, speakers=speakers)


def serialize_blocks(blocks: Sequence[Block]) -> str:
    """Emit one line per block and trim trailing whitespace."""
    lines = []
    for block in blocks:
        if isinstance(block, SpeakerBlock):
            lines.append(speaker_line(block.speaker) + "\n")
        elif isinstance(block, TextBlock):
            lines.append(block.content + "\n")
        else:
            raise TypeError(f"Unsupported block type: {type(block)!r}")
    return "".join(lines).rstrip()


def split_bold_runs(line: str) -> List[Tuple[str, bool]]:
    """Split a text line into (text, is_bold) runs; unmatched ``**`` stays plain."""
    runs: List[Tuple[str, bool]] = []
    position = 0
    for match in BOLD_RUN_RE.finditer(line):
        if match.start() > position:
            runs.append((line[position:match.start()], False))
        runs.append((match.group(1), True))
        position = match.end()
    if position < len(line):
        runs.append((line[position:], False))
    return runs


def render_markup_html(markup: Optional[str]) -> str:
    """Render markup as HTML paragraphs for reading views."""
    parts = []
    for line in (markup or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        name = match_speaker(trimmed)
        if name is not None:
            parts.append(f'<p class="speaker">{html.escape(name)}</p>')
            continue
        body = "".join(
            f"<strong>{html.escape(text)}</strong>" if bold else html.escape(text)
            for text, bold in split_bold_runs(trimmed)
        )
        parts.append(f"<p>{body}</p>")
    return "".join(parts)
