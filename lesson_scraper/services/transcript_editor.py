"""Block operations used while editing a transcript.

Every function returns new lists; inputs are never mutated.
"""

import logging
from typing import List, Sequence, Tuple

from lesson_scraper.core.models import Block, SpeakerBlock, TextBlock, VocabEntry
from lesson_scraper.services.transcript_encoder import BOLD

logger = logging.getLogger(__name__)


def add_speaker(
    blocks: Sequence[Block], speakers: Sequence[str], name: str
) -> Tuple[List[Block], List[str]]:
    """
    Append a speaker block, registering ``name`` as a known speaker.

    Blank names are ignored and return unchanged copies.
    """
    name = name.strip()
    if not name:
        return list(blocks), list(speakers)
    new_speakers = list(speakers)
    if name not in new_speakers:
        new_speakers.append(name)
    return list(blocks) + [SpeakerBlock(speaker=name)], new_speakers


def add_text_block(blocks: Sequence[Block], content: str = "") -> List[Block]:
    return list(blocks) + [TextBlock(content=content)]


def update_block(blocks: Sequence[Block], block_id: str, content: str) -> List[Block]:
    """
    Replace the text of a text block or the name of a speaker block.

    Speaker names are trimmed; a blank name leaves the block unchanged.
    """
    updated: List[Block] = []
    for block in blocks:
        if block.id != block_id:
            updated.append(block)
        elif isinstance(block, SpeakerBlock):
            name = content.strip()
            updated.append(block.model_copy(update={"speaker": name}) if name else block)
        else:
            updated.append(block.model_copy(update={"content": content}))
    return updated


def delete_block(blocks: Sequence[Block], block_id: str) -> List[Block]:
    return [block for block in blocks if block.id != block_id]


def move_block(blocks: Sequence[Block], block_id: str, offset: int) -> List[Block]:
    """Move a block by ``offset`` positions, clamped to the list bounds."""
    reordered = list(blocks)
    index = next((i for i, block in enumerate(reordered) if block.id == block_id), None)
    if index is None:
        logger.warning(f"Block not found: {block_id}")
        return reordered
    target = max(0, min(len(reordered) - 1, index + offset))
    reordered.insert(target, reordered.pop(index))
    return reordered


def wrap_bold(content: str, start: int, end: int) -> str:
    """Wrap ``content[start:end]`` in bold markers; empty selections are a no-op."""
    if start == end:
        return content
    start, end = sorted((start, end))
    return content[:start] + BOLD + content[start:end] + BOLD + content[end:]


def clean_vocabulary(entries: Sequence[VocabEntry]) -> List[VocabEntry]:
    """Drop entries with a blank term or definition before saving."""
    return [entry for entry in entries if entry.term.strip() and entry.definition.strip()]
