"""Domain models"""

import uuid
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


def _new_block_id() -> str:
    return str(uuid.uuid4())


class VocabEntry(BaseModel):
    """A (term, definition) pair from a lesson's vocabulary section."""

    term: str
    definition: str


class LessonRecord(BaseModel):
    """Structured lesson extracted from one lesson page."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str = "Unknown Title"
    date: str = ""
    imageUrl: str = ""
    intro: str = ""
    audioUrl: str = ""
    transcript: str = ""  # canonical transcript markup
    vocabulary: List[VocabEntry] = []


class SpeakerBlock(BaseModel):
    """Editor block marking the start of a speaker turn."""

    id: str = Field(default_factory=_new_block_id)
    type: Literal["speaker"] = "speaker"
    speaker: str


class TextBlock(BaseModel):
    """Editor block holding one line of transcript text."""

    id: str = Field(default_factory=_new_block_id)
    type: Literal["text"] = "text"
    content: str = ""
    # Most recent speaker above this block; bookkeeping only, never serialized
    speaker: str = ""


Block = Annotated[Union[SpeakerBlock, TextBlock], Field(discriminator="type")]


class ParsedTranscript(BaseModel):
    """Editable projection of a transcript markup string."""

    blocks: List[Block] = []
    speakers: List[str] = []
