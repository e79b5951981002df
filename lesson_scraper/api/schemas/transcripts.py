"""Pydantic schemas for transcript markup requests and responses"""

from pydantic import BaseModel, Field
from typing import List

from lesson_scraper.core.models import Block


class TranscriptRequest(BaseModel):
    """Request schema carrying transcript markup."""

    transcript: str = Field(default="", description="Transcript markup")


class SerializeRequest(BaseModel):
    """Request schema carrying editor blocks."""

    blocks: List[Block] = []


class TranscriptResponse(BaseModel):
    """Response schema for serialized markup."""

    transcript: str


class RenderResponse(BaseModel):
    """Response schema for rendered HTML."""

    html: str
