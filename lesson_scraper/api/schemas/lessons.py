"""Pydantic schemas for lesson-related API requests and responses"""

from pydantic import BaseModel, Field
from typing import List

from lesson_scraper.core.models import Block, VocabEntry


class ScrapeRequest(BaseModel):
    """Request schema for scraping a lesson page."""

    url: str = Field(..., description="Lesson page URL")


class ExtractRequest(BaseModel):
    """Request schema for extracting a lesson from already-fetched HTML."""

    url: str = Field(..., description="Source URL of the page")
    html: str = Field(..., description="Page HTML")


class LessonEditRequest(BaseModel):
    """Edited transcript blocks and vocabulary, as sent by the editor on save."""

    blocks: List[Block] = []
    vocabulary: List[VocabEntry] = []


class LessonEditResponse(BaseModel):
    """Transcript markup and cleaned vocabulary ready to be stored."""

    transcript: str
    vocabulary: List[VocabEntry]
