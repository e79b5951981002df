"""Transcript markup routes used by the editor."""

import logging

from fastapi import APIRouter

from lesson_scraper.api.schemas.transcripts import (
    RenderResponse,
    SerializeRequest,
    TranscriptRequest,
    TranscriptResponse,
)
from lesson_scraper.core.models import ParsedTranscript
from lesson_scraper.services.markup_service import (
    parse_markup,
    render_markup_html,
    serialize_blocks,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcripts", tags=["transcripts"])


@router.post("/parse", response_model=ParsedTranscript)
def parse_transcript(body: TranscriptRequest):
    """Split markup into editable blocks plus the speakers seen."""
    return parse_markup(body.transcript)


@router.post("/serialize", response_model=TranscriptResponse)
def serialize_transcript(body: SerializeRequest):
    """Turn edited blocks back into markup."""
    return TranscriptResponse(transcript=serialize_blocks(body.blocks))


@router.post("/render", response_model=RenderResponse)
def render_transcript(body: TranscriptRequest):
    return RenderResponse(html=render_markup_html(body.transcript))
