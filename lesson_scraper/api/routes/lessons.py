"""Lesson routes: scrape a page into a lesson record and prepare edits for saving."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from lesson_scraper.api.schemas.lessons import (
    ExtractRequest,
    LessonEditRequest,
    LessonEditResponse,
    ScrapeRequest,
)
from lesson_scraper.core.models import LessonRecord
from lesson_scraper.services.lesson_scraper_service import LessonScraperService, extract_lesson
from lesson_scraper.services.markup_service import serialize_blocks
from lesson_scraper.services.transcript_editor import clean_vocabulary


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])


def get_scraper_service() -> LessonScraperService:
    return LessonScraperService()


@router.post("/scrape", response_model=LessonRecord)
async def scrape_lesson(
    body: ScrapeRequest,
    scraper: LessonScraperService = Depends(get_scraper_service),
):
    """Fetch a lesson page and return the extracted lesson."""
    url = body.url.strip()
    if not url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL is required",
        )
    try:
        lesson = await scraper.scrape(url)
    except Exception as e:
        logger.error("Error scraping lesson %s: %s", url, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to scrape lesson",
        )
    if lesson is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to scrape lesson",
        )
    return lesson


@router.post("/extract", response_model=LessonRecord)
def extract_lesson_from_html(body: ExtractRequest):
    """Extract a lesson from HTML the caller already fetched."""
    lesson = extract_lesson(body.html, body.url)
    if lesson is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to parse lesson page",
        )
    return lesson


@router.post("/edits", response_model=LessonEditResponse)
def prepare_lesson_edit(body: LessonEditRequest):
    """Turn editor state into the transcript markup and vocabulary to store."""
    return LessonEditResponse(
        transcript=serialize_blocks(body.blocks),
        vocabulary=clean_vocabulary(body.vocabulary),
    )
