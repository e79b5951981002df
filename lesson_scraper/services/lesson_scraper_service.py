"""Service that assembles a LessonRecord from a lesson page"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from lesson_scraper.core.models import LessonRecord
from lesson_scraper.services.field_extractors import (
    extract_audio_url,
    extract_date,
    extract_image_url,
    extract_intro,
    extract_title,
)
from lesson_scraper.services.page_fetcher import PageFetcher
from lesson_scraper.services.transcript_encoder import extract_transcript
from lesson_scraper.services.vocabulary_parser import extract_vocabulary

logger = logging.getLogger(__name__)


def parse_document(html: Optional[str]) -> Optional[BeautifulSoup]:
    """Build the element tree, or None if the document has no elements at all."""
    if not html or not html.strip():
        return None
    soup = BeautifulSoup(html, "html.parser")
    if soup.find(True) is None:
        return None
    return soup


def extract_lesson(html: Optional[str], url: str) -> Optional[LessonRecord]:
    """
    Extract every lesson field from one page.

    Missing sections fall back to their defaults; only a document without
    any element tree is a failure.

    Args:
        html: The fetched page
        url: Source URL, stored on the record

    Returns:
        The lesson record, or None if the page could not be parsed
    """
    soup = parse_document(html)
    if soup is None:
        logger.warning("No element tree in page from %s", url)
        return None

    lesson = LessonRecord(
        url=url,
        title=extract_title(soup),
        date=extract_date(soup),
        imageUrl=extract_image_url(soup),
        intro=extract_intro(soup),
        audioUrl=extract_audio_url(soup),
        transcript=extract_transcript(soup),
        vocabulary=extract_vocabulary(soup),
    )
    logger.info(
        "Extracted lesson %r from %s: %d vocabulary entries, %d transcript chars",
        lesson.title,
        url,
        len(lesson.vocabulary),
        len(lesson.transcript),
    )
    return lesson


class LessonScraperService:
    """Fetches a lesson page and extracts a LessonRecord from it."""

    def __init__(self, fetcher: Optional[PageFetcher] = None):
        self.fetcher = fetcher or PageFetcher()

    async def scrape(self, url: str) -> Optional[LessonRecord]:
        html = await self.fetcher.fetch(url)
        if html is None:
            logger.warning("Failed to fetch lesson page %s", url)
            return None
        return extract_lesson(html, url)
