"""Fallback chains for the scalar lesson fields (title, date, image, intro, audio)"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Unknown Title"

# Widget headings that label page sections rather than name the episode
NON_TITLE_HEADINGS = frozenset({
    "6 Minute English",
    "Intermediate level",
    "Introduction",
    "Vocabulary",
    "TRANSCRIPT",
    "This week's question",
    "Next",
})
GENERIC_OG_TITLE = "Learning English"
MIN_TITLE_LENGTH = 10

# Subheader reads like "Episode 240101 / 01 Jan 2024"
DATE_RE = re.compile(r"/\s*(\d{1,2}\s+\w+\s+\d{4})")
INTRO_HEADING_RE = re.compile(r"Introduction", re.IGNORECASE)


def _meta_content(soup: BeautifulSoup, prop: str) -> str:
    meta = soup.find("meta", attrs={"property": prop})
    if meta is None:
        return ""
    return (meta.get("content") or "").strip()


def next_paragraph(heading: Tag) -> Optional[Tag]:
    """Return the element right after ``heading`` if it is a <p>."""
    sibling = heading.find_next_sibling()
    if sibling is not None and sibling.name == "p":
        return sibling
    return None


def extract_title(soup: BeautifulSoup) -> str:
    """
    Pick the episode title.

    Prefers the first widget heading that is not a section label and either
    asks a question or is longer than a short label; falls back to og:title.
    """
    for heading in soup.select("div.widget-heading h3"):
        text = heading.get_text().strip()
        if not text or text in NON_TITLE_HEADINGS:
            continue
        if "?" in text or len(text) > MIN_TITLE_LENGTH:
            return text

    og_title = _meta_content(soup, "og:title")
    if og_title and og_title != GENERIC_OG_TITLE:
        return og_title

    logger.debug("No title found, using default")
    return DEFAULT_TITLE


def extract_date(soup: BeautifulSoup) -> str:
    """Return the free-text episode date from the feature subheader, or ''."""
    subheader = " ".join(
        h3.get_text() for h3 in soup.select("div.widget-bbcle-featuresubheader .details h3")
    )
    match = DATE_RE.search(subheader)
    if match:
        return match.group(1).strip()
    return ""


def extract_image_url(soup: BeautifulSoup) -> str:
    img = soup.select_one("div.widget-video img[src]")
    if img is not None and img.get("src"):
        return img["src"]
    return _meta_content(soup, "og:image")


def extract_intro(soup: BeautifulSoup) -> str:
    heading = next(
        (h3 for h3 in soup.find_all("h3") if INTRO_HEADING_RE.search(h3.get_text())),
        None,
    )
    if heading is None:
        return ""
    paragraph = next_paragraph(heading)
    if paragraph is None:
        return ""
    return paragraph.get_text().strip()


def extract_audio_url(soup: BeautifulSoup) -> str:
    link = soup.select_one("a.download.bbcle-download-extension-mp3")
    if link is None:
        return ""
    return link.get("href") or ""
