"""Utilities for cleaning text pulled out of HTML"""

NBSP = "\u00a0"


def normalize_nbsp(text: str) -> str:
    """Replace non-breaking spaces with regular spaces."""
    return text.replace(NBSP, " ")


def clean_text(text: str) -> str:
    """
    Normalize non-breaking spaces and trim.

    Args:
        text: Raw text node content (may be None)

    Returns:
        Cleaned text, empty string for missing input
    """
    if not text:
        return ""
    return normalize_nbsp(text).strip()
