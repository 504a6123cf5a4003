"""
papercite/detectors.py

Pattern detection for input classification.
Fast, free, no network - decides which provider adapter resolves the input.

Each detector returns True/False. detect_input_type() runs them in priority
order because one input can match several patterns (a DOI link is also an
http URL, a YouTube link is also a URL).
"""

import re

from models import InputType


_ISBN_SEPARATORS = re.compile(r'[-\s]')
_ISBN_DIGITS = re.compile(r'^(?:\d{10}|\d{13})$')


# =============================================================================
# INDIVIDUAL DETECTORS
# =============================================================================

def is_doi(text: str) -> bool:
    """Bare DOI (10.xxxx/...) or any doi.org link."""
    lower = text.strip().lower()
    return lower.startswith('10.') or 'doi.org/' in lower


def is_isbn(text: str) -> bool:
    """
    Exactly 10 or 13 digits once hyphens and whitespace are removed.

    978-0-13-468599-1 -> 9780134685991 -> True
    12345 -> False
    """
    return bool(_ISBN_DIGITS.match(_ISBN_SEPARATORS.sub('', text.strip())))


def is_youtube(text: str) -> bool:
    lower = text.lower()
    return 'youtube.com' in lower or 'youtu.be' in lower


def is_wikipedia(text: str) -> bool:
    return 'wikipedia.org' in text.lower()


def is_url(text: str) -> bool:
    """Check if text is a URL."""
    return text.strip().lower().startswith(('http://', 'https://'))


# =============================================================================
# MAIN DETECTION ROUTER
# =============================================================================

_DETECTORS = [
    (InputType.DOI, is_doi),
    (InputType.ISBN, is_isbn),
    (InputType.YOUTUBE, is_youtube),
    (InputType.WIKIPEDIA, is_wikipedia),
    (InputType.URL, is_url),
]


def detect_input_type(text: str) -> InputType:
    """
    Classify raw input. Total: every string maps to exactly one InputType.

    Priority order (first match wins):
    1. DOI (10. prefix or doi.org/)
    2. ISBN (10 or 13 digits)
    3. YouTube
    4. Wikipedia
    5. URL (http/https)
    6. Text (free-text search)
    """
    clean = (text or '').strip()
    if not clean:
        return InputType.TEXT

    for input_type, detector in _DETECTORS:
        if detector(clean):
            return input_type

    return InputType.TEXT
