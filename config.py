"""
papercite/config.py

Configuration, constants, and shared settings.
"""

import os
from datetime import date
from typing import Dict, List

# =============================================================================
# API KEYS (from environment)
# =============================================================================

GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '')

# =============================================================================
# HTTP SETTINGS
# =============================================================================

DEFAULT_TIMEOUT = int(os.environ.get('CITE_TIMEOUT', '10'))  # seconds
DEFAULT_HEADERS = {
    'User-Agent': 'PaperCitation/1.0 (mailto:contact@papercitation.com)',
    'Accept': 'application/json'
}

# Used when fetching arbitrary web pages
BROWSER_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (compatible; PaperCitation/1.0)',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}

# =============================================================================
# GEMINI SETTINGS
# =============================================================================

GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.0-flash')
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

# =============================================================================
# PROVIDER ENDPOINTS
# =============================================================================

CROSSREF_WORKS_URL = "https://api.crossref.org/works"
GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"
GOOGLE_BOOKS_WEB_URL = "https://books.google.com/books"
OPEN_LIBRARY_URL = "https://openlibrary.org"
YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"
DOI_RESOLVER_URL = "https://doi.org"

# =============================================================================
# PLACEHOLDERS & PLATFORM CONSTANTS
# =============================================================================

UNTITLED = "Untitled"
UNKNOWN_PUBLISHER = "Unknown Publisher"
UNKNOWN_AUTHOR = "Unknown"
NO_DATE = "n.d."

YOUTUBE_SITE_NAME = "YouTube"
WIKIPEDIA_SITE_NAME = "Wikipedia"
WIKIPEDIA_PUBLISHER = "Wikimedia Foundation"

# =============================================================================
# SEARCH LIMITS
# =============================================================================

SEARCH_RESULT_LIMIT = 10
PROVIDER_SEARCH_LIMIT = 5

# =============================================================================
# META TAGS (generic URL scraping, checked in order)
# =============================================================================

DATE_META_TAGS: List[str] = [
    'article:published_time',
    'datePublished',
    'date',
]

AUTHOR_META_TAGS: List[str] = [
    'author',
    'article:author',
    'og:article:author',
]

# =============================================================================
# MONTHS
# =============================================================================

MONTH_NAMES: List[str] = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

# MLA 9 abbreviates months longer than four letters
MLA_MONTH_ABBREVIATIONS: Dict[str, str] = {
    'January': 'Jan.',
    'February': 'Feb.',
    'March': 'Mar.',
    'April': 'Apr.',
    'May': 'May',
    'June': 'June',
    'July': 'July',
    'August': 'Aug.',
    'September': 'Sept.',
    'October': 'Oct.',
    'November': 'Nov.',
    'December': 'Dec.',
}

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_month_name(month) -> str:
    """Full month name for a month number (1-12); empty string if out of range."""
    try:
        index = int(month)
    except (TypeError, ValueError):
        return ''
    if 1 <= index <= 12:
        return MONTH_NAMES[index - 1]
    return ''


def format_long_date(d: date) -> str:
    """October 17, 2026"""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def format_short_date(d: date) -> str:
    """17 Oct 2026"""
    return f"{d.day} {MONTH_NAMES[d.month - 1][:3]} {d.year}"
