"""
papercite/engines/__init__.py

Provider adapters package.
"""

from engines.base import SearchEngine, fetch_concurrently
from engines.doi import CrossrefEngine, normalize_crossref
from engines.books import (
    GoogleBooksEngine,
    OpenLibraryEngine,
    merge_isbn_records,
    fetch_isbn_metadata,
)
from engines.video import YouTubeEngine
from engines.generic_url import GenericURLEngine, parse_date, parse_date_parts

__all__ = [
    # Base
    'SearchEngine',
    'fetch_concurrently',
    # DOI
    'CrossrefEngine',
    'normalize_crossref',
    # Books
    'GoogleBooksEngine',
    'OpenLibraryEngine',
    'merge_isbn_records',
    'fetch_isbn_metadata',
    # Video
    'YouTubeEngine',
    # Web pages
    'GenericURLEngine',
    'parse_date',
    'parse_date_parts',
]
