"""
engines/books.py

Book providers: Google Books and Open Library.

Both are used two ways:
- ISBN lookup (direct cite). Queried in parallel and merged.
- Free-text search (candidate list for the user to pick from).
"""

import re
from typing import Optional, List, Any

from engines.base import SearchEngine, fetch_concurrently
from models import SourceMetadata, SourceType, SearchCandidate, SearchSource
from config import (
    GOOGLE_BOOKS_URL, GOOGLE_BOOKS_WEB_URL, OPEN_LIBRARY_URL,
    PROVIDER_SEARCH_LIMIT,
)


def _year_prefix(date_str: Any) -> Optional[str]:
    """'2024-03-15' -> '2024'; None if the value doesn't start with a year."""
    match = re.match(r'^\d{4}', str(date_str or ''))
    return match.group(0) if match else None


class GoogleBooksEngine(SearchEngine):
    """
    Google Books API for book searches.

    Best for:
    - ISBN lookups
    - Book title/author searches
    - Finding publisher info
    """

    name = "Google Books"
    base_url = GOOGLE_BOOKS_URL

    def get_by_id(self, isbn: str) -> Optional[SourceMetadata]:
        """Look up by ISBN."""
        data = self._get_json(self.base_url, params={'q': f"isbn:{isbn}"})
        if not isinstance(data, dict):
            return None

        items = data.get('items') or []
        if not items:
            print(f"[{self.name}] No match for ISBN {isbn}")
            return None

        info = items[0].get('volumeInfo')
        if not isinstance(info, dict):
            return None

        publisher = info.get('publisher') or None
        return SourceMetadata(
            title=info.get('title', ''),
            authors=info.get('authors') or [],
            site_name=publisher or '',
            publisher=publisher,
            year=_year_prefix(info.get('publishedDate')),
            url=info.get('infoLink') or f"{GOOGLE_BOOKS_WEB_URL}?q=isbn:{isbn}",
            source_type=SourceType.BOOK,
            source_engine=self.name,
        )

    def search_multiple(self, query: str, limit: int = PROVIDER_SEARCH_LIMIT) -> List[SearchCandidate]:
        params = {
            'q': query,
            'maxResults': limit,
            'printType': 'books'
        }

        data = self._get_json(self.base_url, params=params)
        if not isinstance(data, dict):
            return []

        candidates = []
        for item in (data.get('items') or [])[:limit]:
            info = item.get('volumeInfo') or {}
            candidates.append(SearchCandidate(
                id=f"google_{item.get('id', '')}",
                title=info.get('title', ''),
                authors=info.get('authors') or [],
                year=_year_prefix(info.get('publishedDate')),
                publisher=info.get('publisher'),
                source_type=SourceType.BOOK,
                source=SearchSource.GOOGLE_BOOKS,
                raw=item,
            ))
        return candidates

    @staticmethod
    def candidate_url(candidate: SearchCandidate) -> str:
        """infoLink if present, else a books.google.com link built from the volume id."""
        info = candidate.raw.get('volumeInfo') or {}
        if info.get('infoLink'):
            return info['infoLink']
        volume_id = candidate.raw.get('id') or candidate.id[len('google_'):]
        return f"{GOOGLE_BOOKS_WEB_URL}?id={volume_id}"


class OpenLibraryEngine(SearchEngine):
    """
    Open Library API for book searches.

    Best for:
    - ISBN lookups (free, no API key needed)
    - Older/public domain books
    - Original publication years
    """

    name = "Open Library"
    base_url = OPEN_LIBRARY_URL

    def get_by_id(self, isbn: str) -> Optional[SourceMetadata]:
        """Look up by ISBN via the books API (authors and publishers come inline)."""
        key = f"ISBN:{isbn}"
        params = {'bibkeys': key, 'format': 'json', 'jscmd': 'data'}

        data = self._get_json(f"{self.base_url}/api/books", params=params)
        if not isinstance(data, dict):
            return None

        book = data.get(key)
        if not isinstance(book, dict):
            print(f"[{self.name}] No match for ISBN {isbn}")
            return None

        publishers = book.get('publishers') or []
        publisher = publishers[0].get('name') if publishers and isinstance(publishers[0], dict) else None
        year_match = re.search(r'\d{4}', str(book.get('publish_date') or ''))

        return SourceMetadata(
            title=book.get('title', ''),
            authors=[a.get('name', '') for a in book.get('authors') or [] if isinstance(a, dict)],
            site_name=publisher or '',
            publisher=publisher,
            year=year_match.group(0) if year_match else None,
            url=book.get('url') or f"{self.base_url}/isbn/{isbn}",
            source_type=SourceType.BOOK,
            source_engine=self.name,
        )

    def search_multiple(self, query: str, limit: int = PROVIDER_SEARCH_LIMIT) -> List[SearchCandidate]:
        params = {
            'q': query,
            'limit': limit
        }

        data = self._get_json(f"{self.base_url}/search.json", params=params)
        if not isinstance(data, dict):
            return []

        candidates = []
        for doc in (data.get('docs') or [])[:limit]:
            publishers = doc.get('publisher') or []
            first_year = doc.get('first_publish_year')
            candidates.append(SearchCandidate(
                id=f"openlibrary_{doc.get('key', '')}",
                title=doc.get('title', ''),
                authors=doc.get('author_name') or [],
                year=str(first_year) if first_year else None,
                publisher=publishers[0] if publishers else None,
                source_type=SourceType.BOOK,
                source=SearchSource.OPEN_LIBRARY,
                raw=doc,
            ))
        return candidates

    @staticmethod
    def candidate_url(candidate: SearchCandidate) -> str:
        """Work page built from the catalog key (/works/OL...W)."""
        key = candidate.raw.get('key') or candidate.id[len('openlibrary_'):]
        return f"{OPEN_LIBRARY_URL}{key}"


# =============================================================================
# ISBN LOOKUP (both catalogs, merged)
# =============================================================================

def _year_value(year: Optional[str]) -> int:
    try:
        return int(year) if year else 9999
    except ValueError:
        return 9999


def merge_isbn_records(
    google: Optional[SourceMetadata],
    open_library: Optional[SourceMetadata],
) -> Optional[SourceMetadata]:
    """
    Merge the two catalog answers for one ISBN.

    Google Books is the base record. When both answered, the earlier year wins
    (closer to original publication) and a non-empty publisher is taken from
    whichever source has one. A single answer is returned unchanged.
    """
    if google and open_library:
        year = open_library.year if _year_value(open_library.year) < _year_value(google.year) else google.year
        publisher = google.publisher or open_library.publisher
        return SourceMetadata(
            title=google.title,
            authors=list(google.authors),
            site_name=publisher or google.site_name,
            publisher=publisher,
            year=year,
            month=google.month,
            day=google.day,
            url=google.url,
            source_type=SourceType.BOOK,
            source_engine=f"{google.source_engine} + {open_library.source_engine}",
        )
    return google or open_library


def fetch_isbn_metadata(
    isbn: str,
    google_books: Optional[GoogleBooksEngine] = None,
    open_library: Optional[OpenLibraryEngine] = None,
) -> Optional[SourceMetadata]:
    """Query Google Books and Open Library in parallel and merge the answers."""
    google_books = google_books or GoogleBooksEngine()
    open_library = open_library or OpenLibraryEngine()

    google_result, open_lib_result = fetch_concurrently(
        (google_books.get_by_id, (isbn,)),
        (open_library.get_by_id, (isbn,)),
    )
    return merge_isbn_records(google_result, open_lib_result)
