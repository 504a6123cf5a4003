"""
papercite/models.py

Core data models for the citation system.
All modules communicate through these standardized structures.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum

from config import UNTITLED, UNKNOWN_PUBLISHER


class SourceType(Enum):
    """Kinds of source a citation can describe. Selects the formatting branch."""
    WEBSITE = "website"
    BOOK = "book"
    ARTICLE = "article"
    VIDEO = "video"
    ENCYCLOPEDIA = "encyclopedia"

    @classmethod
    def from_string(cls, s: Optional[str]) -> "SourceType":
        """Parse a type name; anything unrecognised is treated as a website."""
        try:
            return cls((s or '').lower().strip())
        except ValueError:
            return cls.WEBSITE


class InputType(Enum):
    """What the raw user input looks like. Selects the provider adapter."""
    DOI = "doi"
    ISBN = "isbn"
    YOUTUBE = "youtube"
    WIKIPEDIA = "wikipedia"
    URL = "url"
    TEXT = "text"


class SearchSource(Enum):
    """Provenance tag of a search candidate."""
    GOOGLE_BOOKS = "google_books"
    OPEN_LIBRARY = "openlibrary"


class CitationStyle(Enum):
    """Supported citation formatting styles."""
    APA7 = "apa7"
    MLA9 = "mla9"
    CHICAGO = "chicago"
    HARVARD = "harvard"

    @classmethod
    def from_string(cls, s: str) -> "CitationStyle":
        """Parse style from string, with common aliases."""
        mapping = {
            'apa': cls.APA7,
            'apa7': cls.APA7,
            'apa 7': cls.APA7,
            'mla': cls.MLA9,
            'mla9': cls.MLA9,
            'mla 9': cls.MLA9,
            'chicago': cls.CHICAGO,
            'chicago manual of style': cls.CHICAGO,
            'harvard': cls.HARVARD,
        }
        return mapping.get(s.lower().strip(), cls.APA7)


# =============================================================================
# ERRORS
# =============================================================================

class CitationError(Exception):
    """Base class for errors surfaced to callers of the citation pipeline."""


class CitationInputError(CitationError):
    """Empty or malformed input (source, query or selected candidate)."""


class CitationGenerationError(CitationError):
    """Every structured path and the AI fallback failed."""

    def __init__(self, message: str = "Failed to generate citation"):
        super().__init__(message)


# =============================================================================
# RECORDS
# =============================================================================

@dataclass
class SourceMetadata:
    """
    Normalized metadata record.

    This is the standard data contract between the provider adapters and the
    formatters:
    - Engines/Extractors populate the fields from provider responses
    - The router stamps access_date right before formatting
    - Formatters consume this to produce citation strings

    Authors are display names in citation order; an empty list means the
    source has no byline. title and site_name are never empty.
    """

    title: str = UNTITLED
    authors: List[str] = field(default_factory=list)
    site_name: str = UNKNOWN_PUBLISHER
    publisher: Optional[str] = None
    year: Optional[str] = None
    month: Optional[str] = None  # Full month name
    day: Optional[str] = None
    url: str = ""
    access_date: str = ""
    source_type: SourceType = SourceType.WEBSITE
    id: Optional[str] = None  # Provider-qualified, never rendered
    source_engine: str = ""  # Which engine/extractor produced this

    def __post_init__(self):
        self.authors = [a.strip() for a in (self.authors or []) if a and a.strip()]
        self.title = (self.title or '').strip() or UNTITLED
        self.site_name = (self.site_name or '').strip() or UNKNOWN_PUBLISHER
        self.publisher = (self.publisher or '').strip() or None
        self.year = str(self.year).strip() if self.year else None
        self.month = self.month or None
        self.day = str(self.day).strip() if self.day else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary used by the HTTP API."""
        d = {
            'authors': list(self.authors),
            'title': self.title,
            'siteName': self.site_name,
            'publisher': self.publisher,
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'url': self.url,
            'accessDate': self.access_date,
            'type': self.source_type.value,
        }
        if self.id:
            d['id'] = self.id
        return d


@dataclass
class SearchCandidate:
    """
    Lightweight search hit returned for free-text queries.

    raw keeps the provider payload only so the canonical URL can be derived
    once the user picks this candidate.
    """
    id: str
    title: str
    source: SearchSource
    authors: List[str] = field(default_factory=list)
    year: Optional[str] = None
    publisher: Optional[str] = None
    source_type: SourceType = SourceType.BOOK
    raw: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.authors = [a.strip() for a in (self.authors or []) if a and a.strip()]
        self.title = (self.title or '').strip() or UNTITLED
        self.year = str(self.year) if self.year else None
        self.publisher = self.publisher or None

    @property
    def completeness(self) -> int:
        """One point each for a year, a publisher and at least one author."""
        return (1 if self.year else 0) + (1 if self.publisher else 0) + (1 if self.authors else 0)

    @property
    def first_author(self) -> Optional[str]:
        return self.authors[0] if self.authors else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'authors': list(self.authors),
            'year': self.year,
            'publisher': self.publisher,
            'type': self.source_type.value,
            'source': self.source.value,
            'raw': self.raw,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SearchCandidate":
        """
        Rebuild a candidate sent back by a client.

        Raises:
            ValueError: unknown source tag
            CitationInputError: authors is not a list of names
        """
        authors = d.get('authors') or []
        if not isinstance(authors, list) or not all(isinstance(a, str) for a in authors):
            raise CitationInputError("Result authors must be a list of names")

        return cls(
            id=d.get('id') or '',
            title=d.get('title', ''),
            source=SearchSource(d.get('source')),
            authors=authors,
            year=d.get('year'),
            publisher=d.get('publisher'),
            source_type=SourceType.from_string(d.get('type') or 'book'),
            raw=d.get('raw') or {},
        )


@dataclass
class Citations:
    """The four formatted citation strings for one source."""
    apa7: str
    mla9: str
    chicago: str
    harvard: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'apa7': self.apa7,
            'mla9': self.mla9,
            'chicago': self.chicago,
            'harvard': self.harvard,
        }


@dataclass
class ResolveResult:
    """Outcome of a resolve request: citations, or a request to run a search."""
    input_type: InputType
    citations: Optional[Citations] = None
    metadata: Optional[SourceMetadata] = None
    needs_search: bool = False
    message: str = ""
    via_ai: bool = False

    def to_dict(self) -> Dict[str, Any]:
        if self.needs_search:
            return {'needsSearch': True, 'message': self.message}
        d = {'citations': self.citations.to_dict() if self.citations else None}
        # AI fallback citations have no structured record behind them
        if self.metadata is not None:
            d['metadata'] = self.metadata.to_dict()
        return d
