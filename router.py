"""
papercite/router.py

Main routing logic that orchestrates:
1. Detection (what kind of input is this?)
2. Resolution (get metadata from the matching provider adapter)
3. Formatting (produce all four citation styles)

Free-text input is not resolved directly: the caller runs search_all_sources()
and cites the candidate the user picks with resolve_selected().

This is the primary public API for the citation system.
"""

import threading
from datetime import date
from typing import Optional, List, Tuple, Callable, Dict

from models import (
    SourceMetadata, SearchCandidate, SearchSource, InputType, Citations, ResolveResult,
    CitationError, CitationInputError, CitationGenerationError,
)
from detectors import detect_input_type
from extractors import extract_doi, extract_isbn, extract_wikipedia
from engines import (
    CrossrefEngine,
    GoogleBooksEngine,
    OpenLibraryEngine,
    YouTubeEngine,
    GenericURLEngine,
    fetch_concurrently,
    fetch_isbn_metadata,
)
from formatters import format_all_citations
from config import SEARCH_RESULT_LIMIT, format_long_date, format_short_date


NEEDS_SEARCH_MESSAGE = "Text queries require search selection"

AIFallback = Callable[[str, str], Citations]
Resolver = Callable[[str], Optional[SourceMetadata]]


# =============================================================================
# ENGINE INSTANCES (lazy-loaded, one set per thread)
# =============================================================================

# Each engine owns a requests.Session; concurrent requests must not share one
_local = threading.local()


def _get_engine(name: str):
    """Get or create this thread's engine instance."""
    engines = getattr(_local, 'engines', None)
    if engines is None:
        engines = _local.engines = {}

    if name not in engines:
        engine_map = {
            'crossref': CrossrefEngine,
            'google_books': GoogleBooksEngine,
            'open_library': OpenLibraryEngine,
            'youtube': YouTubeEngine,
            'generic_url': GenericURLEngine,
        }
        if name in engine_map:
            engines[name] = engine_map[name]()
    return engines.get(name)


# =============================================================================
# RESOLVERS (one fallible chain per input type)
# =============================================================================

def resolve_doi(source: str) -> Optional[SourceMetadata]:
    return _get_engine('crossref').get_by_id(extract_doi(source))


def resolve_isbn(source: str) -> Optional[SourceMetadata]:
    return fetch_isbn_metadata(
        extract_isbn(source),
        _get_engine('google_books'),
        _get_engine('open_library'),
    )


def resolve_youtube(source: str) -> Optional[SourceMetadata]:
    return _get_engine('youtube').get_by_id(source)


def resolve_wikipedia(source: str) -> Optional[SourceMetadata]:
    return extract_wikipedia(source)


def resolve_url(source: str) -> Optional[SourceMetadata]:
    return _get_engine('generic_url').get_by_id(source)


RESOLVER_CHAINS: Dict[InputType, List[Tuple[str, Resolver]]] = {
    InputType.DOI: [('Crossref', resolve_doi)],
    InputType.ISBN: [('Google Books + Open Library', resolve_isbn)],
    InputType.YOUTUBE: [('YouTube oEmbed', resolve_youtube)],
    InputType.WIKIPEDIA: [('Wikipedia', resolve_wikipedia)],
    InputType.URL: [('Generic URL', resolve_url)],
    InputType.TEXT: [],
}


def run_resolvers(resolvers: List[Tuple[str, Resolver]], source: str) -> Optional[SourceMetadata]:
    """
    Evaluate resolvers in order; first non-None result wins.

    A resolver that raises is treated like one that found nothing.
    """
    for name, resolver in resolvers:
        try:
            result = resolver(source)
        except Exception as e:
            print(f"[Router] {name} failed: {e}")
            result = None
        if result is not None:
            print(f"[Router] Resolved via {name}")
            return result
    return None


def resolve_metadata(source: str) -> Tuple[InputType, Optional[SourceMetadata]]:
    """
    Classify the input and run its resolver chain.

    Returns:
        (input_type, metadata or None). TEXT inputs always give None.
    """
    input_type = detect_input_type(source)
    return input_type, run_resolvers(RESOLVER_CHAINS[input_type], source)


# =============================================================================
# MAIN ROUTING FUNCTIONS
# =============================================================================

def _cite(metadata: SourceMetadata, today: date) -> Citations:
    """Stamp the access date and format all four styles."""
    metadata.access_date = format_long_date(today)
    return format_all_citations(metadata, format_short_date(today))


def _ai_fallback(
    source: str,
    today: date,
    ai_fallback: Optional[AIFallback],
) -> Citations:
    if ai_fallback is None:
        from gemini_router import gemini_generate_citations
        ai_fallback = gemini_generate_citations

    print(f"[Router] No structured data, falling back to AI for: {source[:80]}")
    try:
        return ai_fallback(source, format_long_date(today))
    except CitationError:
        raise
    except Exception as e:
        print(f"[Router] AI fallback error: {e}")
        raise CitationGenerationError() from e


def resolve(
    source: str,
    ai_fallback: Optional[AIFallback] = None,
    today: Optional[date] = None,
) -> ResolveResult:
    """
    Resolve a DOI, ISBN, YouTube link, Wikipedia link or URL into citations.

    1. Detect the input type
    2. Run the matching resolver chain
    3. Found: stamp access date, format all four styles
       Not found: hand the raw input to the AI fallback

    Free text is never resolved here; the result asks for a search instead.

    Args:
        source: Raw user input
        ai_fallback: (source, today_long) -> Citations; Gemini by default
        today: Access date override (tests)

    Raises:
        CitationInputError: empty source
        CitationGenerationError: nothing structured found and the AI fallback failed
    """
    clean_source = (source or '').strip()
    if not clean_source:
        raise CitationInputError("No source provided")

    input_type, metadata = resolve_metadata(clean_source)

    if input_type == InputType.TEXT:
        return ResolveResult(input_type=input_type, needs_search=True, message=NEEDS_SEARCH_MESSAGE)

    # Access date is taken now, after the provider round trip
    today = today or date.today()

    if metadata is None:
        citations = _ai_fallback(clean_source, today, ai_fallback)
        return ResolveResult(input_type=input_type, citations=citations, via_ai=True)

    return ResolveResult(
        input_type=input_type,
        citations=_cite(metadata, today),
        metadata=metadata,
    )


# =============================================================================
# SEARCH (free text -> ranked candidates)
# =============================================================================

def is_duplicate(a: SearchCandidate, b: SearchCandidate) -> bool:
    """
    Same title and same first author, both case-insensitive.
    Candidates without authors are never duplicates of anything.
    """
    if not a.first_author or not b.first_author:
        return False
    return (
        a.title.lower() == b.title.lower()
        and a.first_author.lower() == b.first_author.lower()
    )


def dedupe_candidates(candidates: List[SearchCandidate]) -> List[SearchCandidate]:
    """Drop later duplicates, keeping the first occurrence of each."""
    unique: List[SearchCandidate] = []
    for candidate in candidates:
        if not any(is_duplicate(kept, candidate) for kept in unique):
            unique.append(candidate)
    return unique


def rank_candidates(candidates: List[SearchCandidate]) -> List[SearchCandidate]:
    """Most complete first; ties keep their original order (stable sort)."""
    return sorted(candidates, key=lambda c: c.completeness, reverse=True)


def search_all_sources(query: str, limit: int = SEARCH_RESULT_LIMIT) -> List[SearchCandidate]:
    """
    Search Google Books and Open Library in parallel for user selection.

    Google Books results go first so they win ties in ranking.

    Args:
        query: Free-text query
        limit: Maximum candidates to return

    Returns:
        Deduplicated, ranked SearchCandidate list (may be empty)

    Raises:
        CitationInputError: empty query
    """
    clean_query = (query or '').strip()
    if not clean_query:
        raise CitationInputError("No query provided")

    google_results, open_lib_results = fetch_concurrently(
        (_get_engine('google_books').search_multiple, (clean_query,)),
        (_get_engine('open_library').search_multiple, (clean_query,)),
    )

    combined = list(google_results or []) + list(open_lib_results or [])
    results = rank_candidates(dedupe_candidates(combined))[:limit]
    print(f"[Search] '{clean_query[:50]}': {len(combined)} hits, {len(results)} returned")
    return results


# =============================================================================
# CITE A SELECTED CANDIDATE
# =============================================================================

def candidate_url(candidate: SearchCandidate) -> str:
    """Canonical URL for a candidate, derived from its provenance."""
    if candidate.source == SearchSource.GOOGLE_BOOKS:
        return GoogleBooksEngine.candidate_url(candidate)
    return OpenLibraryEngine.candidate_url(candidate)


def candidate_to_metadata(candidate: SearchCandidate) -> SourceMetadata:
    return SourceMetadata(
        id=candidate.id,
        title=candidate.title,
        authors=list(candidate.authors),
        site_name=candidate.publisher or '',
        publisher=candidate.publisher,
        year=candidate.year,
        url=candidate_url(candidate),
        source_type=candidate.source_type,
        source_engine=candidate.source.value,
    )


def resolve_selected(candidate: SearchCandidate, today: Optional[date] = None) -> ResolveResult:
    """
    Cite the search candidate the user picked.

    Raises:
        CitationInputError: no candidate given
    """
    if candidate is None:
        raise CitationInputError("No result provided")

    metadata = candidate_to_metadata(candidate)
    return ResolveResult(
        input_type=InputType.TEXT,
        citations=_cite(metadata, today or date.today()),
        metadata=metadata,
    )
