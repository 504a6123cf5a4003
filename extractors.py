"""
papercite/extractors.py

Local extractors that don't require API calls.
These strip wrapper syntax from identifiers and build metadata from the URL
alone where the source needs no lookup.
"""

import re
from typing import Optional
from urllib.parse import unquote

from models import SourceMetadata, SourceType
from config import WIKIPEDIA_SITE_NAME, WIKIPEDIA_PUBLISHER


# =============================================================================
# IDENTIFIER EXTRACTORS
# =============================================================================

def extract_doi(text: str) -> str:
    """
    Strip DOI wrappers down to the bare identifier.

    Examples:
        https://doi.org/10.1000/xyz123 -> 10.1000/xyz123
        doi.org/10.1000/xyz123 -> 10.1000/xyz123
        10.1000/xyz123 -> 10.1000/xyz123
    """
    doi = text.strip()
    if 'doi.org/' in doi.lower():
        index = doi.lower().index('doi.org/')
        doi = doi[index + len('doi.org/'):]
    return re.sub(r'^https?://', '', doi, flags=re.IGNORECASE)


def extract_isbn(text: str) -> str:
    """Remove hyphens and whitespace: 978-0-13-468599-1 -> 9780134685991"""
    return re.sub(r'[-\s]', '', text)


# =============================================================================
# WIKIPEDIA EXTRACTOR
# =============================================================================

_WIKI_SLUG = re.compile(r'wikipedia\.org/wiki/([^#?]+)', re.IGNORECASE)


def extract_wikipedia(url: str) -> Optional[SourceMetadata]:
    """
    Build encyclopedia metadata from a Wikipedia article URL.

    The title comes from the URL slug (underscores to spaces, percent-decoded).
    Encyclopedia entries are cited by title, so authors stay empty.

    Returns:
        SourceMetadata, or None if the URL has no /wiki/<slug> path
    """
    match = _WIKI_SLUG.search(url)
    if not match:
        print(f"[Wikipedia] No article slug in: {url}")
        return None

    title = unquote(match.group(1).replace('_', ' ')).strip()

    return SourceMetadata(
        title=title,
        authors=[],
        site_name=WIKIPEDIA_SITE_NAME,
        publisher=WIKIPEDIA_PUBLISHER,
        url=url.strip(),
        source_type=SourceType.ENCYCLOPEDIA,
        source_engine="Wikipedia Extractor",
    )
