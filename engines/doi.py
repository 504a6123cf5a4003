"""
engines/doi.py

Direct DOI lookup against Crossref.

The DOI is extracted from whatever the user pasted (bare DOI or doi.org link)
and the work record is fetched from Crossref's REST API.
"""

from typing import Optional, Dict, Any, List
from urllib.parse import quote

from engines.base import SearchEngine
from models import SourceMetadata, SourceType
from config import CROSSREF_WORKS_URL, DOI_RESOLVER_URL, get_month_name


# Crossref date fields, most preferred first
DATE_FIELDS = ['published', 'published-online', 'published-print']


class CrossrefEngine(SearchEngine):
    """
    Crossref works API.

    Best for:
    - DOI lookups (journal articles, conference papers)
    """

    name = "Crossref"
    base_url = CROSSREF_WORKS_URL

    def get_by_id(self, doi: str) -> Optional[SourceMetadata]:
        if not doi:
            return None

        print(f"[{self.name}] Fetching: {doi}")
        data = self._get_json(f"{self.base_url}/{quote(doi, safe='')}")
        if not isinstance(data, dict):
            return None

        work = data.get('message')
        if not isinstance(work, dict) or not work:
            print(f"[{self.name}] Empty record for {doi}")
            return None

        metadata = normalize_crossref(work, doi)
        print(f"[{self.name}] Found: {metadata.title[:50]}")
        return metadata


def _first(values: Any) -> str:
    """Crossref wraps most strings in single-element lists."""
    if isinstance(values, list) and values:
        return str(values[0] or '')
    if isinstance(values, str):
        return values
    return ''


def _date_parts(work: Dict[str, Any]) -> List[Any]:
    """First date-parts row from the preferred date field that has one."""
    for key in DATE_FIELDS:
        field = work.get(key)
        if not isinstance(field, dict):
            continue
        rows = field.get('date-parts') or []
        if rows and isinstance(rows[0], list) and rows[0] and rows[0][0] is not None:
            return rows[0]
    return []


def _format_author(author: Dict[str, Any]) -> str:
    """'Family, Given', or whichever half exists."""
    family = (author.get('family') or '').strip()
    given = (author.get('given') or '').strip()
    if family and given:
        return f"{family}, {given}"
    return family or given or (author.get('name') or '').strip()


def normalize_crossref(work: Dict[str, Any], doi: str) -> SourceMetadata:
    """
    Normalize a Crossref work record to SourceMetadata.

    Args:
        work: The 'message' object of the Crossref response
        doi: The DOI that was looked up

    Returns:
        SourceMetadata with type ARTICLE
    """
    authors = [_format_author(a) for a in work.get('author') or [] if isinstance(a, dict)]

    parts = _date_parts(work)
    year = str(parts[0]) if len(parts) > 0 else None
    # Crossref pads missing components with null
    month = get_month_name(parts[1]) if len(parts) > 1 and parts[1] else None
    day = str(parts[2]) if len(parts) > 2 and parts[2] and month else None

    publisher = work.get('publisher') or None
    container = _first(work.get('container-title'))

    return SourceMetadata(
        title=_first(work.get('title')),
        authors=authors,
        site_name=container or publisher or '',
        publisher=publisher,
        year=year,
        month=month or None,
        day=day,
        url=f"{DOI_RESOLVER_URL}/{doi}",
        source_type=SourceType.ARTICLE,
        source_engine="Crossref (DOI Direct)",
    )
