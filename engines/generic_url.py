"""
engines/generic_url.py

Generic URL metadata extraction via HTML scraping.

This engine fetches a URL and extracts metadata from:
1. Open Graph tags (og:title, og:site_name)
2. Standard meta tags (author, date, article:published_time, ...)
3. Fallback: <title>, hostname

This is the adapter for any URL that doesn't match a specialized handler.
"""

import re
from datetime import datetime, date
from email.utils import parsedate_to_datetime
from typing import Optional, List, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from engines.base import SearchEngine
from models import SourceMetadata, SourceType
from config import (
    BROWSER_HEADERS, DATE_META_TAGS, AUTHOR_META_TAGS, MONTH_NAMES, get_month_name,
)


# Tried after ISO 8601
DATE_FORMATS = [
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%B %d, %Y',
    '%b %d, %Y',
    '%d %B %Y',
    '%d %b %Y',
]


def parse_date(value: str) -> Optional[date]:
    """
    Parse a meta-tag date into a calendar date.

    Accepts ISO 8601 (with or without time / 'Z'), RFC 2822 and a few
    common written formats. Returns None when nothing matches.
    """
    value = (value or '').strip()
    if not value:
        return None

    iso = value[:-1] + '+00:00' if value.endswith('Z') else value
    try:
        return datetime.fromisoformat(iso).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(value).date()
    except (TypeError, ValueError, IndexError):
        return None


_PARTIAL_DATE = re.compile(r'^(\d{4})(?:[-/](\d{1,2}))?$')


def parse_date_parts(value: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """
    (year, month name, day) for a meta-tag date.

    '2020' and '2020-03' keep only the parts they carry; full dates go
    through parse_date(). Unparseable values give (None, None, None).
    """
    value = (value or '').strip()
    partial = _PARTIAL_DATE.match(value)
    if partial:
        month = get_month_name(partial.group(2)) if partial.group(2) else ''
        return partial.group(1), month or None, None

    parsed = parse_date(value)
    if parsed is None:
        return None, None, None
    return str(parsed.year), MONTH_NAMES[parsed.month - 1], str(parsed.day)


def hostname(url: str) -> str:
    """Hostname with a leading 'www.' stripped."""
    host = urlparse(url).netloc.lower()
    return host[4:] if host.startswith('www.') else host


class GenericURLEngine(SearchEngine):
    """
    Generic URL metadata extractor.

    Fetches any URL and extracts citation metadata from HTML meta tags,
    Open Graph tags, and the document title.
    """

    name = "Generic URL"
    headers = BROWSER_HEADERS

    def get_by_id(self, url: str) -> Optional[SourceMetadata]:
        """
        Fetch a URL and extract citation metadata.

        Returns:
            SourceMetadata, or None if the page could not be fetched
        """
        print(f"[{self.name}] Fetching: {url}")
        response = self._make_request(url)
        if response is None:
            return None
        return self.parse_html(response.text, url)

    def parse_html(self, html: str, url: str) -> SourceMetadata:
        """Extract title, date, author and site name from a page."""
        soup = BeautifulSoup(html, 'html.parser')
        for tag in soup(['script', 'style']):
            tag.decompose()

        title = self._meta_content(soup, 'og:title')
        if not title and soup.title and soup.title.string:
            title = soup.title.string.strip()

        year, month, day = parse_date_parts(self._first_meta(soup, DATE_META_TAGS) or '')

        author = self._first_meta(soup, AUTHOR_META_TAGS)

        return SourceMetadata(
            title=title or '',
            authors=[author] if author else [],
            site_name=self._meta_content(soup, 'og:site_name') or hostname(url),
            year=year,
            month=month,
            day=day,
            url=url,
            source_type=SourceType.WEBSITE,
            source_engine=self.name,
        )

    @staticmethod
    def _meta_content(soup: BeautifulSoup, key: str) -> Optional[str]:
        """content of <meta name=key> or <meta property=key>, case-insensitive."""
        key = key.lower()
        for meta in soup.find_all('meta'):
            names = (meta.get('name'), meta.get('property'), meta.get('itemprop'))
            if any(n and n.strip().lower() == key for n in names):
                content = (meta.get('content') or '').strip()
                if content:
                    return content
        return None

    def _first_meta(self, soup: BeautifulSoup, keys: List[str]) -> Optional[str]:
        for key in keys:
            value = self._meta_content(soup, key)
            if value:
                return value
        return None
