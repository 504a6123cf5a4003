"""
papercite/formatters/apa.py

APA 7th Edition citation formatter.
Common in psychology, education, and social sciences.

Uses <i> tags for italics (Word-compatible).
"""

from formatters.base import BaseFormatter, register_formatter
from formatters.authors import format_author_apa
from models import SourceMetadata, CitationStyle
from config import NO_DATE, UNKNOWN_AUTHOR


@register_formatter(CitationStyle.APA7)
@register_formatter('APA')
@register_formatter('APA 7')
class APAFormatter(BaseFormatter):
    """
    APA 7th Edition formatter.

    Format patterns:
    - Encyclopedia: Title. (Year). In Site. Retrieved Date, from URL
    - Book: Author, A. A. (Year). Title. Publisher.
    - Video: Channel (Year, Month Day). Title [Video]. Site. URL
    - Article: Author, A. A. (Year). Title. Journal. URL
    - Website: Author, A. A. (Year, Month Day). Title. Site. URL
    """

    style = CitationStyle.APA7

    @staticmethod
    def year_date(m: SourceMetadata) -> str:
        return f"({m.year or NO_DATE})"

    @staticmethod
    def full_date(m: SourceMetadata) -> str:
        """(2020, March 5) / (2020, March) / (2020) / (n.d.)"""
        if not m.year:
            return f"({NO_DATE})"
        if not m.month:
            return f"({m.year})"
        if m.day:
            return f"({m.year}, {m.month} {m.day})"
        return f"({m.year}, {m.month})"

    def format_encyclopedia(self, m: SourceMetadata) -> str:
        return (
            f"{self.end_title(m.title)} {self.year_date(m)}. In {self.italicize(m.site_name)}. "
            f"Retrieved {m.access_date}, from {m.url}"
        )

    def format_book(self, m: SourceMetadata) -> str:
        author = format_author_apa(m.authors)
        return (
            f"{author} {self.year_date(m)}. {self.end_title(m.title, italic=True)} "
            f"{self.terminate(self.publisher_or_site(m))}"
        )

    def format_video(self, m: SourceMetadata) -> str:
        # Channel names are not personal names; keep them as given
        author = ", ".join(m.authors) if m.authors else UNKNOWN_AUTHOR
        return f"{author} {self.full_date(m)}. {self.italicize(m.title)} [Video]. {m.site_name}. {m.url}"

    def format_article(self, m: SourceMetadata) -> str:
        author = format_author_apa(m.authors)
        return f"{author} {self.year_date(m)}. {self.end_title(m.title)} {self.italicize(m.site_name)}. {m.url}"

    def format_website(self, m: SourceMetadata) -> str:
        """
        No byline: the site stands in as author and is not repeated
        after the title.
        """
        author = format_author_apa(m.authors) if m.authors else m.site_name
        parts = [f"{author} {self.full_date(m)}.", self.end_title(m.title, italic=True)]
        if author != m.site_name:
            parts.append(f"{m.site_name}.")
        parts.append(m.url)
        return " ".join(parts)
