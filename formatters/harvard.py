"""
papercite/formatters/harvard.py

Harvard (author-date) citation formatter.
Common in UK and Australian universities.

Uses <i> tags for italics (Word-compatible).
"""

from formatters.base import BaseFormatter, register_formatter
from formatters.authors import format_author_apa
from models import SourceMetadata, CitationStyle
from config import UNKNOWN_AUTHOR


@register_formatter(CitationStyle.HARVARD)
@register_formatter('Harvard Referencing')
class HarvardFormatter(BaseFormatter):
    """
    Harvard formatter.

    Format patterns:
    - Encyclopedia: Site (Year) Title. Available at: URL (Accessed: Date).
    - Book: Author, A. (Year) Title. Publisher.
    - Video: Channel (Year) Title [Video]. Available at: URL (Accessed: Date).
    - Article: Author, A. (Year) Title. Journal. Available at: URL (Accessed: Date).
    - Website: Author, A. (Year) Title, Site. Available at: URL (Accessed: Date).
    """

    style = CitationStyle.HARVARD

    def availability(self, m: SourceMetadata) -> str:
        return f"Available at: {m.url} (Accessed: {m.access_date})."

    def format_encyclopedia(self, m: SourceMetadata) -> str:
        return f"{self.italicize(m.site_name)} ({self.year_or_nd(m)}) {self.end_title(m.title)} {self.availability(m)}"

    def format_book(self, m: SourceMetadata) -> str:
        return (
            f"{format_author_apa(m.authors)} ({self.year_or_nd(m)}) {self.end_title(m.title, italic=True)} "
            f"{self.terminate(self.publisher_or_site(m))}"
        )

    def format_video(self, m: SourceMetadata) -> str:
        author = ", ".join(m.authors) if m.authors else UNKNOWN_AUTHOR
        return f"{author} ({self.year_or_nd(m)}) {self.italicize(m.title)} [Video]. {self.availability(m)}"

    def format_article(self, m: SourceMetadata) -> str:
        return (
            f"{format_author_apa(m.authors)} ({self.year_or_nd(m)}) {self.end_title(m.title)} "
            f"{self.italicize(m.site_name)}. {self.availability(m)}"
        )

    def format_website(self, m: SourceMetadata) -> str:
        author = format_author_apa(m.authors) if m.authors else m.site_name
        return (
            f"{author} ({self.year_or_nd(m)}) {self.italicize(m.title)}, {m.site_name}. "
            f"{self.availability(m)}"
        )
