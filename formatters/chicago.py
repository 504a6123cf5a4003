"""
papercite/formatters/chicago.py

Chicago Manual of Style (17th ed.) citation formatter, bibliography form.
This is the default style for history and humanities.

Uses <i> tags for italics (Word-compatible).
"""

from formatters.base import BaseFormatter, register_formatter
from formatters.authors import format_author_mla
from models import SourceMetadata, CitationStyle


@register_formatter(CitationStyle.CHICAGO)
@register_formatter('Chicago Manual of Style')
@register_formatter('CMS')
class ChicagoFormatter(BaseFormatter):
    """
    Chicago Manual of Style formatter.

    Format patterns:
    - Encyclopedia: Site. "Title." Accessed Date. URL.
    - Book: Last, First. Title. Publisher, Year.
    - Video: Last, First. "Title." Video. Site, Month Day, Year. URL.
    - Article: Last, First. "Title." Journal, Year. URL.
    - Website: Last, First. "Title." Site, Month Day, Year. URL.
    """

    style = CitationStyle.CHICAGO

    def author_block(self, m: SourceMetadata) -> str:
        if not m.authors:
            return ""
        return self.terminate(format_author_mla(m.authors)) + " "

    def format_encyclopedia(self, m: SourceMetadata) -> str:
        return f"{self.italicize(m.site_name)}. {self.quoted_title(m.title)} Accessed {m.access_date}. {m.url}."

    def format_book(self, m: SourceMetadata) -> str:
        return (
            f"{self.author_block(m)}{self.end_title(m.title, italic=True)} "
            f"{self.publisher_or_site(m)}, {self.year_or_nd(m)}."
        )

    def format_video(self, m: SourceMetadata) -> str:
        return (
            f"{self.author_block(m)}{self.quoted_title(m.title)} Video. {self.italicize(m.site_name)}, "
            f"{self.date_month_day_year(m)}. {m.url}."
        )

    def format_article(self, m: SourceMetadata) -> str:
        return (
            f"{self.author_block(m)}{self.quoted_title(m.title)} {self.italicize(m.site_name)}, "
            f"{self.year_or_nd(m)}. {m.url}."
        )

    def format_website(self, m: SourceMetadata) -> str:
        return (
            f"{self.author_block(m)}{self.quoted_title(m.title)} {self.italicize(m.site_name)}, "
            f"{self.date_month_day_year(m)}. {m.url}."
        )
