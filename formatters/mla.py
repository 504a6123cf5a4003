"""
papercite/formatters/mla.py

MLA 9th Edition formatter.

MLA style characteristics:
- Author last name first for first author only
- Title in quotes for articles, videos and web pages, italics for books
- Container (journal, site) in italics
- Date after the container
- URL, then access date, at the end
"""

from formatters.base import BaseFormatter, register_formatter
from formatters.authors import format_author_mla
from models import SourceMetadata, CitationStyle


@register_formatter(CitationStyle.MLA9)
@register_formatter('MLA')
@register_formatter('MLA 9')
class MLAFormatter(BaseFormatter):
    """MLA 9th Edition citation formatter."""

    style = CitationStyle.MLA9

    def author_block(self, m: SourceMetadata) -> str:
        """'Doe, Jane. ' or nothing; MLA leads with the title when there's no author."""
        if not m.authors:
            return ""
        return self.terminate(format_author_mla(m.authors)) + " "

    def _container_entry(self, m: SourceMetadata) -> str:
        """
        Pattern:
        Last, First. "Title." Site, Day Mon. Year, URL. Accessed Date.
        """
        return (
            f"{self.author_block(m)}{self.quoted_title(m.title)} {self.italicize(m.site_name)}, "
            f"{self.date_day_month_year(m)}, {m.url}. Accessed {self.access_date_short}."
        )

    def format_encyclopedia(self, m: SourceMetadata) -> str:
        return (
            f"{self.quoted_title(m.title)} {self.italicize(m.site_name)}, {self.date_day_month_year(m)}, "
            f"{m.url}. Accessed {self.access_date_short}."
        )

    def format_book(self, m: SourceMetadata) -> str:
        """
        Pattern:
        Last, First. Title of Book. Publisher, Year.
        """
        return (
            f"{self.author_block(m)}{self.end_title(m.title, italic=True)} "
            f"{self.publisher_or_site(m)}, {self.year_or_nd(m)}."
        )

    def format_video(self, m: SourceMetadata) -> str:
        return self._container_entry(m)

    def format_article(self, m: SourceMetadata) -> str:
        return self._container_entry(m)

    def format_website(self, m: SourceMetadata) -> str:
        return self._container_entry(m)
