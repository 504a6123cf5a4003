"""
papercite/formatters/base.py

Base citation formatter and style router.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models import SourceMetadata, SourceType, CitationStyle, Citations
from config import NO_DATE, MLA_MONTH_ABBREVIATIONS


TERMINAL_PUNCTUATION = ('.', '?', '!')


class BaseFormatter(ABC):
    """
    Abstract base class for citation formatters.

    Each style (APA, MLA, Chicago, Harvard) implements this interface.
    Subclasses must implement a format method for each source type.
    """

    style: CitationStyle = CitationStyle.APA7

    def format(self, metadata: SourceMetadata, access_date_short: Optional[str] = None) -> str:
        """
        Main entry point - routes to type-specific formatter.

        access_date_short is only used by styles that print a short access
        date (MLA); the others read metadata.access_date.
        """
        self.access_date_short = access_date_short or metadata.access_date

        formatters = {
            SourceType.ENCYCLOPEDIA: self.format_encyclopedia,
            SourceType.BOOK: self.format_book,
            SourceType.VIDEO: self.format_video,
            SourceType.ARTICLE: self.format_article,
            SourceType.WEBSITE: self.format_website,
        }
        return formatters[metadata.source_type](metadata)

    # =========================================================================
    # ABSTRACT METHODS - Must be implemented by each style
    # =========================================================================

    @abstractmethod
    def format_encyclopedia(self, m: SourceMetadata) -> str:
        """Format an encyclopedia entry citation."""
        pass

    @abstractmethod
    def format_book(self, m: SourceMetadata) -> str:
        """Format a book citation."""
        pass

    @abstractmethod
    def format_video(self, m: SourceMetadata) -> str:
        """Format an online video citation."""
        pass

    @abstractmethod
    def format_article(self, m: SourceMetadata) -> str:
        """Format a journal article citation."""
        pass

    @abstractmethod
    def format_website(self, m: SourceMetadata) -> str:
        """Format a web page citation."""
        pass

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @staticmethod
    def italicize(text: str) -> str:
        """Wrap text in <i> tags for italics (Word-compatible)."""
        return f"<i>{text}</i>" if text else ""

    @staticmethod
    def quote(text: str) -> str:
        """Wrap text in quotation marks."""
        return f'"{text}"' if text else ""

    @staticmethod
    def terminate(text: str) -> str:
        """Append a period unless the text already ends with . ? or !"""
        return text if text.endswith(TERMINAL_PUNCTUATION) else text + "."

    def end_title(self, title: str, italic: bool = False) -> str:
        """
        Title followed by its period: <i>Title</i>. / Title.

        A title ending in ? or ! keeps its own mark: <i>Why?</i>
        """
        rendered = self.italicize(title) if italic else title
        return rendered if title.endswith(TERMINAL_PUNCTUATION) else rendered + "."

    def quoted_title(self, title: str) -> str:
        """Quoted title, period inside the quotes unless it ends in ? or !"""
        return self.quote(self.terminate(title))

    @staticmethod
    def year_or_nd(m: SourceMetadata) -> str:
        return m.year or NO_DATE

    @staticmethod
    def publisher_or_site(m: SourceMetadata) -> str:
        return m.publisher or m.site_name

    @staticmethod
    def date_day_month_year(m: SourceMetadata) -> str:
        """MLA order: 5 Mar. 2020 / Mar. 2020 / 2020 / n.d."""
        if not m.year:
            return NO_DATE
        if not m.month:
            return m.year
        month = MLA_MONTH_ABBREVIATIONS.get(m.month, m.month)
        if m.day:
            return f"{m.day} {month} {m.year}"
        return f"{month} {m.year}"

    @staticmethod
    def date_month_day_year(m: SourceMetadata) -> str:
        """Chicago order: March 5, 2020 / March 2020 / 2020 / n.d."""
        if not m.year:
            return NO_DATE
        if not m.month:
            return m.year
        if m.day:
            return f"{m.month} {m.day}, {m.year}"
        return f"{m.month} {m.year}"


# =============================================================================
# FORMATTER REGISTRY
# =============================================================================

_formatters = {}


def register_formatter(style):
    """
    Decorator to register a formatter class.

    Can be used with CitationStyle enum or string:
        @register_formatter(CitationStyle.APA7)
        @register_formatter('APA 7')
        class APAFormatter: ...
    """
    def decorator(cls):
        # Normalize the key
        if isinstance(style, CitationStyle):
            key = style.value.lower()
        else:
            key = str(style).lower()
        _formatters[key] = cls
        return cls
    return decorator


def get_formatter(style) -> BaseFormatter:
    """
    Get formatter instance for a style.

    Accepts CitationStyle enum or string.

    Args:
        style: CitationStyle enum or string (e.g., 'APA 7', 'Harvard')

    Returns:
        Formatter instance
    """
    if isinstance(style, CitationStyle):
        key = style.value.lower()
    else:
        key = str(style).lower().strip()

    formatter_cls = _formatters.get(key)
    if formatter_cls is None:
        formatter_cls = _formatters[CitationStyle.from_string(key).value]
    return formatter_cls()


def format_citation(
    metadata: SourceMetadata,
    style=CitationStyle.APA7,
    access_date_short: Optional[str] = None,
) -> str:
    """
    Format a citation using the specified style.

    Args:
        metadata: SourceMetadata to format
        style: Citation style to use (CitationStyle enum or string)
        access_date_short: Short access date for MLA ("17 Oct 2026")

    Returns:
        Formatted citation string
    """
    return get_formatter(style).format(metadata, access_date_short)


def format_all_citations(metadata: SourceMetadata, access_date_short: Optional[str] = None) -> Citations:
    """Format one record in all four styles."""
    return Citations(
        apa7=format_citation(metadata, CitationStyle.APA7, access_date_short),
        mla9=format_citation(metadata, CitationStyle.MLA9, access_date_short),
        chicago=format_citation(metadata, CitationStyle.CHICAGO, access_date_short),
        harvard=format_citation(metadata, CitationStyle.HARVARD, access_date_short),
    )
