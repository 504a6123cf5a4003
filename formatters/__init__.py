"""
papercite/formatters/__init__.py

Citation formatters package.
"""

from formatters.base import (
    BaseFormatter,
    register_formatter,
    get_formatter,
    format_citation,
    format_all_citations,
)
from formatters.authors import format_author_apa, format_author_mla
from formatters.apa import APAFormatter
from formatters.mla import MLAFormatter
from formatters.chicago import ChicagoFormatter
from formatters.harvard import HarvardFormatter

__all__ = [
    'BaseFormatter',
    'register_formatter',
    'get_formatter',
    'format_citation',
    'format_all_citations',
    'format_author_apa',
    'format_author_mla',
    'APAFormatter',
    'MLAFormatter',
    'ChicagoFormatter',
    'HarvardFormatter',
]
