"""
papercite/formatters/authors.py

Author-name rules shared by the style formatters.

Names arrive either in display order ("Jane Mary Doe") or already inverted
("Doe, Jane Mary", as Crossref gives them). Both forms split into the same
(family, given-tokens) pair.
"""

from typing import List, Tuple

from config import UNKNOWN_AUTHOR


def split_name(name: str) -> Tuple[str, List[str]]:
    """
    Split a name into (family, given tokens).

    'Jane Mary Doe' -> ('Doe', ['Jane', 'Mary'])
    'Doe, Jane Mary' -> ('Doe', ['Jane', 'Mary'])
    'Plato' -> ('Plato', [])
    """
    if ',' in name:
        family, _, given = name.partition(',')
        return family.strip(), given.split()
    parts = name.split()
    if len(parts) <= 1:
        return name.strip(), []
    return parts[-1], parts[:-1]


def _apa_name(name: str) -> str:
    family, given = split_name(name)
    if not given:
        return name.strip()
    initials = " ".join(f"{token[0].upper()}." for token in given)
    return f"{family}, {initials}"


def _inverted_name(name: str) -> str:
    family, given = split_name(name)
    if not given:
        return name.strip()
    return f"{family}, {' '.join(given)}"


def format_author_apa(authors: List[str]) -> str:
    """
    APA: Last, F. M., & Last, F.

    ['Jane Mary Doe'] -> 'Doe, J. M.'
    ['A B', 'C D'] -> 'B, A., & D, C.'
    """
    if not authors:
        return UNKNOWN_AUTHOR

    formatted = [_apa_name(name) for name in authors]
    if len(formatted) == 1:
        return formatted[0]
    return f"{', '.join(formatted[:-1])}, & {formatted[-1]}"


def format_author_mla(authors: List[str]) -> str:
    """
    MLA: first author inverted, second as given, et al. from three on.

    ['Jane Doe'] -> 'Doe, Jane'
    ['Jane Doe', 'John Roe'] -> 'Doe, Jane, and John Roe'
    ['Jane Doe', 'John Roe', 'Ann Poe'] -> 'Doe, Jane, et al.'
    """
    if not authors:
        return UNKNOWN_AUTHOR

    first = _inverted_name(authors[0])
    if len(authors) == 1:
        return first
    if len(authors) == 2:
        return f"{first}, and {authors[1]}"
    return f"{first}, et al."
