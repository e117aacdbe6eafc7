"""
Filters: extracting the words that should be spell-checked from the lines of text in different
document formats.

.. autofunction:: new_filter
"""

from typing import Optional

from spellscan.data.options import FilterType, Options

from .plain import PlainFilter, WordSpan
from .tex import TeXFilter
from .sgml import SGMLFilter
from .nroff import NroffFilter

FILTERS = {
    FilterType.PLAIN: PlainFilter,
    FilterType.TEX: TeXFilter,
    FilterType.SGML: SGMLFilter,
    FilterType.NROFF: NroffFilter,
}


def new_filter(filter_type: Optional[FilterType], options: Optional[Options] = None) -> PlainFilter:
    """
    Create filter of the given type. Unknown type (or ``None``) produces plain text filter.

    Args:
        filter_type: Document format
        options: Character tables and dialect settings
    """
    return FILTERS.get(filter_type, PlainFilter)(options or Options())


__all__ = [
    "new_filter",
    "PlainFilter",
    "TeXFilter",
    "SGMLFilter",
    "NroffFilter",
    "WordSpan",
]
