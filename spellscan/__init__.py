from .checker import Checker, Misspelling
from .data.options import FilterType, Options, guess_filter_type
from .data.wordlist import CapitalizationIndex
from .filters import new_filter

__all__ = [
    "Checker",
    "Misspelling",
    "FilterType",
    "Options",
    "guess_filter_type",
    "CapitalizationIndex",
    "new_filter",
]
