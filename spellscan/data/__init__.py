from . import options, wordlist

__all__ = [
    "options",
    "wordlist",
]
