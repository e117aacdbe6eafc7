"""
Capitalization classes of the words stored in personal and session word lists.

.. autoclass:: Type

.. autofunction:: guess
.. autofunction:: fold
.. autofunction:: coerce
.. autofunction:: compatible
"""

from enum import Enum


Type = Enum('Type', 'LOWER UPPER INIT OTHER')
"""
Type of capitalization, detected by :func:`guess`:

* ``LOWER``: all lowercase ("paris")
* ``UPPER``: all uppercase ("PARIS"), including single uppercase letter ("A")
* ``INIT``: titlecase, only initial letter is capitalized ("Paris")
* ``OTHER``: everything else: mixed capitalization ("McDonald", "iPhone"), digits, empty word
"""


def guess(word: str) -> Type:
    """
    Guess word's capitalization.

    Note that it is intentionally stricter than ``str.islower()``/``str.isupper()``: any character
    which is neither lowercase nor uppercase letter (digit, apostrophe, hyphen) makes word ``OTHER``,
    unless it is the first character.

    ::

        >>> guess('paris'), guess('Paris'), guess('PARIS'), guess('PaRis')
        (<Type.LOWER: 1>, <Type.INIT: 3>, <Type.UPPER: 2>, <Type.OTHER: 4>)
    """

    if not word:
        return Type.OTHER

    if word[0].isupper():
        rest = word[1:]
        if not rest:
            return Type.UPPER
        if rest[0].islower():
            return Type.INIT if _all(rest, str.islower) else Type.OTHER
        if rest[0].isupper():
            return Type.UPPER if _all(rest, str.isupper) else Type.OTHER
        return Type.OTHER

    return Type.LOWER if _all(word, str.islower) else Type.OTHER


def fold(word: str, captype: Type) -> str:
    """
    Storage form of the word: words with "regular" capitalization are stored lowercase, as the
    capitalization type is enough to restore them, ``OTHER`` words are stored as is.
    """
    if captype in (Type.OTHER, Type.LOWER):
        return word
    return ''.join(_lower_char(char) for char in word)


def coerce(stem: str, captype: Type) -> str:
    """
    Reverse of :func:`fold`: render stored stem in its display form.

    Both work char by char, and leave alone the chars that have no one-char counterpart in the
    other case (like "İ" which lowercases to "i" + combining dot, or "ß" which uppercases to
    "SS"), so ``coerce(fold(word, captype), captype) == word`` for any word of ``captype``.
    """
    if captype == Type.UPPER:
        return ''.join(_upper_char(char) for char in stem)
    if captype == Type.INIT:
        return _upper_char(stem[:1]) + stem[1:]
    return stem


def compatible(stored: Type, queried: Type) -> bool:
    """
    Whether the word stored with ``stored`` capitalization accepts the same word written with
    ``queried`` capitalization. All-lowercase words match also the capitalized and fully uppercase
    forms ("paris" accepts "Paris" and "PARIS"), everything else only matches itself ("Paris" does
    not accept "paris" or "PARIS").
    """
    if stored == queried:
        return True
    return stored == Type.LOWER and queried in (Type.UPPER, Type.INIT)


def _all(text, predicate):
    return all(predicate(char) for char in text)


def _lower_char(char):
    lower = char.lower()
    return lower if len(lower) == 1 and lower.upper() == char else char


def _upper_char(char):
    upper = char.upper()
    return upper if len(upper) == 1 else char
