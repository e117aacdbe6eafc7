"""
Deciding which characters make up words.

.. autoclass:: CharacterClassifier
    :members:
"""

from typing import Iterable


class CharacterClassifier:
    """
    Pure lookup of character classes, shared by all the filters.

    * *word characters* are all alphabetic characters, plus the configured extra ones (for example,
      ``-w`` option of ispell, or word characters of the dictionary entry);
    * *boundary characters* may appear inside the word, but only between two word characters (the
      typical example is apostrophe: ``it's`` is one word, but ``'quoted'`` is not).

    ::

        >>> classifier = CharacterClassifier(boundary_characters="'")
        >>> classifier.is_word_char('a'), classifier.is_word_char("'")
        (True, False)
        >>> classifier.is_boundary_char("'")
        True

    Args:
        word_characters: Additional characters considered parts of the words
        boundary_characters: Characters allowed between word characters
    """

    def __init__(self, word_characters: Iterable[str] = '', boundary_characters: Iterable[str] = ''):
        self.word_characters = frozenset(word_characters)
        self.boundary_characters = frozenset(boundary_characters)

    def is_word_char(self, char: str) -> bool:
        return char.isalpha() or char in self.word_characters

    def is_boundary_char(self, char: str) -> bool:
        return char in self.boundary_characters

    def __repr__(self):
        return (f'CharacterClassifier(word_characters={"".join(sorted(self.word_characters))!r}, '
                f'boundary_characters={"".join(sorted(self.boundary_characters))!r})')
