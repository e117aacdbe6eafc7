"""
Plain text filter, and the base of all other filters.

Every filter works line by line: the caller sets the current line, and then repeatedly asks for
the next word, until there are none::

    filter = new_filter(FilterType.PLAIN, Options(boundary_characters="'"))

    filter.set_line("It's a plain text")
    span = filter.get_next_word()
    while span is not None:
        print(span.of(filter.line))
        span = filter.get_next_word()
    # It's
    # a
    # plain
    # text

The state of the filter is the cursor (integer offset into the line), plus whatever dialect-specific
state subclasses have. Note that subclass state (like TeX environments) is *sticky*, it persists
between lines, because the document structure spans many lines.

The line is never copied, and never changed by the filter. If the caller changes the line (for
example, replaces a misspelled word with correction), it should set the new line and restore the
cursor with :meth:`PlainFilter.reset`.

.. autoclass:: WordSpan

.. autoclass:: PlainFilter
    :members:
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from spellscan.algo.charclass import CharacterClassifier
from spellscan.data.options import Options


@dataclass(frozen=True)
class WordSpan:
    """
    Word found by the filter: ``line[begin:end]``.
    """

    begin: int
    end: int

    def of(self, line: str) -> str:
        return line[self.begin:self.end]


class PlainFilter:
    """
    Just splits the text into words.

    Word is the maximal run of word characters, where boundary characters are included if they
    are *between* two word characters. So, with ``'`` being a boundary character, ``'it's'`` is
    split into (quotes excluded) ``it's``; without it, into ``it`` and ``s``.

    Subclasses redefine :meth:`get_next_word` and call ``super().get_next_word()`` when the
    cursor is at the word that should be checked.
    """

    def __init__(self, options: Optional[Options] = None):
        options = options or Options()
        self.classifier = CharacterClassifier(
            word_characters=options.extra_word_characters + options.word_characters,
            boundary_characters=options.boundary_characters
        )
        self.line = ''
        self.pos = 0

    def set_line(self, line: str):
        """
        Set the new line to filter, and put the cursor to its beginning.
        """
        self.line = line
        self.pos = 0

    def reset(self, pos: int = 0):
        """
        Move cursor to the specified offset in the current line.
        """
        self.pos = max(0, min(pos, len(self.line)))

    def get_next_word(self) -> Optional[WordSpan]:
        """
        Returns the next word to check, or ``None`` if there are no more words in the line.
        """
        self.skip_non_word_characters()
        begin = self.pos
        self.skip_over_word()
        if begin == self.pos:
            return None
        return WordSpan(begin, self.pos)

    def spans(self) -> Iterator[WordSpan]:
        """
        All remaining words of the current line.
        """
        span = self.get_next_word()
        while span is not None:
            yield span
            span = self.get_next_word()

    def words(self, line: str) -> Iterator[str]:
        """
        Shortcut for setting the line and fetching all of its words' texts.
        """
        self.set_line(line)
        for span in self.spans():
            yield span.of(line)

    # Cursor movement helpers, used by all the filters

    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    def current(self) -> str:
        return '' if self.at_end() else self.line[self.pos]

    def is_at(self, text: str) -> bool:
        return self.line.startswith(text, self.pos)

    def is_at_word(self) -> bool:
        return not self.at_end() and self.classifier.is_word_char(self.line[self.pos])

    def is_at_boundary(self) -> bool:
        return not self.at_end() and self.classifier.is_boundary_char(self.line[self.pos])

    def skip(self, count: int = 1):
        self.pos = min(self.pos + count, len(self.line))

    def skip_while(self, predicate):
        while not self.at_end() and predicate(self.line[self.pos]):
            self.pos += 1

    def skip_whitespace(self):
        self.skip_while(str.isspace)

    def skip_non_whitespace(self):
        self.skip_while(lambda char: not char.isspace())

    def skip_non_word_characters(self):
        self.skip_while(lambda char: not self.classifier.is_word_char(char))

    def skip_over_word(self):
        """
        Skip word characters, and boundary characters between them.
        """
        while True:
            self.skip_while(self.classifier.is_word_char)
            # boundary char is a part of the word only if the word continues after it
            if not self.is_at_boundary() or self.pos + 1 >= len(self.line):
                break
            if not self.classifier.is_word_char(self.line[self.pos + 1]):
                break
            self.pos += 1
