from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional

from spylls.hunspell import Dictionary

from spellscan.data.options import FilterType, Options
from spellscan.data.wordlist import CapitalizationIndex
from spellscan.filters import PlainFilter, new_filter

log = logging.getLogger(__name__)


@dataclass
class Misspelling:
    """
    Word known neither to the spelling engine, nor to the user's word lists.
    """

    word: str
    #: 1-based number of the line
    line_no: int
    #: 0-based offset of the word in the line
    offset: int


class Checker:
    """
    The main interface to ``spellscan`` as a library: ties together the spelling engine, the
    filters, and the user's word lists.

    Usage::

        from spellscan import Checker, FilterType, Options

        options = Options(
            boundary_characters="'",
            tex_command_filter='cite OP, ref P, label P, emph p',
            tex_environment_filter='$ equation verbatim',
        )
        # Hunspell dictionary as a spelling engine, from folder where en_US.aff and en_US.dic are present
        checker = Checker.from_hunspell('/path/to/dictionary/en_US', options=options)
        checker.load_personal_dictionary('/home/me/.ispell_english')

        with open('paper.tex') as file:
            for misspelling in checker.misspellings(file, FilterType.TEX):
                print(misspelling.line_no, misspelling.offset, misspelling.word)
                print(checker.suggest(misspelling.word))

    Any object having ``lookup(word) -> bool`` method (and, optionally, ``suggest(word)``) can be
    used as the spelling engine. Without an engine, only the word lists are consulted.

    **Checker creation**

    .. automethod:: from_hunspell
    .. automethod:: from_system

    **Checking**

    .. automethod:: check_word
    .. automethod:: suggest
    .. automethod:: filter
    .. automethod:: misspellings

    **Word lists**

    .. automethod:: add_personal_word
    .. automethod:: add_session_word
    .. automethod:: load_personal_dictionary
    .. automethod:: save_personal_dictionary

    .. autoattribute:: personal
    .. autoattribute:: session
    """

    #: Words user added permanently, saved between sessions
    personal: CapitalizationIndex
    #: Words user accepted for the current session only
    session: CapitalizationIndex

    @classmethod
    def from_hunspell(cls, path: str, **kwargs) -> Checker:
        """
        Use Hunspell dictionary (pair of files ``/some/path/some_name.aff`` and ``/some/path/some_name.dic``)
        as a spelling engine, via `Spylls <https://github.com/zverok/spylls>`_.

        Args:
            path: Should be just ``/some/path/some_name``.
            kwargs: Passed to the constructor
        """
        return cls(Dictionary.from_files(path), **kwargs)

    @classmethod
    def from_system(cls, name: str, **kwargs) -> Checker:
        """
        Like :meth:`from_hunspell`, but looks for the dictionary in system folders.

        Args:
            name: Language/dictionary name, like ``en_US``

        Raises:
            LookupError: if the dictionary is not found
        """
        return cls(Dictionary.from_system(name), **kwargs)

    def __init__(self, engine: Any = None, *,
                 options: Optional[Options] = None,
                 personal: Optional[CapitalizationIndex] = None,
                 session: Optional[CapitalizationIndex] = None):
        self.engine = engine
        self.options = options or Options()
        self.personal = personal if personal is not None else CapitalizationIndex()
        self.session = session if session is not None else CapitalizationIndex()

    def check_word(self, word: str) -> bool:
        """
        Checks if the word is correct: either too short to bother (see
        :attr:`Options.legal_word_length <spellscan.data.options.Options.legal_word_length>`), or
        known to the engine, or to the personal or session word list.
        """
        if len(word) < self.options.legal_word_length:
            return True
        if self.engine is not None and self.engine.lookup(word):
            return True
        return word in self.personal or word in self.session

    def suggest(self, word: str) -> List[str]:
        """
        Suggestions for the misspelled word, best first. Empty if the engine doesn't suggest.
        """
        suggest = getattr(self.engine, 'suggest', None)
        if suggest is None:
            return []
        return list(suggest(word))

    def filter(self, filter_type: Optional[FilterType] = None) -> PlainFilter:
        """
        New filter of the given type, or of the default type from options.
        """
        return new_filter(filter_type or self.options.default_filter, self.options)

    def misspellings(self, lines: Iterable[str], filter_type: Optional[FilterType] = None) -> Iterator[Misspelling]:
        """
        Checks all the words in the text (sequence of lines, for example, opened file), yields the
        ones that are not correct.
        """
        text_filter = self.filter(filter_type)
        for line_no, line in enumerate(lines, start=1):
            line = line.rstrip('\r\n')
            text_filter.set_line(line)
            for span in text_filter.spans():
                word = span.of(line)
                if not self.check_word(word):
                    yield Misspelling(word, line_no, span.begin)

    def add_personal_word(self, word: str):
        self.personal.add(word)

    def add_session_word(self, word: str):
        self.session.add(word)

    def load_personal_dictionary(self, path: str) -> bool:
        """
        Load personal word list from the file. Absence of the file is normal (the user just hasn't
        added any words yet), so reading errors are logged, not raised.

        Returns:
            Whether the list was read
        """
        try:
            self.personal.load(path)
        except OSError as error:
            log.warning("Unable to read personal dictionary %s: %s", path, error)
            return False
        log.info("Loaded %d words from personal dictionary %s", len(self.personal), path)
        return True

    def save_personal_dictionary(self, path: str, *, force: bool = False) -> bool:
        """
        Save personal word list to the file, if it was changed.

        Returns:
            Whether the file was written

        Raises:
            OSError: if the file can't be written
        """
        if not force and not self.personal.changed:
            return False
        try:
            self.personal.save(path)
        except OSError as error:
            log.error("Unable to write personal dictionary %s: %s", path, error)
            raise
        return True
