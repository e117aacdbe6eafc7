"""
Personal and session word lists: words the user told to accept.

Words are stored with their capitalization in mind: the user adding "paris" most probably wants
"Paris" at the beginning of the sentence and "PARIS" in the headline to be accepted too; but the
user adding "Paris" or "NATO" doesn't want "paris" or "nato" to be accepted. See
:func:`capitalization.compatible <spellscan.algo.capitalization.compatible>` for the exact rule.

On disk, the word list is just a text file with one word per line, in its display form::

    >>> index = CapitalizationIndex.from_file('/home/me/.ispell_english')
    >>> 'Paris' in index
    True
    >>> index.add('NATO')
    >>> index.save('/home/me/.ispell_english')

``CapitalizationIndex``
-----------------------

.. autoclass:: CapitalizationIndex

``CapitalizedWord``
-------------------

.. autoclass:: CapitalizedWord
"""

from __future__ import annotations

import logging

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterator, List

from spellscan.algo import capitalization as cap
from spellscan.algo.capitalization import Type as CapType
from spellscan.readers.file_reader import FileReader
from spellscan.readers.wordlist import read_wordlist

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapitalizedWord:
    """
    One word of the list, in storage form: "folded" stem and its capitalization type. For example,
    "Paris" is stored as ``CapitalizedWord(INIT, 'paris')``, while "McDonald" is
    ``CapitalizedWord(OTHER, 'McDonald')``, because there is no way to restore its capitalization
    from type.
    """

    captype: CapType
    stem: str

    @classmethod
    def from_word(cls, word: str) -> CapitalizedWord:
        captype = cap.guess(word)
        return cls(captype, cap.fold(word, captype))

    def display(self) -> str:
        """
        Word with its proper capitalization restored.
        """
        return cap.coerce(self.stem, self.captype)

    def __repr__(self):
        return f'CapitalizedWord({self.display()})'


class CapitalizationIndex:
    """
    Set of words, supporting case-aware membership check.

    Words are grouped by their storage stem (like "Paris" and "paris" are both stored under
    "paris"), so the lookup just checks the capitalization types of all the words under the same
    stem. Iteration goes in stem order.

    Note that it is not a plain set of folded words: the same stem may be stored with several
    capitalizations at once. After adding "Paris" and then "paris", both are kept (and both are
    saved), instead of the first one winning. :meth:`remove` drops all the capitalizations of the
    stem.

    **Changing**

    .. automethod:: add
    .. automethod:: remove
    .. automethod:: clear
    .. autoattribute:: changed

    **Querying**

    .. automethod:: __contains__
    .. automethod:: words

    **Reading and writing**

    .. automethod:: from_file
    .. automethod:: load
    .. automethod:: merge
    .. automethod:: save
    """

    #: Whether the list was changed since it was loaded or saved
    changed: bool

    def __init__(self, words=()):
        self.index: Dict[str, List[CapitalizedWord]] = defaultdict(list)
        for word in words:
            self._insert(word)
        self.changed = False

    @classmethod
    def from_file(cls, path: str) -> CapitalizationIndex:
        """
        Read the word list from the file (one word per line, in UTF-8).

        Raises:
            OSError: if the file can't be read
        """
        index = cls()
        index.load(path)
        return index

    def add(self, word: str):
        self._insert(word)
        self.changed = True

    def remove(self, word: str):
        """
        Remove the word, along with all of its other capitalizations: removing "paris" will also
        remove "Paris", if it was stored separately.
        """
        self.index.pop(CapitalizedWord.from_word(word).stem, None)
        self.changed = True

    def clear(self):
        self.index.clear()
        self.changed = True

    def __contains__(self, word: str) -> bool:
        """
        Checks if the word is in list (considering capitalization rules)::

            >>> index = CapitalizationIndex(['paris', 'NATO'])
            >>> 'PARIS' in index, 'Nato' in index, 'nato' in index
            (True, False, False)
        """
        query = CapitalizedWord.from_word(word)
        return any(cap.compatible(stored.captype, query.captype) for stored in self.homonyms(query.stem))

    def contains(self, word: str) -> bool:
        return word in self

    def homonyms(self, stem: str) -> List[CapitalizedWord]:
        """
        All the stored words with the same stem.
        """
        return self.index.get(stem, [])

    def __iter__(self) -> Iterator[CapitalizedWord]:
        for stem in sorted(self.index):
            yield from sorted(self.index[stem], key=lambda word: word.captype.value)

    def __len__(self):
        return sum(len(words) for words in self.index.values())

    def words(self) -> Iterator[str]:
        """
        All the words in display form.
        """
        return (word.display() for word in self)

    def load(self, path: str):
        """
        Replace the content of the list with the words from file.
        """
        self.index.clear()
        self.merge(path)
        self.changed = False

    def merge(self, path: str):
        """
        Add words from the file to the list.
        """
        count = 0
        for word in read_wordlist(FileReader(path)):
            self._insert(word)
            count += 1
        log.debug("Read %d words from %s", count, path)

    def save(self, path: str):
        """
        Write the list to the file, one word per line.

        Raises:
            OSError: if the file can't be written
        """
        with open(path, 'w', encoding='UTF-8') as file:
            for word in self.words():
                file.write(word + '\n')
        self.changed = False

    def _insert(self, word: str):
        word_obj = CapitalizedWord.from_word(word)
        homonyms = self.index[word_obj.stem]
        if word_obj not in homonyms:
            homonyms.append(word_obj)

    def __repr__(self):
        return f'CapitalizationIndex(... {len(self)} words ...)'
