"""
.. autoclass:: FileReader
"""

import io

from typing import Iterator, Tuple, Union

BOM = '\ufeff'


class FileReader:
    """
    Very thin wrapper around file (or ``IO``-alike object), to read it line by line and:

    * strip lines transparently
    * ignore BOM (byte-order mark) at the beginning
    * skip empty lines
    * yield line with its number (1-based)::

        for num, line in FileReader('/home/me/.ispell_english'):
            print(num, line)

    The file is opened lazily on iteration and closed when the iteration is over, so ``OSError``
    (like ``FileNotFoundError``) is raised from the first ``next()``, not from the constructor.
    """

    def __init__(self, source: Union[str, io.TextIOBase], encoding: str = 'UTF-8'):
        self.source = source
        self.encoding = encoding

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        if isinstance(self.source, str):
            with open(self.source, 'r', encoding=self.encoding, errors='surrogateescape') as file:
                yield from self._lines(file)
        else:
            yield from self._lines(self.source)

    def _lines(self, file):     # pylint: disable=no-self-use
        for num, line in enumerate(file, start=1):
            if num == 1 and line.startswith(BOM):
                line = line[len(BOM):]
            line = line.strip()
            if line:
                yield (num, line)
