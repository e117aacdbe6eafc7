from typing import Iterator

from spellscan.readers.file_reader import FileReader


def read_wordlist(source: FileReader) -> Iterator[str]:
    """
    Reads words from personal dictionary file. The format is just words separated by whitespace,
    typically one word per line, as they should be displayed (with their capitalization):

    .. code-block:: text

        paris
        NATO
        McDonald

    Args:
        source: "Reader" (thin wrapper around opened file, targeting line-by-line reading)
    """
    for _, line in source:
        yield from line.split()
