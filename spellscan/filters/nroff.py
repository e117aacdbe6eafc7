"""
Filter for \\*roff (troff, nroff, groff) sources, like man pages.

The rules follow the ones of ispell's \\*roff handling, and are far from complete \\*roff parser:

* formatter requests (lines starting with ``.``) are skipped, along with macro or register name for
  ``.ds``, ``.de`` and ``.nr``; the rest of the request line is checked (so ``.SH DESCRIPTION``
  checks "DESCRIPTION");
* conditionals ``.if t``, ``.if n``, ``.ie``, ``.el`` are skipped, and the request after them handled
  as above;
* font changes (``\\fB``, ``\\f(CW``), size changes (``\\s+2``, ``\\s0``) and special characters
  (``\\(em``, ``\\*(Tm``, ``\\*R``) are skipped.

.. autoclass:: NroffFilter
"""

from typing import Optional, Tuple

from spellscan.data.options import Options
from spellscan.filters.plain import PlainFilter, WordSpan

CONDITIONALS = ('if t', 'if n', 'el ', 'ie ')
DEFINITIONS = ('ds ', 'de ', 'nr ')


class NroffFilter(PlainFilter):
    """
    Skips \\*roff requests and escape sequences.
    """

    def __init__(self, options: Optional[Options] = None):
        super().__init__(options)
        self.line_changed = True

    def set_line(self, line: str):
        super().set_line(line)
        self.line_changed = True

    def get_next_word(self) -> Optional[WordSpan]:
        if self.line_changed and self.is_at('.'):
            self._skip_request()
        self.line_changed = False

        self.skip_whitespace()

        while not self.at_end():
            if self.is_at('\\'):
                self._skip_escape()
            elif self.is_at_word():
                return super().get_next_word()
            else:
                self.skip()
            self.skip_whitespace()

        return None

    def _skip_request(self):
        matched, end = self._request_at(*CONDITIONALS)
        if matched:
            self.pos = end
            self.skip_whitespace()
            self.line_changed = False

        matched, end = self._request_at(*DEFINITIONS)
        if matched:
            # .ds XX value: XX is a name, value is checked
            self.pos = end
            self.skip_whitespace()
            self.skip_non_whitespace()
            self.skip_whitespace()
            self.line_changed = False

        # Generic formatter request, if any
        matched, end = self._request_at('')
        if matched:
            self.pos = end
            self.skip_non_whitespace()

    def _request_at(self, *requests: str) -> Tuple[bool, int]:
        """
        Whether there is a request (``.`` and one of request names) at the current position.
        At the very beginning of the line, spaces between ``.`` and request name are allowed.

        Returns:
            Whether found, and the position after the request name
        """
        i = self.pos
        while i < len(self.line) and self.line[i].isspace():
            i += 1
        at_begin = self.line_changed and i == self.pos

        if i >= len(self.line) or self.line[i] != '.':
            return (False, self.pos)
        i += 1
        if at_begin:
            while i < len(self.line) and self.line[i].isspace():
                i += 1

        for request in requests:
            if self.line.startswith(request, i):
                return (True, i + len(request))
        return (False, self.pos)

    def _skip_escape(self):
        if self.is_at('\\f'):
            # Font change: \fB, \f(CW, \f)
            self.skip(2)
            self.skip(3 if self.is_at('(') else 1)
        elif self.is_at('\\s'):
            # Size change: \s0, \s+2, \s-12
            self.skip(2)
            if self.current() in ('+', '-'):
                self.skip()
            self.skip()
            if self.current().isdigit():
                self.skip()
        elif self.is_at('\\('):
            # Special character: \(em
            self.skip(4)
        elif self.is_at('\\*'):
            # String interpolation: \*(Tm or \*R
            self.skip(2)
            self.skip(3 if self.is_at('(') else 1)
        else:
            self.skip()
