"""
TeX/LaTeX filter: skips command names, parameters of known commands that shouldn't be checked,
math, and comments.

This is done by really (if roughly) parsing the TeX source, so this is the most complicated filter.
It should also tolerate malformed input: the worst thing the filter could do is to check some
markup or skip some text, never fail.

How it works
------------

Tokens like ``\\commandname[optparam1]{param1}`` are *commands*. The filter keeps track of which
parameter of which command is currently parsed, in the stack of :class:`Frame` objects (top is
the innermost). The knowledge about parameters comes from ``tex-command-filter`` option, parsed
by :func:`read_command_filter <spellscan.readers.options.read_command_filter>`::

    cite OP
    # \\cite[p.~5]{knuth84}: optional parameter and required parameter, neither is checked

``\\begin{name}`` pushes a special *environment* frame (with name ``name``) before the frame for
``\\begin`` command itself, and ``\\end{name}`` pops it. This way, the filter knows if it is inside
some environment that shouldn't be checked (listed in ``tex-environment-filter`` option). Inline
math ``$...$`` and display math ``$$...$$`` are tracked the same way, as environment named ``$``.

Since the filter doesn't know how many parameters an unknown command takes, each command frame has
a :attr:`Frame.waiting` flag: it is ``True`` while we are between the command's parameters. If
something other than ``{`` or ``[`` follows, the command is over, and its frame is discarded.

A word is checked when it is not inside the skipped environment, and the innermost command's
current parameter is checked one (or unknown).

.. autoclass:: TeXFilter

.. autoclass:: Frame
    :members:
"""

import logging
import re

from dataclasses import dataclass
from typing import List, Optional, Tuple

from spellscan.data.options import Options, ParamType
from spellscan.filters.plain import PlainFilter, WordSpan
from spellscan.readers.options import read_command_filter, read_name_list

log = logging.getLogger(__name__)

# Trailing * is stripped, so \section* takes the same parameters as \section
COMMAND_REGEXP = re.compile(r'\\([@a-zA-Z0-9]+)\*?')
ENVIRONMENT_REGEXP = re.compile(r'\{([a-zA-Z0-9]+)\*?\}')

MATH = '$'


@dataclass
class Frame:
    """
    Position inside the parameter list of the command, or an open environment.
    """

    #: Name of the command (without backslash) or environment
    name: str
    #: Known parameters of the command; empty for unknown commands and environments
    params: Tuple[ParamType, ...] = ()
    #: Index of the current parameter in :attr:`params`
    pos: int = 0
    #: Whether we are between the parameters (waiting for ``{`` or ``[``)
    waiting: bool = True
    is_environment: bool = False

    @classmethod
    def environment(cls, name: str) -> 'Frame':
        return cls(name, waiting=False, is_environment=True)

    def finished(self) -> bool:
        """
        No more known parameters: everything further is considered "unknown" (and checked).
        """
        return self.pos >= len(self.params)

    def checked(self) -> bool:
        return self.finished() or self.params[self.pos].checked

    def advance(self, optional: bool):
        """
        Step over the parameter that was just closed.

        Args:
            optional: Whether it was optional (``[...]``) or required (``{...}``) one
        """
        while not self.finished():
            param = self.params[self.pos]
            if param.optional == optional:
                self.pos += 1
                break
            if not optional:
                # Required parameter closed: optional ones before it were omitted
                self.pos += 1
            else:
                # Optional parameter where required expected: malformed, treat the rest as unknown
                self.pos = len(self.params)


class TeXFilter(PlainFilter):
    """
    Parses TeX input and checks only the words that are a text, not markup.

    Note that internal state is sticky: the filter assumes the lines are fed in the same order as
    they are in the file. :meth:`reset <spellscan.filters.plain.PlainFilter.reset>` should be used
    only to reposition inside the current line (it doesn't reset the command stack).
    """

    def __init__(self, options: Optional[Options] = None):
        options = options or Options()
        super().__init__(options)

        self.command_params = read_command_filter(options.tex_command_filter)
        self.skip_environments = read_name_list(options.tex_environment_filter)

        self.stack: List[Frame] = []
        self.in_comment = False

    def set_line(self, line: str):
        super().set_line(line)
        # Comments span to the end of line
        self.in_comment = False

    def get_next_word(self) -> Optional[WordSpan]:
        if self.in_comment:
            return None

        self.skip_whitespace()

        while not self.at_end():
            char = self.current()

            if char == '\\':
                self._discard_waiting()
                self._command()
            elif char == '%':
                # Comment till the end of the line, nothing to check there
                self.skip()
                self.in_comment = True
                return None
            elif char in '{[':
                self.skip()
                self._top().waiting = False
            elif char in '}]':
                self.skip()
                self._discard_waiting()
                top = self._top()
                top.waiting = True
                top.advance(optional=(char == ']'))
            else:
                self._discard_waiting()
                if self.is_at_word():
                    if self._should_check():
                        return super().get_next_word()
                    self.skip_over_word()
                elif char == MATH:
                    self.skip()
                    if self.is_at(MATH):
                        self.skip()
                    self._toggle_math()
                else:
                    self.skip()

            self.skip_whitespace()

        return None

    def _command(self):
        match = COMMAND_REGEXP.match(self.line, self.pos)
        if not match:
            # \\, \%, \{ and so on: escaped char, not structure
            self.skip(2)
            return

        self.pos = match.end()
        name = match.group(1)

        if name == 'begin':
            self._environment(self._push_env)
        elif name == 'end':
            self._environment(self._pop_env)

        # \begin and \end frames are atop of their environment's frame
        self.stack.append(Frame(name, self.command_params.get(name, ())))

    def _environment(self, action):
        match = ENVIRONMENT_REGEXP.match(self.line, self.pos)
        if match:
            self.pos = match.end()
            action(match.group(1))

    def _toggle_math(self):
        top = self._top()
        if top.is_environment and top.name == MATH:
            self._pop_env(MATH)
        else:
            self._push_env(MATH)

    def _should_check(self) -> bool:
        return not self._in_skipped_environment() and self._top().checked()

    def _in_skipped_environment(self) -> bool:
        return any(frame.is_environment and frame.name in self.skip_environments for frame in self.stack)

    # Stack manipulation

    def _top(self) -> Frame:
        if not self.stack:
            # Top level: behaves as a command with unknown parameters
            return Frame('')
        return self.stack[-1]

    def _push_env(self, name: str):
        self.stack.append(Frame.environment(name))

    def _pop_env(self, name: str):
        """
        Pop the innermost environment with the given name. If there is no such (mismatched
        ``\\begin``/``\\end``), pop just the innermost environment, whatever name it has.
        """
        index = self._find_environment(name)
        if index is None:
            log.debug("No open environment %r, closing the innermost one", name)
            index = self._find_environment()
        if index is None:
            log.debug("No open environments to close")
            return
        del self.stack[index]

    def _find_environment(self, name: Optional[str] = None) -> Optional[int]:
        """
        Index of the innermost environment frame (with the given name, if specified).
        """
        for index in range(len(self.stack) - 1, -1, -1):
            frame = self.stack[index]
            if frame.is_environment and (name is None or frame.name == name):
                return index
        return None

    def _nearest_command(self) -> Optional[Frame]:
        """
        The innermost frame which is a command, not an environment.
        """
        for frame in reversed(self.stack):
            if not frame.is_environment:
                return frame
        return None

    def _discard_waiting(self):
        """
        Pop the commands that are still waiting for the parameters: something other than the
        parameter has come, so their parameter lists are over.
        """

        # Malformed input: environments opened while some command below them still waits for
        # a parameter can't be valid
        while len(self.stack) > 1 and self.stack[-1].is_environment:
            command = self._nearest_command()
            if command is None or not command.waiting:
                break
            log.debug("Discarding environment %r inside command %r", self.stack[-1].name, command.name)
            self.stack.pop()

        while self.stack and self.stack[-1].waiting and not self.stack[-1].is_environment:
            self.stack.pop()
