"""
Parsing setting strings from :class:`Options <spellscan.data.options.Options>` into lookup
tables used by filters.

Both parsers are forgiving: the strings come from user configuration, and a typo in one entry
shouldn't make the whole setting useless, so unparseable parts are just dropped.

.. autofunction:: read_command_filter
.. autofunction:: read_name_list
"""

import logging

from typing import Dict, Set, Tuple

from spellscan.data.options import ParamType

log = logging.getLogger(__name__)

# The first parameter of these is environment name, handled separately by TeX filter
ENVIRONMENT_COMMANDS = ('begin', 'end')


def read_command_filter(text: str) -> Dict[str, Tuple[ParamType, ...]]:
    """
    Read ``tex-command-filter`` setting::

        >>> read_command_filter('emph p, cite OP, begin PO')
        {'emph': (<ParamType.CHECK: 'p'>,),
         'cite': (<ParamType.OPT_NOCHECK: 'O'>, <ParamType.NOCHECK: 'P'>),
         'begin': (<ParamType.OPT_NOCHECK: 'O'>,)}

    Every entry is command name (without backslash), whitespace, and parameter letters. Letters
    other than ``pPoO`` are ignored, entry without letters declares command without parameters.
    Note how ``begin`` lost its first parameter: it is name of the environment, consumed by the
    filter immediately after ``\\begin``.
    """

    result = {}

    for entry in text.split(','):
        parts = entry.split(None, 1)
        if not parts:
            continue

        name = parts[0]
        params = []
        for letter in (parts[1] if len(parts) > 1 else ''):
            try:
                params.append(ParamType(letter))
            except ValueError:
                if not letter.isspace():
                    log.debug("Ignoring parameter type %r of command %r", letter, name)

        if name in ENVIRONMENT_COMMANDS:
            params = params[1:]

        result[name] = tuple(params)

    return result


def read_name_list(text: str) -> Set[str]:
    """
    Read whitespace-separated list of names (``tex-environment-filter``, ``sgml-attributes-to-check``).
    """
    return set(text.split())
