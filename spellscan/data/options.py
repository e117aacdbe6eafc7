"""
Settings consumed by the filters and the :class:`Checker <spellscan.checker.Checker>`.

The library doesn't read configuration files or command lines by itself: the caller parses them
whatever way it wants and passes the resulting mapping to :meth:`Options.from_mapping`. Option
names are the configuration file ones:

.. code-block:: text

    tex-command-filter = "emph p, cite OP, ref P, label P, begin PO, end P"
    tex-environment-filter = "$ equation displaymath verbatim"
    sgml-attributes-to-check = "alt title summary"

``Options``
-----------

.. autoclass:: Options

Enums
-----

.. autoclass:: FilterType
    :members:

.. autoclass:: ParamType
    :members:

.. autofunction:: guess_filter_type
"""

from __future__ import annotations

import logging
import re

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional

log = logging.getLogger(__name__)


class FilterType(Enum):
    """
    Document dialect, selecting one of :mod:`spellscan.filters`.
    """

    PLAIN = 'plain'
    TEX = 'tex'
    NROFF = 'nroff'
    SGML = 'sgml'

    @classmethod
    def from_name(cls, name: str) -> Optional[FilterType]:
        """
        Filter type by its user-facing name (as in ispell's ``-T`` option); ``html`` is accepted
        as a synonym for ``sgml``. Returns ``None`` for unknown names.
        """
        name = name.strip().lower()
        if name == 'html':
            return cls.SGML
        try:
            return cls(name)
        except ValueError:
            return None


class ParamType(Enum):
    """
    Type of TeX command parameter, as specified in ``tex-command-filter``:

    * ``p``: ``CHECK``, required, spell-checked
    * ``P``: ``NOCHECK``, required, skipped
    * ``o``: ``OPT_CHECK``, optional (``[...]``), spell-checked
    * ``O``: ``OPT_NOCHECK``, optional, skipped
    """

    CHECK = 'p'
    NOCHECK = 'P'
    OPT_CHECK = 'o'
    OPT_NOCHECK = 'O'

    @property
    def optional(self) -> bool:
        return self in (ParamType.OPT_CHECK, ParamType.OPT_NOCHECK)

    @property
    def checked(self) -> bool:
        return self in (ParamType.CHECK, ParamType.OPT_CHECK)


FILE_TYPES = [
    (re.compile(r'\.(ms|mm|me|man)$', re.IGNORECASE), FilterType.NROFF),
    (re.compile(r'\.tex$', re.IGNORECASE), FilterType.TEX),
    (re.compile(r'\.(htm|html|sgml)$', re.IGNORECASE), FilterType.SGML),
]


def guess_filter_type(filename: str) -> FilterType:
    """
    Deduce the filter for the file by its extension::

        >>> guess_filter_type('paper.tex')
        <FilterType.TEX: 'tex'>
        >>> guess_filter_type('README')
        <FilterType.PLAIN: 'plain'>
    """
    for regexp, filter_type in FILE_TYPES:
        if regexp.search(filename):
            return filter_type
    return FilterType.PLAIN


@dataclass
class Options:
    """
    All the settings of the filtering and checking.

    .. autoattribute:: extra_word_characters
    .. autoattribute:: word_characters
    .. autoattribute:: boundary_characters
    .. autoattribute:: tex_command_filter
    .. autoattribute:: tex_environment_filter
    .. autoattribute:: sgml_attributes_to_check
    .. autoattribute:: legal_word_length
    .. autoattribute:: default_filter

    .. automethod:: from_mapping
    """

    #: Characters that are parts of words in addition to letters (user-provided)
    extra_word_characters: str = ''
    #: Characters that are parts of words in addition to letters (specified by dictionary)
    word_characters: str = ''
    #: Characters allowed inside the word between two word characters, like apostrophe
    boundary_characters: str = ''

    #: Known TeX commands and their parameters: ``name PARAMSPEC, name PARAMSPEC, ...``,
    #: see :class:`ParamType` for PARAMSPEC letters
    tex_command_filter: str = ''
    #: Whitespace-separated TeX environments which are not spell-checked at all;
    #: ``$`` stands for inline math
    tex_environment_filter: str = ''
    #: Whitespace-separated SGML attributes which values are spell-checked
    sgml_attributes_to_check: str = ''

    #: Words shorter than this are always considered correct
    legal_word_length: int = 0
    #: Filter used when the caller doesn't request a specific one
    default_filter: FilterType = FilterType.PLAIN

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Options:
        """
        Create options from already parsed configuration. Keys are case-insensitive, and can be
        written either config-style (``tex-command-filter``) or Python-style (``tex_command_filter``).
        Unknown keys are ignored.

        Raises:
            ValueError: if ``legal-word-length`` is not an integer
        """

        known = {field.name for field in fields(cls)}
        values = {}

        for key, value in mapping.items():
            name = key.strip().lower().replace('-', '_')
            if name not in known:
                log.debug("Ignoring unknown option %r", key)
                continue

            if name == 'legal_word_length':
                value = int(value)
            elif name == 'default_filter' and not isinstance(value, FilterType):
                filter_type = FilterType.from_name(str(value))
                if filter_type is None:
                    log.debug("Unknown filter %r, using plain", value)
                    filter_type = FilterType.PLAIN
                value = filter_type
            values[name] = value

        return cls(**values)
