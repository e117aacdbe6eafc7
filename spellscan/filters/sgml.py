"""
Filter for SGML, HTML, XML and the like.

Text outside of tags is checked; inside tags, only quoted values of the attributes listed in
``sgml-attributes-to-check`` option are::

    <img alt="a cat" title="not checked">checked</img>

Entity references (``&amp;``, ``&#8212;``) are never checked.
Quotes matter only inside tags, so apostrophes and quotation marks in the text don't affect
the tags after them.

Tags are not stacked: the filter only knows whether it is inside *some* tag, and which attribute
it is in. This is what is needed for spellchecking, and it makes the filter tolerant to all kinds
of broken markup.

.. autoclass:: SGMLFilter
"""

from typing import Optional

from spellscan.data.options import Options
from spellscan.filters.plain import PlainFilter, WordSpan
from spellscan.readers.options import read_name_list

QUOTES = '"\''
ATTRIBUTE_END = '=/"\'>'


def is_graph(char: str) -> bool:
    return char.isprintable() and not char.isspace()


class SGMLFilter(PlainFilter):
    """
    Skips markup, and checks only text and "good" attributes' values.

    .. autoattribute:: in_markup
    .. autoattribute:: quote_char
    .. autoattribute:: tag_name
    .. autoattribute:: attribute_name
    """

    #: Whether the cursor is inside ``<...>``
    in_markup: bool
    #: Quote we are currently inside, or empty string
    quote_char: str
    #: Name of the current tag (empty if the tag is malformed)
    tag_name: str
    #: Name of the current attribute
    attribute_name: str

    def __init__(self, options: Optional[Options] = None):
        options = options or Options()
        super().__init__(options)

        self.attributes_to_check = read_name_list(options.sgml_attributes_to_check)

        self.in_markup = False
        self.quote_char = ''
        self.tag_name = ''
        self.attribute_name = ''

    def in_good_attribute(self) -> bool:
        # Empty name: value without attribute, malformed markup, better to check it
        return not self.attribute_name or self.attribute_name in self.attributes_to_check

    def get_next_word(self) -> Optional[WordSpan]:
        self.skip_whitespace()

        while not self.at_end():
            char = self.current()

            if char == '<':
                self._tag_start()
            elif char == '>':
                self.skip()
                self._markup_end()
            elif char == '/' and self.in_markup and not self.quote_char:
                # Shortened tag: <br/>
                self.skip()
                self._markup_end()
            # Quotes outside of tags are just punctuation
            elif char in QUOTES and self.in_markup and self.quote_char in ('', char):
                self.quote_char = '' if self.quote_char else char
                self.skip()
            elif self.in_markup and not self.quote_char and char.isalnum():
                begin = self.pos
                self.skip_while(lambda c: is_graph(c) and c not in ATTRIBUTE_END)
                self.attribute_name = self.line[begin:self.pos]
            elif char == '&' and (not self.in_markup or self.quote_char):
                self._entity()
            elif self.is_at_word():
                if not self.in_markup or (self.quote_char and self.in_good_attribute()):
                    return super().get_next_word()
                self.skip()
                self.skip_while(str.isalnum)
            else:
                self.skip()

            self.skip_whitespace()

        return None

    def _tag_start(self):
        self.skip()
        if self.is_at('/'):
            self.skip()

        begin = self.pos
        self.skip_while(lambda c: is_graph(c) and c != '>')

        # "<" inside markup: malformed, we don't know what tag is it
        self.tag_name = '' if self.in_markup else self.line[begin:self.pos]
        self.in_markup = True
        self.attribute_name = ''

    def _markup_end(self):
        self.in_markup = False
        self.quote_char = ''
        self.tag_name = ''
        self.attribute_name = ''

    def _entity(self):
        self.skip()
        self.skip_while(str.isalnum)
        if self.is_at(';'):
            self.skip()
