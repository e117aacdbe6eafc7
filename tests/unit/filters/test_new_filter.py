import pytest

from spellscan.data.options import FilterType, Options
from spellscan.filters import new_filter, PlainFilter, TeXFilter, SGMLFilter, NroffFilter


@pytest.mark.parametrize('filter_type,cls', [
    (FilterType.PLAIN, PlainFilter),
    (FilterType.TEX, TeXFilter),
    (FilterType.SGML, SGMLFilter),
    (FilterType.NROFF, NroffFilter),
    (None, PlainFilter),
    ('markdown', PlainFilter),
])
def test_new_filter(filter_type, cls):
    assert type(new_filter(filter_type, Options())) is cls    # pylint: disable=unidiomatic-typecheck


def test_options_passed():
    text_filter = new_filter(FilterType.TEX, Options(extra_word_characters='-', tex_command_filter='cite P'))
    assert list(text_filter.words(r'\cite{key} e-mail')) == ['e-mail']
