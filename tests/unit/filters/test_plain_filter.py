import pytest

from spellscan.data.options import Options
from spellscan.filters import PlainFilter, WordSpan


def words(line, **options):
    return list(PlainFilter(Options(**options)).words(line))


def test_split():
    assert words('Hello, world!  How are you?') == ['Hello', 'world', 'How', 'are', 'you']
    assert words('') == []
    assert words('  ...  ') == []
    assert words('naïve café, Москва') == ['naïve', 'café', 'Москва']


def test_boundary_characters():
    assert words("it's", boundary_characters="'") == ["it's"]
    assert words("it's") == ['it', 's']

    # boundary character never starts or ends the word
    assert words("'quoted' rock'n'roll ends'", boundary_characters="'") == ['quoted', "rock'n'roll", 'ends']
    assert words("a''b", boundary_characters="'") == ['a', 'b']


def test_word_characters():
    assert words('e-mail R2D2') == ['e', 'mail', 'R', 'D']
    assert words('e-mail R2D2', extra_word_characters='-') == ['e-mail', 'R', 'D']
    assert words('e-mail R2D2', word_characters='0123456789') == ['e', 'mail', 'R2D2']


def test_spans():
    line = "it's a test"
    text_filter = PlainFilter(Options(boundary_characters="'"))
    text_filter.set_line(line)

    assert text_filter.get_next_word() == WordSpan(0, 4)
    assert text_filter.get_next_word() == WordSpan(5, 6)
    assert text_filter.get_next_word() == WordSpan(7, 11)
    assert text_filter.get_next_word() is None
    assert text_filter.get_next_word() is None


@pytest.mark.parametrize('line', [
    "Some text, with 'quotes' and punctuation...",
    "a'b'c' 'd e''f",
    "''''",
    "x",
])
def test_spans_are_ordered(line):
    text_filter = PlainFilter(Options(boundary_characters="'"))
    text_filter.set_line(line)
    spans = list(text_filter.spans())

    for span in spans:
        assert 0 <= span.begin < span.end <= len(line)
    for prev, span in zip(spans, spans[1:]):
        assert prev.end <= span.begin


def test_reset():
    text_filter = PlainFilter()
    text_filter.set_line('one two three')
    assert text_filter.get_next_word() == WordSpan(0, 3)
    assert text_filter.get_next_word() == WordSpan(4, 7)

    text_filter.reset()
    assert text_filter.get_next_word() == WordSpan(0, 3)

    text_filter.reset(8)
    assert [span.of(text_filter.line) for span in text_filter.spans()] == ['three']

    text_filter.reset(100)
    assert text_filter.get_next_word() is None
