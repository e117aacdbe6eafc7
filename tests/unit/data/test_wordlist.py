import pytest

from spellscan.algo.capitalization import Type
from spellscan.data.wordlist import CapitalizationIndex, CapitalizedWord


def test_capitalized_word():
    assert CapitalizedWord.from_word('Paris') == CapitalizedWord(Type.INIT, 'paris')
    assert CapitalizedWord.from_word('PARIS') == CapitalizedWord(Type.UPPER, 'paris')
    assert CapitalizedWord.from_word('McDonald') == CapitalizedWord(Type.OTHER, 'McDonald')
    assert CapitalizedWord.from_word('PARIS').display() == 'PARIS'
    assert CapitalizedWord.from_word('Paris').display() == 'Paris'


def test_lowercase_matches_capitalized():
    index = CapitalizationIndex()
    index.add('paris')

    assert 'paris' in index
    assert 'Paris' in index
    assert 'PARIS' in index
    assert 'PaRiS' not in index
    assert 'pari' not in index


def test_capitalized_matches_only_itself():
    index = CapitalizationIndex()
    index.add('Paris')

    assert 'Paris' in index
    assert 'paris' not in index
    assert 'PARIS' not in index

    index = CapitalizationIndex(['NATO', 'McDonald'])
    assert 'NATO' in index
    assert 'Nato' not in index
    assert 'nato' not in index
    assert 'McDonald' in index
    assert 'MCDONALD' not in index
    assert 'mcdonald' not in index


def test_several_capitalizations():
    index = CapitalizationIndex(['Paris'])
    index.add('paris')
    assert 'paris' in index
    assert len(index) == 2

    index.add('Paris')
    assert len(index) == 2
    assert list(index.words()) == ['paris', 'Paris']


def test_remove():
    index = CapitalizationIndex(['paris', 'Paris', 'London'])
    assert not index.changed

    index.remove('PARIS')
    assert index.changed
    assert 'paris' not in index
    assert 'Paris' not in index
    assert 'London' in index

    index.remove('nonexistent')
    assert len(index) == 1


def test_iteration_order():
    index = CapitalizationIndex(['zebra', 'NATO', 'Apple', 'McDonald'])
    assert list(index.words()) == ['McDonald', 'Apple', 'NATO', 'zebra']


def test_changed():
    index = CapitalizationIndex()
    assert not index.changed
    index.add('word')
    assert index.changed


def test_load_save(tmp_path):
    path = tmp_path / 'personal.dict'
    path.write_text('paris\nParis London\n\nNATO\nMcDonald\n', encoding='UTF-8')

    index = CapitalizationIndex.from_file(str(path))
    assert not index.changed
    assert len(index) == 5

    index.add('Berlin')
    assert index.changed

    saved = tmp_path / 'saved.dict'
    index.save(str(saved))
    assert not index.changed
    assert saved.read_text(encoding='UTF-8').splitlines() == [
        'McDonald', 'Berlin', 'London', 'NATO', 'paris', 'Paris'
    ]


def test_round_trip(tmp_path):
    path = str(tmp_path / 'personal.dict')
    queries = ['paris', 'Paris', 'PARIS', 'london', 'London', 'LONDON', 'McDonald', 'MCDONALD',
               'İstanbul', 'STRAẞE', 'straße', 'Straße']

    index = CapitalizationIndex(['paris', 'London', 'McDonald', 'İstanbul', 'STRAẞE', 'straße'])
    index.save(path)

    loaded = CapitalizationIndex.from_file(path)
    assert [query in loaded for query in queries] == [query in index for query in queries]
    assert 'İstanbul' in loaded
    assert 'STRAẞE' in loaded
    assert 'Straße' in loaded
    assert list(loaded.words()) == list(index.words())


def test_load_replaces_merge_adds(tmp_path):
    first = tmp_path / 'first.dict'
    first.write_text('one\n', encoding='UTF-8')
    second = tmp_path / 'second.dict'
    second.write_text('two\n', encoding='UTF-8')

    index = CapitalizationIndex(['zero'])
    index.load(str(first))
    assert list(index.words()) == ['one']

    index.merge(str(second))
    assert list(index.words()) == ['one', 'two']


def test_load_missing(tmp_path):
    index = CapitalizationIndex()
    with pytest.raises(OSError):
        index.load(str(tmp_path / 'missing.dict'))
