import pytest

from spellscan.algo import capitalization as cap
from spellscan.algo.capitalization import Type


@pytest.mark.parametrize('word,captype', [
    ('', Type.OTHER),
    ('paris', Type.LOWER),
    ('Paris', Type.INIT),
    ('PARIS', Type.UPPER),
    ('A', Type.UPPER),
    ('a', Type.LOWER),
    ('McDonald', Type.OTHER),
    ('iPhone', Type.OTHER),
    ('PARis', Type.OTHER),
    ("it's", Type.OTHER),
    ('R2D2', Type.OTHER),
    ('Öl', Type.INIT),
    ('ÖL', Type.UPPER),
    ('straße', Type.LOWER),
])
def test_guess(word, captype):
    assert cap.guess(word) == captype


def test_fold_and_coerce():
    assert cap.fold('Paris', Type.INIT) == 'paris'
    assert cap.fold('PARIS', Type.UPPER) == 'paris'
    assert cap.fold('McDonald', Type.OTHER) == 'McDonald'

    assert cap.coerce('paris', Type.INIT) == 'Paris'
    assert cap.coerce('paris', Type.UPPER) == 'PARIS'
    assert cap.coerce('paris', Type.LOWER) == 'paris'
    assert cap.coerce('McDonald', Type.OTHER) == 'McDonald'


def test_compatible():
    assert cap.compatible(Type.LOWER, Type.LOWER)
    assert cap.compatible(Type.LOWER, Type.INIT)
    assert cap.compatible(Type.LOWER, Type.UPPER)
    assert not cap.compatible(Type.LOWER, Type.OTHER)

    assert cap.compatible(Type.INIT, Type.INIT)
    assert not cap.compatible(Type.INIT, Type.LOWER)
    assert not cap.compatible(Type.INIT, Type.UPPER)

    assert cap.compatible(Type.UPPER, Type.UPPER)
    assert not cap.compatible(Type.UPPER, Type.INIT)


@pytest.mark.parametrize('word,captype,stem', [
    ('İstanbul', Type.INIT, 'İstanbul'),
    ('STRAẞE', Type.UPPER, 'straẞe'),
    ('ΣΟΦΙΑ', Type.UPPER, 'σοφια'),
    ('Öl', Type.INIT, 'öl'),
])
def test_fold_keeps_length(word, captype, stem):
    assert cap.guess(word) == captype
    assert cap.fold(word, captype) == stem
    assert cap.coerce(stem, captype) == word
