from decimal import Decimal
from fractions import Fraction

import pytest

from lazyrange import Range

r = Range(1, 10, 2)  # [1, 3, 5, 7, 9]
d = Range(0, -9, -3)  # [0, -3, -6]


@pytest.mark.parametrize(
    "value,expected", [(1, True), (9, True), (5, True), (4, False), (11, False), (-1, False)]
)
def test_contains(value, expected):
    assert (value in r) is expected
    assert r.includes(value) is expected


def test_contains_negative_step():
    assert -6 in d
    assert -9 not in d
    assert 3 not in d
    assert -4 not in d


def test_contains_non_integers():
    assert 3.0 in r
    assert Fraction(6, 2) in r
    assert 3.5 not in r
    assert float("inf") not in r
    assert float("nan") not in r
    assert "3" not in r
    assert None not in r


@pytest.mark.parametrize(
    "needle",
    [
        Decimal(3),
        Decimal("3.0"),
        Decimal("3.5"),
        Decimal("NaN"),
        Decimal("Infinity"),
        3 + 0j,
        3 + 1j,
        complex(float("nan"), 0),
        Fraction(7, 2),
        4.0,
        -1.0,
    ],
)
def test_numeric_needles_match_list(needle):
    values = list(r)
    assert (needle in r) == (needle in values)
    assert r.includes(needle) == (needle in values)
    expected = values.index(needle) if needle in values else -1
    assert r.index_of(needle) == expected
    assert r.last_index_of(needle) == expected
    assert r.count(needle) == values.count(needle)


@pytest.mark.parametrize(
    "value,from_index,expected",
    [
        (5, 0, 2),
        (5, 2, 2),
        (5, 3, -1),
        (5, -3, 2),
        (5, -2, -1),
        (5, -100, 2),
        (5, 100, -1),
        (4, 0, -1),
    ],
)
def test_index_of(value, from_index, expected):
    assert r.index_of(value, from_index) == expected
    assert r.includes(value, from_index) is (expected != -1)


@pytest.mark.parametrize(
    "value,from_index,expected",
    [
        (5, None, 2),
        (5, 2, 2),
        (5, 1, -1),
        (5, -3, 2),
        (5, -4, -1),
        (5, 100, 2),
        (5, -100, -1),
        (8, None, -1),
    ],
)
def test_last_index_of(value, from_index, expected):
    assert r.last_index_of(value, from_index) == expected


def test_index_of_empty():
    e = Range(3, 1)
    assert e.index_of(3) == -1
    assert e.last_index_of(3) == -1
    assert not e.includes(3)
    assert 3 not in e


def test_index():
    assert r.index(7) == 3
    assert d.index(-6) == 2
    assert r.index(7, 1, 4) == 3
    with pytest.raises(ValueError):
        r.index(7, 0, 3)
    with pytest.raises(ValueError):
        r.index(8)


def test_count():
    assert r.count(3) == 1
    assert r.count(4) == 0
    assert Range(0).count(0) == 0
