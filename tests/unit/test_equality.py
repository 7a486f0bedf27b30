import pytest

from lazyrange import Range

equal_pairs = [
    (Range(1, 8, 3), Range(1, 9, 3)),
    (Range(1, 8, 3), Range(1, 10, 3)),
    (Range(5), Range(0, 5, 1)),
    (Range(0, -5, -2), Range(0, -6, -2)),
    (Range(1, 10, 2).to_reversed(), Range(9, 0, -2)),
    (Range(0), Range(3, 1)),
    (Range(0), Range(1, 3, -1)),
    (Range(0), Range(7, 7, -4)),
]

unequal_pairs = [
    (Range(1, 8, 3), Range(1, 11, 3)),
    (Range(1, 8, 3), Range(2, 8, 3)),
    (Range(1, 8, 3), Range(1, 8, 2)),
    (Range(5), Range(6)),
    (Range(0, 1, 1), Range(0, 1, 2)),
    (Range(0), Range(1)),
    (Range(1, 5), Range(4, 0, -1)),
]


@pytest.mark.parametrize("a,b", equal_pairs)
def test_equal(a, b):
    assert a == b
    assert b == a
    assert not a != b
    assert hash(a) == hash(b)


@pytest.mark.parametrize("a,b", unequal_pairs)
def test_not_equal(a, b):
    assert a != b
    assert b != a


def test_reflexive():
    r = Range(-3, 40, 7)
    assert r == r
    assert hash(r) == hash(r)


@pytest.mark.parametrize("other", [[0, 1, 2], (0, 1, 2), range(3), "range(0, 3, 1)", None])
def test_not_equal_to_other_types(other):
    assert Range(3) != other


def test_usable_as_dict_key():
    d = {Range(1, 8, 3): "a"}
    assert d[Range(1, 9, 3)] == "a"
    assert len({Range(0), Range(3, 1), Range(1, 3, -1)}) == 1
