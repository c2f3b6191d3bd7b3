import pytest
from hypothesis import given
from hypothesis import strategies as st

from basicds.vector import Vector


def test_initial_state():
    v = Vector()
    assert v.capacity() == 16
    assert v.is_empty() is True
    assert len(v) == 0


def test_capacity_doubles_when_full():
    v = Vector(range(16))
    assert v.capacity() == 16
    v.push_back(16)
    assert v.capacity() == 2 * 16
    assert list(v) == list(range(17))


def test_str():
    assert str(Vector([1, 2, 3])) == "1 2 3"


def test_at_and_getitem_bounds():
    v = Vector(["x", "y"])
    assert v.at(1) == "y"
    assert v[0] == "x"
    with pytest.raises(IndexError, match="Index is out of range !"):
        v.at(2)
    with pytest.raises(IndexError, match="Index is out of range!"):
        v[-1]


def test_setitem():
    v = Vector([1, 2, 3])
    v[1] = 9
    assert list(v) == [1, 9, 3]
    with pytest.raises(IndexError):
        v[3] = 0


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_matches_list(index):
    base = [1, 2, 3]
    v = Vector(base)
    v.insert(index, 0)
    expected = list(base)
    expected.insert(index, 0)
    assert list(v) == expected


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        Vector([1]).insert(2, 5)


def test_prepend():
    v = Vector()
    v.prepend(2)
    v.prepend(1)
    assert list(v) == [1, 2]


def test_pop_back():
    v = Vector([4, 5])
    assert v.pop_back() == 5
    assert list(v) == [4]
    v.pop_back()
    with pytest.raises(IndexError, match="pop_back operation is not valid for empty array"):
        v.pop_back()


def test_delete_index():
    v = Vector([1, 2, 3])
    v.delete_index(1)
    assert list(v) == [1, 3]
    with pytest.raises(IndexError, match="Index is out of range"):
        v.delete_index(2)


def test_find():
    v = Vector([7, 8, 7])
    assert v.find(7) == 0
    assert v.find(8) == 1
    assert v.find(100) == -1


def test_remove_all_occurrences():
    v = Vector([1, 2, 1, 1, 3])
    v.remove(1)
    assert list(v) == [2, 3]


@given(st.lists(st.integers()))
def test_roundtrip_and_capacity_invariant(items):
    v = Vector(items)
    assert list(v) == items
    assert v.capacity() >= len(v)
    assert [v.pop_back() for _ in items] == items[::-1]
    assert v.is_empty()