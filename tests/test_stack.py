import pytest
from hypothesis import given
from hypothesis import strategies as st

from basicds.stack import Stack


def test_push_and_show():
    s = Stack()
    for value in (10, 30, 40):
        s.push(value)
    assert str(s) == "10 30 40"
    assert s.is_empty() is False
    assert len(s) == 3


def test_pop_and_peek():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.peek() == 2
    assert s.pop() == 2
    assert s.peek() == 1
    assert list(s) == [1]


def test_underflow_and_empty_peek():
    s = Stack()
    assert s.is_empty() is True
    with pytest.raises(IndexError, match="stack underflow"):
        s.pop()
    with pytest.raises(IndexError, match="Empty stack"):
        s.peek()


def test_overflow():
    s = Stack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(IndexError, match="stack overflow"):
        s.push(3)
    assert list(s) == [1, 2]


def test_default_capacity_limit():
    s = Stack()
    for value in range(1000):
        s.push(value)
    with pytest.raises(IndexError):
        s.push(1000)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-5)


@given(st.lists(st.integers(), max_size=50))
def test_lifo_roundtrip(items):
    s = Stack()
    for item in items:
        s.push(item)
    assert list(s) == items
    assert [s.pop() for _ in items] == items[::-1]
    assert s.is_empty()