import operator

import pytest

import iteration_adapters as ia
from iteration_adapters._src.iterators import singleton_iterator
from iteration_adapters.abc import SupportsLengthHint


def test_empty_has_no_elements():
    cursor = ia.empty_iterator()
    for _ in range(3):
        assert not cursor.has_next()
        with pytest.raises(ia.NoSuchElementError):
            cursor.next()


def test_empty_remove_is_illegal_state():
    cursor = ia.empty_iterator()
    with pytest.raises(ia.IllegalStateError, match="remove"):
        cursor.remove()
    with pytest.raises(ia.IllegalStateError):
        cursor.remove()


def test_empty_remove_is_not_unsupported_operation():
    with pytest.raises(ia.IllegalStateError) as info:
        ia.empty_iterator().remove()
    assert not isinstance(info.value, ia.UnsupportedOperationError)


def test_empty_python_iteration():
    cursor = ia.empty_iterator()
    assert list(cursor) == []
    with pytest.raises(StopIteration):
        next(cursor)
    assert operator.length_hint(cursor) == 0


def test_empty_is_shared():
    assert ia.empty_iterator() is ia.empty_iterator()
    assert repr(ia.empty_iterator()) == "EmptyCursor()"


def test_empty_for_each_remaining():
    ia.for_each_remaining(ia.empty_iterator(), pytest.fail)


def test_singleton_yields_once():
    cursor = singleton_iterator("x")
    assert cursor.has_next()
    assert cursor.has_next()
    assert cursor.next() == "x"
    assert not cursor.has_next()
    with pytest.raises(ia.NoSuchElementError):
        cursor.next()
    assert not cursor.has_next()


def test_singleton_none():
    cursor = singleton_iterator(None)
    assert cursor.has_next()
    assert cursor.next() is None
    assert not cursor.has_next()


def test_singleton_remove_is_unsupported():
    cursor = singleton_iterator(1)
    with pytest.raises(ia.UnsupportedOperationError, match="remove"):
        cursor.remove()
    cursor.next()
    with pytest.raises(ia.UnsupportedOperationError):
        cursor.remove()


def test_singleton_python_iteration():
    cursor = singleton_iterator(5)
    assert operator.length_hint(cursor) == 1
    assert repr(cursor) == "SingletonCursor(5)"
    assert list(cursor) == [5]
    assert operator.length_hint(cursor) == 0
    assert repr(cursor) == "SingletonCursor(<exhausted>)"
    assert list(cursor) == []


def test_singleton_for_each_remaining():
    seen = []
    ia.for_each_remaining(singleton_iterator(7), seen.append)
    assert seen == [7]


def test_singleton_is_not_public():
    assert "singleton_iterator" not in ia.__all__
    assert not hasattr(ia, "singleton_iterator")


def test_length_hint_protocol():
    assert isinstance(ia.empty_iterator(), SupportsLengthHint)
    assert isinstance(singleton_iterator(1), SupportsLengthHint)
