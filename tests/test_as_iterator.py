import pytest
from hypothesis import given, strategies as st

import iteration_adapters as ia


class ListEnumeration:
    """Legacy enumeration over a list."""

    def __init__(self, elements):
        self.elements = list(elements)
        self.index = 0

    def has_more_elements(self):
        return self.index < len(self.elements)

    def next_element(self):
        if self.index >= len(self.elements):
            raise ia.NoSuchElementError("enumeration is exhausted")
        element = self.elements[self.index]
        self.index += 1
        return element


def test_yields_elements_in_order():
    cursor = ia.as_iterator(ListEnumeration("abc"))
    seen = []
    while cursor.has_next():
        seen.append(cursor.next())
    assert seen == ["a", "b", "c"]
    assert not cursor.has_next()


@given(st.lists(st.integers()))
def test_python_iteration(elements):
    assert list(ia.as_iterator(ListEnumeration(elements))) == elements


def test_delegates_to_enumeration():
    enumeration = ListEnumeration([1, 2])
    cursor = ia.as_iterator(enumeration)
    assert cursor.next() == 1
    assert enumeration.index == 1
    assert cursor.has_next()


def test_exhausted_behaviour_is_the_enumerations():
    cursor = ia.as_iterator(ListEnumeration([]))
    with pytest.raises(ia.NoSuchElementError, match="enumeration is exhausted"):
        cursor.next()


def test_remove_is_unsupported():
    cursor = ia.as_iterator(ListEnumeration("abc"))
    with pytest.raises(ia.UnsupportedOperationError, match="remove"):
        cursor.remove()
    cursor.next()
    with pytest.raises(ia.UnsupportedOperationError):
        cursor.remove()


def test_returns_new_cursor_each_time():
    enumeration = ListEnumeration([1])
    assert ia.as_iterator(enumeration) is not ia.as_iterator(enumeration)


def test_for_each_remaining():
    seen = []
    ia.for_each_remaining(ia.as_iterator(ListEnumeration([3, 2, 1])), seen.append)
    assert seen == [3, 2, 1]


def test_null_enumeration():
    with pytest.raises(ia.NullArgumentError, match="enumeration"):
        ia.as_iterator(None)


def test_rejects_non_enumerations():
    with pytest.raises(TypeError, match="expected an enumeration"):
        ia.as_iterator(iter([1, 2]))


def test_repr():
    enumeration = ListEnumeration([])
    assert repr(ia.as_iterator(enumeration)) == f"EnumerationCursor({enumeration!r})"
