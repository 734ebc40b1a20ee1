"""
Static helpers bringing the bulk traversal, enumeration adapting and
canonical empty/singleton cursors of newer runtimes to any cursor.

The cursor is always passed explicitly as the first argument instead of
being grafted onto existing types.
"""
from __future__ import annotations
import sys
from typing import Any, TypeVar, Union

if sys.version_info < (3, 9):
    from typing import Callable, Iterable, Iterator
else:
    from collections.abc import Callable, Iterable, Iterator

from .abc_cursor import AbstractCursor
from .cursor_protocol import (
    CursorProtocol,
    DoubleCursorProtocol,
    EnumerationProtocol,
    IntCursorProtocol,
    LongCursorProtocol,
)
from .empty_cursor import EMPTY_CURSOR
from .enumeration_cursor import EnumerationCursor
from .errors import require_non_null
from .iterable_cursor import IterableCursor
from .singleton_cursor import SingletonCursor

__all__ = [
    "as_cursor",
    "as_iterator",
    "empty_iterator",
    "for_each_remaining",
    "for_each_remaining_double",
    "for_each_remaining_int",
    "for_each_remaining_long",
]

T = TypeVar("T")


def for_each_remaining(cursor: Union[CursorProtocol[T], Iterator[T]], action: Callable[[T], Any], /) -> None:
    """
    Calls action on every remaining element of the cursor, in order,
    until the cursor is exhausted.

    Plain Python iterators are accepted as well and are looped over
    directly. If action raises, the exception propagates unchanged and
    the remaining elements are left in the cursor.

    Raises
    ------
    NullArgumentError
        If cursor or action is None. Nothing is consumed.
    TypeError
        If cursor is neither a cursor nor an iterator.
    """
    require_non_null(cursor, "cursor")
    require_non_null(action, "action")
    if isinstance(cursor, CursorProtocol):
        while cursor.has_next():
            action(cursor.next())
    elif isinstance(cursor, Iterator):
        for element in cursor:
            action(element)
    else:
        raise TypeError(f"expected a cursor or an iterator, got {cursor!r}")


def for_each_remaining_int(cursor: IntCursorProtocol, action: Callable[[int], Any], /) -> None:
    """Like for_each_remaining, but drives next_int on a 32-bit int cursor."""
    require_non_null(cursor, "cursor")
    require_non_null(action, "action")
    if not isinstance(cursor, IntCursorProtocol):
        raise TypeError(f"expected an int cursor, got {cursor!r}")
    while cursor.has_next():
        action(cursor.next_int())


def for_each_remaining_long(cursor: LongCursorProtocol, action: Callable[[int], Any], /) -> None:
    """Like for_each_remaining, but drives next_long on a 64-bit int cursor."""
    require_non_null(cursor, "cursor")
    require_non_null(action, "action")
    if not isinstance(cursor, LongCursorProtocol):
        raise TypeError(f"expected a long cursor, got {cursor!r}")
    while cursor.has_next():
        action(cursor.next_long())


def for_each_remaining_double(cursor: DoubleCursorProtocol, action: Callable[[float], Any], /) -> None:
    """Like for_each_remaining, but drives next_double on a double cursor."""
    require_non_null(cursor, "cursor")
    require_non_null(action, "action")
    if not isinstance(cursor, DoubleCursorProtocol):
        raise TypeError(f"expected a double cursor, got {cursor!r}")
    while cursor.has_next():
        action(cursor.next_double())


def as_iterator(enumeration: EnumerationProtocol[T], /) -> AbstractCursor[T]:
    """
    Wraps a legacy enumeration in a cursor.

    The enumeration should not be used directly afterwards, doing so
    leaves the returned cursor in an unspecified state.
    """
    require_non_null(enumeration, "enumeration")
    if not isinstance(enumeration, EnumerationProtocol):
        raise TypeError(f"expected an enumeration, got {enumeration!r}")
    return EnumerationCursor(enumeration)


def as_cursor(iterable: Iterable[T], /) -> AbstractCursor[T]:
    require_non_null(iterable, "iterable")
    if isinstance(iterable, AbstractCursor):
        return iterable
    elif not isinstance(iterable, Iterable):
        raise TypeError(f"expected an iterable, got {iterable!r}")
    return IterableCursor(iterable)


def empty_iterator() -> AbstractCursor[Any]:
    """
    Returns a cursor with no elements. Its remove raises
    IllegalStateError, not UnsupportedOperationError.

    The same instance is currently returned every time, but callers
    should not rely on its identity.
    """
    return EMPTY_CURSOR


def singleton_iterator(value: T, /) -> AbstractCursor[T]:
    return SingletonCursor(value)
