from __future__ import annotations
import sys
from typing import Generic, Optional, TypeVar

if sys.version_info < (3, 9):
    from typing import Iterable, Iterator
else:
    from collections.abc import Iterable, Iterator

from .abc_cursor import AbstractCursor
from .errors import NoSuchElementError

__all__ = ["IterableCursor"]

T = TypeVar("T")

Self = TypeVar("Self", bound="IterableCursor")


class IterableCursor(AbstractCursor[T], Generic[T]):
    """
    Adapts a Python iterable to the cursor interface.

    has_next needs to know if another element exists, so at most one
    element is pulled from the iterator ahead of time and kept until
    next is called. Once the iterator raises StopIteration it is
    dropped and the cursor stays exhausted.
    """
    _buffer: Optional[T]
    _buffered: bool
    _iterator: Optional[Iterator[T]]

    __slots__ = {
        "_buffer":
            "The element pulled ahead of time, if _buffered.",
        "_buffered":
            "True if _buffer holds the next element.",
        "_iterator":
            "The wrapped iterator, or None once it is exhausted.",
    }

    def __init__(self: Self, iterable: Iterable[T], /) -> None:
        self._buffer = None
        self._buffered = False
        self._iterator = iter(iterable)

    def __repr__(self: Self, /) -> str:
        if self._iterator is None and not self._buffered:
            return f"{type(self).__name__}(<exhausted>)"
        return f"{type(self).__name__}({self._iterator!r})"

    def has_next(self: Self, /) -> bool:
        if self._buffered:
            return True
        elif self._iterator is None:
            return False
        try:
            self._buffer = next(self._iterator)
        except StopIteration:
            self._iterator = None
            return False
        self._buffered = True
        return True

    def next(self: IterableCursor[T], /) -> T:
        if not self.has_next():
            raise NoSuchElementError("iterable cursor is exhausted")
        element = self._buffer
        self._buffer = None
        self._buffered = False
        return element
