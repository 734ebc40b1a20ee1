from __future__ import annotations
import collections.abc
import sys
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

if sys.version_info < (3, 9):
    from typing import Callable, Iterator
else:
    from collections.abc import Callable, Iterator

from .errors import UnsupportedOperationError, require_non_null

__all__ = ["AbstractCursor"]

Self = TypeVar("Self", bound="AbstractCursor")
T = TypeVar("T")


class AbstractCursor(Iterator[T], ABC, Generic[T]):
    """
    Base class for cursors, iterators which can be asked whether they
    have more elements without consuming one.

    Subclasses implement has_next and next. Cursors are immutable by
    default: remove raises UnsupportedOperationError unless overridden.
    Every cursor is also a regular Python iterator.
    """

    __slots__ = ()

    def __iter__(self: Self, /) -> Self:
        return self

    def __next__(self: AbstractCursor[T], /) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self: Self, /) -> str:
        return f"<{type(self).__name__} has_next={self.has_next()!r}>"

    def for_each_remaining(self: AbstractCursor[T], action: Callable[[T], object], /) -> None:
        require_non_null(action, "action")
        while self.has_next():
            action(self.next())

    @abstractmethod
    def has_next(self: Self, /) -> bool:
        raise NotImplementedError("has_next is a required method for cursors")

    @abstractmethod
    def next(self: AbstractCursor[T], /) -> T:
        raise NotImplementedError("next is a required method for cursors")

    def remove(self: Self, /) -> None:
        raise UnsupportedOperationError("remove")


if sys.version_info < (3, 9):
    collections.abc.Iterator.register(AbstractCursor)
