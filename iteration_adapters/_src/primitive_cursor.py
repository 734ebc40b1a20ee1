from abc import abstractmethod
from typing import TypeVar

from .abc_cursor import AbstractCursor

__all__ = ["DoubleCursor", "IntCursor", "LongCursor"]

Self = TypeVar("Self", bound=AbstractCursor)


class IntCursor(AbstractCursor[int]):
    """Cursor specialized for 32-bit integers, see next_int."""

    __slots__ = ()

    def next(self: Self, /) -> int:
        return self.next_int()

    @abstractmethod
    def next_int(self: Self, /) -> int:
        raise NotImplementedError("next_int is a required method for int cursors")


class LongCursor(AbstractCursor[int]):
    """Cursor specialized for 64-bit integers, see next_long."""

    __slots__ = ()

    def next(self: Self, /) -> int:
        return self.next_long()

    @abstractmethod
    def next_long(self: Self, /) -> int:
        raise NotImplementedError("next_long is a required method for long cursors")


class DoubleCursor(AbstractCursor[float]):
    """Cursor specialized for double precision floats, see next_double."""

    __slots__ = ()

    def next(self: Self, /) -> float:
        return self.next_double()

    @abstractmethod
    def next_double(self: Self, /) -> float:
        raise NotImplementedError("next_double is a required method for double cursors")
