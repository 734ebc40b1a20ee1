from typing import Any, Final, NoReturn, TypeVar

from .abc_cursor import AbstractCursor
from .errors import IllegalStateError, NoSuchElementError

__all__ = ["EMPTY_CURSOR", "EmptyCursor"]

Self = TypeVar("Self", bound="EmptyCursor")


class EmptyCursor(AbstractCursor[Any]):
    """
    A cursor over nothing. It holds no state, so one shared instance,
    EMPTY_CURSOR, serves every element type.

    Unlike every other cursor here, remove raises IllegalStateError
    rather than UnsupportedOperationError: there is never a previously
    returned element which could be removed.
    """

    __slots__ = ()

    def __length_hint__(self: Self, /) -> int:
        return 0

    def __next__(self: Self, /) -> NoReturn:
        raise StopIteration

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}()"

    def has_next(self: Self, /) -> bool:
        return False

    def next(self: Self, /) -> NoReturn:
        raise NoSuchElementError("empty cursor has no elements")

    def remove(self: Self, /) -> NoReturn:
        raise IllegalStateError("remove")


EMPTY_CURSOR: Final[EmptyCursor] = EmptyCursor()
