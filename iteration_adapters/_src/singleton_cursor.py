from typing import Generic, TypeVar

from .abc_cursor import AbstractCursor
from .errors import NoSuchElementError

__all__ = ["SingletonCursor"]

T = TypeVar("T")

Self = TypeVar("Self", bound="SingletonCursor")


class SingletonCursor(AbstractCursor[T], Generic[T]):
    _has_next: bool
    _value: T

    __slots__ = {
        "_has_next":
            "True until the value has been returned by next.",
        "_value":
            "The single value produced by the cursor.",
    }

    def __init__(self: Self, value: T, /) -> None:
        self._has_next = True
        self._value = value

    def __length_hint__(self: Self, /) -> int:
        return 1 if self._has_next else 0

    def __repr__(self: Self, /) -> str:
        if self._has_next:
            return f"{type(self).__name__}({self._value!r})"
        else:
            return f"{type(self).__name__}(<exhausted>)"

    def has_next(self: Self, /) -> bool:
        return self._has_next

    def next(self: Self, /) -> T:
        if self._has_next:
            self._has_next = False
            return self._value
        raise NoSuchElementError("singleton cursor already returned its element")
