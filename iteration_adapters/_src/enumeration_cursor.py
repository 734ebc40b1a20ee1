from typing import Final, Generic, TypeVar

from .abc_cursor import AbstractCursor
from .cursor_protocol import EnumerationProtocol

__all__ = ["EnumerationCursor"]

T = TypeVar("T")

Self = TypeVar("Self", bound="EnumerationCursor")


class EnumerationCursor(AbstractCursor[T], Generic[T]):
    _enumeration: Final[EnumerationProtocol[T]]

    __slots__ = {
        "_enumeration":
            "The wrapped enumeration. Driving it directly afterwards leaves this cursor undefined.",
    }

    def __init__(self: Self, enumeration: EnumerationProtocol[T], /) -> None:
        self._enumeration = enumeration

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._enumeration!r})"

    def has_next(self: Self, /) -> bool:
        return self._enumeration.has_more_elements()

    def next(self: Self, /) -> T:
        return self._enumeration.next_element()
