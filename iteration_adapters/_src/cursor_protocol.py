from typing import Protocol, TypeVar, runtime_checkable

__all__ = [
    "CursorProtocol",
    "DoubleCursorProtocol",
    "EnumerationProtocol",
    "IntCursorProtocol",
    "LongCursorProtocol",
    "SupportsLengthHint",
]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self")


@runtime_checkable
class CursorProtocol(Protocol[T_co]):

    __slots__ = ()

    def has_next(self: Self, /) -> bool: ...
    def next(self: Self, /) -> T_co: ...


@runtime_checkable
class IntCursorProtocol(Protocol):

    __slots__ = ()

    def has_next(self: Self, /) -> bool: ...
    def next_int(self: Self, /) -> int: ...


@runtime_checkable
class LongCursorProtocol(Protocol):

    __slots__ = ()

    def has_next(self: Self, /) -> bool: ...
    def next_long(self: Self, /) -> int: ...


@runtime_checkable
class DoubleCursorProtocol(Protocol):

    __slots__ = ()

    def has_next(self: Self, /) -> bool: ...
    def next_double(self: Self, /) -> float: ...


@runtime_checkable
class EnumerationProtocol(Protocol[T_co]):
    """Legacy cursors which only offer has_more_elements/next_element."""

    __slots__ = ()

    def has_more_elements(self: Self, /) -> bool: ...
    def next_element(self: Self, /) -> T_co: ...


@runtime_checkable
class SupportsLengthHint(Protocol):

    def __length_hint__(self: Self, /) -> int:
        ...
