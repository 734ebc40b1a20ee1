from typing import Optional, TypeVar

__all__ = [
    "IllegalStateError",
    "IterationAdapterError",
    "NoSuchElementError",
    "NullArgumentError",
    "UnsupportedOperationError",
    "require_non_null",
]

T = TypeVar("T")


class IterationAdapterError(Exception):
    """Base class of every error raised by the iteration adapters."""

    __slots__ = ()


class NullArgumentError(IterationAdapterError, TypeError):
    """A required argument was None."""

    __slots__ = ()


class NoSuchElementError(IterationAdapterError, LookupError):
    """
    The next element was requested from an exhausted cursor.

    Not a StopIteration on purpose: that is only raised from __next__.
    """

    __slots__ = ()


class UnsupportedOperationError(IterationAdapterError, NotImplementedError):

    __slots__ = ()


class IllegalStateError(IterationAdapterError, RuntimeError):

    __slots__ = ()


def require_non_null(obj: Optional[T], name: str, /) -> T:
    if obj is None:
        raise NullArgumentError(f"{name} must not be None")
    return obj
