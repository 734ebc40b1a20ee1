"""
Brings the iterator helpers of newer runtimes to any cursor: bulk
traversal with for_each_remaining (with int, long and double variants),
adapting legacy enumerations with as_iterator, and a canonical empty
cursor. Cursors are also ordinary Python iterators, and as_cursor turns
any Python iterable into a cursor.
"""
from . import abc
from ._src.abc_cursor import AbstractCursor
from ._src.cursor_protocol import CursorProtocol, EnumerationProtocol
from ._src.errors import (
    IllegalStateError,
    IterationAdapterError,
    NoSuchElementError,
    NullArgumentError,
    UnsupportedOperationError,
)
from ._src.iterators import (
    as_cursor,
    as_iterator,
    empty_iterator,
    for_each_remaining,
    for_each_remaining_double,
    for_each_remaining_int,
    for_each_remaining_long,
)
from ._src.primitive_cursor import DoubleCursor, IntCursor, LongCursor

__version__ = "1.0.0"

__all__ = [
    "AbstractCursor",
    "CursorProtocol",
    "DoubleCursor",
    "EnumerationProtocol",
    "IllegalStateError",
    "IntCursor",
    "IterationAdapterError",
    "LongCursor",
    "NoSuchElementError",
    "NullArgumentError",
    "UnsupportedOperationError",
    "as_cursor",
    "as_iterator",
    "empty_iterator",
    "for_each_remaining",
    "for_each_remaining_double",
    "for_each_remaining_int",
    "for_each_remaining_long",
]
