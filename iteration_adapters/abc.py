from ._src.abc_cursor import AbstractCursor
from ._src.cursor_protocol import (
    CursorProtocol,
    DoubleCursorProtocol,
    EnumerationProtocol,
    IntCursorProtocol,
    LongCursorProtocol,
    SupportsLengthHint,
)
from ._src.primitive_cursor import DoubleCursor, IntCursor, LongCursor

__all__ = [
    "AbstractCursor",
    "CursorProtocol",
    "DoubleCursor",
    "DoubleCursorProtocol",
    "EnumerationProtocol",
    "IntCursor",
    "IntCursorProtocol",
    "LongCursor",
    "LongCursorProtocol",
    "SupportsLengthHint",
]
