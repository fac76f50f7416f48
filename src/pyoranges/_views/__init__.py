from ._append import AppendCursor, AppendPosition, AppendView
from ._base import Cursor, Range, SubRange, advance_by, distance
from ._chunk import ChunkCursor, ChunkView
from ._concat import ConcatCursor, ConcatView
from ._ordered import OrderedView
from ._sources import (
    IndexCursor,
    IterableRange,
    IteratorRange,
    SequenceRange,
    StreamCursor,
    all_of,
    known_size,
)
from ._transform import TransformView, reverse_iter

__all__ = [
    "AppendCursor",
    "AppendPosition",
    "AppendView",
    "ChunkCursor",
    "ChunkView",
    "ConcatCursor",
    "ConcatView",
    "Cursor",
    "IndexCursor",
    "IterableRange",
    "IteratorRange",
    "OrderedView",
    "Range",
    "SequenceRange",
    "StreamCursor",
    "SubRange",
    "TransformView",
    "advance_by",
    "all_of",
    "distance",
    "known_size",
    "reverse_iter",
]
