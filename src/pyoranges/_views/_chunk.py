from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from .._core import InvalidArgumentError, IterationOutOfRangeError
from ._base import Cursor, Range, SubRange, advance_by, check_not_at_end, distance, retreat_by
from ._sources import all_of


class ChunkCursor[T](Cursor[SubRange[T]]):
    """Cursor over the chunks of a `ChunkView`, holding the `[from, to)` window of the current chunk."""

    __slots__ = ("_from", "_to", "_view")

    def __init__(self, view: ChunkView[T], start: Cursor[T], stop: Cursor[T]) -> None:
        self._view = view
        self._from = start
        self._to = stop

    def get(self) -> SubRange[T]:
        check_not_at_end(self._from, self._view.source.end(), "dereference")
        return SubRange(self._from.copy(), self._to.copy())

    def advance(self) -> Self:
        end = self._view.source.end()
        check_not_at_end(self._from, end, "advance")
        self._from = self._to
        self._to = self._to.copy()
        advance_by(self._to, self._view.chunk_size, end)
        return self

    def retreat(self) -> Self:
        if not self.is_bidirectional():
            return super().retreat()
        source = self._view.source
        if self._from == source.begin():
            msg = "cannot retreat before the first chunk"
            raise IterationOutOfRangeError(msg)
        if self._from == source.end():
            step = self._view.last_chunk_size()
        else:
            step = self._view.chunk_size
        self._to = self._from.copy()
        retreat_by(self._from, step)
        return self

    def copy(self) -> Self:
        return self.__class__(self._view, self._from.copy(), self._to.copy())

    def is_bidirectional(self) -> bool:
        return self._from.is_bidirectional()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkCursor):
            return NotImplemented
        return self._from == other._from


class ChunkView[T](Range[SubRange[T]]):
    """Consecutive, non-overlapping windows of `size` elements over `source`.

    Each chunk is a lazy `SubRange`, not a copy. The last chunk holds the remaining elements when the source length is not a multiple of `size`.

    Args:
        source (Iterable[T]): The elements to split.
        size (int): Number of elements per chunk, at least 1.

    Raises:
        InvalidArgumentError: If `size` is not a positive integer.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [list(chunk) for chunk in pr.ChunkView([1, 2, 3, 4, 5], 2)]
    [[1, 2], [3, 4], [5]]
    >>> pr.ChunkView(range(10), 3).size()
    4

    ```
    """

    __slots__ = ("_size", "_source")

    def __init__(self, source: Iterable[T], size: int) -> None:
        if not isinstance(size, int) or isinstance(size, bool):
            msg = f"chunk size must be an integer, got {type(size).__name__}"
            raise InvalidArgumentError(msg)
        if size == 0:
            msg = "chunk size cannot be 0"
            raise InvalidArgumentError(msg)
        if size < 0:
            msg = f"chunk size must be positive, got {size}"
            raise InvalidArgumentError(msg)
        self._source = all_of(source)
        self._size = size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._source!r}, size={self._size})"

    @property
    def source(self) -> Range[T]:
        return self._source

    @property
    def chunk_size(self) -> int:
        return self._size

    def last_chunk_size(self) -> int:
        """Number of elements in the final chunk of a non-empty source."""
        if self._source.is_sized():
            length = self._source.size()
        else:
            length = distance(self._source.begin(), self._source.end())
        return length % self._size or self._size

    def begin(self) -> ChunkCursor[T]:
        start = self._source.begin()
        stop = start.copy()
        advance_by(stop, self._size, self._source.end())
        return ChunkCursor(self, start, stop)

    def end(self) -> ChunkCursor[T]:
        return ChunkCursor(self, self._source.end(), self._source.end())

    def is_bidirectional(self) -> bool:
        return self._source.is_bidirectional()

    def is_sized(self) -> bool:
        return self._source.is_sized()

    def size(self) -> int:
        if not self.is_sized():
            return super().size()
        return -(-self._source.size() // self._size)
