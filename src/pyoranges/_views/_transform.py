from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Reversible

from .._core import get_config
from .._results import NONE, Option
from ._base import Range
from ._sources import StreamCursor, known_size


class TransformView[T, U](Range[U]):
    """A lazy pass-through over a Python iterator function.

    `func` is applied to `source` again on every `begin()`, so the view can be walked as many times as the source can.

    Args:
        source (Iterable[T]): The elements to transform.
        func (Callable[[Iterable[T]], Iterator[U]]): Builds the transformed iterator from the source.
        size_of (Callable[[int], int] | None): Computes the view size from the source size, when the transform preserves countability.
    """

    __slots__ = ("_func", "_size_of", "_source")

    def __init__(
        self,
        source: Iterable[T],
        func: Callable[[Iterable[T]], Iterator[U]],
        size_of: Callable[[int], int] | None = None,
    ) -> None:
        self._source = source
        self._func = func
        self._size_of = size_of

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", type(self._func).__name__)
        return f"{self.__class__.__name__}({get_config().source_repr(self._source)}, {name})"

    def _known_size(self) -> Option[int]:
        if self._size_of is None:
            return NONE
        return known_size(self._source).map(self._size_of)

    def begin(self) -> StreamCursor[U]:
        return StreamCursor(iter(self._func(self._source)))

    def end(self) -> StreamCursor[U]:
        return StreamCursor.exhausted()

    def is_sized(self) -> bool:
        return self._known_size().is_some()

    def size(self) -> int:
        known = self._known_size()
        if known.is_none():
            return super().size()
        return known.unwrap()

    def __iter__(self) -> Iterator[U]:
        return iter(self._func(self._source))


def walk_backward[T](data: Range[T]) -> Iterator[T]:
    """Yield the elements of a bidirectional range from last to first."""
    first = data.begin()
    cursor = data.end()
    while cursor != first:
        yield cursor.retreat().get()


def reverse_iter[T](data: Iterable[T]) -> Iterator[T]:
    match data:
        case Range() if data.is_bidirectional():
            return walk_backward(data)
        case Range():
            return reversed(tuple(data))
        case Reversible():
            return reversed(data)
        case _:
            return reversed(tuple(data))

