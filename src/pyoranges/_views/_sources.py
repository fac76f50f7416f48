from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Mapping, Sequence, Sized
from typing import Any, Self, TypeGuard

import cytoolz as cz

from .._core import IterationOutOfRangeError, get_config
from .._results import NONE, Option, Some
from ._base import Cursor, Range

_EXHAUSTED: Any = object()


def is_sequence[T](data: Iterable[T]) -> TypeGuard[Sequence[T]]:
    return (
        not isinstance(data, Mapping)
        and hasattr(data, "__getitem__")
        and hasattr(data, "__len__")
    )


class IndexCursor[T](Cursor[T]):
    """Random-access cursor over a `Sequence`, by index."""

    __slots__ = ("_data", "_index")

    def __init__(self, data: Sequence[T], index: int) -> None:
        self._data = data
        self._index = index

    def get(self) -> T:
        if not 0 <= self._index < len(self._data):
            msg = f"index {self._index} is outside of a sequence of length {len(self._data)}"
            raise IterationOutOfRangeError(msg)
        return self._data[self._index]

    def advance(self) -> Self:
        if self._index >= len(self._data):
            msg = "cannot advance past the end of a sequence"
            raise IterationOutOfRangeError(msg)
        self._index += 1
        return self

    def retreat(self) -> Self:
        if self._index <= 0:
            msg = "cannot retreat before the start of a sequence"
            raise IterationOutOfRangeError(msg)
        self._index -= 1
        return self

    def copy(self) -> Self:
        return self.__class__(self._data, self._index)

    def is_bidirectional(self) -> bool:
        return True

    def distance_to(self, other: Cursor[T]) -> Option[int]:
        if isinstance(other, IndexCursor) and other._data is self._data:
            return Some(other._index - self._index)
        return NONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self._data is other._data and self._index == other._index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self._index})"


class StreamCursor[T](Cursor[T]):
    """Forward cursor over a Python `Iterator`.

    The cursor always holds the element it points to, pulled one step ahead of `get()`.

    Copies are made with `itertools.tee`, so only the elements between the slowest and the fastest copy are buffered.

    Positions are compared by the number of steps taken from the start, and every exhausted cursor compares equal to the end.
    """

    __slots__ = ("_iterator", "_position", "_value")

    def __init__(self, iterator: Iterator[T], position: int = 0) -> None:
        self._iterator = iterator
        self._position = position
        self._value: T = next(iterator, _EXHAUSTED)

    @classmethod
    def exhausted(cls) -> StreamCursor[T]:
        """The end cursor of any stream."""
        return cls(iter(()))

    @property
    def done(self) -> bool:
        return self._value is _EXHAUSTED

    def get(self) -> T:
        if self.done:
            msg = "cannot dereference an exhausted stream"
            raise IterationOutOfRangeError(msg)
        return self._value

    def advance(self) -> Self:
        if self.done:
            msg = "cannot advance an exhausted stream"
            raise IterationOutOfRangeError(msg)
        self._value = next(self._iterator, _EXHAUSTED)
        self._position += 1
        return self

    def copy(self) -> Self:
        twin = self.__class__.__new__(self.__class__)
        self._iterator, twin._iterator = itertools.tee(self._iterator)
        twin._position = self._position
        twin._value = self._value
        return twin

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamCursor):
            return NotImplemented
        if self.done or other.done:
            return self.done and other.done
        return self._position == other._position

    def __repr__(self) -> str:
        state = "done" if self.done else f"position={self._position}"
        return f"{self.__class__.__name__}({state})"


class SequenceRange[T](Range[T]):
    """Bidirectional, sized `Range` over a `Sequence` (list, tuple, str, range...)."""

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().source_repr(self._data)})"

    def begin(self) -> IndexCursor[T]:
        return IndexCursor(self._data, 0)

    def end(self) -> IndexCursor[T]:
        return IndexCursor(self._data, len(self._data))

    def is_bidirectional(self) -> bool:
        return True

    def is_sized(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)


class IterableRange[T](Range[T]):
    """Forward `Range` over a re-iterable object; every `begin()` starts a fresh iteration."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[T]) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().source_repr(self._data)})"

    def begin(self) -> StreamCursor[T]:
        return StreamCursor(iter(self._data))

    def end(self) -> StreamCursor[T]:
        return StreamCursor.exhausted()

    def is_sized(self) -> bool:
        return isinstance(self._data, Sized)

    def size(self) -> int:
        if not isinstance(self._data, Sized):
            return super().size()
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)


class IteratorRange[T](Range[T]):
    """Single-pass `Range` over an `Iterator`.

    `begin()` continues from wherever the iterator currently is, so the range can only be walked once.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterator[T]) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def begin(self) -> StreamCursor[T]:
        return StreamCursor(self._data)

    def end(self) -> StreamCursor[T]:
        return StreamCursor.exhausted()

    def __iter__(self) -> Iterator[T]:
        return self._data


def all_of[T](data: Iterable[T]) -> Range[T]:
    """Adapt any iterable into a `Range`.

    - A `Range` is returned as is.
    - A random-access sequence gets index cursors: bidirectional and sized.
    - An `Iterator` can be walked only once.
    - Any other iterable is restarted on every `begin()`.

    Args:
        data (Iterable[T]): The object to adapt.

    Returns:
        Range[T]: A range over the same elements.

    Raises:
        TypeError: If `data` is not iterable.
    """
    match data:
        case Range():
            return data
        case Iterator():
            return IteratorRange(data)
        case _ if is_sequence(data):
            return SequenceRange(data)
        case _ if cz.itertoolz.isiterable(data):
            return IterableRange(data)
        case _:
            msg = f"{type(data).__name__!r} object is not iterable"
            raise TypeError(msg)


def known_size(data: Iterable[Any]) -> Option[int]:
    """Size of an iterable when it is known without iterating."""
    match data:
        case Range():
            return Some(data.size()) if data.is_sized() else NONE
        case Iterator():
            return NONE
        case Sized():
            return Some(len(data))
        case _:
            return NONE
