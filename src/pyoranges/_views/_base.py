from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Self

from .._core import IterationOutOfRangeError, Pipeable, get_config
from .._results import NONE, Option


class Cursor[T](ABC):
    """A position inside a `Range`.

    A cursor can be dereferenced with `get()`, moved forward in place with `advance()`,
    duplicated with `copy()` and compared with `==`.

    Bidirectional cursors also support `retreat()`.

    Cursors of a view keep a reference to that view, and are only meaningful while it is alive.
    """

    __slots__ = ()
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def get(self) -> T:
        """Dereference the cursor.

        Raises:
            IterationOutOfRangeError: If the cursor is past the last element.
        """
        ...

    @abstractmethod
    def advance(self) -> Self:
        """Move to the next position, in place.

        Raises:
            IterationOutOfRangeError: If the cursor already is at the end.
        """
        ...

    @abstractmethod
    def copy(self) -> Self: ...

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    def is_bidirectional(self) -> bool:
        return False

    def retreat(self) -> Self:
        """Move to the previous position, in place.

        Raises:
            TypeError: If the cursor can only move forward.
            IterationOutOfRangeError: If the cursor already is at the start.
        """
        msg = f"{self.__class__.__name__} can only move forward"
        raise TypeError(msg)

    def distance_to(self, other: Cursor[T]) -> Option[int]:  # noqa: ARG002
        """Number of steps from this cursor to `other`, when it can be known without walking.

        Returns:
            Option[int]: `Some(steps)` for random-access cursors, `NONE` otherwise.
        """
        return NONE


class Range[T](Pipeable, Iterable[T]):
    """Base class of every sequence taking part in a pipeline.

    A `Range` hands out a `begin()` and an `end()` cursor, and is iterated by walking from the former to the latter.

    Optional capabilities are reported by `is_bidirectional()` and `is_sized()`.

    Subclasses must implement `begin()` and `end()`.
    """

    __slots__ = ()

    @abstractmethod
    def begin(self) -> Cursor[T]: ...

    @abstractmethod
    def end(self) -> Cursor[T]: ...

    def is_bidirectional(self) -> bool:
        return False

    def is_sized(self) -> bool:
        return False

    def size(self) -> int:
        """Number of elements, known without iterating.

        Returns:
            int: The number of elements.

        Raises:
            TypeError: If the range is not sized.
        """
        msg = f"{self.__class__.__name__} does not know its size without iterating"
        raise TypeError(msg)

    def __iter__(self) -> Iterator[T]:
        cursor = self.begin()
        last = self.end()
        while cursor != last:
            yield cursor.get()
            cursor.advance()


class SubRange[T](Range[T]):
    """A lazy `[first, last)` window over another range's cursors.

    Nothing is copied: iterating the window walks a copy of `first` until it reaches `last`.

    Args:
        first (Cursor[T]): Position of the first element.
        last (Cursor[T]): Position one past the last element.
    """

    __slots__ = ("_first", "_last")

    def __init__(self, first: Cursor[T], last: Cursor[T]) -> None:
        self._first = first
        self._last = last

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def begin(self) -> Cursor[T]:
        return self._first.copy()

    def end(self) -> Cursor[T]:
        return self._last.copy()

    def is_bidirectional(self) -> bool:
        return self._first.is_bidirectional()

    def is_sized(self) -> bool:
        return self._first.distance_to(self._last).is_some()

    def size(self) -> int:
        if not self.is_sized():
            return super().size()
        return self._first.distance_to(self._last).unwrap()


def advance_by[T](cursor: Cursor[T], n: int, bound: Cursor[T]) -> int:
    """Advance `cursor` in place by up to `n` steps, stopping at `bound`.

    Returns:
        int: How many of the `n` steps could not be taken.
    """
    taken = 0
    while taken < n and cursor != bound:
        cursor.advance()
        taken += 1
    return n - taken


def retreat_by[T](cursor: Cursor[T], n: int) -> None:
    for _ in itertools.repeat(None, n):
        cursor.retreat()


def distance[T](first: Cursor[T], last: Cursor[T]) -> int:
    """Number of steps from `first` to `last`, walking a copy of `first` when it cannot be computed directly."""
    known = first.distance_to(last)
    if known.is_some():
        return known.unwrap()
    cursor = first.copy()
    steps = 0
    while cursor != last:
        cursor.advance()
        steps += 1
    return steps


def check_not_at_end[T](cursor: Cursor[T], end: Cursor[T], action: str) -> None:
    if cursor == end:
        msg = f"cannot {action} a cursor at the end of its range"
        raise IterationOutOfRangeError(msg)
