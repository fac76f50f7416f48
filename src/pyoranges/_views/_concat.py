from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from .._core import IterationOutOfRangeError
from ._base import Cursor, Range
from ._sources import all_of


class ConcatCursor[T](Cursor[T]):
    """Cursor over a `ConcatView`.

    Holds a flag telling which source is active, and one cursor per source.
    The cursor into the second source is only created once the first source is exhausted.
    """

    __slots__ = ("_first", "_in_second", "_second", "_view")

    def __init__(
        self,
        view: ConcatView[T],
        first: Cursor[T],
        second: Cursor[T] | None,
        *,
        in_second: bool,
    ) -> None:
        self._view = view
        self._first = first
        self._second = second
        self._in_second = in_second

    @property
    def in_second(self) -> bool:
        return self._in_second

    def _active(self) -> Cursor[T]:
        if self._in_second and self._second is not None:
            return self._second
        return self._first

    def get(self) -> T:
        return self._active().get()

    def advance(self) -> Self:
        if self._in_second:
            self._active().advance()
            return self
        self._first.advance()
        if self._first == self._view.first.end():
            self._in_second = True
            self._second = self._view.second.begin()
        return self

    def retreat(self) -> Self:
        if not self.is_bidirectional():
            return super().retreat()
        if not self._in_second:
            self._first.retreat()
            return self
        second = self._active()
        if second != self._view.second.begin():
            second.retreat()
            return self
        first = self._view.first.end()
        if first == self._view.first.begin():
            msg = "cannot retreat before the start of a concat view"
            raise IterationOutOfRangeError(msg)
        self._first = first.retreat()
        self._in_second = False
        return self

    def copy(self) -> Self:
        second = None if self._second is None else self._second.copy()
        return self.__class__(self._view, self._first.copy(), second, in_second=self._in_second)

    def is_bidirectional(self) -> bool:
        return self._view.is_bidirectional()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConcatCursor):
            return NotImplemented
        if self._in_second != other._in_second:
            return False
        if self._in_second:
            return self._second == other._second
        return self._first == other._first

    def __repr__(self) -> str:
        side = "second" if self._in_second else "first"
        return f"{self.__class__.__name__}({side})"


class ConcatView[T](Range[T]):
    """All elements of `first`, then all elements of `second`, without copying either.

    Args:
        first (Iterable[T]): The elements to yield first.
        second (Iterable[T]): The elements to yield next.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> view = pr.ConcatView([1, 2, 3], [4, 5])
    >>> list(view)
    [1, 2, 3, 4, 5]
    >>> view.size()
    5

    ```
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: Iterable[T], second: Iterable[T]) -> None:
        self._first = all_of(first)
        self._second = all_of(second)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._first!r}, {self._second!r})"

    @property
    def first(self) -> Range[T]:
        return self._first

    @property
    def second(self) -> Range[T]:
        return self._second

    def begin(self) -> ConcatCursor[T]:
        first = self._first.begin()
        if first == self._first.end():
            return ConcatCursor(self, first, self._second.begin(), in_second=True)
        return ConcatCursor(self, first, None, in_second=False)

    def end(self) -> ConcatCursor[T]:
        return ConcatCursor(self, self._first.end(), self._second.end(), in_second=True)

    def is_bidirectional(self) -> bool:
        return self._first.is_bidirectional() and self._second.is_bidirectional()

    def is_sized(self) -> bool:
        return self._first.is_sized() and self._second.is_sized()

    def size(self) -> int:
        if not self.is_sized():
            return super().size()
        return self._first.size() + self._second.size()
