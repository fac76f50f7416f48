from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import Self

from .._core import IterationOutOfRangeError, get_config
from ._base import Cursor, Range
from ._sources import all_of


class AppendPosition(Enum):
    """Phase of an `AppendView` cursor."""

    IN_RANGE = auto()
    """Pointing at an element of the source."""
    IN_APPEND = auto()
    """Pointing at the appended value."""
    IN_END = auto()
    """Past the appended value."""


class AppendCursor[T](Cursor[T]):
    __slots__ = ("_position", "_source", "_view")

    def __init__(self, view: AppendView[T], source: Cursor[T], position: AppendPosition) -> None:
        self._view = view
        self._source = source
        self._position = position

    @property
    def position(self) -> AppendPosition:
        return self._position

    def get(self) -> T:
        match self._position:
            case AppendPosition.IN_RANGE:
                return self._source.get()
            case AppendPosition.IN_APPEND:
                return self._view.value
            case AppendPosition.IN_END:
                msg = "cannot get a value at the end of an append view"
                raise IterationOutOfRangeError(msg)

    def advance(self) -> Self:
        match self._position:
            case AppendPosition.IN_RANGE:
                self._source.advance()
                if self._source == self._view.source.end():
                    self._position = AppendPosition.IN_APPEND
            case AppendPosition.IN_APPEND:
                self._position = AppendPosition.IN_END
            case AppendPosition.IN_END:
                msg = "cannot advance past the end of an append view"
                raise IterationOutOfRangeError(msg)
        return self

    def retreat(self) -> Self:
        if not self.is_bidirectional():
            return super().retreat()
        match self._position:
            case AppendPosition.IN_END:
                self._position = AppendPosition.IN_APPEND
            case AppendPosition.IN_APPEND:
                # raises at the start of an empty source, leaving the phase untouched
                self._source.retreat()
                self._position = AppendPosition.IN_RANGE
            case AppendPosition.IN_RANGE:
                self._source.retreat()
        return self

    def copy(self) -> Self:
        return self.__class__(self._view, self._source.copy(), self._position)

    def is_bidirectional(self) -> bool:
        return self._source.is_bidirectional()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppendCursor):
            return NotImplemented
        return self._position == other._position and self._source == other._source

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._position.name})"


class AppendView[T](Range[T]):
    """Every element of `source`, then `value`.

    Args:
        source (Iterable[T]): The elements to yield first.
        value (T): The element yielded last.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> list(pr.AppendView([1, 2], 0))
    [1, 2, 0]
    >>> list(pr.AppendView([], 0))
    [0]

    ```
    """

    __slots__ = ("_source", "_value")

    def __init__(self, source: Iterable[T], value: T) -> None:
        self._source = all_of(source)
        self._value = value

    def __repr__(self) -> str:
        cfg = get_config()
        return f"{self.__class__.__name__}({self._source!r}, {cfg.source_repr(self._value)})"

    @property
    def source(self) -> Range[T]:
        return self._source

    @property
    def value(self) -> T:
        return self._value

    def begin(self) -> AppendCursor[T]:
        first = self._source.begin()
        if first == self._source.end():
            return AppendCursor(self, first, AppendPosition.IN_APPEND)
        return AppendCursor(self, first, AppendPosition.IN_RANGE)

    def end(self) -> AppendCursor[T]:
        return AppendCursor(self, self._source.end(), AppendPosition.IN_END)

    def is_bidirectional(self) -> bool:
        return self._source.is_bidirectional()

    def is_sized(self) -> bool:
        return self._source.is_sized()

    def size(self) -> int:
        if not self.is_sized():
            return super().size()
        return self._source.size() + 1
