from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .._core import Relation
from .._views import (
    AppendView,
    ChunkView,
    ConcatView,
    OrderedView,
    Range,
    TransformView,
    all_of,
)
from ._protocol import Adaptor


@dataclass(slots=True, frozen=True)
class AppendAdaptor[T](Adaptor[T, AppendView[T]]):
    value: T

    def __call__(self, source: Iterable[T]) -> AppendView[T]:
        return AppendView(source, self.value)


@dataclass(slots=True, frozen=True)
class ChunkAdaptor[T](Adaptor[T, ChunkView[T]]):
    size: int

    def __call__(self, source: Iterable[T]) -> ChunkView[T]:
        return ChunkView(source, self.size)


@dataclass(slots=True, frozen=True)
class ConcatAdaptor[T](Adaptor[T, ConcatView[T]]):
    other: Iterable[T]

    def __call__(self, source: Iterable[T]) -> ConcatView[T]:
        return ConcatView(source, self.other)


@dataclass(slots=True, frozen=True)
class OrderAdaptor[T](Adaptor[T, OrderedView[T]]):
    relation: Relation
    projection: Callable[[T], Any] | None = None

    def __call__(self, source: Iterable[T]) -> OrderedView[T]:
        return OrderedView(source, self.relation, self.projection)


@dataclass(slots=True, frozen=True)
class IterAdaptor[T, U](Adaptor[T, TransformView[T, U]]):
    """Wraps a plain iterator function, such as `filter` or `itertools.islice`, into a lazy view.

    Args:
        func (Callable[[Iterable[T]], Iterator[U]]): Builds the transformed iterator from the source.
        size_of (Callable[[int], int] | None): Computes the view size from the source size, if the transform allows it.
    """

    func: Callable[[Iterable[T]], Iterator[U]]
    size_of: Callable[[int], int] | None = None

    def __call__(self, source: Iterable[T]) -> TransformView[T, U]:
        return TransformView(source, self.func, self.size_of)


@dataclass(slots=True, frozen=True)
class AsViewAdaptor[T](Adaptor[T, Range[T]]):
    def __call__(self, source: Iterable[T]) -> Range[T]:
        return all_of(source)

