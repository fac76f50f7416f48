from __future__ import annotations

import builtins
import functools
from collections.abc import Callable, Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any, Never

import cytoolz as cz
import more_itertools as mit

from .._core import (
    DuplicateKeyError,
    EmptySequenceError,
    InvalidArgumentError,
    ItemNotFoundError,
    PositionOutOfRangeError,
)
from .._results import NONE, Option, Some
from .._views import Range, advance_by, all_of, distance
from ._protocol import Adaptor

type Predicate[T] = Callable[[T], bool]


def _check_position(position: int) -> None:
    if not isinstance(position, int) or isinstance(position, bool) or position < 0:
        msg = f"position must be a non-negative integer, got {position!r}"
        raise InvalidArgumentError(msg)


def _find_first[T](data: Iterable[T], predicate: Predicate[T] | None) -> Option[T]:
    rng = all_of(data)
    if predicate is None:
        cursor = rng.begin()
        return NONE if cursor == rng.end() else Some(cursor.get())
    for item in rng:
        if predicate(item):
            return Some(item)
    return NONE


def _find_last[T](data: Iterable[T], predicate: Predicate[T] | None) -> Option[T]:
    rng = all_of(data)
    if rng.is_bidirectional():
        return _find_last_backward(rng, predicate)
    return _find_last_forward(rng, predicate)


def _find_last_backward[T](rng: Range[T], predicate: Predicate[T] | None) -> Option[T]:
    first = rng.begin()
    cursor = rng.end()
    while cursor != first:
        item = cursor.retreat().get()
        if predicate is None or predicate(item):
            return Some(item)
    return NONE


def _find_last_forward[T](rng: Range[T], predicate: Predicate[T] | None) -> Option[T]:
    found: Option[T] = NONE
    for item in rng:
        if predicate is None or predicate(item):
            found = Some(item)
    return found


def _element_at[T](data: Iterable[T], position: int) -> Option[T]:
    rng = all_of(data)
    cursor = rng.begin()
    end = rng.end()
    if cursor == end:
        return NONE
    advance_by(cursor, position, end)
    return NONE if cursor == end else Some(cursor.get())


def _raise_not_found(predicate: Predicate[Any] | None) -> Never:
    if predicate is None:
        msg = "sequence is empty"
        raise EmptySequenceError(msg)
    msg = "no element satisfies the predicate"
    raise ItemNotFoundError(msg)


@dataclass(slots=True, frozen=True)
class AggregateAdaptor[T, A](Adaptor[T, A | None]):
    """Left fold.

    Without a seed, the accumulator starts from the default value of the first element's type (`0`, `""`, `[]`...),
    and an empty sequence gives `None`.
    """

    func: Callable[[A, T], A]
    seed: Option[A]

    def __call__(self, source: Iterable[T]) -> A | None:
        if self.seed.is_some():
            return functools.reduce(self.func, source, self.seed.unwrap())
        head, data = mit.spy(source)
        if not head:
            return None
        return functools.reduce(self.func, data, type(head[0])())


@dataclass(slots=True, frozen=True)
class AllAdaptor[T](Adaptor[T, bool]):
    predicate: Predicate[T] = bool

    def __call__(self, source: Iterable[T]) -> bool:
        return builtins.all(self.predicate(x) for x in source)


@dataclass(slots=True, frozen=True)
class AnyAdaptor[T](Adaptor[T, bool]):
    predicate: Predicate[T] = bool

    def __call__(self, source: Iterable[T]) -> bool:
        return builtins.any(self.predicate(x) for x in source)


@dataclass(slots=True, frozen=True)
class ContainsAdaptor[T](Adaptor[T, bool]):
    value: T

    def __call__(self, source: Iterable[T]) -> bool:
        return builtins.any(x == self.value for x in source)


@dataclass(slots=True, frozen=True)
class CountAdaptor[T](Adaptor[T, int]):
    def __call__(self, source: Iterable[T]) -> int:
        rng = all_of(source)
        if rng.is_sized():
            return rng.size()
        if isinstance(source, Range):
            return distance(rng.begin(), rng.end())
        return cz.itertoolz.count(source)


@dataclass(slots=True, frozen=True)
class AverageAdaptor(Adaptor[Any, float]):
    """Arithmetic mean, computed in a single pass so that one-shot iterators work too."""

    def __call__(self, source: Iterable[Any]) -> float:
        total = 0.0
        count = 0
        for item in source:
            total += item
            count += 1
        return total / count


@dataclass(slots=True, frozen=True)
class ElementAtAdaptor[T](Adaptor[T, T]):
    position: int

    def __post_init__(self) -> None:
        _check_position(self.position)

    def __call__(self, source: Iterable[T]) -> T:
        rng = all_of(source)
        cursor = rng.begin()
        end = rng.end()
        if cursor == end:
            msg = f"cannot get element {self.position} of an empty sequence"
            raise EmptySequenceError(msg)
        missing = advance_by(cursor, self.position, end)
        if cursor == end:
            msg = f"position {self.position} is out of range for a sequence of {self.position - missing} elements"
            raise PositionOutOfRangeError(msg)
        return cursor.get()


@dataclass(slots=True, frozen=True)
class ElementAtOrDefaultAdaptor[T](Adaptor[T, Option[T]]):
    position: int

    def __post_init__(self) -> None:
        _check_position(self.position)

    def __call__(self, source: Iterable[T]) -> Option[T]:
        return _element_at(source, self.position)


@dataclass(slots=True, frozen=True)
class FirstAdaptor[T](Adaptor[T, T]):
    predicate: Predicate[T] | None = None

    def __call__(self, source: Iterable[T]) -> T:
        found = _find_first(source, self.predicate)
        if found.is_none():
            _raise_not_found(self.predicate)
        return found.unwrap()


@dataclass(slots=True, frozen=True)
class FirstOrDefaultAdaptor[T](Adaptor[T, Option[T]]):
    predicate: Predicate[T] | None = None

    def __call__(self, source: Iterable[T]) -> Option[T]:
        return _find_first(source, self.predicate)


@dataclass(slots=True, frozen=True)
class LastAdaptor[T](Adaptor[T, T]):
    predicate: Predicate[T] | None = None

    def __call__(self, source: Iterable[T]) -> T:
        found = _find_last(source, self.predicate)
        if found.is_none():
            _raise_not_found(self.predicate)
        return found.unwrap()


@dataclass(slots=True, frozen=True)
class LastOrDefaultAdaptor[T](Adaptor[T, Option[T]]):
    predicate: Predicate[T] | None = None

    def __call__(self, source: Iterable[T]) -> Option[T]:
        return _find_last(source, self.predicate)


@dataclass(slots=True, frozen=True)
class ExtremumAdaptor[T](Adaptor[T, T]):
    """Smallest or largest element under `key`; the leftmost one wins ties."""

    pick: Callable[..., T]
    key: Callable[[T], Any] | None = None

    def __call__(self, source: Iterable[T]) -> T:
        head, data = mit.spy(source)
        if not head:
            msg = f"cannot compute the {self.pick.__name__} of an empty sequence"
            raise EmptySequenceError(msg)
        return self.pick(data, key=self.key)


@dataclass(slots=True, frozen=True)
class ToAdaptor[T, C](Adaptor[T, C]):
    factory: Callable[[Iterable[T]], C]

    def __call__(self, source: Iterable[T]) -> C:
        return self.factory(source)


@dataclass(slots=True, frozen=True)
class ToArrayAdaptor[T](Adaptor[T, tuple[T, ...]]):
    size: int

    def __post_init__(self) -> None:
        _check_position(self.size)

    def __call__(self, source: Iterable[T]) -> tuple[T, ...]:
        values = tuple(mit.take(self.size, source))
        if len(values) < self.size:
            msg = f"cannot fill an array of {self.size} elements from a sequence of {len(values)}"
            raise PositionOutOfRangeError(msg)
        return values


@dataclass(slots=True, frozen=True)
class ToMappingAdaptor[T, K, V](Adaptor[T, MutableMapping[K, V]]):
    """Builds a mapping from `(key, value)` pairs produced by `selector`.

    Colliding keys raise `DuplicateKeyError`, unless `overwrite` is set, in which case the last value wins.
    """

    selector: Callable[[T], tuple[K, V]]
    factory: Callable[[], MutableMapping[K, V]] = dict
    overwrite: bool = False

    def __call__(self, source: Iterable[T]) -> MutableMapping[K, V]:
        mapping = self.factory()
        for item in source:
            key, value = self.selector(item)
            if not self.overwrite and key in mapping:
                msg = f"duplicate key {key!r}"
                raise DuplicateKeyError(msg)
            mapping[key] = value
        return mapping
