"""Factory functions building adaptors.

Every function here returns an `Adaptor`, applied with `source | adaptor`.

Some names shadow builtins (`all`, `any`, `min`, `max`, `slice`): import the package as a module, e.g. `import pyoranges as pr`.
"""

from __future__ import annotations

import builtins
import functools
import itertools
import operator
from collections.abc import Callable, Iterable, Iterator, MutableMapping
from typing import Any

from ._adaptors import (
    AggregateAdaptor,
    AllAdaptor,
    AnyAdaptor,
    AppendAdaptor,
    AsViewAdaptor,
    AverageAdaptor,
    ChunkAdaptor,
    ConcatAdaptor,
    ContainsAdaptor,
    CountAdaptor,
    ElementAtAdaptor,
    ElementAtOrDefaultAdaptor,
    ExtremumAdaptor,
    FirstAdaptor,
    FirstOrDefaultAdaptor,
    IterAdaptor,
    LastAdaptor,
    LastOrDefaultAdaptor,
    OrderAdaptor,
    ToAdaptor,
    ToArrayAdaptor,
    ToMappingAdaptor,
)
from ._core import InvalidArgumentError, SupportsRichComparison
from ._results import NONE, Some
from ._views import SequenceRange, reverse_iter

_NO_SEED: Any = object()


def _check_count(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        msg = f"{name} must be a non-negative integer, got {value!r}"
        raise InvalidArgumentError(msg)


# --- sources ---


def empty() -> SequenceRange[Any]:
    """A range without elements.

    Returns:
        SequenceRange[Any]: An empty, sized range.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.empty() | pr.first_or_default()
    NONE

    ```
    """
    return SequenceRange(())


def from_range(start: int, count: int) -> SequenceRange[int]:
    """`count` consecutive integers, starting at `start`.

    Args:
        start (int): The first value.
        count (int): How many values to produce.

    Returns:
        SequenceRange[int]: A sized, bidirectional range.

    Raises:
        InvalidArgumentError: If `count` is negative.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> list(pr.from_range(3, 4))
    [3, 4, 5, 6]

    ```
    """
    _check_count("count", count)
    return SequenceRange(range(start, start + count))


def as_view() -> AsViewAdaptor[Any]:
    """Adapt any iterable into a `Range`, without copying it.

    Returns:
        AsViewAdaptor[Any]: The adaptor.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> view = [1, 2, 3] | pr.as_view()
    >>> view.is_bidirectional(), view.size()
    (True, 3)

    ```
    """
    return AsViewAdaptor()


# --- lazy views ---


def append[T](value: T) -> AppendAdaptor[T]:
    """Yield every element of the source, then `value`.

    Args:
        value (T): The element to add at the end.

    Returns:
        AppendAdaptor[T]: An adaptor producing an `AppendView`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2] | pr.append(0) | pr.to()
    [1, 2, 0]

    ```
    """
    return AppendAdaptor(value)


def chunk(size: int) -> ChunkAdaptor[Any]:
    """Split the source into consecutive windows of `size` elements.

    The last window is shorter when the source length is not a multiple of `size`.

    Args:
        size (int): Number of elements per chunk.

    Returns:
        ChunkAdaptor[Any]: An adaptor producing a `ChunkView`; a size of 0 fails when applied.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3, 4, 5] | pr.chunk(2) | pr.select(list) | pr.to()
    [[1, 2], [3, 4], [5]]

    ```
    """
    return ChunkAdaptor(size)


def concat[T](other: Iterable[T]) -> ConcatAdaptor[T]:
    """Yield every element of the source, then every element of `other`.

    Args:
        other (Iterable[T]): The elements to yield after the source.

    Returns:
        ConcatAdaptor[T]: An adaptor producing a `ConcatView`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> view = [1, 2, 3] | pr.concat([4, 5])
    >>> list(view), view.size()
    ([1, 2, 3, 4, 5], 5)

    ```
    """
    return ConcatAdaptor(other)


def order() -> OrderAdaptor[Any]:
    """Sort the elements in ascending order, lazily.

    Returns:
        OrderAdaptor[Any]: An adaptor producing an `OrderedView`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [3, 1, 2] | pr.order() | pr.to()
    [1, 2, 3]

    ```
    """
    return OrderAdaptor(operator.lt)


def order_by[T](projection: Callable[[T], SupportsRichComparison[Any]]) -> OrderAdaptor[T]:
    """Sort the elements by ascending `projection(element)`, lazily.

    Args:
        projection (Callable[[T], SupportsRichComparison[Any]]): Computes the sort key of an element.

    Returns:
        OrderAdaptor[T]: An adaptor producing an `OrderedView`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> ["ccc", "a", "bb"] | pr.order_by(len) | pr.to()
    ['a', 'bb', 'ccc']

    ```
    """
    return OrderAdaptor(operator.lt, projection)


def order_by_descending[T](projection: Callable[[T], SupportsRichComparison[Any]] | None = None) -> OrderAdaptor[T]:
    """Sort the elements by descending `projection(element)`, lazily.

    Args:
        projection (Callable[[T], SupportsRichComparison[Any]] | None): Computes the sort key of an element. Defaults to the element itself.

    Returns:
        OrderAdaptor[T]: An adaptor producing an `OrderedView`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [2, 1, 4, 3, 5] | pr.order_by_descending() | pr.to()
    [5, 4, 3, 2, 1]

    ```
    """
    return OrderAdaptor(operator.gt, projection)


# --- pass-through views ---


def where[T](predicate: Callable[[T], bool]) -> IterAdaptor[T, T]:
    """Keep the elements satisfying `predicate`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> range(6) | pr.where(lambda x: x % 2 == 0) | pr.to()
    [0, 2, 4]

    ```
    """
    return IterAdaptor(functools.partial(filter, predicate))


def select[T, U](selector: Callable[[T], U]) -> IterAdaptor[T, U]:
    """Apply `selector` to each element.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3] | pr.select(lambda x: x * 10) | pr.to()
    [10, 20, 30]

    ```
    """
    return IterAdaptor(functools.partial(map, selector), size_of=lambda n: n)


def skip(count: int) -> IterAdaptor[Any, Any]:
    """Drop the first `count` elements."""
    _check_count("count", count)

    def _skip[T](data: Iterable[T]) -> Iterator[T]:
        return itertools.islice(data, count, None)

    return IterAdaptor(_skip, size_of=lambda n: builtins.max(0, n - count))


def take(count: int) -> IterAdaptor[Any, Any]:
    """Keep at most the first `count` elements.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.from_range(0, 100) | pr.take(3) | pr.to()
    [0, 1, 2]

    ```
    """
    _check_count("count", count)

    def _take[T](data: Iterable[T]) -> Iterator[T]:
        return itertools.islice(data, count)

    return IterAdaptor(_take, size_of=lambda n: builtins.min(n, count))


def slice(start: int, count: int) -> IterAdaptor[Any, Any]:  # noqa: A001
    """Skip `start` elements, then keep at most `count`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> "abcdefg" | pr.slice(2, 3) | pr.to("".join)
    'cde'

    ```
    """
    _check_count("start", start)
    _check_count("count", count)

    def _slice[T](data: Iterable[T]) -> Iterator[T]:
        return itertools.islice(data, start, start + count)

    return IterAdaptor(_slice, size_of=lambda n: builtins.min(builtins.max(0, n - start), count))


def reverse() -> IterAdaptor[Any, Any]:
    """Yield the elements from last to first.

    Bidirectional ranges are walked backwards with their cursors; other single-pass sources are buffered first.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2] | pr.append(3) | pr.reverse() | pr.to()
    [3, 2, 1]

    ```
    """
    return IterAdaptor(reverse_iter, size_of=lambda n: n)


def join() -> IterAdaptor[Iterable[Any], Any]:
    """Flatten one level of nesting.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3, 4, 5] | pr.chunk(2) | pr.reverse() | pr.join() | pr.to()
    [5, 3, 4, 1, 2]

    ```
    """
    return IterAdaptor(itertools.chain.from_iterable)


def cast[U](target: Callable[[Any], U]) -> IterAdaptor[Any, U]:
    """Convert each element with `target`, usually a type.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> ["1", "2"] | pr.cast(int) | pr.to()
    [1, 2]

    ```
    """
    return IterAdaptor(functools.partial(map, target), size_of=lambda n: n)


# --- terminal operations ---


def aggregate[T, A](func: Callable[[A, T], A], seed: A = _NO_SEED) -> AggregateAdaptor[T, A]:
    """Fold the elements from left to right.

    Args:
        func (Callable[[A, T], A]): Combines the accumulator with the next element.
        seed (A): Starting accumulator. Defaults to the default value of the first element's type (e.g. `0` for `int`).

    Returns:
        AggregateAdaptor[T, A]: The adaptor. Without a seed, an empty source gives `None`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3] | pr.aggregate(lambda acc, x: acc * 10 + x)
    123
    >>> ["a", "b"] | pr.aggregate(lambda acc, x: acc + x, ">")
    '>ab'

    ```
    """
    return AggregateAdaptor(func, NONE if seed is _NO_SEED else Some(seed))


def all[T](predicate: Callable[[T], bool] = bool) -> AllAdaptor[T]:  # noqa: A001
    """`True` if every element satisfies `predicate`; stops at the first failure.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [2, 4] | pr.all(lambda x: x % 2 == 0)
    True

    ```
    """
    return AllAdaptor(predicate)


def any[T](predicate: Callable[[T], bool] = bool) -> AnyAdaptor[T]:  # noqa: A001
    """`True` if some element satisfies `predicate`; stops at the first match.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 3] | pr.any(lambda x: x % 2 == 0)
    False

    ```
    """
    return AnyAdaptor(predicate)


def contains[T](value: T) -> ContainsAdaptor[T]:
    """`True` if some element equals `value`."""
    return ContainsAdaptor(value)


def count() -> CountAdaptor[Any]:
    """Number of elements; sized sources answer without iterating.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> range(10) | pr.where(lambda x: x > 6) | pr.count()
    3

    ```
    """
    return CountAdaptor()


def average() -> AverageAdaptor:
    """Arithmetic mean of the elements, as a `float`.

    An empty source raises `ZeroDivisionError`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3, 4] | pr.average()
    2.5

    ```
    """
    return AverageAdaptor()


def element_at(position: int) -> ElementAtAdaptor[Any]:
    """The element at zero-based `position`.

    Raises `EmptySequenceError` on an empty source, and `PositionOutOfRangeError` if the source is too short.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> "xyz" | pr.element_at(1)
    'y'

    ```
    """
    return ElementAtAdaptor(position)


def element_at_or_default(position: int) -> ElementAtOrDefaultAdaptor[Any]:
    """`Some(element)` at zero-based `position`, or `NONE` if the source is too short.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> "xyz" | pr.element_at_or_default(5)
    NONE

    ```
    """
    return ElementAtOrDefaultAdaptor(position)


def first[T](predicate: Callable[[T], bool] | None = None) -> FirstAdaptor[T]:
    """The first element, or the first one satisfying `predicate`.

    Raises `EmptySequenceError` on an empty source without predicate, and `ItemNotFoundError` when nothing matches.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> people = [("Jake", 20), ("Alexander", 35), ("Emily", 27)]
    >>> people | pr.first(lambda p: p[1] > 30)
    ('Alexander', 35)

    ```
    """
    return FirstAdaptor(predicate)


def first_or_default[T](predicate: Callable[[T], bool] | None = None) -> FirstOrDefaultAdaptor[T]:
    """Like `first`, but returns an `Option` instead of raising.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> people = [("Jake", 20), ("Alexander", 35), ("Emily", 27)]
    >>> people | pr.first_or_default(lambda p: p[1] < 20)
    NONE

    ```
    """
    return FirstOrDefaultAdaptor(predicate)


def last[T](predicate: Callable[[T], bool] | None = None) -> LastAdaptor[T]:
    """The last element, or the last one satisfying `predicate`.

    Bidirectional sources are searched from the end; others are scanned entirely.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [1, 2, 3, 4] | pr.last(lambda x: x % 2 == 1)
    3

    ```
    """
    return LastAdaptor(predicate)


def last_or_default[T](predicate: Callable[[T], bool] | None = None) -> LastOrDefaultAdaptor[T]:
    """Like `last`, but returns an `Option` instead of raising.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> iter([1, 2, 3]) | pr.last_or_default()
    Some(value=3)

    ```
    """
    return LastOrDefaultAdaptor(predicate)


def min[T](key: Callable[[T], SupportsRichComparison[Any]] | None = None) -> ExtremumAdaptor[T]:  # noqa: A001
    """The smallest element, comparing `key(element)` if given.

    Raises `EmptySequenceError` on an empty source.
    """
    return ExtremumAdaptor(builtins.min, key)


def max[T](key: Callable[[T], SupportsRichComparison[Any]] | None = None) -> ExtremumAdaptor[T]:  # noqa: A001
    """The largest element, comparing `key(element)` if given.

    Raises `EmptySequenceError` on an empty source.
    """
    return ExtremumAdaptor(builtins.max, key)


def min_by[T](projection: Callable[[T], SupportsRichComparison[Any]]) -> ExtremumAdaptor[T]:
    """The element with the smallest `projection(element)`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> ["ccc", "a", "bb"] | pr.min_by(len)
    'a'

    ```
    """
    return ExtremumAdaptor(builtins.min, projection)


def max_by[T](projection: Callable[[T], SupportsRichComparison[Any]]) -> ExtremumAdaptor[T]:
    """The element with the largest `projection(element)`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> ["ccc", "a", "bb"] | pr.max_by(len)
    'ccc'

    ```
    """
    return ExtremumAdaptor(builtins.max, projection)


def to[C](factory: Callable[[Iterable[Any]], C] = list) -> ToAdaptor[Any, C]:
    """Collect the elements with `factory`, e.g. `list`, `tuple`, `set` or `"".join`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [3, 1, 3] | pr.to(set)
    {1, 3}

    ```
    """
    return ToAdaptor(factory)


def to_array(size: int) -> ToArrayAdaptor[Any]:
    """The first `size` elements, as a tuple of exactly that length.

    Raises `PositionOutOfRangeError` if the source holds fewer elements.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.from_range(1, 10) | pr.to_array(3)
    (1, 2, 3)

    ```
    """
    return ToArrayAdaptor(size)


def to_dict[T, K, V](
    key: Callable[[T], K],
    element: Callable[[T], V] | None = None,
    *,
    factory: Callable[[], MutableMapping[K, V]] = dict,
    overwrite: bool = False,
) -> ToMappingAdaptor[T, K, V]:
    """Build a mapping of `key(element)` to `element(element)`, or to the element itself.

    Args:
        key (Callable[[T], K]): Computes the key of an element.
        element (Callable[[T], V] | None): Computes the value of an element. Defaults to the element itself.
        factory (Callable[[], MutableMapping[K, V]]): Creates the empty mapping. Defaults to `dict`.
        overwrite (bool): Let later elements replace earlier ones on colliding keys, instead of raising `DuplicateKeyError`.

    Returns:
        ToMappingAdaptor[T, K, V]: The adaptor.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> people = [("Jake", 20), ("Emily", 27)]
    >>> people | pr.to_dict(lambda p: p[0], lambda p: p[1])
    {'Jake': 20, 'Emily': 27}

    ```
    """
    value_of: Callable[[T], Any] = (lambda item: item) if element is None else element

    def _pair(item: T) -> tuple[K, Any]:
        return key(item), value_of(item)

    return ToMappingAdaptor(_pair, factory, overwrite)


def to_dict_pairs[T, K, V](
    selector: Callable[[T], tuple[K, V]],
    *,
    factory: Callable[[], MutableMapping[K, V]] = dict,
    overwrite: bool = False,
) -> ToMappingAdaptor[T, K, V]:
    """Build a mapping from the `(key, value)` pair returned by `selector` for each element.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> ["a", "bb"] | pr.to_dict_pairs(lambda s: (s, len(s)))
    {'a': 1, 'bb': 2}

    ```
    """
    return ToMappingAdaptor(selector, factory, overwrite)
