from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Iterable
from typing import Any

import cytoolz as cz

from .._core import get_config
from .._core import Relation
from .._results import NONE, Option, Some
from ._base import Range
from ._sources import IndexCursor

logger = logging.getLogger(__name__)


def _sort_in_place[T](buffer: list[T], relation: Relation, projection: Callable[[T], Any]) -> None:
    if relation is operator.lt:
        buffer.sort(key=projection)
    elif relation is operator.gt:
        buffer.sort(key=projection, reverse=True)
    else:

        def _compare(left: T, right: T) -> int:
            left_key, right_key = projection(left), projection(right)
            if relation(left_key, right_key):
                return -1
            if relation(right_key, left_key):
                return 1
            return 0

        buffer.sort(key=functools.cmp_to_key(_compare))


class OrderedView[T](Range[T]):
    """A deferred sort of `source`.

    Nothing happens at construction. The first call to `begin()`, `end()` or `size()` drains `source` into a private buffer and sorts it once;
    every later iteration of the same view reuses that buffer.

    Args:
        source (Iterable[T]): The elements to sort.
        relation (Relation): Strict weak ordering applied to projected keys. `operator.lt` sorts ascending, `operator.gt` descending.
        projection (Callable[[T], Any] | None): Function computing the sort key of each element. Defaults to the element itself.

    Example:
    ```python
    >>> import operator
    >>> import pyoranges as pr
    >>> list(pr.OrderedView([2, 1, 4, 3, 5], operator.gt))
    [5, 4, 3, 2, 1]
    >>> list(pr.OrderedView(["bb", "a", "ccc"], projection=len))
    ['a', 'bb', 'ccc']

    ```
    """

    __slots__ = ("_projection", "_relation", "_sorted", "_source")

    def __init__(
        self,
        source: Iterable[T],
        relation: Relation = operator.lt,
        projection: Callable[[T], Any] | None = None,
    ) -> None:
        self._source = source
        self._relation = relation
        self._projection = cz.functoolz.identity if projection is None else projection
        self._sorted: Option[list[T]] = NONE

    def __repr__(self) -> str:
        state = "sorted" if self.is_materialized() else "pending"
        return f"{self.__class__.__name__}({get_config().source_repr(self._source)}, {state})"

    def is_materialized(self) -> bool:
        return self._sorted.is_some()

    def _ensure_sorted(self) -> list[T]:
        if self._sorted.is_none():
            buffer = list(self._source)
            _sort_in_place(buffer, self._relation, self._projection)
            logger.debug("materialized %d elements for %s", len(buffer), type(self).__name__)
            self._sorted = Some(buffer)
        return self._sorted.unwrap()

    def begin(self) -> IndexCursor[T]:
        return IndexCursor(self._ensure_sorted(), 0)

    def end(self) -> IndexCursor[T]:
        buffer = self._ensure_sorted()
        return IndexCursor(buffer, len(buffer))

    def is_bidirectional(self) -> bool:
        return True

    def is_sized(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._ensure_sorted())
