from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import cytoolz as cz


class Adaptor[T, R](ABC):
    """One step of a pipeline: captured parameters plus a single evaluation rule.

    Adaptors are immutable and can be stored and reused. Applying one is always written the same way,
    whether it returns a lazy view or computes a value right away:

    - `source | adaptor`
    - `adaptor(source)`
    - `view.into(adaptor)`

    Two adaptors piped together give a `Pipeline`, applied left to right.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> [5, 3, 8, 1] | pr.where(lambda x: x > 2) | pr.order() | pr.first()
    3
    >>> top_two = pr.order_by_descending() | pr.take(2) | pr.to()
    >>> [5, 3, 8, 1] | top_two
    [8, 5]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def __call__(self, source: Iterable[T]) -> R: ...

    def __ror__(self, source: Iterable[T]) -> R:
        return self(source)

    def __or__(self, other: object) -> Pipeline[T, Any]:
        if not isinstance(other, Adaptor):
            return NotImplemented
        return Pipeline((self, other))


@dataclass(slots=True, frozen=True)
class Pipeline[T, R](Adaptor[T, R]):
    """A reusable chain of adaptors.

    Args:
        steps (tuple[Adaptor[Any, Any], ...]): The adaptors, applied in order.
    """

    steps: tuple[Adaptor[Any, Any], ...]

    def __call__(self, source: Iterable[T]) -> R:
        return cz.functoolz.pipe(source, *self.steps)

    def __or__(self, other: object) -> Pipeline[T, Any]:
        match other:
            case Pipeline():
                return Pipeline((*self.steps, *other.steps))
            case Adaptor():
                return Pipeline((*self.steps, other))
            case _:
                return NotImplemented
