from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]
"""Anything usable as a sort or extremum key."""

type Relation = Callable[[Any, Any], bool]
"""A strict weak ordering over projected keys, such as `operator.lt`."""
