import itertools
from collections.abc import Iterable
from pprint import pformat
from typing import Any


def preview_repr(
    values: Iterable[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    head = list(itertools.islice(values, max_items + 1))
    suffix = "..." if len(head) > max_items else ""
    return pformat(head[:max_items], depth=depth, width=width, compact=compact) + suffix


def source_repr(source: object, max_items: int = 20, width: int = 80) -> str:
    """Repr of a view's source that never consumes a single-pass iterator."""
    match source:
        case list() | tuple() | range() | str():
            text = repr(source) if len(source) <= max_items else preview_repr(source, max_items, width=width)
        case _:
            text = repr(source)
    return text if len(text) <= width else text[: width - 3] + "..."
