from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from ._errors import InvalidArgumentError
from ._format import preview_repr, source_repr


@dataclass(slots=True)
class Config:
    """Display settings shared by every view.

    Attributes:
        max_items (int): Maximum number of elements shown when a repr previews values.
        width (int): Maximum width of a repr before it is truncated.
    """

    max_items: int = 20
    width: int = 80

    def iter_repr(self, values: Iterable[Any]) -> str:
        return preview_repr(values, self.max_items, width=self.width)

    def source_repr(self, source: object) -> str:
        return source_repr(source, self.max_items, self.width)


_CONFIG = Config()


def get_config() -> Config:
    """Get the process-wide `Config`.

    Returns:
        Config: The shared configuration instance.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.get_config().max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> None:
    """Update fields of the process-wide `Config`.

    Args:
        **changes (Any): New values, keyed by field name.

    Raises:
        InvalidArgumentError: If a key is not a `Config` field, or a value is not a positive integer.
    """
    known = {f.name for f in dataclasses.fields(Config)}
    for name, value in changes.items():
        if name not in known:
            msg = f"unknown config field {name!r}, expected one of {sorted(known)}"
            raise InvalidArgumentError(msg)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            msg = f"config field {name!r} must be a positive integer, got {value!r}"
            raise InvalidArgumentError(msg)
    for name, value in changes.items():
        setattr(_CONFIG, name, value)


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:
    """Temporarily update the process-wide `Config`.

    Args:
        **changes (Any): New values, keyed by field name.

    Yields:
        Config: The updated configuration.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> with pr.config_context(max_items=3):
    ...     print(pr.get_config().max_items)
    3
    >>> pr.get_config().max_items
    20

    ```
    """
    previous = dataclasses.asdict(_CONFIG)
    set_config(**changes)
    try:
        yield _CONFIG
    finally:
        set_config(**previous)
