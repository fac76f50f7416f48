from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Returned by every `*_or_default` terminal operation instead of raising.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Build an `Option` from a value that may be `None`.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `NONE` if the value is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.Option.from_(3)
        Some(value=3)
        >>> pr.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> bool:
        """Returns `True` if the option is a `Some` value."""
        ...

    @abstractmethod
    def is_none(self) -> bool:
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> ([4, 5] | pr.first_or_default()).unwrap()
        4
        >>> ([] | pr.first_or_default()).unwrap()
        Traceback (most recent call last):
            ...
        pyoranges._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a custom message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or the default.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> ([1, 2, 3] | pr.last_or_default(lambda x: x > 5)).unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes one from a function.

        Args:
            f (Callable[[], T]): Called only if the option is `NONE`.

        Returns:
            T: The contained value or the computed one.
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained value.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: `Some(f(value))`, or `NONE` untouched.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.Some("Hello, World!").map(len)
        Some(value=13)
        >>> pr.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function returning an `Option` if the option is `Some`, otherwise returns `NONE`.

        Args:
            f (Callable[[T], Option[U]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The result of the function, or `NONE`.
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise the result of `f`.

        Args:
            f (Callable[[], Option[T]]): The function to call if the option is `NONE`.

        Returns:
            Option[T]: This option, or the result of the function.
        """
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keeps the value only if it satisfies the predicate.

        Args:
            predicate (Callable[[T], bool]): The condition checked on the `Some` value.

        Returns:
            Option[T]: This option if it is `Some` and matches, `NONE` otherwise.
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        msg = "called `unwrap` on a `None`"
        raise OptionUnwrapError(msg)


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
