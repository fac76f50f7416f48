from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a left-to-right chaining style.

        Any adaptor can be passed here, since adaptors are callables taking the source as first argument.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function or adaptor for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.as_view()([3, 1, 2]).into(pr.order()).into(list)
        [1, 2, 3]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> view = ([1, 2] | pr.append(3)).inspect(lambda v: print(list(v)))
        [1, 2, 3]
        >>> view | pr.count()
        3

        ```
        """
        func(self, *args, **kwargs)
        return self
