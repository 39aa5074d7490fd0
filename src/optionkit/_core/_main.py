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

        Pipes the instance into a function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import optionkit as ox
        >>> def describe(opt: ox.Option[int]) -> str:
        ...     match opt:
        ...         case ox.Some(value):
        ...             return f"got {value}"
        ...         case _:
        ...             return "nothing"
        >>>
        >>> ox.Some(3).into(describe)
        'got 3'
        >>> ox.NONE.into(describe)
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import optionkit as ox
        >>> ox.Some(4).inspect(print).unwrap()
        Some(value=4)
        4

        ```
        """
        func(self, *args, **kwargs)
        return self
