"""Free functions building, transforming and unwrapping `Option` values.

The wrappers in this module follow a swallow-to-absence policy: any failure
becomes `NONE` and the error itself is discarded.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ._core import deprecated_alias
from ._results import NONE, NoneOption, Option, Some


def make_some[T](value: T) -> Option[T]:
    """Wraps `value` in a `Some`.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.make_some([1, 2])
    Some(value=[1, 2])

    ```
    """
    return Some(value)


def catch_to_option[T](fn: Callable[[], T]) -> Option[T]:
    """Call `fn`, returning its result as `Some`, or `NONE` if it raises.

    The raised exception is discarded.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.catch_to_option(lambda: 42)
    Some(value=42)
    >>> ox.catch_to_option(lambda: 1 / 0)
    NONE

    ```
    """
    try:
        return Some(fn())
    except Exception:  # noqa: BLE001
        return NONE


async def resolve_to_option[T](awaitable: Awaitable[T]) -> Option[T]:
    """Await `awaitable`, returning its result as `Some`, or `NONE` if it fails.

    There is no timeout: if `awaitable` never settles, neither does this call.
    Task cancellation is not swallowed.

    Example:
    ```python
    >>> import asyncio
    >>> import optionkit as ox
    >>> async def five() -> int:
    ...     return 5
    >>> asyncio.run(ox.resolve_to_option(five()))
    Some(value=5)

    ```
    """
    try:
        return Some(await awaitable)
    except Exception:  # noqa: BLE001
        return NONE


def to_optional[T, R](fn: Callable[[T], R]) -> Callable[[T], Option[R]]:
    """Turn `fn` into a function returning an `Option`.

    The result is `Some` only when `fn` returns a truthy value.
    A falsy return (`0`, `""`, `False`, `None`...) and a raised exception both give `NONE`.
    A result whose truthiness cannot be decided also gives `NONE`.

    Example:
    ```python
    >>> import optionkit as ox
    >>> first = ox.to_optional(lambda xs: xs[0])
    >>> first(["a", "b"])
    Some(value='a')
    >>> first([])
    NONE
    >>> first([0])
    NONE

    ```
    """

    def _wrapped(arg: T) -> Option[R]:
        try:
            result = fn(arg)
            if result:
                return Some(result)
        except Exception:  # noqa: BLE001
            return NONE
        return NONE

    return _wrapped


def _is_defined(arg: object) -> bool:
    return arg is not None and not isinstance(arg, NoneOption) and bool(arg)


optional_defined: Callable[[Any], Option[bool]] = to_optional(_is_defined)
"""`Some(True)` when the argument is defined, `NONE` otherwise.

`None`, `NONE` and falsy values such as `0` all give `NONE`.
"""


def map_option[T, U](option: Option[T], fn: Callable[[T], U]) -> Option[U]:
    """Apply `fn` to the value of a `Some`; `NONE` passes through and `fn` is not called.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.map_option(ox.Some(2), lambda x: x + 1)
    Some(value=3)
    >>> ox.map_option(ox.NONE, lambda x: x + 1)
    NONE

    ```
    """
    return option.map(fn)


def unwrap[T](option: Option[T]) -> T:
    """Return the value of a `Some`, raising `OptionUnwrapError` on `NONE`."""
    return option.unwrap()


def unwrap_or[T](option: Option[T], fallback: T) -> T:
    """Return the value of a `Some`, or `fallback` on `NONE`.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.unwrap_or(ox.NONE, "fallback")
    'fallback'

    ```
    """
    return option.unwrap_or(fallback)


def unwrap_expect[T](option: Option[T], message: str) -> T:
    """Return the value of a `Some`, raising `OptionUnwrapError(message)` on `NONE`."""
    return option.expect(message)


optional_catch = deprecated_alias("optional_catch", catch_to_option)
optional_resolve = deprecated_alias("optional_resolve", resolve_to_option)
optional_map = deprecated_alias("optional_map", map_option)
