from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from .._core import Pipeable


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """Presence (`Some`) or absence (`NONE`) of a value.

    Only two variants exist, and both are immutable once built.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from optionkit import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is the `NONE` value.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            optionkit._results._option.OptionUnwrapError: Cannot unwrap None

            ```
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """
        Returns the tagged wire shape of the option.

        The discriminant lives under the `type` key.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some(1).to_dict()
            {'type': 'some', 'value': 1}
            >>> NONE.to_dict()
            {'type': 'none'}

            ```
        """
        ...

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Option[Any]:
        """
        Builds an option back from its tagged wire shape.

        Args:
            data: A mapping shaped like the output of `to_dict`.

        Returns:
            The matching `Some` or `NONE`.

        Raises:
            ValueError: If the discriminant is unknown or a `some` shape has no value.

        Example:
            ```python
            >>> from optionkit import Option
            >>> Option.from_dict({"type": "some", "value": [1, 2]})
            Some(value=[1, 2])
            >>> Option.from_dict({"type": "none"})
            NONE
            >>> Option.from_dict({"type": "ok", "value": 1})
            Traceback (most recent call last):
                ...
            ValueError: invalid option type: 'ok'

            ```
        """
        match data.get("type"):
            case "some":
                if "value" not in data:
                    raise ValueError("`some` option is missing its `value`")
                return Some(data["value"])
            case "none":
                return NONE
            case other:
                raise ValueError(f"invalid option type: {other!r}")

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception carrying exactly the provided message if the value is `NONE`.

        Args:
            msg: The message of the exception raised on `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            optionkit._results._option.OptionUnwrapError: fruits are healthy

            ```
        """
        if self.is_some():
            return self.unwrap()
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        `NONE` is returned untouched and `f` is never called.
        Exceptions raised by `f` propagate to the caller.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `NONE`.
        Some languages call this operation flatmap.

        Example:
            ```python
            >>> from optionkit import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(nope).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> from optionkit import Some, NONE
            >>> Some("barbarians").or_else(lambda: Some("vikings"))
            Some(value='barbarians')
            >>> NONE.or_else(lambda: Some("vikings"))
            Some(value='vikings')

            ```
        """
        return self if self.is_some() else f()


@dataclass(frozen=True, slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.Some(42)
    Some(value=42)

    ```
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"type": "some", "value": self.value}


@dataclass(frozen=True, slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("Cannot unwrap None")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "none"}


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
