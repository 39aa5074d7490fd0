from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Never, TypeIs, cast

from .._core import Pipeable
from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC, Pipeable):
    """Success (`Ok`) or failure (`Err`) of an operation."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """
        Returns the tagged wire shape of the result.

        Example:
            ```python
            >>> from optionkit import Ok, Err
            >>> Ok(1).to_dict()
            {'type': 'ok', 'value': 1}
            >>> Err("boom").to_dict()
            {'type': 'err', 'error': 'boom'}

            ```
        """
        ...

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Result[Any, Any]:
        """
        Builds a result back from its tagged wire shape.

        Raises:
            ValueError: If the discriminant is unknown or the payload key is missing.

        Example:
            ```python
            >>> from optionkit import Result
            >>> Result.from_dict({"type": "err", "error": "boom"})
            Err(error='boom')

            ```
        """
        match data.get("type"):
            case "ok":
                if "value" not in data:
                    raise ValueError("`ok` result is missing its `value`")
                return Ok(data["value"])
            case "err":
                if "error" not in data:
                    raise ValueError("`err` result is missing its `error`")
                return Err(data["error"])
            case other:
                raise ValueError(f"invalid result type: {other!r}")

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Pattern matches on the result, calling ok if Ok, or err if Err.

        Args:
            ok: Callable to handle the Ok value.
            err: Callable to handle the Err value.

        Returns:
            The result of the called function.
        """
        match self.is_ok():
            case True:
                return ok(self.unwrap())
            case False:
                return err(self.unwrap_err())
            case _:
                raise RuntimeError("unreachable")

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Example:
            ```python
            >>> from optionkit import Err
            >>> Err("boom").expect("parsing failed")
            Traceback (most recent call last):
                ...
            optionkit._results._result.ResultUnwrapError: parsing failed: boom

            ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default."""
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error.

        Example:
            ```python
            >>> from optionkit import Ok, Err
            >>> Ok(2).unwrap_or_else(len)
            2
            >>> Err("four").unwrap_or_else(len)
            4

            ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Example:
            ```python
            >>> from optionkit import Ok, Err
            >>> Ok(2).map(lambda x: x * 10)
            Ok(value=20)
            >>> Err("boom").map(lambda x: x * 10)
            Err(error='boom')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched."""
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls f if the result is Ok, otherwise returns Err."""
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Calls f if the result is Err, otherwise returns Ok."""
        return self if self.is_ok() else f(self.unwrap_err())

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        Example:
            ```python
            >>> from optionkit import Ok, Err
            >>> Ok(1).ok()
            Some(value=1)
            >>> Err("boom").ok()
            NONE

            ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(frozen=True, slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "ok", "value": self.value}


@dataclass(frozen=True, slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def to_dict(self) -> dict[str, Any]:
        return {"type": "err", "error": self.error}


def make_ok[T](value: T) -> Result[T, Any]:
    """Wraps `value` in an `Ok`."""
    return Ok(value)


def make_err[E](error: E) -> Result[Any, E]:
    """Wraps `error` in an `Err`."""
    return Err(error)
