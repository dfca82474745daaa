"""A value that is either a success value or an error value."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class ResultError(RuntimeError):
    """Raised when a result is unwrapped or expected on the wrong side."""


class Result(Generic[T, E]):
    """Holds either an Ok value or an Err value, never both."""

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: Any, is_ok: bool = True) -> None:
        self._value = value
        self._is_ok = bool(is_ok)

    @classmethod
    def ok(cls, value: T = None) -> "Result[T, E]":
        """Build a successful result."""
        return cls(value, True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        """Build an error result."""
        return cls(error, False)

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def unwrap(self) -> T:
        """Return the Ok value, raising ResultError if this is an error."""
        if not self._is_ok:
            raise ResultError(f"called unwrap on an error result: {self._value!r}")
        return self._value

    def unwrap_err(self) -> E:
        """Return the Err value, raising ResultError if this is a success."""
        if self._is_ok:
            raise ResultError(f"called unwrap_err on an ok result: {self._value!r}")
        return self._value

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        """Apply func to the Ok value; an error passes through unchanged."""
        if self._is_ok:
            return Result(func(self._value), True)
        return Result(self._value, False)

    def expect(self, message: str) -> T:
        """Return the Ok value or raise ResultError with message."""
        if self._is_ok:
            return self._value
        raise ResultError(message)

    def expect_err(self, message: str) -> E:
        """Return the Err value or raise ResultError with message."""
        if not self._is_ok:
            return self._value
        raise ResultError(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __repr__(self) -> str:
        kind = "Ok" if self._is_ok else "Err"
        return f"{kind}({self._value!r})"