"""Ok / Err outcome of a rule-set build.

The builder reports rejected changes as values so callers can decide
whether to raise (the command handlers do, through :meth:`Err.unwrap`) or
inspect the error.
"""

from __future__ import annotations

from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


class Ok(Generic[T]):
    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and other.value == self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


class Err(Generic[E]):
    """Failed outcome.  Exceptions compare by identity, so two ``Err`` are equal
    only when they hold the same error object.
    """

    __slots__ = ("error",)

    def __init__(self, error: E) -> None:
        self.error = error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and other.error == self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


__all__ = ["Err", "Ok", "Result"]
