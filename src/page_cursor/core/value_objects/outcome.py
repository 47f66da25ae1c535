"""Outcome value object: the success/failure channel for page fetches.

An outcome is either ``Ok`` holding a value or ``Err`` holding an error.
Expected failures travel as ``Err`` values instead of raised exceptions,
so a caller can tell "the fetch failed" apart from "there is no page"
(which is plain ``None``).
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from ..exceptions import UnwrapError

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')
F = TypeVar('F')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_err(self):
        raise UnwrapError("Called unwrap_err() on an Ok outcome", payload=self.value)

    def map(self, fn: Callable[[T], U]) -> 'Ok[U]':
        """Transform the value, keeping the outcome successful."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> 'Ok[T]':
        return self


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError("Called unwrap() on an Err outcome", payload=self.error)

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> 'Err[E]':
        return self

    def map_err(self, fn: Callable[[E], F]) -> 'Err[F]':
        """Transform the error, keeping the outcome failed."""
        return Err(fn(self.error))


Outcome = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Wrap a value in a successful outcome."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Wrap an error in a failed outcome."""
    return Err(error)
