"""Fraction operations that return their failure instead of raising it."""
from typing import Generic, TypeVar, Union

from attrs import frozen

from .exceptions import DivisionByZeroError
from .fraction import Fraction

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@frozen
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        del default
        return self.value


@frozen
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def try_fraction(
    numerator: int, denominator: int
) -> Result[Fraction, DivisionByZeroError]:
    try:
        return Ok(Fraction(numerator, denominator))
    except DivisionByZeroError as e:
        return Err(e)


def try_divide(
    lhs: Fraction, rhs: Union[Fraction, int]
) -> Result[Fraction, DivisionByZeroError]:
    try:
        return Ok(lhs.divide(rhs))
    except DivisionByZeroError as e:
        return Err(e)
