"""Rational numbers kept in lowest terms."""
from typing import Any, Optional, TextIO, Tuple, Union

from attrs import field, mutable

from .exceptions import DivisionByZeroError

ZERO_DENOMINATOR_MSG = "Denominator can not be equal to zero!"
ZERO_DIVISOR_MSG = "Cannot divide by zero fraction."


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two non-negative integers.

    Euclidean algorithm with the convention ``gcd(0, b) == b``.
    """
    while a:
        a, b = b % a, a
    return b


def normalize(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Bring a numerator/denominator pair into canonical form.

    The result has a positive denominator, carries the sign in the
    numerator and has no common divisor left. A zero numerator always
    becomes ``(0, 1)``.

    Args:
        numerator: The numerator of the fraction.
        denominator: The denominator of the fraction, must not be 0.

    Returns:
        The reduced ``(numerator, denominator)`` pair.

    Raises:
        DivisionByZeroError: If the denominator is 0.
    """
    if denominator == 0:
        raise DivisionByZeroError(ZERO_DENOMINATOR_MSG)

    negative = numerator != 0 and (numerator < 0) != (denominator < 0)

    numerator = abs(numerator)
    denominator = abs(denominator)

    divisor = gcd(numerator, denominator)
    numerator = numerator // divisor
    denominator = denominator // divisor

    if negative:
        numerator = -numerator
    return (numerator, denominator)


def is_operand(value: Any) -> bool:
    return isinstance(value, Fraction) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def as_fraction(value: Union["Fraction", int]) -> "Fraction":
    if isinstance(value, Fraction):
        return value
    if is_operand(value):
        return Fraction(value, 1)
    raise TypeError(f"Unsupported operand for Fraction: {value!r}")


def _check_integer(instance, attribute, value) -> None:
    del instance
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Fraction only supports integer values, got {value!r} "
            f"for {attribute.name.lstrip('_')}"
        )


def _check_nonzero(instance, attribute, value) -> None:
    del instance, attribute
    if value == 0:
        raise DivisionByZeroError(ZERO_DENOMINATOR_MSG)


@mutable(eq=False, repr=False)
class Fraction:
    """
    A fraction in canonical form.

    Every construction and every mutation leaves the fraction reduced,
    with a positive denominator. Arithmetic returns new instances and
    never changes its operands. Integers are accepted wherever a
    fraction is, and behave as ``n/1``.
    """

    _numerator: int = field(default=1, validator=_check_integer)
    _denominator: int = field(default=1, validator=[_check_integer, _check_nonzero])

    def __attrs_post_init__(self) -> None:
        self._normalize()

    def _normalize(self) -> None:
        self._numerator, self._denominator = normalize(
            self._numerator, self._denominator
        )

    @property
    def numerator(self) -> int:
        return self._numerator

    @numerator.setter
    def numerator(self, value: int) -> None:
        self._numerator = value
        self._normalize()

    @property
    def denominator(self) -> int:
        return self._denominator

    @denominator.setter
    def denominator(self, value: int) -> None:
        # validation happens on assignment, before any state changes
        self._denominator = value
        self._normalize()

    def get_numerator(self) -> int:
        return self._numerator

    def get_denominator(self) -> int:
        return self._denominator

    def set_numerator(self, value: int) -> None:
        self.numerator = value

    def set_denominator(self, value: int) -> None:
        self.denominator = value

    def copy(self) -> "Fraction":
        return Fraction(self._numerator, self._denominator)

    __copy__ = copy

    def assign(self, other: "Fraction") -> "Fraction":
        """Take over the value of ``other``; assigning to itself changes nothing."""
        if not isinstance(other, Fraction):
            raise TypeError(f"Can only assign a Fraction, got {other!r}")
        if other is not self:
            self._numerator = other._numerator
            self._denominator = other._denominator
        return self

    # arithmetic

    def add(self, other: Union["Fraction", int]) -> "Fraction":
        other = as_fraction(other)
        return Fraction(
            self._numerator * other._denominator
            + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: Union["Fraction", int]) -> "Fraction":
        other = as_fraction(other)
        return Fraction(
            self._numerator * other._denominator
            - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: Union["Fraction", int]) -> "Fraction":
        other = as_fraction(other)
        return Fraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: Union["Fraction", int]) -> "Fraction":
        """
        Divide by another fraction or an integer.

        Raises:
            DivisionByZeroError: If ``other`` has the value zero.
        """
        other = as_fraction(other)
        if other._numerator == 0:
            raise DivisionByZeroError(ZERO_DIVISOR_MSG)
        return Fraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __add__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not is_operand(other):
            return NotImplemented
        return as_fraction(other).subtract(self)

    def __mul__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not is_operand(other):
            return NotImplemented
        return as_fraction(other).divide(self)

    def __neg__(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> "Fraction":
        return self.copy()

    def __abs__(self) -> "Fraction":
        return Fraction(abs(self._numerator), self._denominator)

    # increment and decrement

    def increment(self) -> "Fraction":
        """Add one to the numerator in place and return the fraction itself."""
        self.numerator = self._numerator + 1
        return self

    def decrement(self) -> "Fraction":
        """Subtract one from the numerator in place and return the fraction itself."""
        self.numerator = self._numerator - 1
        return self

    def post_increment(self) -> "Fraction":
        """Add one to the numerator in place and return the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "Fraction":
        """Subtract one from the numerator in place and return the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    # comparison

    def _cross(self, other: "Fraction") -> Tuple[int, int]:
        return (
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def compare_to(self, other: Union["Fraction", int]) -> int:
        lhs, rhs = self._cross(as_fraction(other))
        if lhs < rhs:
            return -1
        elif lhs > rhs:
            return +1
        else:
            return 0

    def equals(self, other: Union["Fraction", int]) -> bool:
        return self.compare_to(other) == 0

    def __eq__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs == rhs

    def __ne__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs != rhs

    def __lt__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs < rhs

    def __le__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs <= rhs

    def __gt__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs > rhs

    def __ge__(self, other):
        if not is_operand(other):
            return NotImplemented
        lhs, rhs = self._cross(as_fraction(other))
        return lhs >= rhs

    # mutable value, so not hashable
    __hash__ = None  # type: ignore

    # conversion

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    def to_string(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


def format_fraction(fraction: Optional[Fraction]) -> str:
    """Text form of a fraction; empty for ``None``."""
    if fraction is None:
        return ""
    return fraction.to_string()


def write_fraction(stream: TextIO, fraction: Optional[Fraction]) -> TextIO:
    """Write a fraction to a stream. Nothing is written for ``None``."""
    if fraction is not None:
        stream.write(fraction.to_string())
    return stream
