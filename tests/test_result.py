import pytest

from fractioncalc.exceptions import DivisionByZeroError
from fractioncalc.fraction import Fraction
from fractioncalc.result import Err, Ok, try_divide, try_fraction


def test_try_fraction_ok():
    res = try_fraction(2, -4)
    assert isinstance(res, Ok)
    assert res.is_ok()
    assert res.unwrap() == Fraction(-1, 2)
    assert res.unwrap_or(Fraction()) == Fraction(-1, 2)


def test_try_fraction_err():
    res = try_fraction(1, 0)
    assert isinstance(res, Err)
    assert not res.is_ok()
    assert isinstance(res.error, DivisionByZeroError)
    assert res.unwrap_or(Fraction()) == Fraction(1, 1)
    with pytest.raises(DivisionByZeroError):
        res.unwrap()


@pytest.mark.parametrize(
    "lhs,rhs,expected",
    [
        (Fraction(1, 2), Fraction(1, 4), Fraction(2, 1)),
        (Fraction(1, 2), 3, Fraction(1, 6)),
        (Fraction(1, 2), Fraction(0, 5), None),
        (Fraction(1, 2), 0, None),
    ],
)
def test_try_divide(lhs, rhs, expected):
    res = try_divide(lhs, rhs)
    if expected is None:
        assert isinstance(res, Err)
        assert isinstance(res.error, DivisionByZeroError)
    else:
        assert res == Ok(expected)
