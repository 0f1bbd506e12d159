from typing import Tuple

from fractioncalc.fraction import Fraction
from fractioncalc.menu import Operation
from fractioncalc.utils import clean_type_str


def test_clean_type_str():
    assert clean_type_str(int) == "int"
    assert clean_type_str(Fraction) == "Fraction"
    assert clean_type_str(Operation) == "Operation"
    assert clean_type_str(Tuple[int, int]) == "Tuple[int, int]"
