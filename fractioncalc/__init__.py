"""A fraction type in lowest terms and a console calculator built on it."""
__version__ = "0.1.0"

from loguru import logger

from .config import Config
from .exceptions import (
    DivisionByZeroError,
    EndOfInputError,
    FractionCalcException,
    InvalidInputError,
)
from .fraction import Fraction, format_fraction, gcd, normalize, write_fraction
from .result import Err, Ok, Result, try_divide, try_fraction
from .run import main, run

logger.disable("fractioncalc")

__all__ = [
    "Fraction",
    "gcd",
    "normalize",
    "format_fraction",
    "write_fraction",
    "Ok",
    "Err",
    "Result",
    "try_fraction",
    "try_divide",
    "FractionCalcException",
    "DivisionByZeroError",
    "InvalidInputError",
    "EndOfInputError",
    "Config",
    "run",
    "main",
]
