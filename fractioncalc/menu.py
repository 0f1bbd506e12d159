"""
Interactive console demo of the fraction arithmetic.

The user is offered a menu, enters two fractions as pairs of integers
and picks an operation to apply to them.
"""
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Tuple, Type

from attrs import mutable
from loguru import logger
from rich.console import Console

from .config import Config
from .exceptions import DivisionByZeroError, EndOfInputError, InvalidInputError
from .fraction import Fraction
from .preprocessing import InputTokens
from .type_converters import TokenConverterStore

MENU_TEXT = (
    "\nMenu:\n"
    "1. Enter your own fractions and perform operations\n"
    "2. Exit"
)
CHOICE_PROMPT = "Enter your choice: "
INVALID_CHOICE_PROMPT = "Invalid input. Please enter a number between 1 and 2: "
FIRST_FRACTION_PROMPT = "Enter the numerator and denominator for the first fraction: "
SECOND_FRACTION_PROMPT = (
    "Enter the numerator and denominator for the second fraction: "
)
OPERATION_PROMPT = "Enter an operation (+, -, *, /) to perform on these fractions: "
ZERO_FRACTION_DIVISOR_MSG = "Error: Cannot divide by zero fraction."


class MenuChoice(IntEnum):
    ENTER_FRACTIONS = 1
    EXIT = 2


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def label(self) -> str:
        return _OPERATION_LABELS[self]

    def apply(self, lhs: Fraction, rhs: Fraction) -> Fraction:
        return _OPERATION_FUNCS[self](lhs, rhs)


_OPERATION_LABELS = {
    Operation.ADD: "addition",
    Operation.SUBTRACT: "subtraction",
    Operation.MULTIPLY: "multiplication",
    Operation.DIVIDE: "division",
}

_OPERATION_FUNCS: Dict[Operation, Callable[[Fraction, Fraction], Fraction]] = {
    Operation.ADD: Fraction.add,
    Operation.SUBTRACT: Fraction.subtract,
    Operation.MULTIPLY: Fraction.multiply,
    Operation.DIVIDE: Fraction.divide,
}


@mutable
class Session:
    """Input and output of one run of the menu."""

    tokens: InputTokens
    console: Console
    store: TokenConverterStore

    @classmethod
    def from_config(cls, config: Config) -> "Session":
        return cls(
            tokens=InputTokens(config.get_input_stream()),
            console=config.console,
            store=config.converter_store,
        )

    def print(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False)

    def prompt(self, text: str) -> None:
        self.console.print(text, end="", markup=False, emoji=False, highlight=False)

    def read(self, target_type: Type) -> Any:
        converter = self.store.get_converter(target_type)
        return converter.convert(self.tokens.take(converter.num_req_tokens))


def read_choice(session: Session) -> MenuChoice:
    while True:
        try:
            return MenuChoice(session.read(int))
        except ValueError as e:
            logger.warning(f"Rejected menu choice: {e}")
            session.tokens.discard_line()
            session.prompt(INVALID_CHOICE_PROMPT)


def read_fraction(session: Session) -> Fraction:
    numerator, denominator = session.read(Tuple[int, int])
    if denominator == 0:
        raise InvalidInputError("Denominator cannot be zero.")
    return Fraction(numerator, denominator)


def user_interaction(session: Session) -> None:
    """
    Read two fractions and an operation and print the result.

    Bad input or a division by a zero fraction is reported and ends
    the interaction, but never the session.
    """
    try:
        session.prompt(FIRST_FRACTION_PROMPT)
        first = read_fraction(session)
        session.prompt(SECOND_FRACTION_PROMPT)
        second = read_fraction(session)

        session.print(f"First Fraction: {first}")
        session.print(f"Second Fraction: {second}")

        session.prompt(OPERATION_PROMPT)
        try:
            operation = session.read(Operation)
        except InvalidInputError as e:
            logger.warning(f"Rejected operation: {e}")
            session.print("Invalid operation.")
            return

        # checked here as well so the user gets the message of this menu
        if operation is Operation.DIVIDE and second.numerator == 0:
            raise DivisionByZeroError(ZERO_FRACTION_DIVISOR_MSG)

        logger.debug(f"Applying {operation.label} to {first} and {second}")
        result = operation.apply(first, second)
        session.print(f"Result of {operation.label}: {result}")
    except InvalidInputError as e:
        logger.warning(f"Rejected fraction: {e}")
        session.tokens.discard_line()
        session.print(f"Invalid input: {e}")
    except DivisionByZeroError as e:
        session.print(f"Logic error: {e}")


def menu(session: Session) -> None:
    exit_menu = False

    while not exit_menu:
        session.print(MENU_TEXT)
        session.prompt(CHOICE_PROMPT)
        choice = read_choice(session)

        try:
            if choice is MenuChoice.ENTER_FRACTIONS:
                user_interaction(session)
            else:
                exit_menu = True
                session.print("Exiting the program.")
        except EndOfInputError:
            raise
        except Exception as e:
            session.print(f"Error: {e}")
