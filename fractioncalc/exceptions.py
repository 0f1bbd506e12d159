import traceback
from types import ModuleType
from typing import Iterable, Optional, Union

from attrs import asdict, field, mutable
from rich.console import Console
from rich.traceback import LOCALS_MAX_LENGTH, LOCALS_MAX_STRING, Traceback

from fractioncalc.rich import console as default_console


class FractionCalcException(Exception):
    pass


class DivisionByZeroError(FractionCalcException, ZeroDivisionError):
    pass


class InvalidInputError(FractionCalcException, ValueError):
    pass


class EndOfInputError(FractionCalcException, EOFError):
    pass


@mutable
class FractionCalcExcHandler:
    """Report package errors as a single line of text."""

    show_tb: bool = False
    console: Console = field(factory=lambda: default_console)

    def __call__(self, exc: Exception) -> Optional[Exception]:
        if isinstance(exc, FractionCalcException):
            if self.show_tb:
                tb_exc = traceback.TracebackException.from_exception(exc)
                self.console.print("".join(list(tb_exc.format())), markup=False)
            else:
                self.console.print(f"Error: {exc}", markup=False, highlight=False)
            return None
        else:
            return exc


@mutable
class RichExcHandler:
    """Report any other error with a rich traceback."""

    width: Optional[int] = 100
    extra_lines: int = 3
    theme: Optional[str] = None
    word_wrap: bool = False
    show_locals: bool = False
    locals_max_length: int = LOCALS_MAX_LENGTH
    locals_max_string: int = LOCALS_MAX_STRING
    locals_hide_dunder: bool = True
    locals_hide_sunder: bool = False
    indent_guides: bool = True
    suppress: Iterable[Union[str, ModuleType]] = ()
    max_frames: int = 100
    console: Console = field(factory=lambda: default_console)

    def __call__(self, exc: Exception) -> Optional[Exception]:
        self.console.print(f"Error: {exc}", markup=False, highlight=False)
        trace_opts = asdict(self, filter=lambda attr, _: attr.name != "console")
        trace = Traceback.from_exception(
            type(exc), exc, exc.__traceback__, **trace_opts
        )
        self.console.print(trace)
        return None
