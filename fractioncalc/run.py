import contextlib
import io
import os
import sys
from typing import Callable, List, Optional, Union

from attrs import mutable
from loguru import logger

from .config import LOG_LEVEL_ENV, Config
from .exceptions import FractionCalcExcHandler, RichExcHandler
from .menu import Session, menu


def add_log_sink(level: str) -> int:
    """Enable the package's log records on stderr and return the sink id."""
    logger.enable("fractioncalc")
    return logger.add(sys.stderr, level=level.upper())


def run(
    config: Optional[Config] = None,
    exception_handlers: Optional[
        List[Callable[[Exception], Optional[Exception]]]
    ] = None,
    add_fractioncalc_exc_handler: bool = True,
    add_rich_exc_handler: bool = True,
) -> int:
    """
    Run the interactive menu until the user exits.

    Exceptions escaping the menu are offered to the exception handlers in
    order. A handler returns ``None`` once it has reported the exception,
    or an exception to hand on to the next one. Whatever no handler deals
    with is raised again.

    Returns:
        The exit code of the process, which is always 0.
    """
    if config is None:
        config = Config()

    exception_handlers = list(exception_handlers or [])
    if add_fractioncalc_exc_handler:
        exception_handlers.append(
            FractionCalcExcHandler(show_tb=False, console=config.console)
        )
    if add_rich_exc_handler:
        exception_handlers.append(RichExcHandler(console=config.console))

    sink_id = None
    try:
        if config.log_level is not None:
            sink_id = add_log_sink(config.log_level)
        menu(Session.from_config(config))
    except Exception as input_e:
        # run through all exception handlers in order
        e: Optional[Exception] = input_e
        for handler in exception_handlers:
            if e is None:
                break
            try:
                e = handler(e)
            except Exception as raised_e:
                e = raised_e
            if not isinstance(e, Exception):
                break
        if e is not None:
            raise e from input_e
    finally:
        if sink_id is not None:
            logger.remove(sink_id)
            logger.disable("fractioncalc")
    return 0


def main() -> int:
    return run(config=Config(log_level=os.environ.get(LOG_LEVEL_ENV)))


@mutable
class RunOutput:
    stdout: str
    stderr: str
    exit_code: Optional[Union[int, str]]
    exc: Optional[Exception]


def runner_testing(
    input_text: str,
    config: Optional[Config] = None,
    exception_handlers: Optional[
        List[Callable[[Exception], Optional[Exception]]]
    ] = None,
    add_fractioncalc_exc_handler: bool = True,
    add_rich_exc_handler: bool = True,
) -> RunOutput:
    """Run the menu on the given input and capture what it prints."""
    if config is None:
        config = Config()
    config.input_stream = io.StringIO(input_text)

    output = RunOutput(stdout="", stderr="", exit_code=None, exc=None)
    with contextlib.redirect_stdout(
        io.StringIO()
    ) as rout, contextlib.redirect_stderr(io.StringIO()) as rerr:
        try:
            output.exit_code = run(
                config=config,
                exception_handlers=exception_handlers,
                add_fractioncalc_exc_handler=add_fractioncalc_exc_handler,
                add_rich_exc_handler=add_rich_exc_handler,
            )
        except Exception as e:
            output.exc = e
            output.exit_code = 1
        except SystemExit as e:
            output.exit_code = e.code

    output.stdout = rout.getvalue()
    output.stderr = rerr.getvalue()
    return output
