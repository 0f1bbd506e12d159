import sys
from functools import partial
from typing import Optional, TextIO

from attrs import field, mutable
from rich.console import Console

from .rich import console as default_console
from .type_converters import TokenConverterStore

LOG_LEVEL_ENV = "FRACTIONCALC_LOG_LEVEL"


@mutable(kw_only=True)
class Config:
    input_stream: Optional[TextIO] = None
    console: Console = field(factory=lambda: default_console)
    log_level: Optional[str] = None
    converter_store: TokenConverterStore = field(
        factory=partial(TokenConverterStore, add_defaults=True)
    )

    def get_input_stream(self) -> TextIO:
        # sys.stdin is looked up late so that redirection is honored
        if self.input_stream is None:
            return sys.stdin
        return self.input_stream
