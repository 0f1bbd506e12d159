import io

import pytest
from rich.console import Console

from fractioncalc.menu import Session
from fractioncalc.preprocessing import InputTokens
from fractioncalc.type_converters import TokenConverterStore


@pytest.fixture
def store():
    yield TokenConverterStore(add_defaults=True)


@pytest.fixture
def make_session(store):
    """Session reading the given text, printing into a string buffer."""

    def _make_session(input_text: str) -> Session:
        return Session(
            tokens=InputTokens(io.StringIO(input_text)),
            console=Console(file=io.StringIO(), width=200),
            store=store,
        )

    yield _make_session
