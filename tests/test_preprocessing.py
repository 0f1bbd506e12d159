import io

import pytest

from fractioncalc.exceptions import EndOfInputError
from fractioncalc.preprocessing import InputTokens


def test_tokens_across_lines():
    tokens = InputTokens(io.StringIO("1  2\n\n   3\n4 +\n"))
    assert tokens.take(3) == ["1", "2", "3"]
    assert tokens.next() == "4"
    assert tokens.num_pending == 1
    assert tokens.next() == "+"


def test_discard_line():
    tokens = InputTokens(io.StringIO("a b c\nd\n"))
    assert tokens.next() == "a"
    tokens.discard_line()
    assert tokens.num_pending == 0
    assert tokens.next() == "d"


def test_end_of_input():
    tokens = InputTokens(io.StringIO("1\n"))
    assert tokens.next() == "1"
    with pytest.raises(EndOfInputError):
        tokens.next()


def test_no_newline_at_end():
    tokens = InputTokens(io.StringIO("5 6"))
    assert tokens.take(2) == ["5", "6"]
