"Reading of whitespace separated tokens from the user input"
from collections import deque
from typing import Deque, List, TextIO

from attrs import field, mutable

from .exceptions import EndOfInputError


@mutable
class InputTokens:
    """
    Whitespace separated tokens of a text stream.

    Tokens are handed out one at a time and may span several lines.
    A new line is only read from the stream once all tokens of the
    previous line have been used up, so a prompt printed before asking
    for a token is answered by the remainder of the current line if
    there is one.
    """

    stream: TextIO
    _pending: Deque[str] = field(factory=deque, init=False)

    def _fill(self) -> None:
        while len(self._pending) == 0:
            line = self.stream.readline()
            if line == "":
                raise EndOfInputError("No more input available.")
            self._pending.extend(line.split())

    def next(self) -> str:
        self._fill()
        return self._pending.popleft()

    def take(self, num: int) -> List[str]:
        return [self.next() for _ in range(num)]

    def discard_line(self) -> None:
        """Drop whatever is left of the current line."""
        self._pending.clear()

    @property
    def num_pending(self) -> int:
        return len(self._pending)
