# src/domaincloud/core/stream.py
from typing import List, TextIO

EOF_CHAR = ""


class CharReader:
    """
    Reads a text stream one character at a time.
    Characters handed to ungetc() are returned again by the next getc() calls,
    most recently pushed first.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pushed: List[str] = []

    def getc(self) -> str:
        """Returns the next character, or EOF_CHAR at end of input."""
        if self._pushed:
            return self._pushed.pop()
        return self.stream.read(1)

    def ungetc(self, ch: str) -> None:
        # Pushing back end of input is a no-op, like C's ungetc(EOF)
        if ch:
            self._pushed.append(ch)

    def __iter__(self):
        while True:
            ch = self.getc()
            if not ch:
                return
            yield ch
