# src/domaincloud/core/frequency.py
from bisect import insort
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class Token:
    """A distinct word and the number of times it was seen."""
    text: str
    count: int = field(default=1, compare=False)


class FrequencyTable:
    """
    Maps token text to its Token, one Token per distinct text.
    Iteration is in ascending order of the text.
    """

    def __init__(self):
        self._tokens: Dict[str, Token] = {}
        self._order: List[str] = []

    def add(self, text: str) -> Token:
        """Counts one occurrence of `text`, creating its Token on first sight."""
        if not text:
            raise ValueError("token text must not be empty")
        token = self._tokens.get(text)
        if token is None:
            token = Token(text)
            self._tokens[text] = token
            insort(self._order, text)
        else:
            token.count += 1
        return token

    def get(self, text: str) -> Optional[Token]:
        return self._tokens.get(text)

    @property
    def total(self) -> int:
        """Number of occurrences over all tokens."""
        return sum(t.count for t in self._tokens.values())

    def most_common(self, n: int) -> List[Token]:
        """The `n` most frequent tokens; ties are broken by text."""
        return sorted(self._tokens.values(), key=lambda t: (-t.count, t.text))[:n]

    def __iter__(self) -> Iterator[Token]:
        for text in self._order:
            yield self._tokens[text]

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, text: object) -> bool:
        return text in self._tokens
