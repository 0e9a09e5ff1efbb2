# src/domaincloud/core/render.py
from enum import Enum
from typing import Iterator, TextIO

from domaincloud.core.frequency import FrequencyTable, Token


class RenderMode(Enum):
    ALPHA_ONLY = "alpha"
    WITH_FREQUENCY = "freq"
    RAW_REPEATED = "raw"


def _alpha_lines(token: Token) -> Iterator[str]:
    yield token.text


def _frequency_lines(token: Token) -> Iterator[str]:
    yield f"{token.text} [{token.count}]"


def _raw_lines(token: Token) -> Iterator[str]:
    # Repeated so that word cloud tools weight the word by its frequency
    for _ in range(token.count):
        yield token.text


_LINE_FORMATTERS = {
    RenderMode.ALPHA_ONLY: _alpha_lines,
    RenderMode.WITH_FREQUENCY: _frequency_lines,
    RenderMode.RAW_REPEATED: _raw_lines,
}


def render(ostr: TextIO, table: FrequencyTable, mode: RenderMode) -> None:
    """Writes the tokens of `table` to `ostr` in ascending order, one per line."""
    lines_for = _LINE_FORMATTERS[mode]
    for token in table:
        for line in lines_for(token):
            ostr.write(f"{line}\n")
