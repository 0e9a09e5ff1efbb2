# src/domaincloud/core/words.py
"""
Extracts identifier-like words from C-like source text and counts them.

Comments and string literals are skipped with the same primitives the
stripper uses, while token boundaries are tracked in the same pass, so only
the word being read is ever buffered.
"""
import io
import string
from typing import List, Optional, TextIO

from domaincloud.core.clutter import QUOTES, skip_delimited, try_skip_comment
from domaincloud.core.frequency import FrequencyTable
from domaincloud.core.stream import CharReader
from domaincloud.errors import StreamError

IDENTIFIER_CHARS = frozenset(string.ascii_letters + "._")
DIGITS = frozenset(string.digits)


def is_identifier(ch: str) -> bool:
    """True if `ch` may start a word."""
    return ch in IDENTIFIER_CHARS


def _finish_word(word: List[str], table: FrequencyTable) -> None:
    if word:
        table.add("".join(word))
        word.clear()


def count_words(istr: TextIO, table: FrequencyTable) -> None:
    """
    Reads words from `istr` and counts them into `table`.

    A word starts with an ASCII letter, `.` or `_` and may continue with
    digits. Anything else ends it, including the start of a comment or a
    string literal.

    Raises StreamError if reading fails. Words counted before the failure
    stay in `table`.
    """
    reader = CharReader(istr)
    word: List[str] = []
    try:
        for ch in reader:
            if ch == "/":
                _finish_word(word, table)
                try_skip_comment(reader)
            elif ch in QUOTES:
                _finish_word(word, table)
                skip_delimited(reader, ch)
            elif is_identifier(ch) or (word and ch in DIGITS):
                word.append(ch)
            else:
                _finish_word(word, table)
    except (OSError, UnicodeError) as e:
        raise StreamError(f"stream error while counting words: {e}", e) from e
    _finish_word(word, table)


def count_text(text: str, table: Optional[FrequencyTable] = None) -> FrequencyTable:
    """Counts the words of `text` into `table`, or into a new table."""
    if table is None:
        table = FrequencyTable()
    count_words(io.StringIO(text), table)
    return table
