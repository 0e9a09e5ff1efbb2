# src/domaincloud/core/clutter.py
"""
Recognizes and removes clutter from C-like source text.

Clutter is a `//` line comment, a `/* */` block comment or a string literal
quoted with `"` or `'`. Every skip_* primitive is called right after the
character(s) opening the region were consumed and leaves the reader just past
the end of the region, or at end of input. The primitives never report errors;
stream failures surface from strip() and count_words().
"""
import io
import string
from typing import TextIO

from domaincloud.core.stream import CharReader
from domaincloud.errors import StreamError

QUOTES = ('"', "'")
WHITESPACE = frozenset(string.whitespace)
SEPARATOR = " "


def skip_delimited(reader: CharReader, delimiter: str) -> None:
    """
    Advances past the first `delimiter` that is not escaped by a backslash.
    A backslash escapes the character right after it, so an even run of
    backslashes escapes nothing.
    """
    ignore_next = False
    for ch in reader:
        if ignore_next:
            ignore_next = False
        elif ch == "\\":
            ignore_next = True
        elif ch == delimiter:
            return


def skip_line_comment(reader: CharReader) -> None:
    """Advances past the first unescaped newline. A trailing backslash joins lines."""
    skip_delimited(reader, "\n")


def skip_block_comment(reader: CharReader) -> None:
    """Advances past the first `*/`. Block comments do not nest."""
    cur = reader.getc()
    for nxt in reader:
        if cur == "*" and nxt == "/":
            return
        cur = nxt


def try_skip_comment(reader: CharReader) -> bool:
    """
    Resolves a `/` that was just consumed.
    Returns True if it opened a comment, which is then skipped. Otherwise the
    peeked character is pushed back and False is returned: the `/` is text.
    """
    nxt = reader.getc()
    if nxt == "/":
        skip_line_comment(reader)
        return True
    if nxt == "*":
        skip_block_comment(reader)
        return True
    reader.ungetc(nxt)
    return False


def strip(istr: TextIO, ostr: TextIO) -> None:
    """
    Copies `istr` to `ostr` without comments and string literals, replacing
    every run of whitespace by a single space.

    A space is only written if the previously written character is not one
    already, so whitespace around removed clutter still collapses to one
    separator (`x = "s" + y` -> `x = + y`).

    Raises StreamError if reading or writing fails. Input that ends inside a
    comment or string is not an error.
    """
    reader = CharReader(istr)
    last_was_separator = False
    try:
        for ch in reader:
            if ch == "/":
                if try_skip_comment(reader):
                    continue
                ostr.write(ch)
                last_was_separator = False
            elif ch in QUOTES:
                skip_delimited(reader, ch)
            elif ch in WHITESPACE:
                if not last_was_separator:
                    ostr.write(SEPARATOR)
                    last_was_separator = True
            else:
                ostr.write(ch)
                last_was_separator = False
        ostr.flush()
    except (OSError, UnicodeError) as e:
        raise StreamError(f"stream error while stripping: {e}", e) from e


def strip_text(text: str) -> str:
    """Returns `text` with clutter removed and whitespace collapsed."""
    out = io.StringIO()
    strip(io.StringIO(text), out)
    return out.getvalue()
