from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


ESCAPE_SYMBOL = "\\"

DECIMAL_DIGITS = frozenset(string.digits)
IDENTIFIER_START_CHARACTERS = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARACTERS = IDENTIFIER_START_CHARACTERS | DECIMAL_DIGITS


def unescape_text_literal(text: str) -> str:
    """Remove all terminations within string (escape it)."""
    # Non-ASCII text must survive, only backslash escapes are decoded
    return text.encode("latin-1", "backslashreplace").decode("unicode-escape")


def find_word_start(text: str, start: int) -> int:
    """Find start column index of an word."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_quoted_literal_end(line: str, idx: int, *, quote: str) -> int:
    """Find index where given string ends (close quote) or -1 if not closed properly."""
    idx_end = len(line)

    prev = None
    while idx < idx_end:
        current = line[idx]
        if current == quote and prev != ESCAPE_SYMBOL:
            return idx + 1

        # Escaped escape symbol does not escape quote after it
        prev = None if current == ESCAPE_SYMBOL and prev == ESCAPE_SYMBOL else current
        idx += 1

    return -1


def find_identifier_end(text: str, start: int) -> int:
    """Find end column index of an identifier (or integer) that starts at given column."""
    return _find_column(text, start, lambda s: s not in IDENTIFIER_CHARACTERS)


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start
