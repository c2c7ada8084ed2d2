"""Errors collections that lexer may raise (user-facing ones)."""

from .unclosed_string_quote import UnclosedStringQuoteError
from .unknown_character import UnknownCharacterError

__all__ = [
    "UnclosedStringQuoteError",
    "UnknownCharacterError",
]
