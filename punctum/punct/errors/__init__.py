"""Errors collections that punctuation declarations may raise (user-facing ones)."""

from .declaration import PunctuationDeclarationError
from .empty_symbol import EmptyPunctuationSymbolError
from .invalid_name import InvalidPunctuationNameError
from .unexpected_punctuation import UnexpectedPunctuationError

__all__ = [
    "EmptyPunctuationSymbolError",
    "InvalidPunctuationNameError",
    "PunctuationDeclarationError",
    "UnexpectedPunctuationError",
]
