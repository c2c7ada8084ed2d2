"""Lexer package for tokenizing text into stream of tokens."""

from .lexer import debug_lexer_wrapper, tokenize_from_raw, tokenize_string
from .tokens import Token, TokenLocation, TokenType

__all__ = [
    "Token",
    "TokenLocation",
    "TokenType",
    "debug_lexer_wrapper",
    "tokenize_from_raw",
    "tokenize_string",
]
