"""Punctum, custom multi-character punctuation tokens.

Provides declaration of punctuation token types and small token stream they are parsed from and printed into.
"""

from .custom import CustomPunctuation, PunctuationFeatures, custom_punctuation
from .lexer import Token, TokenLocation, TokenType, tokenize_string
from .parser import Lookahead, ParseError, ParseStream, TokenCursor, parse_str
from .printer import TokenStream

__all__ = [
    "CustomPunctuation",
    "Lookahead",
    "ParseError",
    "ParseStream",
    "PunctuationFeatures",
    "Token",
    "TokenCursor",
    "TokenLocation",
    "TokenStream",
    "TokenType",
    "custom_punctuation",
    "parse_str",
    "tokenize_string",
]
