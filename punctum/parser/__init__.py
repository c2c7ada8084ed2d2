"""Parsing over an token stream: cursors, parse streams and punctuation primitives."""

from .cursor import TokenCursor
from .errors import ParseError
from .punct import parse_punct, peek_punct
from .stream import Lookahead, ParseStream, parse_str

__all__ = [
    "Lookahead",
    "ParseError",
    "ParseStream",
    "TokenCursor",
    "parse_punct",
    "parse_str",
    "peek_punct",
]
