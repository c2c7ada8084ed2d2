"""Printing tokens back into an output token stream and source text."""

from .punct import print_punct
from .stream import TokenStream, ToTokens

__all__ = [
    "ToTokens",
    "TokenStream",
    "print_punct",
]
