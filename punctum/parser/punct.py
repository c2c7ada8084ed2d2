"""Primitives for peeking, parsing multi-character punctuation from an token stream.

Multi-character punctuation is an sequence of single punctuation character tokens,
where each character except the last one is joint with the next (has no trailing whitespace).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from punctum.punct import DecompositionMode, decompose_atoms

if TYPE_CHECKING:
    from punctum.lexer.tokens import Token, TokenLocation
    from punctum.parser.cursor import TokenCursor
    from punctum.parser.stream import ParseStream


def peek_punct(cursor: TokenCursor, text: str) -> bool:
    """Is upcoming input at given cursor is exactly given punctuation (non-consuming)."""
    return _match_punct(cursor, text) is not None


def parse_punct(stream: ParseStream, text: str) -> tuple[TokenLocation, ...]:
    """Consume given punctuation from the stream and get location of each atom of it.

    :raises ParseError: If upcoming input is not that punctuation, stream is left unadvanced
    """
    matched = _match_punct(stream.cursor(), text)
    if matched is None:
        raise stream.error(f"expected `{text}`")

    tokens, rest = matched
    stream.advance_to_cursor(rest)
    return _atoms_locations(text, tokens)


def _match_punct(cursor: TokenCursor, text: str) -> tuple[list[Token], TokenCursor] | None:
    tokens: list[Token] = []
    for i, char in enumerate(text):
        punct = cursor.punct()
        if punct is None:
            return None
        token, cursor = punct
        if token.text != char:
            return None
        if i + 1 < len(text) and token.has_trailing_whitespace:
            return None
        tokens.append(token)
    return tokens, cursor


def _atoms_locations(text: str, tokens: list[Token]) -> tuple[TokenLocation, ...]:
    """Location of an atom is location of its first character."""
    locations: list[TokenLocation] = []
    offset = 0
    for atom in decompose_atoms(text, DecompositionMode.LENIENT):
        locations.append(tokens[offset].location)
        offset += atom.length
    return tuple(locations)
