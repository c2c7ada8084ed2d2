from __future__ import annotations

from typing import TYPE_CHECKING

from punctum.lexer.tokens import Token, TokenType
from punctum.punct import DecompositionMode, decompose_atoms

if TYPE_CHECKING:
    from collections.abc import Sequence

    from punctum.lexer.tokens import TokenLocation
    from punctum.printer.stream import TokenStream


def print_punct(text: str, locations: Sequence[TokenLocation], tokens: TokenStream) -> None:
    """Emit punctuation into stream as joint characters, each atom gets its own location.

    Characters of an atom are located right after the atom location (shifted by column).
    """
    atoms = decompose_atoms(text, DecompositionMode.LENIENT)
    assert len(atoms) == len(locations), "Expected one location per punctuation atom"

    last = len(text) - 1
    offset = 0
    for atom, location in zip(atoms, locations, strict=True):
        for atom_offset, char in enumerate(atom.text):
            tokens.append(
                Token(
                    type=TokenType.PUNCT,
                    text=char,
                    value=char,
                    location=location.shift_col_number(atom_offset),
                    has_trailing_whitespace=offset == last,
                ),
            )
            offset += 1
