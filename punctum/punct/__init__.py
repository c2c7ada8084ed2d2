"""Atom table of the host grammar and decomposition of punctuation symbols into these atoms."""

from .atoms import ATOM_TABLE, PUNCTUATION_CHARACTERS, Atom, is_punctuation_character, lookup_atom
from .decompose import DecompositionMode, decompose, decompose_atoms, symbol_length

__all__ = [
    "ATOM_TABLE",
    "PUNCTUATION_CHARACTERS",
    "Atom",
    "DecompositionMode",
    "decompose",
    "decompose_atoms",
    "is_punctuation_character",
    "lookup_atom",
    "symbol_length",
]
