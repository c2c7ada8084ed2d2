"""Decomposition of an punctuation symbol into atoms of the host grammar.

Symbol is scanned left to right, at each position the longest atom is consumed (maximal munch),
so `<=>` is `<=` followed by `>` and `<<=` is single atom rather than `<` `<=`.

Two modes exist:
    Lenient - unknown character is skipped and contributes nothing (never fails)
    Strict  - unknown character rejects whole symbol with an error

Declarations always run both, lenient count must agree with strict one for valid symbols.
"""

from __future__ import annotations

from enum import Enum, auto

from .atoms import MAX_ATOM_LENGTH, Atom, lookup_atom
from .errors import EmptyPunctuationSymbolError, UnexpectedPunctuationError


class DecompositionMode(Enum):
    LENIENT = auto()
    STRICT = auto()


def decompose(symbol: str, mode: DecompositionMode = DecompositionMode.STRICT) -> int:
    """Get amount of atoms given symbol consist of.

    :raises UnexpectedPunctuationError: In strict mode, if some part of symbol is not an atom
    :raises EmptyPunctuationSymbolError: In strict mode, if symbol is empty
    """
    return len(decompose_atoms(symbol, mode))


def decompose_atoms(
    symbol: str,
    mode: DecompositionMode = DecompositionMode.STRICT,
) -> tuple[Atom, ...]:
    """Split symbol into atoms, in order from left to right."""
    if not symbol and mode == DecompositionMode.STRICT:
        raise EmptyPunctuationSymbolError

    atoms: list[Atom] = []
    position = 0
    while position < len(symbol):
        atom = _match_longest_atom(symbol, position)
        if atom is None:
            if mode == DecompositionMode.STRICT:
                raise UnexpectedPunctuationError(symbol=symbol, position=position)
            position += 1
            continue

        atoms.append(atom)
        position += atom.length

    return tuple(atoms)


def symbol_length(symbol: str) -> int:
    """Get amount of characters covered by atoms of given symbol (lenient)."""
    return sum(atom.length for atom in decompose_atoms(symbol, DecompositionMode.LENIENT))


def _match_longest_atom(symbol: str, position: int) -> Atom | None:
    for length in range(MAX_ATOM_LENGTH, 0, -1):
        if position + length > len(symbol):
            continue
        if atom := lookup_atom(symbol[position : position + length]):
            return atom
    return None
