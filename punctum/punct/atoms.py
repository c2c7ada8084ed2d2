from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Atom:
    """Smallest punctuation lexeme known to the host grammar (e.g `+`, `+=`, `<<=`)."""

    text: str
    length: Literal[1, 2, 3]

    def __post_init__(self) -> None:
        assert len(self.text) == self.length, "Atom length must match its text"


_ATOMS_TEXT = (
    "+",
    "+=",
    "&",
    "&&",
    "&=",
    "@",
    "!",
    "^",
    "^=",
    ":",
    "::",
    ",",
    "/",
    "/=",
    ".",
    "..",
    "...",
    "..=",
    "=",
    "==",
    ">=",
    ">",
    "<=",
    "<",
    "*=",
    "!=",
    "|",
    "|=",
    "||",
    "#",
    "?",
    "->",
    "<-",
    "%",
    "%=",
    "=>",
    ";",
    "<<",
    "<<=",
    ">>",
    ">>=",
    "*",
    "-",
    "-=",
    "~",
)

# Read-only, built once at import
ATOM_TABLE: Mapping[str, Atom] = MappingProxyType(
    {text: Atom(text=text, length=len(text)) for text in _ATOMS_TEXT},  # type: ignore[arg-type]
)

MAX_ATOM_LENGTH = max(atom.length for atom in ATOM_TABLE.values())

# Every character that may start or continue an atom
PUNCTUATION_CHARACTERS = frozenset("".join(ATOM_TABLE.keys()))


def lookup_atom(text: str) -> Atom | None:
    """Get atom by its exact text or None if there is no such atom."""
    return ATOM_TABLE.get(text)


def is_punctuation_character(char: str) -> bool:
    return char in PUNCTUATION_CHARACTERS
