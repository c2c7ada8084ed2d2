from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class TokenLocation:
    """Location of any token within source text."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "string", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "toolchain":
            return "'(punctum-toolchain-internals)'"
        if self.source == "string":
            return f"'<string>:{self.line_number + 1}:{self.col_number + 1}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    def shift_col_number(self, by: int) -> TokenLocation:
        if self.source == "toolchain":
            # Synthetic locations has no columns to shift
            return self
        return TokenLocation(
            line_number=self.line_number,
            col_number=self.col_number + by,
            filepath=self.filepath,
            source=self.source,
        )

    @classmethod
    def toolchain(cls) -> TokenLocation:
        """Create a location for toolchain originated (synthesized) tokens."""
        return cls(
            line_number=0,
            col_number=0,
            source="toolchain",
        )


class TokenType(IntEnum):
    """Type of the lexical token."""

    # Literals
    INTEGER = auto()
    STRING = auto()

    # Language
    IDENTIFIER = auto()

    # Single punctuation character, multi-character punctuation is an sequence of these
    PUNCT = auto()

    # Brackets and parentheses
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LCURLY = auto()  # {
    RCURLY = auto()  # }

    # Content
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """Lexical token obtained by lexer."""

    type: TokenType

    # Real text of an token within source code
    text: str

    # `pre-parsed` value (e.g numbers are numbers, string are unescaped)
    value: int | str

    # Location within source
    location: TokenLocation

    # Punctuation without trailing whitespace is joint with the next punctuation character
    has_trailing_whitespace: bool = True
