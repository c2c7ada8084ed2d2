from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from punctum.lexer.tokens import TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from punctum.lexer.tokens import Token


@dataclass(frozen=True, slots=True)
class TokenCursor:
    """Immutable position within buffer of tokens.

    Cursor never moves, advancing creates new cursor so any cursor may be freely kept as lookahead.
    Buffer must end with `EOF` token, cursor never goes beyond it.
    """

    tokens: Sequence[Token]
    position: int = 0

    def __post_init__(self) -> None:
        assert self.tokens, "Tokens buffer must contain at least EOF token"
        assert self.tokens[-1].type == TokenType.EOF, "Tokens buffer must end with EOF token"

    def token(self) -> Token:
        return self.tokens[self.position]

    def is_eof(self) -> bool:
        return self.token().type == TokenType.EOF

    def advance(self, by: int = 1) -> TokenCursor:
        position = min(self.position + by, len(self.tokens) - 1)
        return TokenCursor(tokens=self.tokens, position=position)

    def punct(self) -> tuple[Token, TokenCursor] | None:
        """Get punctuation character token at cursor and cursor after it, or None if there is no punctuation."""
        token = self.token()
        if token.type != TokenType.PUNCT:
            return None
        return token, self.advance()
