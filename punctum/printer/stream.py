from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from punctum.lexer.tokens import Token


class ToTokens(Protocol):
    def to_tokens(self, tokens: TokenStream) -> None: ...


@dataclass
class TokenStream:
    """Output stream of tokens that is rendered back into source text."""

    tokens: list[Token] = field(default_factory=list)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def append(self, token: Token) -> None:
        self.tokens.append(token)

    def extend(self, *nodes: ToTokens) -> None:
        """Print each of given nodes into that stream, in order."""
        for node in nodes:
            node.to_tokens(self)

    def to_source(self) -> str:
        """Render tokens into text, tokens with trailing whitespace are separated by single space."""
        parts: list[str] = []
        for token in self.tokens:
            parts.append(token.text)
            if token.has_trailing_whitespace:
                parts.append(" ")
        return "".join(parts).rstrip(" ")
