from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, overload

from punctum.lexer.lexer import tokenize_string
from punctum.lexer.tokens import Token, TokenType
from punctum.parser.cursor import TokenCursor
from punctum.parser.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

T = TypeVar("T")


class Peekable(Protocol):
    """Token type that can be checked at an cursor (e.g generated punctuation)."""

    @classmethod
    def peek(cls, cursor: TokenCursor) -> bool: ...

    @classmethod
    def display(cls) -> str: ...


class Parsable(Protocol[T]):
    @classmethod
    def parse(cls, stream: ParseStream) -> T: ...


class ParseStream:
    """Mutable parsing position over an token buffer.

    Only successful parsing advances the stream, failed one leaves it where it was.
    """

    def __init__(self, tokens: Sequence[Token] | TokenCursor) -> None:
        if isinstance(tokens, TokenCursor):
            self._cursor = tokens
        else:
            self._cursor = TokenCursor(tokens=tokens)

    def cursor(self) -> TokenCursor:
        return self._cursor

    def is_empty(self) -> bool:
        return self._cursor.is_eof()

    def peek_token(self) -> Token:
        return self._cursor.token()

    def peek(self, token: type[Peekable] | TokenType) -> bool:
        """Is upcoming input is given token (type), never advances the stream."""
        if isinstance(token, TokenType):
            return self._cursor.token().type == token
        return token.peek(self._cursor)

    @overload
    def parse(self, parsable: type[Parsable[T]]) -> T: ...
    @overload
    def parse(self, parsable: Callable[[ParseStream], T]) -> T: ...
    def parse(self, parsable):  # type: ignore[no-untyped-def]
        """Parse given token type (or run given parse function) at current position."""
        if isinstance(parsable, type):
            return parsable.parse(self)
        return parsable(self)

    def expect(self, token_type: TokenType) -> Token:
        """Consume token of given type or raise an error."""
        token = self._cursor.token()
        if token.type != token_type:
            raise self.error(f"expected {token_type.name.lower()}")
        self._cursor = self._cursor.advance()
        return token

    def fork(self) -> ParseStream:
        """Get an independent copy of the stream for speculative parsing."""
        return ParseStream(self._cursor)

    def advance_to(self, fork: ParseStream) -> None:
        """Move stream to the position speculative fork reached."""
        self.advance_to_cursor(fork.cursor())

    def advance_to_cursor(self, cursor: TokenCursor) -> None:
        assert cursor.tokens is self._cursor.tokens, "Cannot advance to cursor of another buffer"
        assert cursor.position >= self._cursor.position, "Cannot advance stream backwards"
        self._cursor = cursor

    def lookahead1(self) -> Lookahead:
        return Lookahead(self._cursor)

    def error(self, message: str) -> ParseError:
        """Create an error for current position (not raised)."""
        return ParseError(message, got=self._cursor.token())


class Lookahead:
    """Single token lookahead that remembers what was tried to build `expected one of` errors."""

    def __init__(self, cursor: TokenCursor) -> None:
        self._cursor = cursor
        self._comparisons: list[str] = []

    def peek(self, token: type[Peekable] | TokenType) -> bool:
        if isinstance(token, TokenType):
            self._comparisons.append(token.name.lower())
            return self._cursor.token().type == token

        self._comparisons.append(token.display())
        return token.peek(self._cursor)

    def error(self) -> ParseError:
        got = self._cursor.token()
        match self._comparisons:
            case []:
                message = "unexpected token"
            case [single]:
                message = f"expected {single}"
            case [first, second]:
                message = f"expected {first} or {second}"
            case [*rest, last]:
                message = f"expected one of: {', '.join(rest)}, {last}"
        return ParseError(message, got=got)


def parse_str(text: str, parser: Callable[[ParseStream], T] | type[Parsable[T]]) -> T:
    """Tokenize given text and parse it whole with given parser.

    :raises ParseError: If parser failed or did not consume whole input
    """
    stream = ParseStream(tokenize_string(text))
    result = stream.parse(parser)
    if not stream.is_empty():
        raise stream.error("unexpected token")
    return result
