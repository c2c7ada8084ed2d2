from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from punctum.lexer._state import LexerState
from punctum.lexer.errors import UnclosedStringQuoteError, UnknownCharacterError
from punctum.lexer.helpers import (
    DECIMAL_DIGITS,
    IDENTIFIER_START_CHARACTERS,
    find_identifier_end,
    find_quoted_literal_end,
    find_word_start,
    unescape_text_literal,
)
from punctum.lexer.tokens import Token, TokenType
from punctum.punct import is_punctuation_character

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path


STRING_QUOTE = '"'

DELIMITERS_MAPPING = {
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LCURLY,
    "}": TokenType.RCURLY,
}


def tokenize_from_raw(
    source: Path | Literal["string", "toolchain"],
    lines: Iterable[str],
) -> Generator[Token]:
    """Stream lexical tokens via generator (perform lexical analysis).

    Punctuation is emitted character by character, multi-character punctuation is recognized
    later by parser via spacing of these characters (see `Token.has_trailing_whitespace`).

    :returns tokenizer: Generator of tokens, in order from top to bottom of an text (default order)
    """
    state = LexerState(path=source)

    for row, line in enumerate(lines, start=0):
        state.set_line(row, line.rstrip("\r\n"))

        state.col = find_word_start(state.line, 0)

        col_ends_at = len(state.line)
        while state.col < col_ends_at:
            yield _tokenize_line_next_token(state)
            state.col = find_word_start(state.line, state.col)

    yield Token(
        type=TokenType.EOF,
        text="",
        value=0,
        location=state.current_location(),
    )


def tokenize_string(text: str) -> list[Token]:
    """Tokenize whole text that is not backed by any file."""
    return list(tokenize_from_raw(source="string", lines=text.splitlines() or [""]))


def _tokenize_line_next_token(state: LexerState) -> Token:
    """Acquire token from current state and move state right after that token."""
    symbol = state.line[state.col]

    match symbol:
        case '"':
            return _tokenize_string_literal(state)
        case _ if symbol in DELIMITERS_MAPPING:
            return _tokenize_single_symbol(state, DELIMITERS_MAPPING[symbol])
        case _ if is_punctuation_character(symbol):
            return _tokenize_single_symbol(state, TokenType.PUNCT)
        case _ if symbol in DECIMAL_DIGITS:
            return _tokenize_integer(state)
        case _ if symbol in IDENTIFIER_START_CHARACTERS:
            return _tokenize_identifier(state)
        case _:
            raise UnknownCharacterError(at=state.current_location(), character=symbol)


def _tokenize_single_symbol(state: LexerState, token_type: TokenType) -> Token:
    location = state.current_location()
    char = state.line[state.col]
    state.col += 1
    return Token(
        type=token_type,
        text=char,
        value=char,
        location=location,
        has_trailing_whitespace=state.is_trailing_whitespace(state.col),
    )


def _tokenize_string_literal(state: LexerState) -> Token:
    location = state.current_location()

    ends_at = find_quoted_literal_end(state.line, state.col + 1, quote=STRING_QUOTE)
    if ends_at == -1:
        raise UnclosedStringQuoteError(open_quote_at=location)

    string_raw = state.line[state.col : ends_at]
    state.col = ends_at
    return Token(
        type=TokenType.STRING,
        text=string_raw,
        value=unescape_text_literal(string_raw[1:-1]),
        location=location,
        has_trailing_whitespace=state.is_trailing_whitespace(state.col),
    )


def _tokenize_integer(state: LexerState) -> Token:
    location = state.current_location()
    ends_at = find_identifier_end(state.line, state.col)
    word = state.line[state.col : ends_at]
    if not all(c in DECIMAL_DIGITS for c in word):
        # Digits followed by letters, like `12ab`
        bad_at = next(i for i, c in enumerate(word) if c not in DECIMAL_DIGITS)
        raise UnknownCharacterError(
            at=location.shift_col_number(bad_at),
            character=word[bad_at],
        )

    state.col = ends_at
    return Token(
        type=TokenType.INTEGER,
        text=word,
        value=int(word, 10),
        location=location,
        has_trailing_whitespace=state.is_trailing_whitespace(state.col),
    )


def _tokenize_identifier(state: LexerState) -> Token:
    location = state.current_location()
    ends_at = find_identifier_end(state.line, state.col)
    word = state.line[state.col : ends_at]
    state.col = ends_at
    return Token(
        type=TokenType.IDENTIFIER,
        text=word,
        value=word,
        location=location,
        has_trailing_whitespace=state.is_trailing_whitespace(state.col),
    )


def debug_lexer_wrapper(lexer: Iterable[Token]) -> Generator[Token]:
    for token in lexer:
        print(token.type.name, repr(token.value), token.location)
        yield token
