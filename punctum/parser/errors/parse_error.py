from __future__ import annotations

from typing import TYPE_CHECKING

from punctum.exceptions import PunctumError

if TYPE_CHECKING:
    from punctum.lexer.tokens import Token


class ParseError(PunctumError):
    """Upcoming input does not match what parser expected.

    Recoverable, stream that raised it is left untouched so caller may try an alternative.
    """

    def __init__(self, message: str, got: Token) -> None:
        super().__init__(message)
        self.message = message
        self.got = got

    def __repr__(self) -> str:
        got = "end of input" if not self.got.text else f"`{self.got.text}`"
        return f"""{self.message[:1].upper()}{self.message[1:]} but got {got} at {self.got.location}!

{self.generic_error_name}"""
