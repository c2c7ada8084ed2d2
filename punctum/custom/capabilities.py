"""Capabilities that are composed into generated punctuation types.

Each capability is an mixin over `CustomPunctuation` that only relies on its class attributes,
generator picks them according to enabled features.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from punctum.custom.base import CustomPunctuation
from punctum.parser.punct import parse_punct, peek_punct
from punctum.printer.punct import print_punct
from punctum.printer.stream import TokenStream

if TYPE_CHECKING:
    from punctum.parser.cursor import TokenCursor
    from punctum.parser.stream import ParseStream


class ParsingCapability(CustomPunctuation):
    __slots__ = ()

    @classmethod
    def peek(cls, cursor: TokenCursor) -> bool:
        return peek_punct(cursor, cls.SYMBOL)

    @classmethod
    def display(cls) -> str:
        return f"`{cls.SYMBOL}`"

    @classmethod
    def parse(cls, stream: ParseStream) -> Self:
        return cls(parse_punct(stream, cls.SYMBOL))


class PrintingCapability(CustomPunctuation):
    __slots__ = ()

    def to_tokens(self, tokens: TokenStream) -> None:
        print_punct(self.SYMBOL, self.locations, tokens)

    def to_source(self) -> str:
        tokens = TokenStream()
        self.to_tokens(tokens)
        return tokens.to_source()


class CloneCapability(CustomPunctuation):
    __slots__ = ()

    def clone(self) -> Self:
        # Locations are immutable, sharing the tuple is enough
        return type(self)(self.locations)

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self.clone()


class ExtraTraitsCapability(CustomPunctuation):
    """Equality, hash and repr that ignore locations."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return self.SYMBOL
