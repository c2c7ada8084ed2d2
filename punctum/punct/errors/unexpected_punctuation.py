from .declaration import PunctuationDeclarationError


class UnexpectedPunctuationError(PunctuationDeclarationError):
    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = position

    @property
    def remainder(self) -> str:
        return self.symbol[self.position :]

    @property
    def unexpected(self) -> str:
        return self.symbol[self.position]

    def __repr__(self) -> str:
        pointer = " " * self.position + "^"
        return f"""Unexpected `{self.unexpected}` in punctuation `{self.symbol}` at offset {self.position}!

    {self.symbol}
    {pointer}
Cannot decompose remaining `{self.remainder}` into known punctuation atoms.
Only punctuation of the host grammar may be combined (e.g `<=`, `::`, `->`).

{self.generic_error_name}"""
