from .declaration import PunctuationDeclarationError


class InvalidPunctuationNameError(PunctuationDeclarationError):
    def __init__(self, name: str, symbol: str) -> None:
        self.name = name
        self.symbol = symbol

    def __repr__(self) -> str:
        return f"""Invalid name '{self.name}' for punctuation `{self.symbol}`!

Name of an punctuation token type must be an valid identifier (e.g `LeftRightArrow`).

{self.generic_error_name}"""
