from punctum.exceptions import PunctumError
from punctum.lexer.tokens import TokenLocation


class UnknownCharacterError(PunctumError):
    def __init__(self, at: TokenLocation, character: str) -> None:
        self.at = at
        self.character = character

    def __repr__(self) -> str:
        return f"""Unknown character '{self.character}' at {self.at}!

Character is neither punctuation, delimiter, identifier, number nor string.

{self.generic_error_name}"""
