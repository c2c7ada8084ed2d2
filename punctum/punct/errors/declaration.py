from punctum.exceptions import PunctumError


class PunctuationDeclarationError(PunctumError):
    """Declaration of an custom punctuation cannot be turned into an token type."""
