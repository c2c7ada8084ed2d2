from .declaration import PunctuationDeclarationError


class EmptyPunctuationSymbolError(PunctuationDeclarationError):
    def __repr__(self) -> str:
        return f"""Empty punctuation symbol!

Expected at least one punctuation character in declaration but got nothing!

{self.generic_error_name}"""
