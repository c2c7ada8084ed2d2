from dataclasses import dataclass

from punctum.custom.features import PunctuationFeatures


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Punctum CLI process."""

    symbol: str | None
    name: str
    input_text: str | None

    version: bool

    features: PunctuationFeatures

    verbose: bool
    lexer_debug_emit_lexemes: bool
    cli_debug_user_friendly_errors: bool
