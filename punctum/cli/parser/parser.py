from __future__ import annotations

from typing import TYPE_CHECKING

from punctum.cli.output import cli_fatal_abort
from punctum.cli.parser.arguments import CLIArguments
from punctum.custom.features import PunctuationFeatures

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    if not args.version and args.symbol is None:
        cli_fatal_abort("No punctuation symbol specified, has nothing to declare")

    return CLIArguments(
        symbol=args.symbol,
        name=args.name,
        input_text=args.input_text,
        version=bool(args.version),
        features=PunctuationFeatures(
            parsing=bool(args.parsing),
            printing=bool(args.printing),
            clone=bool(args.clone),
            extra_traits=bool(args.extra_traits),
        ),
        verbose=bool(args.verbose),
        lexer_debug_emit_lexemes=bool(args.lexer_debug_emit_lexemes),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )
