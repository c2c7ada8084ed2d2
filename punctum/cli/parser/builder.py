from argparse import ArgumentParser

from punctum import feature_flags


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Punctum - CLI for inspecting custom multi-character punctuation declarations",
        usage=f"{prog} symbol [--input TEXT] [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "symbol",
        help="Punctuation symbol to declare (e.g `<=>`)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    parser.add_argument(
        "--name",
        "-n",
        default="CustomPunctuation",
        help="Name of an generated token type (default: %(default)s)",
    )

    parser.add_argument(
        "--input",
        "-i",
        dest="input_text",
        default=None,
        help="If passed, text to peek and parse declared punctuation from (at the beginning)",
    )

    _add_features_group(parser)
    _add_logging_group(parser)
    _add_debug_group(parser)
    return parser


def _add_features_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with capabilities toggles into given parser."""
    group = parser.add_argument_group("Features", "Capabilities of generated token type")

    group.add_argument(
        "--no-parsing",
        dest="parsing",
        action="store_false",
        default=feature_flags.FEATURE_PARSING,
        help="Generate type without peeking and parsing",
    )
    group.add_argument(
        "--no-printing",
        dest="printing",
        action="store_false",
        default=feature_flags.FEATURE_PRINTING,
        help="Generate type without printing",
    )
    group.add_argument(
        "--no-clone",
        dest="clone",
        action="store_false",
        default=feature_flags.FEATURE_CLONE_IMPLS,
        help="Generate type without cloning",
    )
    group.add_argument(
        "--no-extra-traits",
        dest="extra_traits",
        action="store_false",
        default=feature_flags.FEATURE_EXTRA_TRAITS,
        help="Generate type without equality, hashing and repr",
    )


def _add_logging_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group("Logging")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs",
    )


def _add_debug_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group("Toolchain debug")
    group.add_argument(
        "--lexer-debug-emit-lexemes",
        required=False,
        action="store_true",
        help="If passed will print every token of an input text",
    )
    group.add_argument(
        "--cli-unfriendly-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        help="If passed will propagate errors with traceback instead of user-friendly messages",
    )
