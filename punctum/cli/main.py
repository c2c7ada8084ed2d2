from __future__ import annotations

import sys
from pathlib import Path

from punctum.cli.errors.error_handler import cli_punctum_error_handler
from punctum.cli.goals import perform_desired_toolchain_goal
from punctum.cli.parser.builder import build_cli_parser
from punctum.cli.parser.parser import parse_cli_arguments

from .output import cli_message


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry."""
    prog = Path(sys.argv[0]).name

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))
    wrapper = cli_punctum_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: toolchain must perform at least one goal!")
    sys.exit(1)


if __name__ == "__main__":
    cli_entry_point()
