"""Goals for CLI (e.g declare, show version) as different goals that output different result."""

from typing import NoReturn

from punctum.cli.goals.declare import cli_perform_declare_goal
from punctum.cli.goals.version import cli_perform_version_goal
from punctum.cli.parser.arguments import CLIArguments


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into declare goal."""
    if args.version:
        return cli_perform_version_goal(args)

    return cli_perform_declare_goal(args)
