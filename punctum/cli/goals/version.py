import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from punctum.cli.parser.arguments import CLIArguments
from punctum.feature_flags import (
    FEATURE_CLONE_IMPLS,
    FEATURE_EXTRA_TRAITS,
    FEATURE_PARSING,
    FEATURE_PRINTING,
)
from punctum.punct import ATOM_TABLE


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Punctum toolchain]")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print("Punctuation atoms:")
    print(f"\t{' '.join(ATOM_TABLE.keys())}")
    print("Features:")
    print(f"\tFEATURE_PARSING = {FEATURE_PARSING}")
    print(f"\tFEATURE_PRINTING = {FEATURE_PRINTING}")
    print(f"\tFEATURE_CLONE_IMPLS = {FEATURE_CLONE_IMPLS}")
    print(f"\tFEATURE_EXTRA_TRAITS = {FEATURE_EXTRA_TRAITS}")
    print(f"\t(enabled for this invocation: {', '.join(args.features.enabled) or 'none'})")
    return sys.exit(0)
