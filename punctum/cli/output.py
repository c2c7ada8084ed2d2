from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

CLI_MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR", "SUCCESS"]

_LEVEL_COLORS: dict[str, str] = {
    "INFO": "\033[34m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "SUCCESS": "\033[32m",
}
_RESET = "\033[0m"


def cli_message(level: CLI_MESSAGE_LEVEL, text: str, *, verbose: bool = True) -> None:
    """Emit an message to the user (stderr), messages that are not verbose are silenced."""
    if not verbose:
        return
    prefix = f"[{level}]"
    if sys.stderr.isatty():
        prefix = f"{_LEVEL_COLORS[level]}{prefix}{_RESET}"
    print(prefix, text, file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and exit with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
