"""Errors collections that parser may raise (user-facing ones)."""

from .parse_error import ParseError

__all__ = ["ParseError"]
