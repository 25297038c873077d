"""Exceptions raised by the lower level helpers.

Mixins themselves never raise for unrecognized keywords or out of range
values; they omit the affected output instead. These errors surface from the
lexer, the declaration parser, and color parsing when called directly.
"""

from __future__ import annotations

__all__ = ["StyleError", "ParseError", "ColorError"]


class StyleError(Exception):
    """Base class for every error raised by stylemix."""


class ParseError(StyleError):
    """Raised when declaration or value text cannot be tokenized or parsed."""


class ColorError(StyleError, ValueError):
    """Raised when a color value cannot be turned into rgb channels."""

    def __init__(self, color: object, reason: str) -> None:
        self.color = color
        self.reason = reason
        super().__init__(f"Invalid color {color!r}: {reason}")
