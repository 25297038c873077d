"""Coercion of mixin parameters into tokens and CSS text."""

from __future__ import annotations
import logging
import math
from typing import Union
from typing_extensions import TypeAliasType

from stylemix.config import DEFAULTS
from stylemix.css.lexer import tokenize
from stylemix.css.tokens import NUMERIC, Comment, Dimension, Number, Token, Whitespace

__all__ = ["Value", "format_number", "to_tokens", "flatten", "is_numeric", "magnitude", "to_css"]

logger = logging.getLogger(__name__)

Value = TypeAliasType("Value", Union[int, float, str])

def format_number(value: int | float, precision: int = DEFAULTS["precision"]) -> str:
    """Format a number the way it should appear in CSS.

    Rounds to `precision` decimals and drops trailing zeros, so `1.4000000001`
    becomes `1.4` and `2.0` becomes `2`. Infinities and NaN are returned as
    Python spells them, callers decide whether to emit them.
    """
    if not math.isfinite(value):
        return str(float(value))
    rounded = round(float(value), precision)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0").rstrip(".")

def to_tokens(value: Value) -> list[Token]:
    """Tokenize a single parameter, skipping whitespace and comments.

    Python numbers become `Number` tokens, booleans are never numeric.
    """
    if isinstance(value, bool):
        return tokenize(str(value).lower())
    if isinstance(value, (int, float)):
        _type = "integer" if isinstance(value, int) else "number"
        return [Number(value, _type, format_number(value))]
    return [
        token for token in tokenize(str(value))
        if not isinstance(token, (Whitespace, Comment))
    ]

def flatten(*values: Value) -> list[Token]:
    """Tokenize every value, so `"top 10px", "left", 0` reads as one list."""
    result: list[Token] = []
    for value in values:
        result.extend(to_tokens(value))
    return result

def is_numeric(token: Token) -> bool:
    return isinstance(token, NUMERIC)

def magnitude(value: Value) -> int | float | None:
    """The numeric part of a single number, percentage or dimension with its unit stripped.

    Returns
        None when the value is not exactly one numeric token or is not finite.
    """
    tokens = to_tokens(value)
    if len(tokens) != 1 or not is_numeric(tokens[0]):
        logger.debug("%r has no numeric magnitude", value)
        return None
    token = tokens[0]
    if not math.isfinite(token.value):
        logger.debug("%r is not a finite number", value)
        return None
    if isinstance(token, Dimension):
        logger.debug("Stripping unit %r from %r", token.unit, value)
    return token.value

def to_css(value: Value) -> str:
    """Render a parameter as CSS text, numbers are formatted with `format_number`."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value).strip()
