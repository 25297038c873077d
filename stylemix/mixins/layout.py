"""Positioning and box helpers."""

from __future__ import annotations
import logging
import math
from typing import Literal

from stylemix.config import OFFSETS
from stylemix.css.rules import Block, Declaration, Rule
from stylemix.css.tokens import Ident, Token
from stylemix.values import Value, flatten, is_numeric, to_css

__all__ = [
    "position",
    "absolute",
    "fixed",
    "relative",
    "size",
    "center_block",
    "reset_list",
    "clearfix",
]

logger = logging.getLogger(__name__)

PositionKind = Literal["absolute", "fixed", "relative", "static"]

def _offset_value_(tokens: list[Token], offset: str) -> Token | None:
    """The token right after the first `offset` keyword, if it is numeric."""
    for i, token in enumerate(tokens):
        if isinstance(token, Ident) and token.raw == offset:
            if i + 1 >= len(tokens):
                logger.debug("Offset %r has no value, skipping", offset)
                return None
            if not is_numeric(tokens[i + 1]) or not math.isfinite(tokens[i + 1].value):
                logger.debug("Offset %r is followed by non numeric %r, skipping", offset, str(tokens[i + 1]))
                return None
            return tokens[i + 1]
    return None

def position(kind: PositionKind | str, *offsets: Value) -> Block:
    """Set `position` and any of the four offsets found in `offsets`.

    Offsets are read as keyword/value pairs, `position("absolute", "top 10px left 0")`
    and `position("absolute", "top", "10px", "left", 0)` are equivalent. Only the first
    occurrence of each keyword counts and it must be followed by a number, percentage,
    or dimension. Anything else is left out of the output.
    """
    tokens = flatten(*offsets)
    block = Block(Declaration("position", to_css(kind)))
    for offset in OFFSETS:
        if (value := _offset_value_(tokens, offset)) is not None:
            block.append(Declaration(offset, str(value)))
    return block

def absolute(*offsets: Value) -> Block:
    return position("absolute", *offsets)

def fixed(*offsets: Value) -> Block:
    return position("fixed", *offsets)

def relative(*offsets: Value) -> Block:
    return position("relative", *offsets)

def size(width: Value, height: Value | None = None) -> Block:
    """Set `width` and `height`, height defaults to the width.

    Infinite or NaN numbers have no CSS spelling, their declaration is left out.
    """
    if height is None:
        height = width
    block = Block()
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, float) and not math.isfinite(value):
            logger.warning("%s %r is not a finite length, declaration omitted", name, value)
            continue
        block.append(Declaration(name, to_css(value)))
    return block

def center_block() -> Block:
    return Block(
        Declaration("display", "block"),
        Declaration("margin-left", "auto"),
        Declaration("margin-right", "auto"),
    )

def reset_list() -> Block:
    """Strip list markers and spacing."""
    return Block(
        Declaration("list-style", "none"),
        Declaration("margin", "0"),
        Declaration("padding", "0"),
    )

def clearfix() -> Block:
    """Contain floats using generated table boxes, `*zoom` triggers hasLayout in IE6/7."""
    return Block(
        Declaration("*zoom", "1"),
        Rule("&:before, &:after", Block(
            Declaration("content", '" "'),
            Declaration("display", "table"),
        )),
        Rule("&:after", Block(
            Declaration("clear", "both"),
        )),
    )
