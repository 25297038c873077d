"""Text related mixins."""

from __future__ import annotations
import logging

from stylemix.config import PLACEHOLDER_SELECTORS, OptionalOptions, default_options
from stylemix.css.parser import Content, normalize
from stylemix.css.rules import Block, Declaration, Rule
from stylemix.values import Value, format_number, magnitude

__all__ = ["font_size", "hide_text", "placeholder"]

logger = logging.getLogger(__name__)

def font_size(
    size: Value,
    important: bool = False,
    *,
    property: str = "font-size",
    options: OptionalOptions | None = None,
) -> Block:
    """Pixel font size with a rem override for browsers that understand it.

    `size` is read as a plain magnitude. Unitless numbers are used as is and any unit
    is stripped without conversion, so `14`, `"14px"` and `"14em"` all give `14px` and
    `1.4rem` with the default rem base of 10.

    Returns
        An empty block when `size` is not a single numeric value.
    """
    options = default_options(options)
    value = magnitude(size)
    if value is None:
        logger.warning("font-size %r is not numeric, no declarations emitted", size)
        return Block()

    precision = options["precision"]
    return Block(
        Declaration(property, f"{format_number(value, precision)}px", important),
        Declaration(property, f"{format_number(value / options['rem_base'], precision)}rem", important),
    )

def hide_text() -> Block:
    """Push text off canvas while keeping it available to screen readers."""
    return Block(
        Declaration("text-indent", "100%"),
        Declaration("white-space", "nowrap"),
        Declaration("overflow", "hidden"),
    )

def placeholder(content: Content) -> Block:
    """Repeat `content` under every vendor placeholder pseudo selector.

    Each selector gets its own rule since one unknown selector invalidates a whole
    selector list.
    """
    return Block(*(Rule(selector, normalize(content)) for selector in PLACEHOLDER_SELECTORS))
