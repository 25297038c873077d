"""Color and transparency fallbacks."""

from __future__ import annotations
import logging

from stylemix.color import Color, ColorFormat
from stylemix.css.rules import Block, Declaration
from stylemix.errors import ColorError
from stylemix.values import Value, format_number, magnitude, to_css

__all__ = ["rgba_background", "opacity"]

logger = logging.getLogger(__name__)

def _fraction_(value: Value) -> int | float | None:
    fraction = magnitude(value)
    if fraction is None or not 0 <= fraction <= 1:
        return None
    return fraction

def _fallback_(color: ColorFormat) -> str:
    if isinstance(color, Color):
        return str(color)
    elif isinstance(color, tuple):
        return f"rgb({', '.join(str(channel) for channel in color)})"
    return to_css(color)

def rgba_background(color: ColorFormat, opacity: Value = 1, *, property: str = "background") -> Block:
    """The color as given, then the same property again with an `rgba()` value.

    Browsers without `rgba()` drop the second declaration and keep the first. When
    the color can't be parsed or the opacity is outside [0, 1] only the first
    declaration is emitted.
    """
    block = Block(Declaration(property, _fallback_(color)))

    if (alpha := _fraction_(opacity)) is None:
        logger.warning("Opacity %r is outside [0, 1], keeping only the %s fallback", opacity, property)
        return block

    try:
        rgb = Color.new(color)
    except ColorError as error:
        logger.warning("%s, keeping only the %s fallback", error, property)
        return block

    return block.append(Declaration(property, rgb.rgba(alpha)))

def opacity(value: Value) -> Block:
    """`opacity` plus the IE filters, which take a percentage.

    Returns
        An empty block when `value` is not a number between 0 and 1.
    """
    if (fraction := _fraction_(value)) is None:
        logger.warning("Opacity %r is outside [0, 1], no declarations emitted", value)
        return Block()

    percent = format_number(fraction * 100)
    return Block(
        Declaration("opacity", format_number(fraction)),
        Declaration("filter", f"alpha(opacity={percent})"),
        Declaration("-ms-filter", f'"progid:DXImageTransform.Microsoft.Alpha(Opacity={percent})"'),
    )
