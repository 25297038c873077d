"""CSS border triangles."""

from __future__ import annotations
import logging
from typing import Literal

from stylemix.color import Color, ColorFormat
from stylemix.css.rules import Block, Declaration
from stylemix.values import Value, to_css

__all__ = ["arrow", "Direction", "ARROW_BORDERS"]

logger = logging.getLogger(__name__)

Direction = Literal[
    "top", "right", "bottom", "left",
    "top-left", "top-right", "bottom-left", "bottom-right",
]

# direction => (border side, painted with the color)
ARROW_BORDERS: dict[str, tuple[tuple[str, bool], ...]] = {
    "top": (("left", False), ("right", False), ("bottom", True)),
    "right": (("top", False), ("bottom", False), ("left", True)),
    "bottom": (("left", False), ("right", False), ("top", True)),
    "left": (("top", False), ("bottom", False), ("right", True)),
    "top-left": (("top", True), ("right", False)),
    "top-right": (("top", True), ("left", False)),
    "bottom-left": (("bottom", True), ("right", False)),
    "bottom-right": (("bottom", True), ("left", False)),
}

def arrow(direction: Direction | str, color: ColorFormat, size: Value) -> Block:
    """A zero sized inline box whose borders draw a triangle pointing in `direction`.

    The straight directions give a symmetric arrow head, the corner directions only
    set two borders and give a right angled corner triangle. Unknown directions keep
    the box but draw no borders.
    """
    block = Block(
        Declaration("display", "inline-block"),
        Declaration("height", "0"),
        Declaration("width", "0"),
    )
    if (borders := ARROW_BORDERS.get(direction)) is None:
        logger.debug("Unknown arrow direction %r, no borders emitted", direction)
        return block

    width = to_css(size)
    paint = str(color) if isinstance(color, Color) else to_css(color)
    for side, painted in borders:
        block.append(Declaration(f"border-{side}", f"{width} solid {paint if painted else 'transparent'}"))
    return block
