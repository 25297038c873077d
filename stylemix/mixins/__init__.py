"""
Mixins: pure functions returning a `Block` of declarations.

| mixin               | output                                                        |
|---------------------|---------------------------------------------------------------|
| position & friends  | `position` plus the numeric `top/right/bottom/left` offsets   |
| size                | width and height                                              |
| font-size           | px with a rem override                                        |
| rgba-background     | hex fallback then `rgba()`                                    |
| opacity             | `opacity` plus IE filters                                     |
| arrow               | border triangle                                               |
| retina              | high density media query around nested content                |
| placeholder         | nested content under each vendor placeholder selector         |
| legacy hacks        | IE6/7 inline-block, clearfix, whitespace fixes, focus outline |
"""
from __future__ import annotations
from collections.abc import Callable

from stylemix.css.rules import Block
from stylemix.mixins.color import opacity, rgba_background
from stylemix.mixins.layout import (
    absolute,
    center_block,
    clearfix,
    fixed,
    position,
    relative,
    reset_list,
    size,
)
from stylemix.mixins.legacy import (
    focus_outline,
    inline_block,
    inline_block_fix_left,
    inline_block_fix_right,
)
from stylemix.mixins.media import retina, retina_query
from stylemix.mixins.shapes import arrow
from stylemix.mixins.typography import font_size, hide_text, placeholder

__all__ = [
    "MIXINS",
    "absolute",
    "arrow",
    "center_block",
    "clearfix",
    "fixed",
    "focus_outline",
    "font_size",
    "hide_text",
    "inline_block",
    "inline_block_fix_left",
    "inline_block_fix_right",
    "opacity",
    "placeholder",
    "position",
    "relative",
    "reset_list",
    "retina",
    "retina_query",
    "rgba_background",
    "size",
]

MIXINS: dict[str, Callable[..., Block]] = {
    "position": position,
    "absolute": absolute,
    "fixed": fixed,
    "relative": relative,
    "size": size,
    "font-size": font_size,
    "rgba-background": rgba_background,
    "opacity": opacity,
    "arrow": arrow,
    "retina": retina,
    "placeholder": placeholder,
    "reset-list": reset_list,
    "hide-text": hide_text,
    "center-block": center_block,
    "inline-block": inline_block,
    "focus-outline": focus_outline,
    "clearfix": clearfix,
    "inline-block-fix-left": inline_block_fix_left,
    "inline-block-fix-right": inline_block_fix_right,
}
