"""Hacks for IE6/7 and engine specific focus rings.

Declarations prefixed with `*` are only read by IE7 and below.
"""

from __future__ import annotations

from stylemix.config import OptionalOptions, default_options
from stylemix.css.rules import Block, Declaration, Rule

__all__ = ["inline_block", "inline_block_fix_left", "inline_block_fix_right", "focus_outline"]

def inline_block() -> Block:
    """Emulate `display: inline-block` on IE6/7."""
    return Block(
        Declaration("*display", "inline"),
        Declaration("*zoom", "1"),
    )

def _inline_block_fix_(side: str, pseudo: str, options: OptionalOptions | None) -> Block:
    gap = default_options(options)["inline_block_gap"]
    return Block(
        Declaration(f"*margin-{side}", gap),
        Rule(f"&:{pseudo}", Block(Declaration(f"*margin-{side}", "0"))),
    )

def inline_block_fix_left(*, options: OptionalOptions | None = None) -> Block:
    """Restore the whitespace gap IE7 loses between inline blocks, except before the first child."""
    return _inline_block_fix_("left", "first-child", options)

def inline_block_fix_right(*, options: OptionalOptions | None = None) -> Block:
    return _inline_block_fix_("right", "last-child", options)

def focus_outline() -> Block:
    return Block(
        Declaration("outline", "thin dotted"),
        Declaration("outline", "5px auto -webkit-focus-ring-color"),
        Declaration("outline-offset", "-2px"),
    )
