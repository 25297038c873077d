from __future__ import annotations
import logging

from stylemix.color import Color
from stylemix.css.parser import parse_declarations
from stylemix.css.rules import AtRule, Block, Declaration, Rule, ruleset
from stylemix.errors import ColorError, ParseError, StyleError
from stylemix.mixins import *
from stylemix.mixins import __all__ as _mixins

__version__ = "0.1.0"

""" # Usage

    from stylemix import absolute, font_size, retina, ruleset

    print(ruleset(
        ".badge",
        absolute("top 0 right -4px"),
        font_size(12, important=True),
        retina("background-image: url(badge@2x.png)"),
    ))

+ Every mixin is pure and returns a new `Block`
+ `str(block)` keeps `&` nesting, `ruleset` flattens it
+ Unknown keywords and out of range values are left out, never raised
"""

__all__ = [
    "__version__",
    "AtRule",
    "Block",
    "Color",
    "ColorError",
    "Declaration",
    "ParseError",
    "Rule",
    "StyleError",
    "parse_declarations",
    "ruleset",
    *_mixins,
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
