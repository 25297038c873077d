"""
References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)

<block>
    <property/>: <value/>;
    <rule selector="&:after"> <block/> </rule>
    <at-rule prelude="only all and (...)"> <block/> </at-rule>
</block>
"""
from stylemix.css.lexer import Lexer, tokenize
from stylemix.css.parser import Parser, normalize, parse_declarations
from stylemix.css.rules import AtRule, Block, Declaration, Rule, resolve_selector, ruleset

__all__ = [
    "Lexer",
    "tokenize",
    "Parser",
    "normalize",
    "parse_declarations",
    "AtRule",
    "Block",
    "Declaration",
    "Rule",
    "resolve_selector",
    "ruleset",
]
