""" CSS declaration list parser
https://www.w3.org/TR/css-syntax-3/#consume-list-of-declarations

Turns text such as `color: #999; font-size: 1.4rem !important` back into
`Declaration` objects. Used to read nested content given as text and to check
rendered mixin output.
"""

from __future__ import annotations
from collections.abc import Callable, Iterable
import logging
from typing import Union
from typing_extensions import TypeAliasType

from stylemix.css.lexer import Lexer
from stylemix.css.rules import Block, Declaration, Node
from stylemix.css.tokens import *
from stylemix.errors import ParseError

__all__ = ["Parser", "Content", "parse_declarations", "normalize"]

logger = logging.getLogger(__name__)

Content = TypeAliasType(
    "Content",
    Union[Block, str, Iterable[Node], Callable[[], Union[Block, str, Iterable[Node]]]],
)

class Parser:
    # string, tokenize first
    # list of tokens, used as is
    def __init__(self, tokens: list[Token] | str) -> None:
        if isinstance(tokens, str):
            lexer = Lexer(tokens)
            self.tokens: list[Token] = lexer.process()
            self.errors: list[Exception] = list(lexer.errors)
        else:
            self.tokens = list(tokens)
            self.errors = []

    def peek(self, amount: int = 1) -> Token:
        if len(self.tokens) >= amount:
            return self.tokens[amount - 1]
        return EOF()

    def next(self) -> Token:
        if len(self.tokens) >= 1:
            return self.tokens.pop(0)
        return EOF()

    def error(self, error: Exception):
        logger.debug("Skipping declaration: %s", error)
        self.errors.append(error)

    def skip_whitespace(self):
        while isinstance(self.peek(), (Whitespace, Comment)):
            self.next()

    def consume_declaration(self, tokens: list[Token]) -> Declaration | None:
        """Build a declaration from the tokens between two semicolons."""
        parser = Parser(tokens)
        parser.skip_whitespace()
        name = parser.next()
        # legacy star hack, `*zoom: 1`
        if isinstance(name, Delim) and name.raw == "*" and isinstance(parser.peek(), Ident):
            name = Ident("*" + parser.next().raw)
        if not isinstance(name, Ident):
            self.error(ParseError(f"Expected a property name, found {str(name)!r}"))
            return None

        parser.skip_whitespace()
        if not isinstance(parser.next(), Colon):
            self.error(ParseError(f"Expected a colon after {name.raw!r}"))
            return None

        value = [t for t in parser.tokens if not isinstance(t, Comment)]
        while len(value) > 0 and isinstance(value[-1], Whitespace):
            value.pop()

        important = False
        if (
            len(value) >= 2
            and isinstance(value[-1], Ident) and value[-1].raw.lower() == "important"
        ):
            bang = len(value) - 2
            while bang >= 0 and isinstance(value[bang], Whitespace):
                bang -= 1
            if bang >= 0 and isinstance(value[bang], Delim) and value[bang].raw == "!":
                value = value[:bang]
                important = True

        text = "".join(" " if isinstance(t, Whitespace) else str(t) for t in value).strip()
        if text == "":
            self.error(ParseError(f"Declaration {name.raw!r} has no value"))
            return None
        return Declaration(name.raw, text, important)

    def consume_decl_list(self) -> list[Declaration]:
        decls = []
        depth = 0
        current: list[Token] = []
        while True:
            next = self.next()
            if isinstance(next, EOF) or (isinstance(next, Semicolon) and depth == 0):
                if any(not isinstance(t, (Whitespace, Comment)) for t in current):
                    if (decl := self.consume_declaration(current)) is not None:
                        decls.append(decl)
                current = []
                if isinstance(next, EOF):
                    return decls
                continue

            if isinstance(next, (Function, LParantheses)):
                depth += 1
            elif isinstance(next, RParantheses) and depth > 0:
                depth -= 1
            current.append(next)


def parse_declarations(source: str | list[Token]) -> list[Declaration]:
    """Parse a semicolon separated declaration list.

    Raises
        ParseError: When any entry is not a `name: value` pair or a string is left open.
    """
    parser = Parser(source)
    decls = parser.consume_decl_list()
    if len(parser.errors) > 0:
        raise parser.errors[0]
    return decls


def normalize(content: Content) -> Block:
    """Materialize nested mixin content into a new `Block`.

    Accepts a block, declaration text, an iterable of nodes, or a zero argument
    callable producing any of those.
    """
    if callable(content):
        content = content()
    if isinstance(content, Block):
        return content.copy()
    elif isinstance(content, str):
        return Block(*parse_declarations(content))
    elif isinstance(content, Iterable):
        return Block(*content).copy()
    raise TypeError(
        "Unexpected nested content. Expected a Block, declaration text, nodes, or a callable producing them."
    )
