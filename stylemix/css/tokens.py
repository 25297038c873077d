"""
Tokens produced when lexing mixin parameters and declaration text.

References:
    - [tokenizing](https://www.w3.org/TR/css-syntax-3/#tokenization)
    - [dimensions](https://developer.mozilla.org/en-US/docs/Web/CSS/dimension)

value => number, percentage, dimension, hex, named constants, functions, etc...
"""
from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "Hash",
    "String",
    "BadString",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "LParantheses",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",
    "NUMERIC",

    "Comment",
    "Whitespace",
    "EOF"
]

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, __value: object) -> bool:
        if type(__value) is type(self):
            return str(self) == str(__value)
        return False

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, str(self)))

class Ident(Token): pass
class Function(Token):
    def __str__(self) -> str:
        return f"{self.raw}("
class Hash(Token):
    def __init__(self, raw: str = '', *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw)
    def __repr__(self) -> str:
        return f'Hash({"id, " if self.type == "id" else ""}{self.raw!r})'
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    def __init__(self, raw: str = '', *, quote: str = '"'):
        self.quote = quote
        super().__init__(raw)
    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"
class BadString(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)
    def __repr__(self) -> str:
        return f'Delim({self.raw!r})'

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class LParantheses(Token): pass
class RParantheses(Token): pass

class Number(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(self, value: int | float, type: Literal['integer', 'number'], raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

    def __repr__(self) -> str:
        return f"Number({self.raw!r})"

class Percentage(Number):
    def __repr__(self) -> str:
        return f"Percentage({self.value!r}%)"

    def __str__(self) -> str:
        return f"{self.raw}%"

class Dimension(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(self, value: int | float, type: Literal['integer', 'number'], unit: str, raw: str):
        self.value = value
        self.unit = unit
        self.type = type
        super().__init__(raw)

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r})"

# Tokens that count as a numeric value for offsets and sizes
NUMERIC = (Number, Dimension)

class Comment(Token):
    @property
    def text(self) -> str:
        return self.raw.removeprefix("/*").removesuffix("*/")

class Whitespace(Token): pass
class EOF(Token): pass
