""" CSS LEXING
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

Only the subset of the tokenizer that mixin parameters and declaration values
need: idents, functions, hashes, strings, numbers, percentages, dimensions,
comments, whitespace and single code point delimiters.

"top 10px right 5%" => Ident('top') Whitespace Dimension('10px') Whitespace Ident('right') ...
"""

from __future__ import annotations
import logging
import re
from typing import Literal
from stylemix.css.tokens import *
from stylemix.errors import ParseError

__all__ = ["Check", "Lexer", "tokenize"]

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = '�'
MAX_CODE_POINT = 0x10FFFF

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isascii() and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in '0123456789'

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in '0123456789abcdefABCDEF'

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif Check.ident_start(first):
            return True
        elif first == "\\":
            return Check.escape(first, second)
        return False

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in "+-":
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.source: list[str] = list(RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR))
        self.errors: list[Exception] = []

    def __iter__(self):
        return self

    def __next__(self):
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenize the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead without consuming it."""
        if len(self.source) >= amount:
            return self.source[amount-1]
        return None

    def next(self) -> str | None:
        if len(self.source) >= 1:
            return self.source.pop(0)
        return None

    def reconsume(self, current: str):
        self.source.insert(0, current)

    def error(self, error: Exception):
        logger.debug("Recoverable lexer error: %s", error)
        self.errors.append(error)

    def _consume_comment_(self, current: str) -> Comment:
        comment = Comment(current + self.next())
        while True:
            next = self.next()
            if next is None:
                self.error(ParseError("Comment not closed"))
                return comment
            if next == "*" and self.peek() == "/":
                comment.raw += next + self.next()
                return comment
            comment.raw += next

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = Whitespace(current)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_string_(self, ending: str) -> String | BadString:
        string = String(quote=ending)
        while True:
            next = self.next()
            if next is None:
                self.error(ParseError("String was not closed"))
                return string
            elif next == ending:
                return string
            elif next == "\n":
                self.error(ParseError("String literal contains an unescaped newline"))
                self.reconsume(next)
                return BadString(string.raw)
            elif next == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.next()
                else:
                    string.raw += self._consume_escape_(next)
            else:
                string.raw += next

    def _consume_escape_(self, current: str) -> str:
        """Consume an escape sequence, keeping it in its escaped form."""
        next = self.next()
        if next is None:
            return REPLACEMENT_CHAR

        if Check.hex(next):
            output = next
            while Check.hex(self.peek()) and len(output) < 6:
                output += self.next()
            code = int(output, 16)
            if code == 0 or code > MAX_CODE_POINT:
                return REPLACEMENT_CHAR
            return current + output
        return current + next

    def _consume_ident_(self) -> str:
        result = ''

        while self.peek() is not None:
            next = self.next()
            if Check.ident(next):
                result += next
            elif Check.escape(next, self.peek()):
                result += self._consume_escape_(next)
            else:
                self.reconsume(next)
                return result
        return result

    def _consume_hash_(self, current: str) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            hasht = Hash()
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                hasht.type = "id"
            hasht.raw = self._consume_ident_()
            return hasht
        return Delim(current)

    def _consume_number_(self) -> tuple[int | float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number, and the raw representation.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next() + self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        if (peek := self.peek()) is not None and peek in "Ee":
            sign = self.peek(2)
            if sign is not None and sign in "-+" and Check.digit(self.peek(3)):
                raw += self.next() + self.next()
                _type = "number"
            elif Check.digit(sign):
                raw += self.next()
                _type = "number"
            while _type == "number" and Check.digit(self.peek()):
                raw += self.next()

        if _type == "integer":
            return int(raw), _type, raw
        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points and produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_ident_like_(self) -> Ident | Function:
        ident = self._consume_ident_()
        if self.peek() == "(":
            self.next()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif next == "/" and self.peek() == "*":
            return self._consume_comment_(next)
        elif next in '"\'':
            return self._consume_string_(next)
        elif next == '#':
            return self._consume_hash_(next)
        elif next in "+-.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume(next)
                return self._consume_numeric_()
            elif next == "-" and Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume(next)
                return self._consume_ident_like_()
            return Delim(next)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume(next)
                return self._consume_ident_like_()
            self.error(ParseError("Invalid backslash"))
            return Delim(next)
        elif Check.digit(next):
            self.reconsume(next)
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.reconsume(next)
            return self._consume_ident_like_()
        elif Check.whitespace(next):
            return self._consume_whitespace_(next)
        elif next == "(":
            return LParantheses(next)
        elif next == ")":
            return RParantheses(next)
        elif next == ",":
            return Comma(next)
        elif next == ":":
            return Colon(next)
        elif next == ";":
            return Semicolon(next)
        return Delim(next)


def tokenize(source: str) -> list[Token]:
    """Tokenize `source` into a list of tokens, dropping nothing."""
    return Lexer(source).process()
