from __future__ import annotations
from typing import Literal, Union
from typing_extensions import TypeAliasType

from stylemix.css.tokens import Hash, Ident
from stylemix.errors import ColorError
from stylemix.values import format_number, to_tokens

__all__ = ["Color", "ColorFormat", "NAMED_COLORS"]

HEX_DIGITS = "0123456789abcdefABCDEF"

ColorFormat = TypeAliasType(
    "ColorFormat",
    Union[
        tuple[int, int, int],
        Literal["black", "white", "red", "green", "blue", "yellow", "cyan", "magenta"],
        str,
        "Color",
    ],
)

# CSS 2.1 basic keywords
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "silver": (192, 192, 192),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "white": (255, 255, 255),
    "maroon": (128, 0, 0),
    "red": (255, 0, 0),
    "purple": (128, 0, 128),
    "fuchsia": (255, 0, 255),
    "magenta": (255, 0, 255),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "olive": (128, 128, 0),
    "yellow": (255, 255, 0),
    "navy": (0, 0, 128),
    "blue": (0, 0, 255),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
    "cyan": (0, 255, 255),
    "orange": (255, 165, 0),
}


class Color:
    """Helper class to turn color parameters into rgb channels and `rgba()` values."""

    __slots__ = ("r", "g", "b")

    def __init__(self, r: int, g: int, b: int) -> None:
        for channel in (r, g, b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ColorError((r, g, b), "channels must be integers between 0 and 255")
        self.r = r
        self.g = g
        self.b = b

    @staticmethod
    def new(color: ColorFormat) -> Color:
        if isinstance(color, Color):
            return color
        elif isinstance(color, tuple):
            if len(color) != 3:
                raise ColorError(color, "expected an (r, g, b) tuple")
            return Color(*color)
        elif isinstance(color, str):
            tokens = to_tokens(color)
            if len(tokens) == 1 and isinstance(tokens[0], Hash):
                return Color.hex(tokens[0].raw)
            elif len(tokens) == 1 and isinstance(tokens[0], Ident):
                return Color.named(tokens[0].raw)
        raise ColorError(color, "expected a hex code, a named color, or an (r, g, b) tuple")

    @staticmethod
    def named(name: str) -> Color:
        if (rgb := NAMED_COLORS.get(name.lower())) is None:
            raise ColorError(name, "unknown color name")
        return Color(*rgb)

    @staticmethod
    def hex(code: str) -> Color:
        code = code.lstrip("#")
        if len(code) not in [3, 6]:
            raise ColorError(f"#{code}", "hex value must be 3 or 6 digits")
        if any(c not in HEX_DIGITS for c in code):
            raise ColorError(f"#{code}", "hex value contains non hex digits")

        if len(code) == 3:
            code = f"{code[0]*2}{code[1]*2}{code[2]*2}"

        return Color(int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16))

    @property
    def channels(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self, alpha: int | float) -> str:
        """The color as an `rgba()` value with the given alpha."""
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(alpha)})"

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Color):
            return self.channels == __value.channels
        return False

    def __hash__(self) -> int:
        return hash(self.channels)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
