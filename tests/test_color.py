"""Unit tests for `stylemix.color` and the color mixins."""

from __future__ import annotations

import logging

import pytest

from stylemix.color import Color
from stylemix.css.rules import Block
from stylemix.errors import ColorError, StyleError
from stylemix.mixins import opacity, rgba_background

from .conftest import decl, pairs

# ---------------------------------------------------------------------------
# Color parsing
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "channels"),
    [
        ("#fff", (255, 255, 255)),
        ("#0a0B0c", (10, 11, 12)),
        ("black", (0, 0, 0)),
        ("Orange", (255, 165, 0)),
        ((1, 2, 3), (1, 2, 3)),
        (Color(4, 5, 6), (4, 5, 6)),
    ],
)
def test_color_new(value, channels: tuple) -> None:
    assert Color.new(value).channels == channels


@pytest.mark.parametrize(
    "value",
    ["#ffff", "#ggg", "notacolor", "#", "10px", (256, 0, 0), (1, 2), (1.0, 2, 3), 42],
)
def test_invalid_colors(value) -> None:
    with pytest.raises(ColorError):
        Color.new(value)


def test_color_error_hierarchy() -> None:
    error = ColorError("#12", "hex value must be 3 or 6 digits")
    assert isinstance(error, StyleError)
    assert isinstance(error, ValueError)
    assert str(error) == "Invalid color '#12': hex value must be 3 or 6 digits"


def test_color_formatting() -> None:
    color = Color.hex("#0f0")
    assert str(color) == "#00ff00"
    assert color.rgba(0.5) == "rgba(0, 255, 0, 0.5)"
    assert color.rgba(1) == "rgba(0, 255, 0, 1)"
    assert color == Color(0, 255, 0)


# ---------------------------------------------------------------------------
# rgba_background
# ---------------------------------------------------------------------------


def test_rgba_background() -> None:
    assert rgba_background("#000", 0.5) == Block(
        decl("background", "#000"),
        decl("background", "rgba(0, 0, 0, 0.5)"),
    )


def test_rgba_background_default_opacity() -> None:
    assert rgba_background("white").get("background") == ["white", "rgba(255, 255, 255, 1)"]


def test_rgba_background_structured_colors() -> None:
    assert pairs(rgba_background((255, 0, 0), "0.25", property="color")) == [
        ("color", "rgb(255, 0, 0)"),
        ("color", "rgba(255, 0, 0, 0.25)"),
    ]
    assert rgba_background(Color(1, 2, 3), 0).get("background") == ["#010203", "rgba(1, 2, 3, 0)"]


@pytest.mark.parametrize(("color", "alpha"), [("#000", 1.5), ("#000", -0.1), ("#000", "auto"), ("bogus", 0.5)])
def test_rgba_background_keeps_only_fallback(color, alpha, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="stylemix"):
        assert pairs(rgba_background(color, alpha)) == [("background", color)]
    assert "fallback" in caplog.text


# ---------------------------------------------------------------------------
# opacity
# ---------------------------------------------------------------------------


def test_opacity() -> None:
    assert pairs(opacity(0.5)) == [
        ("opacity", "0.5"),
        ("filter", "alpha(opacity=50)"),
        ("-ms-filter", '"progid:DXImageTransform.Microsoft.Alpha(Opacity=50)"'),
    ]


@pytest.mark.parametrize(
    ("value", "number", "percent"),
    [(0, "0", "0"), (1, "1", "100"), ("0.25", "0.25", "25"), (0.333, "0.333", "33.3")],
)
def test_opacity_percentages(value, number: str, percent: str) -> None:
    block = opacity(value)
    assert block.get("opacity") == [number]
    assert block.get("filter") == [f"alpha(opacity={percent})"]


@pytest.mark.parametrize("value", [2, -1, "half"])
def test_opacity_out_of_range(value, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="stylemix"):
        assert opacity(value) == Block()
    assert "outside [0, 1]" in caplog.text
