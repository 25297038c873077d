"""Unit tests for `stylemix.mixins.shapes`."""

from __future__ import annotations

import logging

import pytest

from stylemix.color import Color
from stylemix.mixins import arrow

from .conftest import pairs

BOX = [("display", "inline-block"), ("height", "0"), ("width", "0")]


def test_arrow_top() -> None:
    assert pairs(arrow("top", "black", "50px")) == BOX + [
        ("border-left", "50px solid transparent"),
        ("border-right", "50px solid transparent"),
        ("border-bottom", "50px solid black"),
    ]


def test_arrow_corner_sets_two_borders() -> None:
    assert pairs(arrow("bottom-right", "red", "10px"))[3:] == [
        ("border-bottom", "10px solid red"),
        ("border-left", "10px solid transparent"),
    ]


@pytest.mark.parametrize(
    ("direction", "colored", "transparent"),
    [
        ("top", ["bottom"], ["left", "right"]),
        ("right", ["left"], ["top", "bottom"]),
        ("bottom", ["top"], ["left", "right"]),
        ("left", ["right"], ["top", "bottom"]),
        ("top-left", ["top"], ["right"]),
        ("top-right", ["top"], ["left"]),
        ("bottom-left", ["bottom"], ["right"]),
        ("bottom-right", ["bottom"], ["left"]),
    ],
)
def test_arrow_directions(direction: str, colored: list, transparent: list) -> None:
    block = arrow(direction, "#333", 8)
    for side in colored:
        assert block.get(f"border-{side}") == ["8 solid #333"]
    for side in transparent:
        assert block.get(f"border-{side}") == ["8 solid transparent"]
    assert len(block) == 3 + len(colored) + len(transparent)


def test_arrow_unknown_direction(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="stylemix.mixins.shapes"):
        assert pairs(arrow("up", "red", "10px")) == BOX
    assert "Unknown arrow direction" in caplog.text


def test_arrow_color_object() -> None:
    assert arrow("left", Color(255, 0, 0), "1em").get("border-right") == ["1em solid #ff0000"]
