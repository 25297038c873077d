"""Unit tests for the text mixins."""

from __future__ import annotations

import logging

import pytest

from stylemix.css.rules import Block, Rule
from stylemix.mixins import font_size, hide_text, placeholder

from .conftest import decl, pairs


# ---------------------------------------------------------------------------
# font_size
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("size", "px", "rem"),
    [
        ("14px", "14px", "1.4rem"),
        (20, "20px", "2rem"),
        (13, "13px", "1.3rem"),
        ("1.5em", "1.5px", "0.15rem"),
        (12.5, "12.5px", "1.25rem"),
        ("16", "16px", "1.6rem"),
        ("14px /* open", "14px", "1.4rem"),
    ],
)
def test_font_size(size, px: str, rem: str) -> None:
    """Units are stripped to a magnitude, rem is the magnitude over ten."""
    assert pairs(font_size(size)) == [("font-size", px), ("font-size", rem)]


def test_font_size_important() -> None:
    assert font_size("14px", important=True) == Block(
        decl("font-size", "14px", True),
        decl("font-size", "1.4rem", True),
    )
    assert str(font_size(14, True)) == "font-size: 14px !important;\nfont-size: 1.4rem !important;"


def test_font_size_rem_base_option() -> None:
    assert pairs(font_size(16, options={"rem_base": 16})) == [
        ("font-size", "16px"),
        ("font-size", "1rem"),
    ]


def test_font_size_other_property() -> None:
    assert font_size(10, property="line-height").get("line-height") == ["10px", "1rem"]


def test_font_size_unknown_option() -> None:
    with pytest.raises(KeyError):
        font_size(10, options={"base": 16})  # type: ignore[typeddict-unknown-key]


@pytest.mark.parametrize("size", ["large", "10px 12px", "", "1e999px", float("inf"), float("nan")])
def test_font_size_not_numeric(size, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="stylemix"):
        assert font_size(size) == Block()
    assert "not numeric" in caplog.text


# ---------------------------------------------------------------------------
# hide_text and placeholder
# ---------------------------------------------------------------------------


def test_hide_text() -> None:
    assert pairs(hide_text()) == [
        ("text-indent", "100%"),
        ("white-space", "nowrap"),
        ("overflow", "hidden"),
    ]


def test_placeholder_selectors() -> None:
    block = placeholder("color: #999")
    assert [rule.prelude for rule in block.rules] == [
        "&::-webkit-input-placeholder",
        "&:-moz-placeholder",
        "&::-moz-placeholder",
        "&:-ms-input-placeholder",
    ]
    assert all(rule.block == Block(decl("color", "#999")) for rule in block.rules)
    assert block.declarations == []


def test_placeholder_calls_producer_per_selector() -> None:
    calls = []

    def content() -> Block:
        calls.append(1)
        return Block(decl("opacity", "1"))

    block = placeholder(content)
    assert len(calls) == 4
    assert all(isinstance(node, Rule) for node in block)


def test_placeholder_blocks_are_independent() -> None:
    block = placeholder(Block(decl("color", "red"), Rule("&:hover", Block(decl("color", "blue")))))
    block.rules[0].block.append(decl("opacity", "1"))
    block.rules[0].block.rules[0].block.append(decl("opacity", "1"))
    assert len(block.rules[1].block) == 2
    assert len(block.rules[1].block.rules[0].block) == 1


def test_placeholder_render() -> None:
    text = str(placeholder("color: #999"))
    assert text.startswith("&::-webkit-input-placeholder {\n  color: #999;\n}\n")
    assert text.count("color: #999;") == 4
