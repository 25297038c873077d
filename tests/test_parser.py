"""Unit tests for `stylemix.css.parser`."""

from __future__ import annotations

import pytest

from stylemix.css.parser import normalize, parse_declarations
from stylemix.css.rules import Block, Declaration
from stylemix.errors import ParseError
from stylemix.mixins import MIXINS, focus_outline, hide_text, inline_block, opacity

from .conftest import decl

# ---------------------------------------------------------------------------
# parse_declarations
# ---------------------------------------------------------------------------


def test_simple_list() -> None:
    assert parse_declarations("color: red; top: 10px") == [
        decl("color", "red"),
        decl("top", "10px"),
    ]


def test_important() -> None:
    assert parse_declarations("top: 10px !important;") == [decl("top", "10px", True)]
    assert parse_declarations("top: 10px ! important") == [decl("top", "10px", True)]


@pytest.mark.parametrize(
    "value",
    [
        "rgba(0, 0, 0, 0.5)",
        "5px auto -webkit-focus-ring-color",
        "alpha(opacity=50)",
        '"progid:DXImageTransform.Microsoft.Alpha(Opacity=50)"',
        '" "',
        "100%",
        "-2px",
        "url(a.png)",
    ],
)
def test_value_text_is_preserved(value: str) -> None:
    assert parse_declarations(f"x: {value};") == [decl("x", value)]


def test_semicolon_inside_function() -> None:
    (only,) = parse_declarations("x: f(a;b)")
    assert only.value == "f(a;b)"


def test_star_hack_property() -> None:
    assert parse_declarations("*zoom: 1") == [decl("*zoom", "1")]


def test_comments_and_blank_entries_are_skipped() -> None:
    assert parse_declarations("/* lead */ ; color: red /* tail */ ;;") == [decl("color", "red")]


@pytest.mark.parametrize("source", ["color red", "color:", "10px: a", "color: 'open", "color: red /* open"])
def test_invalid_declarations(source: str) -> None:
    with pytest.raises(ParseError):
        parse_declarations(source)


@pytest.mark.parametrize("block", [opacity(0.5), focus_outline(), hide_text(), inline_block()])
def test_rendered_output_parses_back(block: Block) -> None:
    assert parse_declarations(block.render()) == block.declarations


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


def test_normalize_copies_blocks() -> None:
    block = Block(Declaration("a", "1"))
    result = normalize(block)
    assert result == block
    assert result is not block


def test_normalize_text() -> None:
    assert normalize("a: 1; b: 2") == Block(decl("a", "1"), decl("b", "2"))


def test_normalize_iterable_and_callable() -> None:
    nodes = [decl("a", "1")]
    assert normalize(nodes) == Block(*nodes)
    assert normalize(lambda: "a: 1") == Block(*nodes)
    assert normalize(lambda: Block(*nodes)) == Block(*nodes)


def test_normalize_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        normalize(42)  # type: ignore[arg-type]


def test_registry_mixins_are_callable() -> None:
    assert all(callable(mixin) for mixin in MIXINS.values())
