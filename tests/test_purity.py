"""Every registered mixin is pure: same arguments, same text."""

from __future__ import annotations

import pytest

from stylemix.css.rules import Block
from stylemix.mixins import MIXINS

ARGUMENTS = {
    "position": ("relative", "top 1px left 2px"),
    "absolute": ("top 0 right 0",),
    "fixed": ("bottom", 0),
    "relative": ("left 50%",),
    "size": ("10px",),
    "font-size": ("14px", True),
    "rgba-background": ("#336699", 0.8),
    "opacity": (0.5,),
    "arrow": ("top-left", "black", "5px"),
    "retina": ("background-size: 50%",),
    "placeholder": ("color: #999",),
    "reset-list": (),
    "hide-text": (),
    "center-block": (),
    "inline-block": (),
    "focus-outline": (),
    "clearfix": (),
    "inline-block-fix-left": (),
    "inline-block-fix-right": (),
}


def test_every_mixin_has_arguments() -> None:
    assert set(ARGUMENTS) == set(MIXINS)


@pytest.mark.parametrize("name", sorted(MIXINS))
def test_idempotent(name: str) -> None:
    mixin = MIXINS[name]
    first = mixin(*ARGUMENTS[name])
    second = mixin(*ARGUMENTS[name])
    assert isinstance(first, Block)
    assert len(first) > 0
    assert first.render() == second.render()
    assert first is not second


def test_output_is_not_shared() -> None:
    """Mutating a returned block leaves later calls untouched."""
    MIXINS["clearfix"]().value.clear()
    assert len(MIXINS["clearfix"]()) == 3
