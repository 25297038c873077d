"""Shared pytest helpers for stylemix."""

from __future__ import annotations

from stylemix.css.rules import Block, Declaration


def pairs(block: Block) -> list[tuple[str, str]]:
    """Top level `(name, value)` pairs of a block, in order."""
    return [(decl.name, decl.value) for decl in block.declarations]


def decl(name: str, value: str, important: bool = False) -> Declaration:
    return Declaration(name, value, important)
