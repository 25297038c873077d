""" CSS output model

Mixins return a `Block`: an ordered list of declarations and nested rules.

<block>
    <declaration/>                 name: value [!important];
    <rule prelude="&:after">       nested selector, `&` is the parent
        <block/>
    </rule>
    <at-rule name="media">         conditional block
        <block/>
    </at-rule>
</block>

`Block.render` keeps the nesting, `ruleset` flattens it against a real selector.
"""

from __future__ import annotations
from collections.abc import Iterable, Iterator
from typing import overload

__all__ = ["Declaration", "Rule", "AtRule", "Block", "Node", "ruleset", "resolve_selector"]

INDENT = "  "

class Declaration:
    name: str
    value: str
    important: bool
    def __init__(self, name: str, value: str, important: bool = False):
        self.name = name
        self.value = value
        self.important = important

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.value!r})"

    def __str__(self) -> str:
        return f"{self.name}: {self.value}{' !important' if self.important else ''};"

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Declaration):
            return (
                self.name == __value.name
                and self.value == __value.value
                and self.important == __value.important
            )
        return False

    def __hash__(self) -> int:
        return hash((self.name, self.value, self.important))

    def copy(self) -> Declaration:
        return Declaration(self.name, self.value, self.important)

class Rule:
    """A nested style rule. The prelude is a selector that may reference the parent with `&`."""

    prelude: str
    block: Block
    def __init__(self, prelude: str, block: Block | None = None) -> None:
        self.prelude = prelude
        self.block = block if block is not None else Block()

    @property
    def header(self) -> str:
        return self.prelude

    def __repr__(self) -> str:
        return f"Rule({self.prelude!r}, block={{{len(self.block)}}})"

    def __eq__(self, __value: object) -> bool:
        if type(__value) is type(self):
            return self.header == __value.header and self.block == __value.block
        return False

    def __hash__(self) -> int:
        return hash((self.header, tuple(self.block)))

    def copy(self) -> Rule:
        """A copy of the rule with its nested block copied all the way down."""
        return Rule(self.prelude, self.block.copy())

class AtRule(Rule):
    """A conditional group rule such as `@media`."""

    name: str
    def __init__(self, name: str, prelude: str, block: Block | None = None) -> None:
        self.name = name
        super().__init__(prelude, block)

    @property
    def header(self) -> str:
        return f"@{self.name} {self.prelude}"

    def __repr__(self) -> str:
        return f"AtRule({self.name!r}, prelude={self.prelude!r}, block={{{len(self.block)}}})"

    def copy(self) -> AtRule:
        return AtRule(self.name, self.prelude, self.block.copy())

Node = Declaration | Rule

class Block:
    value: list[Node]
    def __init__(self, *nodes: Node) -> None:
        self.value = list(nodes)

    def append(self, node: Node) -> Block:
        self.value.append(node)
        return self

    def extend(self, nodes: Iterable[Node]) -> Block:
        self.value.extend(nodes)
        return self

    def copy(self) -> Block:
        return Block(*(node.copy() for node in self.value))

    @property
    def declarations(self) -> list[Declaration]:
        """Top level declarations, nested rules excluded."""
        return [node for node in self.value if isinstance(node, Declaration)]

    @property
    def rules(self) -> list[Rule]:
        return [node for node in self.value if isinstance(node, Rule)]

    def get(self, name: str) -> list[str]:
        """Values of every top level declaration named `name`, in order."""
        return [decl.value for decl in self.declarations if decl.name == name]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __bool__(self) -> bool:
        return len(self.value) > 0

    @overload
    def __getitem__(self, index: int) -> Node: ...
    @overload
    def __getitem__(self, index: slice) -> Block: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return Block(*self.value[index])
        return self.value[index]

    def __add__(self, other: Block) -> Block:
        return Block(*self.value, *other.value)

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Block):
            return self.value == __value.value
        return False

    def __repr__(self) -> str:
        return f"Block({', '.join(repr(node) for node in self.value)})"

    def __str__(self) -> str:
        return self.render()

    def _lines_(self, depth: int) -> Iterator[str]:
        pad = INDENT * depth
        for node in self.value:
            if isinstance(node, Declaration):
                yield f"{pad}{node}"
            else:
                yield f"{pad}{node.header} {{"
                yield from node.block._lines_(depth + 1)
                yield f"{pad}}}"

    def render(self, indent: int = 0) -> str:
        """Render the block as nested CSS text, one declaration per line."""
        return "\n".join(self._lines_(indent))

    def flatten(self, selector: str) -> list[Rule]:
        """Resolve nested rules against `selector` and hoist at-rules to the top level.

        Returns
            Flat rules (and at-rules wrapping flat rules) in source order. Rules that
            end up without declarations are dropped.
        """
        result: list[Rule] = []
        declarations = self.declarations
        if len(declarations) > 0:
            result.append(Rule(selector, Block(*declarations)))

        for node in self.rules:
            if isinstance(node, AtRule):
                inner = node.block.flatten(selector)
                if len(inner) > 0:
                    result.append(AtRule(node.name, node.prelude, Block(*inner)))
            else:
                result.extend(node.block.flatten(resolve_selector(node.prelude, selector)))
        return result


def resolve_selector(prelude: str, parent: str) -> str:
    """Replace `&` in a nested selector list with each selector of the parent list.

    Selectors without `&` are treated as descendants of the parent.
    """
    parents = [p.strip() for p in parent.split(",") if p.strip()]
    resolved = []
    for part in (p.strip() for p in prelude.split(",")):
        if part == "":
            continue
        for p in parents:
            resolved.append(part.replace("&", p) if "&" in part else f"{p} {part}")
    return ", ".join(resolved)


def ruleset(selector: str, *blocks: Block) -> str:
    """Merge mixin output under `selector` and render it as flat CSS."""
    merged = Block()
    for block in blocks:
        merged.extend(block)
    return "\n\n".join(Block(rule).render() for rule in merged.flatten(selector))
