"""Arena-backed scope tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from rsmlpy.text import TextRange
from rsmlpy.values import Value, value_to_data

ROOT_INDEX = 0


@dataclass(frozen=True, slots=True)
class MacroDefinition:
    """A `@macro Name($!a, ...) { ... }` block; its body lives at `node`, outside any `rules`."""

    name: str
    arguments: tuple[str, ...]
    node: int


@dataclass(slots=True)
class TreeNode:
    """One lexical scope: the document root or a selector block."""

    rules: dict[str, list[int]] = field(default_factory=dict)
    variables: dict[str, Value] = field(default_factory=dict)
    properties: dict[str, Value] = field(default_factory=dict)
    priority: int | None = None
    derives: list[str] = field(default_factory=list)
    macros: dict[str, MacroDefinition] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.rules or self.variables or self.properties or self.derives or self.macros) and (
            self.priority is None
        )

    def add_rule(self, selector: str, child: int) -> None:
        self.rules.setdefault(selector, []).append(child)

    def to_data(self) -> dict[str, Any]:
        return {
            "rules": {selector: list(children) for selector, children in self.rules.items()},
            "variables": {name: value_to_data(value) for name, value in self.variables.items()},
            "properties": {name: value_to_data(value) for name, value in self.properties.items()},
            "priority": self.priority,
            "derives": list(self.derives),
            "macros": {
                name: {"arguments": list(macro.arguments), "node": macro.node} for name, macro in self.macros.items()
            },
        }


class Arena:
    """Owns every `TreeNode` of one document by index; node 0 is the root.

    Children always have a larger index than their parent.
    """

    __slots__ = ("_nodes", "_parents", "_spans")

    def __init__(self) -> None:
        self._nodes: list[TreeNode] = [TreeNode()]
        self._parents: list[int | None] = [None]
        self._spans: list[TextRange | None] = [None]

    @property
    def root(self) -> TreeNode:
        return self._nodes[ROOT_INDEX]

    def push(self, node: TreeNode | None = None, *, parent: int = ROOT_INDEX) -> int:
        self._check_index(parent)
        self._nodes.append(node if node is not None else TreeNode())
        self._parents.append(parent)
        self._spans.append(None)
        return len(self._nodes) - 1

    def parent(self, index: int) -> int | None:
        """Enclosing scope of a rule or macro body; None for the root."""
        self._check_index(index)
        return self._parents[index]

    def ancestors(self, index: int) -> Iterator[int]:
        """`index` followed by each enclosing scope up to the root."""
        current: int | None = index
        while current is not None:
            yield current
            current = self.parent(current)

    def span(self, index: int) -> TextRange | None:
        """Source range of a scope, from its selector (or `@macro`) to its closing brace."""
        self._check_index(index)
        return self._spans[index]

    def set_span(self, index: int, span: TextRange) -> None:
        self._check_index(index)
        self._spans[index] = span

    def get(self, index: int) -> TreeNode | None:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def __getitem__(self, index: int) -> TreeNode:
        self._check_index(index)
        return self._nodes[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"Arena index out of range: {index} (arena has {len(self._nodes)} nodes)")

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes)

    def children(self, index: int) -> Iterator[tuple[str, int]]:
        """Yield `(selector, child_index)` pairs of a node in declaration order."""
        for selector, child_indices in self[index].rules.items():
            for child in child_indices:
                yield selector, child

    def walk(self, index: int = ROOT_INDEX) -> Iterator[tuple[int, str | None, int]]:
        """Depth-first `(index, selector, depth)` over the rule tree; the start node has no selector."""
        stack: list[tuple[int, str | None, int]] = [(index, None, 0)]
        while stack:
            current, selector, depth = stack.pop()
            yield current, selector, depth
            nested = [(child, key, depth + 1) for key, child in self.children(current)]
            stack.extend(reversed(nested))

    def to_data(self) -> dict[str, Any]:
        return {"nodes": [node.to_data() for node in self._nodes]}
