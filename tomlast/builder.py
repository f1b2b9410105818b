"""Construction of the node tree for one expression."""

from __future__ import annotations

from collections.abc import Iterator

from tomlast.ast import Node
from tomlast.errors import Range
from tomlast.kind import Kind


class Builder:
    """Accumulates nodes and links them by index."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._last = 0

    def reset(self) -> None:
        """Start a fresh tree; nodes handed out earlier stay intact."""
        self._nodes = []
        self._last = 0

    def _append(self, kind: Kind, raw: Range | None, data: bytes) -> int:
        node = Node(kind, raw if raw is not None else Range(), data)
        node._tree = self._nodes
        self._nodes.append(node)
        return len(self._nodes) - 1

    def push(self, kind: Kind, raw: Range | None = None, data: bytes = b"") -> int:
        """Add a node and return its reference."""
        self._last = self._append(kind, raw, data)
        return self._last

    def push_and_chain(
        self, kind: Kind, raw: Range | None = None, data: bytes = b""
    ) -> int:
        """Add a node as the next sibling of the last added node."""
        index = self._append(kind, raw, data)
        if self._last < index:
            self._nodes[self._last]._next = index
        self._last = index
        return index

    def attach_child(self, parent: int, child: int) -> None:
        """Make ``child`` the first child of ``parent``."""
        self._nodes[parent]._child = child

    def chain(self, source: int, target: int) -> None:
        """Make ``target`` the next sibling of ``source``."""
        self._nodes[source]._next = target

    def node_at(self, ref: int) -> Node:
        """The node for a reference."""
        return self._nodes[ref]

    def top_level(self) -> Iterator[Node]:
        """Iterate over the top-level nodes of the tree."""
        node = self._nodes[0] if self._nodes else None
        while node is not None:
            yield node
            node = node.next()