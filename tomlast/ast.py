"""Nodes of a TOML expression tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from tomlast.errors import Range
from tomlast.kind import Kind


@dataclass(eq=False)
class Node:
    """A node of a TOML expression tree.

    How the children are read depends on the kind:

    - ARRAY has one child per element.
    - INLINE_TABLE has one KEY_VALUE child per entry.
    - KEY_VALUE has the value first, then the parts of a possibly dotted key.
    - TABLE and ARRAY_TABLE have the parts of their dotted key.
    """

    kind: Kind
    raw: Range = field(default_factory=Range)
    data: bytes = b""
    _tree: list[Node] | None = field(default=None, init=False, repr=False)
    _next: int | None = field(default=None, init=False, repr=False)
    _child: int | None = field(default=None, init=False, repr=False)

    def next(self) -> Node | None:
        """The following sibling, or None."""
        if self._next is None or self._tree is None:
            return None
        return self._tree[self._next]

    def child(self) -> Node | None:
        """The first child, or None."""
        if self._child is None or self._tree is None:
            return None
        return self._tree[self._child]

    def is_last(self) -> bool:
        """True when no sibling follows this node."""
        return self._next is None

    def key(self) -> Iterator[Node]:
        """Iterate over the KEY nodes forming the key of this node."""
        if self.kind is Kind.KEY_VALUE:
            value = self.child()
            if value is None:
                raise ValueError("KeyValue should have at least two children")
            return _siblings(value.next())
        if self.kind in (Kind.TABLE, Kind.ARRAY_TABLE):
            return _siblings(self.child())
        raise ValueError(f"key() is not supported on a {self.kind}")

    def value(self) -> Node | None:
        """The value node of a KEY_VALUE."""
        return self.child()

    def children(self) -> Iterator[Node]:
        """Iterate over the children of this node."""
        return _siblings(self.child())


def _siblings(start: Node | None) -> Iterator[Node]:
    node = start
    while node is not None:
        yield node
        node = node.next()


@runtime_checkable
class Unmarshaler(Protocol):
    """Implemented by types that build themselves from a parsed node."""

    def unmarshal_toml(self, value: Node) -> None:
        """Populate the object from ``value``, raising on failure."""