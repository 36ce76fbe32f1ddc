"""
gedcom_node.py - Tree representation of GEDCOM output.

A record is a GedcomNode with an optional pointer; its substructures are
child nodes. Levels are not stored: they follow from the depth in the tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional


@dataclass
class GedcomNode:
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    children: List["GedcomNode"] = field(default_factory=list)

    def add(self, tag: str, value: str = "", pointer: Optional[str] = None) -> "GedcomNode":
        """Append a child node and return it."""
        child = GedcomNode(tag, value, pointer)
        self.children.append(child)
        return child

    def copy(self, **changes) -> "GedcomNode":
        """Shallow copy with the given fields replaced; children list is copied."""
        node = replace(self, **changes)
        if 'children' not in changes:
            node.children = list(self.children)
        return node

    def walk(self, level: int = 0) -> Iterator[tuple]:
        """Depth-first (level, node) pairs, this node first."""
        yield level, self
        for child in self.children:
            yield from child.walk(level + 1)
