"""Data models shared by the PlantUML and OPML converters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import config


@dataclass
class Node:
    """A single outline item.

    Nodes form a tree via the `children` list. The parent reference is
    non-owning and only used for navigation; top-level nodes have none.
    """
    label: str = ""
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    @property
    def depth(self) -> int:
        """Nesting level, 1 for top-level nodes."""
        d = 1
        node = self.parent
        while node is not None:
            d += 1
            node = node.parent
        return d

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def path(self) -> list[str]:
        """List of labels from the top-level ancestor to this node."""
        parts = []
        node = self
        while node is not None:
            parts.append(node.label)
            node = node.parent
        return list(reversed(parts))

    def find(self, label: str) -> Optional[Node]:
        """Find first node in this subtree with matching label (case-insensitive)."""
        label_lower = label.lower()
        if self.label.lower() == label_lower:
            return self
        for child in self.children:
            result = child.find(label)
            if result is not None:
                return result
        return None

    def find_all(self, label: str) -> list[Node]:
        """Find all nodes in this subtree with matching label (case-insensitive)."""
        results = []
        if self.label.lower() == label.lower():
            results.append(self)
        for child in self.children:
            results.extend(child.find_all(label))
        return results

    def walk(self):
        """Yield this node and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def add_child(self, label: str) -> Node:
        """Create and append a new child node."""
        child = Node(label=label, parent=self)
        self.children.append(child)
        return child

    def count(self) -> int:
        """Total number of nodes in this subtree (including self)."""
        return sum(1 for _ in self.walk())

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        child_count = len(self.children)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"Node({self.label!r}{suffix})"


@dataclass
class Document:
    """An outline document: metadata plus the list of top-level nodes.

    `version` and `title` only matter on the OPML side; the PlantUML
    serializer ignores them.
    """
    outlines: list[Node] = field(default_factory=list)
    version: str = config.OPML_VERSION
    title: str = field(default_factory=lambda: config.DEFAULT_TITLE)

    @property
    def node_count(self) -> int:
        return sum(node.count() for node in self.outlines)

    def add_outline(self, label: str) -> Node:
        """Create and append a new top-level node."""
        node = Node(label=label)
        self.outlines.append(node)
        return node

    def walk(self):
        """Iterate all nodes depth-first, in document order."""
        for node in self.outlines:
            yield from node.walk()

    def find(self, label: str) -> Optional[Node]:
        """Find first node with matching label."""
        for node in self.outlines:
            result = node.find(label)
            if result is not None:
                return result
        return None

    def find_all(self, label: str) -> list[Node]:
        """Find all nodes with matching label."""
        results = []
        for node in self.outlines:
            results.extend(node.find_all(label))
        return results

    def __repr__(self) -> str:
        return f"Document({self.title!r}, {self.node_count} nodes)"
