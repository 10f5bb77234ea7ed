"""Index types for nodes, tabs and surfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class _Index:
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{type(self).__name__} expects an int, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative: {self.value}")

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


@dataclass(frozen=True, order=True, repr=False)
class NodeIndex(_Index):
    """Position of a node in a tree's flat binary-heap layout."""

    @staticmethod
    def root() -> NodeIndex:
        """Index of the node that contains all other nodes."""
        return NodeIndex(0)

    def left(self) -> NodeIndex:
        """Index of the left child."""
        return NodeIndex(self.value * 2 + 1)

    def right(self) -> NodeIndex:
        """Index of the right child."""
        return NodeIndex(self.value * 2 + 2)

    def parent(self) -> NodeIndex | None:
        """Index of the parent, or None for the root."""
        if self.value > 0:
            return NodeIndex((self.value - 1) // 2)
        return None

    def level(self) -> int:
        """Number of nodes from the root to this node, including itself."""
        return (self.value + 1).bit_length()

    def is_left(self) -> bool:
        """Whether this node is the left child of its parent."""
        return self.value % 2 != 0

    def is_right(self) -> bool:
        """Whether this node is the right child of its parent."""
        return self.value % 2 == 0

    def children_at(self, level: int) -> range:
        """Flat indices of all descendants `level` levels below this node."""
        base = 1 << level
        return range((self.value + 1) * base - 1, (self.value + 2) * base - 1)

    def children_left(self, level: int) -> range:
        """Descendants at `level` that lie under the left child."""
        base = 1 << level
        start = (self.value + 1) * base - 1
        return range(start, (self.value + 1) * base + base // 2 - 1)

    def children_right(self, level: int) -> range:
        """Descendants at `level` that lie under the right child."""
        base = 1 << level
        return range((self.value + 1) * base + base // 2 - 1, (self.value + 2) * base - 1)


@dataclass(frozen=True, order=True, repr=False)
class TabIndex(_Index):
    """Position of a tab within a leaf node."""


@dataclass(frozen=True, order=True, repr=False)
class SurfaceIndex(_Index):
    """Position of a surface within a dock state."""

    @staticmethod
    def main() -> SurfaceIndex:
        """Index of the main surface."""
        return SurfaceIndex(0)

    def is_main(self) -> bool:
        """Whether this is the main surface's index."""
        return self.value == 0