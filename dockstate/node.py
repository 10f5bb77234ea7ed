"""Nodes of a dock tree: empty slots, tab-holding leaves and split parents."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .indices import TabIndex
from .split import Split
from .window_state import Rect


class NodeKind(enum.Enum):
    """What a node holds."""

    EMPTY = "empty"
    LEAF = "leaf"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass
class Node:
    """A single node of a dock tree.

    Leaves carry ``tabs``, ``active``, ``viewport`` and ``scroll``; parents
    (vertical or horizontal) carry ``fraction``. ``rect`` is set for every
    kind except empty.
    """

    kind: NodeKind = NodeKind.EMPTY
    rect: Optional[Rect] = None
    viewport: Optional[Rect] = None
    tabs: Optional[list[Any]] = None
    active: TabIndex = field(default_factory=lambda: TabIndex(0))
    scroll: float = 0.0
    fraction: Optional[float] = None

    @staticmethod
    def empty() -> Node:
        """An empty node."""
        return Node()

    @staticmethod
    def leaf(tab: Any) -> Node:
        """A leaf holding a single tab."""
        return Node.leaf_with([tab])

    @staticmethod
    def leaf_with(tabs: Iterable[Any]) -> Node:
        """A leaf holding the given tabs, the first one active."""
        return Node(
            kind=NodeKind.LEAF,
            rect=Rect.NOTHING,
            viewport=Rect.NOTHING,
            tabs=list(tabs),
            active=TabIndex(0),
            scroll=0.0,
        )

    @staticmethod
    def _parent(kind: NodeKind, fraction: float, rect: Rect) -> Node:
        return Node(kind=kind, rect=rect, fraction=fraction)

    def _take(self, other: Node) -> None:
        self.kind = other.kind
        self.rect = other.rect
        self.viewport = other.viewport
        self.tabs = other.tabs
        self.active = other.active
        self.scroll = other.scroll
        self.fraction = other.fraction

    def set_rect(self, rect: Rect) -> None:
        """Set the area occupied by the node; ignored for empty nodes."""
        if self.kind is not NodeKind.EMPTY:
            self.rect = rect

    def get_rect(self) -> Rect | None:
        """The area occupied by the node, or None if it is empty."""
        if self.kind is NodeKind.EMPTY:
            return None
        return self.rect

    def is_empty(self) -> bool:
        return self.kind is NodeKind.EMPTY

    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def is_horizontal(self) -> bool:
        return self.kind is NodeKind.HORIZONTAL

    def is_vertical(self) -> bool:
        return self.kind is NodeKind.VERTICAL

    def is_parent(self) -> bool:
        return self.is_horizontal() or self.is_vertical()

    def split(self, split: Split, fraction: float) -> Node:
        """Turn this node into a parent for `split` and return its former content.

        Raises ValueError if `fraction` is outside 0..=1.
        """
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be in 0..=1, got {fraction}")
        kind = NodeKind.HORIZONTAL if split.is_left_right() else NodeKind.VERTICAL
        old = Node()
        old._take(self)
        self._take(Node._parent(kind, fraction, Rect.NOTHING))
        return old

    def iter_tabs(self) -> Iterator[Any]:
        """The tabs of this node; nothing if it is not a leaf."""
        if self.tabs is not None:
            yield from self.tabs

    def _require_leaf(self) -> list[Any]:
        if self.kind is not NodeKind.LEAF or self.tabs is None:
            raise ValueError("node was not a leaf")
        return self.tabs

    def append_tab(self, tab: Any) -> None:
        """Add `tab` at the end and make it active. Raises ValueError if not a leaf."""
        tabs = self._require_leaf()
        self.active = TabIndex(len(tabs))
        tabs.append(tab)

    def insert_tab(self, index: TabIndex, tab: Any) -> None:
        """Insert `tab` at `index` and make it active.

        Raises ValueError if not a leaf and IndexError if `index` exceeds the tab count.
        """
        tabs = self._require_leaf()
        position = int(index)
        if position > len(tabs):
            raise IndexError(f"insertion index {position} exceeds tab count {len(tabs)}")
        tabs.insert(position, tab)
        self.active = TabIndex(position)

    def remove_tab(self, tab_index: TabIndex) -> Any | None:
        """Remove and return the tab at `tab_index`; None if not a leaf.

        Raises IndexError if the index is out of bounds.
        """
        if self.kind is not NodeKind.LEAF or self.tabs is None:
            return None
        position = int(tab_index)
        if position >= len(self.tabs):
            raise IndexError(f"tab index {position} out of range for {len(self.tabs)} tabs")
        if tab_index <= self.active:
            self.active = TabIndex(max(self.active.value - 1, 0))
        return self.tabs.pop(position)

    def tabs_count(self) -> int:
        """Number of tabs; zero for non-leaf nodes."""
        return len(self.tabs) if self.kind is NodeKind.LEAF and self.tabs is not None else 0

    def filter_map_tabs(self, function: Callable[[Any], Any | None]) -> Node:
        """A new node with each tab mapped by `function`, dropping those mapped to None.

        A leaf left without tabs becomes an empty node.
        """
        if self.kind is NodeKind.LEAF:
            tabs = [mapped for mapped in map(function, self.iter_tabs()) if mapped is not None]
            if not tabs:
                return Node.empty()
            return Node(
                kind=NodeKind.LEAF,
                rect=self.rect,
                viewport=self.viewport,
                tabs=tabs,
                active=self.active,
                scroll=self.scroll,
            )
        if self.kind is NodeKind.EMPTY:
            return Node.empty()
        return Node(kind=self.kind, rect=self.rect, fraction=self.fraction)

    def map_tabs(self, function: Callable[[Any], Any]) -> Node:
        """A new node with each tab mapped by `function`."""
        return self.filter_map_tabs(function)

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Node:
        """A new node keeping only tabs for which `predicate` holds."""
        return self.filter_map_tabs(lambda tab: tab if predicate(tab) else None)

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> None:
        """Drop tabs for which `predicate` fails; an emptied leaf becomes empty."""
        if self.kind is NodeKind.LEAF and self.tabs is not None:
            self.tabs[:] = [tab for tab in self.tabs if predicate(tab)]
            if not self.tabs:
                self._take(Node.empty())