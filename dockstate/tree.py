"""A binary tree of dock nodes stored in a flat, heap-ordered list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .indices import NodeIndex, TabIndex
from .node import Node
from .split import Split
from .window_state import Rect


class Tree:
    """Binary tree of nodes holding splits and tabs.

    The root lives at index 0; the children of node ``n`` live at ``2n + 1``
    (left or top) and ``2n + 2`` (right or bottom).
    """

    def __init__(self, tabs: Iterable[Any]) -> None:
        self._nodes: list[Node] = [Node.leaf_with(tabs)]
        self._focused_node: NodeIndex | None = None

    @classmethod
    def _with_nodes(cls, nodes: list[Node], focused_node: NodeIndex | None) -> Tree:
        tree = cls.__new__(cls)
        tree._nodes = nodes
        tree._focused_node = focused_node
        return tree

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self._nodes)}, focused={self._focused_node!r})"

    def __len__(self) -> int:
        """Number of nodes, including empty ones."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        """The nodes in storage order, including empty ones."""
        return iter(self._nodes)

    def __getitem__(self, index: NodeIndex) -> Node:
        return self._nodes[int(index)]

    def __setitem__(self, index: NodeIndex, node: Node) -> None:
        self._nodes[int(index)] = node

    def _get(self, index: NodeIndex) -> Node | None:
        position = int(index)
        return self._nodes[position] if position < len(self._nodes) else None

    def is_empty(self) -> bool:
        """Whether the tree holds no nodes at all."""
        return not self._nodes

    def find_active(self) -> tuple[Rect, Any] | None:
        """Viewport and active tab of the first leaf that has one."""
        for node in self._nodes:
            if node.is_leaf() and node.tabs is not None and int(node.active) < len(node.tabs):
                return node.viewport, node.tabs[int(node.active)]
        return None

    def breadth_first_index_iter(self) -> Iterator[NodeIndex]:
        """Indices of all nodes, level by level."""
        return (NodeIndex(position) for position in range(len(self._nodes)))

    def tabs(self) -> Iterator[Any]:
        """All tabs of the tree, node by node."""
        for node in self._nodes:
            yield from node.iter_tabs()

    def num_tabs(self) -> int:
        """Total number of tabs in the tree."""
        return sum(node.tabs_count() for node in self._nodes)

    def root_node(self) -> Node | None:
        """The root node, or None if the tree is empty."""
        return self._nodes[0] if self._nodes else None

    def split_tabs(
        self, parent: NodeIndex, split: Split, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent` in direction `split`, placing `tabs` in the new node."""
        return self.split(parent, split, fraction, Node.leaf_with(tabs))

    def split_above(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent`, placing `tabs` above the old content."""
        return self.split(parent, Split.ABOVE, fraction, Node.leaf_with(tabs))

    def split_below(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent`, placing `tabs` below the old content."""
        return self.split(parent, Split.BELOW, fraction, Node.leaf_with(tabs))

    def split_left(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent`, placing `tabs` left of the old content."""
        return self.split(parent, Split.LEFT, fraction, Node.leaf_with(tabs))

    def split_right(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent`, placing `tabs` right of the old content."""
        return self.split(parent, Split.RIGHT, fraction, Node.leaf_with(tabs))

    def split(
        self, parent: NodeIndex, split: Split, fraction: float, new: Node
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split `parent` into the old content and `new`, returning (old, new) indices.

        `fraction` is the share of the area kept by the old content. Raises
        ValueError if `fraction` is outside 0..=1, if `new` holds no tabs, or
        if `parent` is an empty node.
        """
        target = self[parent]
        if not (target.is_leaf() or target.is_parent()):
            raise ValueError(f"cannot split empty node at {parent!r}")
        if new.tabs_count() == 0:
            raise ValueError("the new node must be a leaf with at least one tab")
        old = target.split(split, fraction)

        last = next(
            (i for i in reversed(range(len(self._nodes))) if not self._nodes[i].is_empty()),
            0,
        )
        size = (1 << (NodeIndex(last).level() + 1)) - 1
        if len(self._nodes) < size:
            self._nodes.extend(Node.empty() for _ in range(size - len(self._nodes)))
        else:
            del self._nodes[size:]

        if split in (Split.LEFT, Split.ABOVE):
            old_index, new_index = parent.right(), parent.left()
        else:
            old_index, new_index = parent.left(), parent.right()

        if old.is_parent():
            levels_to_move = NodeIndex(len(self._nodes)).level() - old_index.level()
            # Level 0 is the old node itself, placed below; move its descendants deepest first.
            for level in reversed(range(1, levels_to_move)):
                old_start = parent.children_at(level).start
                new_start = old_index.children_at(level).start
                length = 1 << level
                moved = self._nodes[old_start:old_start + length]
                self._nodes[old_start:old_start + length] = self._nodes[new_start:new_start + length]
                self._nodes[new_start:new_start + length] = moved

        self[old_index] = old
        self[new_index] = new
        self._focused_node = new_index
        return old_index, new_index

    def _first_leaf(self, top: NodeIndex) -> NodeIndex | None:
        left, right = top.left(), top.right()
        left_node, right_node = self._get(left), self._get(right)
        if left_node is not None and left_node.is_leaf():
            return left
        if right_node is not None and right_node.is_leaf():
            return right
        left_parent = left_node is not None and left_node.is_parent()
        right_parent = right_node is not None and right_node.is_parent()
        if left_parent and right_parent:
            found = self._first_leaf(left)
            return found if found is not None else self._first_leaf(right)
        if left_parent:
            return self._first_leaf(left)
        if right_parent:
            return self._first_leaf(right)
        return None

    def find_active_focused(self) -> tuple[Rect, Any] | None:
        """Viewport and active tab of the focused leaf, if any."""
        if self._focused_node is None:
            return None
        node = self._get(self._focused_node)
        if node is None or not node.is_leaf() or node.tabs is None:
            return None
        position = int(node.active)
        if position >= len(node.tabs):
            return None
        return node.viewport, node.tabs[position]

    def focused_leaf(self) -> NodeIndex | None:
        """Index of the focused leaf, or None."""
        return self._focused_node

    def set_focused_node(self, node_index: NodeIndex) -> None:
        """Focus `node_index` if it is a leaf; otherwise clear the focus."""
        node = self._get(node_index)
        self._focused_node = node_index if node is not None and node.is_leaf() else None

    def remove_leaf(self, node: NodeIndex) -> None:
        """Remove the leaf at `node`, lifting its sibling's subtree into the parent's place.

        Removing the root leaves a single leaf without tabs. Raises ValueError
        if the tree is empty or `node` is not a leaf.
        """
        if self.is_empty():
            raise ValueError("cannot remove a leaf from an empty tree")
        if not self[node].is_leaf():
            raise ValueError(f"node at {node!r} is not a leaf")

        parent = node.parent()
        if parent is None:
            self._nodes = [Node.leaf_with([])]
            return

        if node == self._focused_node:
            self._focused_node = None
            current = node
            while (up := current.parent()) is not None:
                sibling = up.right() if current.is_left() else up.left()
                sibling_node = self._get(sibling)
                if sibling_node is not None and sibling_node.is_leaf():
                    self._focused_node = sibling
                    break
                found = self._first_leaf(sibling)
                if found is not None:
                    self._focused_node = found
                    break
                current = up

        self[parent] = Node.empty()
        self[node] = Node.empty()

        sources = parent.children_right if node.is_left() else parent.children_left
        level = 0
        while True:
            for dst, src in zip(parent.children_at(level), sources(level + 1)):
                if src >= len(self._nodes):
                    return
                if self._focused_node == NodeIndex(src):
                    self._focused_node = NodeIndex(dst)
                self._nodes[dst] = self._nodes[src]
                self._nodes[src] = Node.empty()
            level += 1

    def push_to_first_leaf(self, tab: Any) -> None:
        """Add `tab` to the first leaf, or make a new leaf in the first empty slot."""
        for position, node in enumerate(self._nodes):
            if node.is_leaf():
                node.append_tab(tab)
                self._focused_node = NodeIndex(position)
                return
            if node.is_empty():
                self._nodes[position] = Node.leaf(tab)
                self._focused_node = NodeIndex(position)
                return
        if self._nodes:
            raise ValueError("tree has neither a leaf nor an empty slot")
        self._nodes.append(Node.leaf_with([tab]))
        self._focused_node = NodeIndex.root()

    def set_active_tab(self, node_index: NodeIndex, tab_index: TabIndex) -> None:
        """Make `tab_index` the active tab of the leaf at `node_index`."""
        node = self._get(node_index)
        if node is not None and node.is_leaf():
            node.active = tab_index

    def push_to_focused_leaf(self, tab: Any) -> None:
        """Add `tab` to the focused leaf, falling back to the first leaf."""
        if not self._nodes:
            self._nodes.append(Node.leaf(tab))
            self._focused_node = NodeIndex.root()
            return
        focused = self._focused_node
        if focused is None:
            self.push_to_first_leaf(tab)
            return
        node = self[focused]
        if node.is_empty():
            self[focused] = Node.leaf(tab)
        elif node.is_leaf():
            node.append_tab(tab)
        else:
            self.push_to_first_leaf(tab)

    def remove_tab(self, node_index: NodeIndex, tab_index: TabIndex) -> Any | None:
        """Remove and return a tab; a leaf left without tabs is removed as well."""
        node = self[node_index]
        tab = node.remove_tab(tab_index)
        if node.tabs_count() == 0:
            self.remove_leaf(node_index)
        return tab

    def filter_map_tabs(self, function: Callable[[Any], Any | None]) -> Tree:
        """A new tree with tabs mapped by `function`; tabs mapped to None are dropped.

        Leaves left without tabs are removed.
        """
        nodes = []
        emptied = set()
        for position, node in enumerate(self._nodes):
            mapped = node.filter_map_tabs(function)
            if mapped.is_empty() and not node.is_empty():
                emptied.add(NodeIndex(position))
            nodes.append(mapped)
        tree = Tree._with_nodes(nodes, self._focused_node)
        tree._balance(emptied)
        return tree

    def map_tabs(self, function: Callable[[Any], Any]) -> Tree:
        """A new tree with every tab mapped by `function`."""
        return self.filter_map_tabs(function)

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Tree:
        """A new tree keeping only tabs for which `predicate` holds."""
        return self.filter_map_tabs(lambda tab: tab if predicate(tab) else None)

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> None:
        """Drop tabs for which `predicate` fails, removing emptied leaves."""
        emptied = set()
        for position, node in enumerate(self._nodes):
            was_empty = node.is_empty()
            node.retain_tabs(predicate)
            if node.is_empty() and not was_empty:
                emptied.add(NodeIndex(position))
        self._balance(emptied)

    def _balance(self, emptied_nodes: set[NodeIndex]) -> None:
        parents = sorted({p for p in (n.parent() for n in emptied_nodes) if p is not None})
        emptied_parents = set()
        for parent in parents:
            left_empty = self[parent.left()].is_empty()
            right_empty = self[parent.right()].is_empty()
            if left_empty and right_empty:
                self[parent] = Node.empty()
                emptied_parents.add(parent)
            elif left_empty:
                self[parent] = self[parent.right()]
                self[parent.right()] = Node.empty()
            elif right_empty:
                self[parent] = self[parent.left()]
                self[parent.left()] = Node.empty()
        if emptied_parents:
            self._balance(emptied_parents)

    def find_tab(self, needle_tab: Any) -> tuple[NodeIndex, TabIndex] | None:
        """Location of the first tab equal to `needle_tab`, or None."""
        for node_position, node in enumerate(self._nodes):
            if not node.is_leaf():
                continue
            for tab_position, tab in enumerate(node.iter_tabs()):
                if tab == needle_tab:
                    return NodeIndex(node_position), TabIndex(tab_position)
        return None