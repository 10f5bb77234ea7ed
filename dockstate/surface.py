"""Surfaces: the areas in which a dock tree is laid out."""

from __future__ import annotations

import copy
import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from .indices import NodeIndex
from .node import Node
from .tree import Tree
from .window_state import WindowState


class SurfaceKind(enum.Enum):
    """What a surface is."""

    EMPTY = "empty"
    MAIN = "main"
    WINDOW = "window"


@dataclass
class Surface:
    """An area holding a tree of nodes.

    The main surface is the one rendered in the host area; window surfaces
    float in their own windows and carry a ``WindowState``. An empty surface
    is a placeholder slot with nothing in it.
    """

    kind: SurfaceKind = SurfaceKind.EMPTY
    tree: Optional[Tree] = None
    state: Optional[WindowState] = None

    @staticmethod
    def empty() -> Surface:
        """A surface with nothing inside."""
        return Surface()

    @staticmethod
    def main(tree: Tree) -> Surface:
        """The main surface holding `tree`."""
        return Surface(kind=SurfaceKind.MAIN, tree=tree)

    @staticmethod
    def window(tree: Tree, state: WindowState) -> Surface:
        """A window surface holding `tree`, placed according to `state`."""
        return Surface(kind=SurfaceKind.WINDOW, tree=tree, state=state)

    def is_empty(self) -> bool:
        """Whether this is an empty (null) surface."""
        return self.kind is SurfaceKind.EMPTY

    def node_tree(self) -> Tree | None:
        """The surface's tree, or None if the surface is empty."""
        if self.kind is SurfaceKind.EMPTY:
            return None
        return self.tree

    def iter_nodes(self) -> Iterator[Node]:
        """The nodes of this surface's tree; nothing if the surface is empty."""
        tree = self.node_tree()
        if tree is not None:
            yield from tree

    def iter_all_tabs(self) -> Iterator[tuple[NodeIndex, Any]]:
        """Every tab of the surface with the index of the node holding it."""
        for position, node in enumerate(self.iter_nodes()):
            for tab in node.iter_tabs():
                yield NodeIndex(position), tab

    def filter_map_tabs(self, function: Callable[[Any], Any | None]) -> Surface:
        """A new surface with tabs mapped by `function`, dropping those mapped to None.

        A window whose tree ends up with no nodes becomes an empty surface.
        """
        if self.kind is SurfaceKind.EMPTY or self.tree is None:
            return Surface.empty()
        tree = self.tree.filter_map_tabs(function)
        if self.kind is SurfaceKind.MAIN:
            return Surface.main(tree)
        if tree.is_empty():
            return Surface.empty()
        state = copy.copy(self.state) if self.state is not None else WindowState()
        return Surface.window(tree, state)

    def map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        """A new surface with every tab mapped by `function`."""
        return self.filter_map_tabs(function)

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        """A new surface keeping only tabs for which `predicate` holds."""
        return self.filter_map_tabs(lambda tab: tab if predicate(tab) else None)

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> None:
        """Drop tabs for which `predicate` fails; a surface left without nodes becomes empty."""
        if self.kind is SurfaceKind.EMPTY or self.tree is None:
            return
        self.tree.retain_tabs(predicate)
        if self.tree.is_empty():
            self.kind = SurfaceKind.EMPTY
            self.tree = None
            self.state = None