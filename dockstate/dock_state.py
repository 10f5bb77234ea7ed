"""The collection of surfaces that makes up a whole dock layout."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .indices import NodeIndex, SurfaceIndex, TabIndex
from .node import Node
from .split import (
    InsertAppend,
    InsertAt,
    InsertSplit,
    Split,
    TabDestination,
    ToEmptySurface,
    ToNode,
    ToWindow,
)
from .surface import Surface
from .translations import Translations
from .tree import Tree
from .window_state import Rect, WindowState


class DockState:
    """A collection of surfaces, each holding a tree in which tabs are arranged.

    Indexing with a ``SurfaceIndex`` yields that surface's ``Tree``.
    """

    def __init__(self, tabs: Iterable[Any]) -> None:
        self._surfaces: list[Surface] = [Surface.main(Tree(tabs))]
        self._focused_surface: SurfaceIndex | None = None
        self.translations: Translations = Translations.english()

    @classmethod
    def _from_parts(
        cls,
        surfaces: list[Surface],
        focused_surface: SurfaceIndex | None,
        translations: Translations,
    ) -> DockState:
        state = cls.__new__(cls)
        state._surfaces = surfaces
        state._focused_surface = focused_surface
        state.translations = translations
        return state

    def __repr__(self) -> str:
        return (
            f"DockState(surfaces={len(self._surfaces)}, "
            f"focused_surface={self._focused_surface!r})"
        )

    def _surface_tree(self, index: SurfaceIndex) -> Tree:
        tree = self._surfaces[int(index)].node_tree()
        if tree is None:
            raise LookupError(f"There did not exist a tree at surface index {int(index)}")
        return tree

    def __getitem__(self, index: SurfaceIndex) -> Tree:
        """The tree of the surface at `index`.

        Raises IndexError if there is no such surface and LookupError if it is empty.
        """
        return self._surface_tree(index)

    def __setitem__(self, index: SurfaceIndex, tree: Tree) -> None:
        """Replace the tree of the (non-empty) surface at `index`."""
        surface = self._surfaces[int(index)]
        if surface.is_empty():
            raise LookupError(f"There did not exist a tree at surface index {int(index)}")
        surface.tree = tree

    def with_translations(self, translations: Translations) -> DockState:
        """Set the text shown by the dock area and return this state."""
        self.translations = translations
        return self

    def main_surface(self) -> Tree:
        """The tree of the main surface."""
        return self[SurfaceIndex.main()]

    def get_window_state(self, surface: SurfaceIndex) -> WindowState | None:
        """The window state of a window surface; None for main or empty surfaces."""
        found = self._surfaces[int(surface)]
        return found.state if found.kind.value == "window" else None

    def find_active_focused(self) -> tuple[Rect, Any] | None:
        """Viewport and active tab of the focused leaf, if any."""
        if self._focused_surface is None:
            return None
        return self[self._focused_surface].find_active_focused()

    def get_surface(self, surface: SurfaceIndex) -> Surface | None:
        """The raw surface at `surface`, or None if there is none."""
        position = int(surface)
        return self._surfaces[position] if position < len(self._surfaces) else None

    def is_surface_valid(self, surface_index: SurfaceIndex) -> bool:
        """Whether the surface exists and is not empty."""
        surface = self.get_surface(surface_index)
        return surface is not None and not surface.is_empty()

    def valid_surface_indices(self) -> list[SurfaceIndex]:
        """Indices of all surfaces that exist and are not empty."""
        return [
            SurfaceIndex(position)
            for position, surface in enumerate(self._surfaces)
            if not surface.is_empty()
        ]

    def remove_surface(self, surface_index: SurfaceIndex) -> Surface | None:
        """Remove a surface and return it, or None if it did not exist.

        Raises ValueError when asked to remove the main surface.
        """
        if surface_index.is_main():
            raise ValueError("the main surface cannot be removed")
        position = int(surface_index)
        if position >= len(self._surfaces):
            return None
        self._focused_surface = SurfaceIndex.main()
        if position == len(self._surfaces) - 1:
            return self._surfaces.pop()
        removed = self._surfaces[position]
        self._surfaces[position] = Surface.empty()
        return removed

    def set_active_tab(
        self, surface_index: SurfaceIndex, node_index: NodeIndex, tab_index: TabIndex
    ) -> None:
        """Make `tab_index` the active tab of a leaf on a given surface."""
        self[surface_index].set_active_tab(node_index, tab_index)

    def set_focused_node_and_surface(
        self, surface_index: SurfaceIndex, node_index: NodeIndex
    ) -> None:
        """Focus the given leaf; anything that is not a leaf clears the focus."""
        if self.is_surface_valid(surface_index):
            tree = self[surface_index]
            if int(node_index) < len(tree) and tree[node_index].is_leaf():
                self._focused_surface = surface_index
                tree.set_focused_node(node_index)
                return
        self._focused_surface = None

    @staticmethod
    def _destination(destination: Any) -> TabDestination:
        if isinstance(destination, (ToWindow, ToNode, ToEmptySurface)):
            return destination
        if isinstance(destination, SurfaceIndex):
            return ToEmptySurface(destination)
        if isinstance(destination, tuple) and len(destination) == 3:
            return ToNode(*destination)
        raise TypeError(f"not a tab destination: {destination!r}")

    def _take_tab(self, surface: SurfaceIndex, node: NodeIndex, tab: TabIndex) -> Any:
        taken = self[surface][node].remove_tab(tab)
        if taken is None:
            raise ValueError(f"node {node!r} on surface {surface!r} is not a leaf")
        return taken

    def _clean_up(self, surface: SurfaceIndex, node: NodeIndex) -> None:
        tree = self[surface]
        if tree[node].is_leaf() and tree[node].tabs_count() == 0:
            tree.remove_leaf(node)
        if tree.is_empty() and not surface.is_main():
            self.remove_surface(surface)

    def move_tab(
        self,
        src_surface: SurfaceIndex,
        src_node: NodeIndex,
        src_tab: TabIndex,
        destination: Any,
    ) -> None:
        """Move a tab to `destination`.

        `destination` is a ``ToWindow``, ``ToNode`` or ``ToEmptySurface``; a
        ``(surface, node, insert)`` tuple or a bare ``SurfaceIndex`` are
        accepted as shorthands for the latter two.
        """
        target = self._destination(destination)
        if isinstance(target, ToWindow):
            self.detach_tab(src_surface, src_node, src_tab, target.rect)
            return
        if isinstance(target, ToNode):
            if (
                src_surface == target.surface
                and src_node == target.node
                and self[src_surface][src_node].tabs_count() == 1
            ):
                return
            tab = self._take_tab(src_surface, src_node, src_tab)
            insert = target.insert
            if isinstance(insert, InsertSplit):
                self[target.surface].split(target.node, insert.split, 0.5, Node.leaf(tab))
            elif isinstance(insert, InsertAt):
                self[target.surface][target.node].insert_tab(insert.index, tab)
            elif isinstance(insert, InsertAppend):
                self[target.surface][target.node].append_tab(tab)
            else:
                raise TypeError(f"not a tab insertion: {insert!r}")
        else:
            if not self[target.surface].is_empty():
                raise ValueError(f"surface {target.surface!r} is not empty")
            tab = self._take_tab(src_surface, src_node, src_tab)
            self[target.surface] = Tree([tab])
        self._clean_up(src_surface, src_node)

    def detach_tab(
        self,
        src_surface: SurfaceIndex,
        src_node: NodeIndex,
        src_tab: TabIndex,
        window_rect: Rect,
    ) -> SurfaceIndex:
        """Move a tab into a new window placed at `window_rect`; return the window's index."""
        tab = self._take_tab(src_surface, src_node, src_tab)
        surface_index = self.add_window([tab])
        state = self.get_window_state(surface_index)
        assert state is not None
        state.set_position(window_rect.min)
        if src_surface.is_main():
            state.set_size(window_rect.size() * 0.8)
        else:
            state.set_size(window_rect.size())
        self._clean_up(src_surface, src_node)
        return surface_index

    def focused_leaf(self) -> tuple[SurfaceIndex, NodeIndex] | None:
        """The surface and node of the focused leaf, or None."""
        surface = self._focused_surface
        if surface is None:
            return None
        leaf = self[surface].focused_leaf()
        return None if leaf is None else (surface, leaf)

    def remove_tab(
        self, surface_index: SurfaceIndex, node_index: NodeIndex, tab_index: TabIndex
    ) -> Any | None:
        """Remove and return a tab; a window left without nodes is removed too."""
        removed = self[surface_index].remove_tab(node_index, tab_index)
        if not surface_index.is_main() and self[surface_index].is_empty():
            self.remove_surface(surface_index)
        return removed

    def split(
        self,
        surface: SurfaceIndex,
        parent: NodeIndex,
        split: Split,
        fraction: float,
        new: Node,
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split a node on `surface`, returning the (old, new) node indices."""
        indices = self[surface].split(parent, split, fraction, new)
        self._focused_surface = surface
        return indices

    def add_window(self, tabs: Iterable[Any]) -> SurfaceIndex:
        """Add a window surface holding `tabs`; its index stays fixed for its lifetime."""
        surface = Surface.window(Tree(tabs), WindowState())
        index = self._find_empty_surface_index()
        position = int(index)
        if position < len(self._surfaces):
            self._surfaces[position] = surface
        else:
            self._surfaces.append(surface)
        return index

    def _find_empty_surface_index(self) -> SurfaceIndex:
        position = next(
            (
                position
                for position, surface in enumerate(self._surfaces)
                if position > 0 and surface.is_empty()
            ),
            len(self._surfaces),
        )
        return SurfaceIndex(position)

    def push_to_focused_leaf(self, tab: Any) -> None:
        """Add `tab` to the focused leaf, falling back to the main surface."""
        surface = self._focused_surface
        if surface is None:
            surface = SurfaceIndex.main()
        self[surface].push_to_focused_leaf(tab)

    def push_to_first_leaf(self, tab: Any) -> None:
        """Add `tab` to the first leaf of the main surface."""
        self[SurfaceIndex.main()].push_to_first_leaf(tab)

    def surfaces_count(self) -> int:
        """Number of surface slots, empty ones included."""
        return len(self._surfaces)

    def iter_surfaces(self) -> Iterator[Surface]:
        """All surfaces in index order."""
        return iter(self._surfaces)

    def iter_all_nodes(self) -> Iterator[tuple[SurfaceIndex, Node]]:
        """Every node of every surface, with its surface index."""
        for position, surface in enumerate(self._surfaces):
            for node in surface.iter_nodes():
                yield SurfaceIndex(position), node

    def iter_all_tabs(self) -> Iterator[tuple[tuple[SurfaceIndex, NodeIndex], Any]]:
        """Every tab, with the indices of its surface and node."""
        for position, surface in enumerate(self._surfaces):
            for node_index, tab in surface.iter_all_tabs():
                yield (SurfaceIndex(position), node_index), tab

    def filter_map_tabs(self, function: Callable[[Any], Any | None]) -> DockState:
        """A new state with tabs mapped by `function`; tabs mapped to None are dropped.

        Emptied nodes and surfaces are removed.
        """
        surfaces = [
            mapped
            for mapped in (surface.filter_map_tabs(function) for surface in self._surfaces)
            if not mapped.is_empty()
        ]
        return DockState._from_parts(
            surfaces, self._focused_surface, copy.deepcopy(self.translations)
        )

    def map_tabs(self, function: Callable[[Any], Any]) -> DockState:
        """A new state with every tab mapped by `function`."""
        return self.filter_map_tabs(function)

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> DockState:
        """A new state keeping only tabs for which `predicate` holds."""
        return self.filter_map_tabs(lambda tab: tab if predicate(tab) else None)

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> None:
        """Drop tabs for which `predicate` fails, removing emptied nodes and surfaces."""
        for surface in self._surfaces:
            surface.retain_tabs(predicate)
        self._surfaces = [surface for surface in self._surfaces if not surface.is_empty()]

    def find_tab(self, needle_tab: Any) -> tuple[SurfaceIndex, NodeIndex, TabIndex] | None:
        """Location of the first tab equal to `needle_tab` on any surface, or None."""
        for surface_index in self.valid_surface_indices():
            found = self[surface_index].find_tab(needle_tab)
            if found is not None:
                return surface_index, found[0], found[1]
        return None

    def find_main_surface_tab(self, needle_tab: Any) -> tuple[NodeIndex, TabIndex] | None:
        """Location of the first tab equal to `needle_tab` on the main surface, or None."""
        return self[SurfaceIndex.main()].find_tab(needle_tab)