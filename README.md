# dockstate

A toolkit-independent model of a docking layout. Tabs are arranged in binary
split trees, held on a main surface and any number of floating window
surfaces. The package keeps layout, focus and tab state consistent as tabs are
split, moved, detached and removed.

## Install

```
pip install dockstate
```

Tests need the `test` extra:

```
pip install "dockstate[test]"
pytest
```

## Concepts

- `dockstate.dock_state.DockState` holds a list of `Surface`s
  (`dockstate.surface`). Surface 0 is always the main one; the others are
  floating windows, each carrying a `WindowState`. Removed windows leave an
  empty slot that `add_window` reuses.
- Each non-empty surface has a `Tree` (`dockstate.tree`): a binary tree of
  `Node`s stored in a flat list. The root is at index 0 and node *n* has its
  children at *2n+1* and *2n+2*.
- A `Node` (`dockstate.node`) is empty, a leaf holding tabs (with an active tab
  index, rects and scroll amount), or a horizontal/vertical parent with a split
  fraction. Its `kind` is a `NodeKind`.
- `NodeIndex`, `TabIndex` and `SurfaceIndex` (`dockstate.indices`) address
  nodes, tabs and surfaces. They are frozen, ordered and usable as integers.
- `Vec2`, `Pos2` and `Rect` (`dockstate.window_state`) are the small geometry
  types used for window placement and node areas.

Tabs can be any Python object; lookups such as `find_tab` compare them with `==`.

## Example

```python
from dockstate.dock_state import DockState
from dockstate.indices import NodeIndex, SurfaceIndex

dock = DockState(["tab1", "tab2"])
tree = dock.main_surface()          # same as dock[SurfaceIndex.main()]

# Put "tab3" to the left of the root; the old content keeps 30% of the area.
old, new = tree.split_left(NodeIndex.root(), 0.3, ["tab3"])
tree.split_below(old, 0.7, ["tab4"])
tree.split_below(new, 0.5, ["tab5"])

print(list(tree.tabs()))           # every tab, node by node
print(dock.find_tab("tab4"))       # (SurfaceIndex, NodeIndex, TabIndex) or None

# Floating windows
window = dock.add_window(["floating"])
state = dock.get_window_state(window)
state.set_position(...)            # a Pos2
state.set_size(...)                # a Vec2
```

### Moving tabs

`DockState.move_tab(surface, node, tab, destination)` takes one of the
destinations in `dockstate.split`:

- `ToNode(surface, node, insert)` with `InsertSplit(Split.LEFT)` (or
  `RIGHT`, `ABOVE`, `BELOW`), `InsertAt(TabIndex(i))` or `InsertAppend()`;
  a plain `(surface, node, insert)` tuple is accepted too.
- `ToEmptySurface(surface)`, or a bare `SurfaceIndex`.
- `ToWindow(rect)`, which does the same as `detach_tab`. A tab detached from
  the main surface gets a window of 80% of the rect's size.

```python
from dockstate.split import InsertAppend, ToNode

surface, node, _ = dock.find_tab("tab1")
dock.move_tab(*dock.find_tab("tab5"), ToNode(surface, node, InsertAppend()))
```

A leaf left without tabs is removed and its sibling takes the parent's place.
A window surface left with no nodes is removed as well.

### Focus

`set_focused_node_and_surface`, `focused_leaf`, `find_active_focused` and
`push_to_focused_leaf` track and use the focused leaf. A split moves focus to
the new node. Removing a focused leaf moves focus to a nearby leaf.

### Mapping and filtering

`map_tabs`, `filter_tabs` and `filter_map_tabs` return new structures.
`retain_tabs` changes the existing one in place. All of them are available on
`DockState`, `Surface`, `Tree` and `Node`, and all remove emptied nodes and
window surfaces. In `filter_map_tabs`, a tab the function maps to `None` is
dropped.

### Labels

Labels for a UI's context-menu buttons and window tooltips live in
`dockstate.translations` (`Translations`, `TabContextMenuTranslations`,
`WindowTranslations`). English is the default. Replace them through
`DockState.translations` or `DockState.with_translations`.

## Errors

Misuse raises an exception:

- `ValueError`: splitting with a fraction outside 0..1, splitting an empty
  node, appending to a non-leaf, or removing the main surface.
- `IndexError`: a tab index out of range.
- `LookupError`: indexing an empty surface.

## What it does not do

There is no drawing, input handling or drag-and-drop here. A UI layer is
expected to render the trees and call these methods.

Nothing in the package records where a window was last shown or whether it
was dragged. `WindowState.rect()` therefore returns `Rect.NOTHING` and
`dragged()` returns `False`. `take_next_position` and `take_next_size` hand
pending requests to whatever does the rendering.

The package also offers no saving or loading of layouts.