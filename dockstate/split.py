"""Split directions and descriptions of where a moved tab should go."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .indices import NodeIndex, SurfaceIndex, TabIndex
from .window_state import Rect


class Split(enum.Enum):
    """Direction of a new node relative to the node being split."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    def is_top_bottom(self) -> bool:
        """Whether the split stacks nodes vertically."""
        return self in (Split.ABOVE, Split.BELOW)

    def is_left_right(self) -> bool:
        """Whether the split places nodes side by side."""
        return self in (Split.LEFT, Split.RIGHT)


@dataclass(frozen=True)
class InsertSplit:
    """Split the target node in the given direction."""

    split: Split


@dataclass(frozen=True)
class InsertAt:
    """Insert the tab at the given position in the target node."""

    index: TabIndex


@dataclass(frozen=True)
class InsertAppend:
    """Append the tab to the end of the target node."""


TabInsert = Union[InsertSplit, InsertAt, InsertAppend]


@dataclass(frozen=True)
class ToWindow:
    """Move the tab into a new window occupying `rect`."""

    rect: Rect

    def is_window(self) -> bool:
        return True


@dataclass(frozen=True)
class ToNode:
    """Move the tab into an existing node."""

    surface: SurfaceIndex
    node: NodeIndex
    insert: TabInsert

    def is_window(self) -> bool:
        return False


@dataclass(frozen=True)
class ToEmptySurface:
    """Move the tab onto a surface whose tree is empty."""

    surface: SurfaceIndex

    def is_window(self) -> bool:
        return False


TabDestination = Union[ToWindow, ToNode, ToEmptySurface]