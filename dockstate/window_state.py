"""Geometry primitives and the state of a floating window surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional size or offset."""

    x: float
    y: float

    @staticmethod
    def splat(value: float) -> Vec2:
        """A vector with both components set to `value`."""
        return Vec2(value, value)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Pos2:
    """A point in screen coordinates."""

    x: float
    y: float

    ZERO: ClassVar[Pos2]

    def __add__(self, offset: Vec2) -> Pos2:
        return Pos2(self.x + offset.x, self.y + offset.y)


Pos2.ZERO = Pos2(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corners."""

    min: Pos2
    max: Pos2

    NOTHING: ClassVar[Rect]

    @staticmethod
    def from_min_size(min: Pos2, size: Vec2) -> Rect:  # noqa: A002
        """The rectangle with top-left corner `min` and extent `size`."""
        return Rect(min, min + size)

    def size(self) -> Vec2:
        """Width and height of the rectangle."""
        return Vec2(self.max.x - self.min.x, self.max.y - self.min.y)


# An inverted rectangle that contains nothing.
Rect.NOTHING = Rect(Pos2(math.inf, math.inf), Pos2(-math.inf, -math.inf))


@dataclass
class WindowState:
    """State of a windowed surface; also a handle to move and resize it."""

    _screen_rect: Rect | None = field(default=None, init=False)
    _dragged: bool = field(default=False, init=False)
    _next_position: Pos2 | None = field(default=None, init=False)
    _next_size: Vec2 | None = field(default=None, init=False)

    def set_position(self, position: Pos2) -> WindowState:
        """Request the window be moved to `position` on the next frame."""
        self._next_position = position
        return self

    def set_size(self, size: Vec2) -> WindowState:
        """Request the window be resized to `size` on the next frame."""
        self._next_size = size
        return self

    def rect(self) -> Rect:
        """The area this window last occupied, or `Rect.NOTHING` if never shown."""
        return self._screen_rect if self._screen_rect is not None else Rect.NOTHING

    def dragged(self) -> bool:
        """Whether the window was being dragged."""
        return self._dragged

    def take_next_position(self) -> Pos2 | None:
        """Return and clear the pending position."""
        position, self._next_position = self._next_position, None
        return position

    def take_next_size(self) -> Vec2 | None:
        """Return and clear the pending size."""
        size, self._next_size = self._next_size, None
        return size