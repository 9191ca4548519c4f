"""Planar vectors, rectangles and bounded positions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def center(self) -> Vec2:
        """Middle point of the rectangle."""
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class Position:
    """A point with an anchor and the screen bounds it is kept within."""

    def __init__(
        self,
        x: float,
        y: float,
        min_x: float = -1.0,
        max_x: float = -1.0,
        min_y: float = -1.0,
        max_y: float = -1.0,
    ) -> None:
        self.pos = Vec2(float(x), float(y))
        self.anchor_pos = Vec2(float(x), float(y))
        self.bounds = Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def __repr__(self) -> str:
        return f"Position(pos={self.pos!r}, anchor_pos={self.anchor_pos!r}, bounds={self.bounds!r})"

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float) -> None:
        self.pos = Vec2(float(value), self.pos.y)

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float) -> None:
        self.pos = Vec2(self.pos.x, float(value))

    def copy(self) -> Position:
        """Independent copy of this position."""
        clone = Position(0, 0)
        clone.pos = self.pos
        clone.anchor_pos = self.anchor_pos
        clone.bounds = self.bounds
        return clone

    def is_beyond_top(self, offset: float = 0) -> bool:
        return self.pos.y + offset < self.bounds.top

    def is_beyond_bottom(self, offset: float = 0) -> bool:
        return self.pos.y - offset > self.bounds.bottom

    def is_beyond_left(self, offset: float = 0) -> bool:
        return self.pos.x + offset < self.bounds.left

    def is_beyond_right(self, offset: float = 0) -> bool:
        return self.pos.x - offset > self.bounds.right

    def is_beyond_any(self, offset: float = 0) -> bool:
        return (
            self.is_beyond_top(offset)
            or self.is_beyond_bottom(offset)
            or self.is_beyond_left(offset)
            or self.is_beyond_right(offset)
        )

    def is_beyond_limits(
        self,
        left_offset: float,
        right_offset: float,
        top_offset: float,
        bottom_offset: float,
    ) -> bool:
        return (
            self.is_beyond_top(top_offset)
            or self.is_beyond_bottom(bottom_offset)
            or self.is_beyond_left(left_offset)
            or self.is_beyond_right(right_offset)
        )

    def go_to_top_limit(self) -> None:
        self.y = self.bounds.top

    def go_to_bottom_limit(self) -> None:
        self.y = self.bounds.bottom

    def go_to_left_limit(self) -> None:
        self.x = self.bounds.left

    def go_to_right_limit(self) -> None:
        self.x = self.bounds.right