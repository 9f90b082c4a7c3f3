"""Small value types for 2D geometry and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

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

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles touch or intersect."""
        return (
            self.x <= other.right
            and self.right >= other.x
            and self.y <= other.bottom
            and self.bottom >= other.y
        )

    def intersect(self, other: Rect) -> Rect | None:
        """The common part of two rectangles, or None if they are apart."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def combine_with(self, other: Rect) -> Rect:
        """The smallest rectangle holding both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(x, y, max(self.right, other.right) - x, max(self.bottom, other.bottom) - y)

    def offset(self, offset: Vec2) -> Rect:
        """A copy moved by the given offset."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)

    def point(self) -> Vec2:
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        return Vec2(self.w, self.h)


@dataclass(frozen=True)
class RectOffset:
    """Distances from each edge of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 0..255 byte components."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)