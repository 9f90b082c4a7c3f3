"""Drawing commands recorded by the painter and later turned into meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Union

from immui.geometry import Color, Rect, RectOffset, Vec2

_BUDGET = (10, 10)
_NO_BUDGET = (0, 0)


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget, used to pick its colours and sprites."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


@dataclass(frozen=True)
class DrawCharacter:
    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        return DrawCharacter(self.dest.offset(offset), self.source, self.color)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Upper bound of (vertices, indices) this command adds."""
        return _BUDGET


@dataclass(frozen=True)
class DrawRect:
    rect: Rect
    source: Rect
    fill: Color | None = None
    stroke: Color | None = None

    def offset(self, offset: Vec2) -> DrawRect:
        return DrawRect(self.rect.offset(offset), self.source, self.fill, self.stroke)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _BUDGET


@dataclass(frozen=True)
class DrawSprite:
    rect: Rect
    source: Rect
    color: Color
    offsets: RectOffset | None = None
    offsets_uv: RectOffset | None = None

    def offset(self, offset: Vec2) -> DrawSprite:
        return DrawSprite(
            self.rect.offset(offset), self.source, self.color, self.offsets, self.offsets_uv
        )

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _NO_BUDGET


@dataclass(frozen=True)
class DrawTriangle:
    p0: Vec2
    p1: Vec2
    p2: Vec2
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        return DrawTriangle(self.p0 + offset, self.p1 + offset, self.p2 + offset, self.color)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _BUDGET


@dataclass(frozen=True)
class DrawLine:
    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        return DrawLine(self.start + offset, self.end + offset, self.source, self.color)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _BUDGET


@dataclass(frozen=True)
class DrawRawTexture:
    rect: Rect
    texture: Hashable

    def offset(self, offset: Vec2) -> DrawRawTexture:
        return DrawRawTexture(self.rect.offset(offset), self.texture)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _BUDGET


@dataclass(frozen=True)
class Clip:
    """Change the clipping zone; None removes clipping."""

    rect: Rect | None = None

    def offset(self, offset: Vec2) -> Clip:
        return Clip(None if self.rect is None else self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return _NO_BUDGET


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"


_BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class LabelParams:
    color: Color = _BLACK
    alignment: Alignment = field(default=Alignment.LEFT)

    @classmethod
    def from_color(cls, color: Color | tuple[Color, Alignment] | LabelParams | None) -> LabelParams:
        """Label parameters from a colour, a (colour, alignment) pair, or None for black."""
        if isinstance(color, LabelParams):
            return color
        if color is None:
            return cls()
        if isinstance(color, tuple):
            value, alignment = color
            return cls(value, alignment)
        return cls(color)