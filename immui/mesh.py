"""Turning draw commands into triangle meshes grouped in draw lists."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, Iterable

from immui.commands import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
)
from immui.geometry import Color, Rect, RectOffset, Vec2

MAX_VERTICES = 8000
MAX_INDICES = 4000
_F32_EPSILON = 1.1920929e-07
_U16 = 0xFFFF


@dataclass(frozen=True)
class Vertex:
    pos: tuple[float, float, float]
    uv: tuple[float, float]
    color: tuple[float, float, float, float]


def _vertex(x: float, y: float, u: float, v: float, color: Color) -> Vertex:
    return Vertex((x, y, 0.0), (u, v), color.as_tuple())


@dataclass
class DrawList:
    """A batch of triangles sharing one clipping zone and texture."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Rect | None = None
    texture: Hashable | None = None

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def _append(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> None:
        base = len(self.vertices)
        self.vertices.extend(vertices)
        self.indices.extend((index + base) & _U16 for index in indices)

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """A one pixel wide outline of the rectangle."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_sprite(
        self, rect: Rect, src: Rect, offsets: RectOffset, uv_offsets: RectOffset, color: Color
    ) -> None:
        """A nine-slice sprite: the margins keep their size while the middle stretches."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        xs = (x, x + offsets.left, x + w - offsets.right, x + w)
        ys = (y, y + offsets.top, y + h - offsets.top, y + h)
        us = (src.x, src.x + uv_offsets.left, src.x + src.w - uv_offsets.right, src.x + src.w)
        vs = (src.y, src.y + uv_offsets.top, src.y + src.h - uv_offsets.bottom, src.y + src.h)

        vertices = [
            _vertex(vx, vy, u, v, color)
            for vx, u in zip(xs, us)
            for vy, v in zip(ys, vs)
        ]
        indices = []
        for row in range(3):
            for column in range(3):
                top_left = row * 4 + column
                below = (row + 1) * 4 + column
                indices += [top_left, top_left + 1, below, top_left + 1, below, below + 1]
        self._append(vertices, indices)

    def draw_rectangle(self, rect: Rect, src: Rect, color: Color) -> None:
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = (
            _vertex(x, y, src.x, src.y, color),
            _vertex(x + w, y, src.x + src.w, src.y, color),
            _vertex(x + w, y + h, src.x + src.w, src.y + src.h, color),
            _vertex(x, y + h, src.x, src.y + src.h, color),
        )
        self._append(vertices, (0, 1, 2, 0, 2, 3))

    def draw_triangle(self, p0: Vec2, p1: Vec2, p2: Vec2, color: Color) -> None:
        vertices = (
            _vertex(p0.x, p0.y, 0.0, 0.0, color),
            _vertex(p1.x, p1.y, 0.0, 0.0, color),
            _vertex(p2.x, p2.y, 0.0, 0.0, color),
        )
        self._append(vertices, (0, 1, 2))

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """A line as a quad of the given thickness; degenerate lines are skipped."""
        nx = -(y2 - y1)
        ny = x2 - x1
        tlen = math.hypot(nx, ny) / (thickness * 0.5)
        if tlen < _F32_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen
        u, v = source.x, source.y
        vertices = (
            _vertex(x1 + tx, y1 + ty, u, v, color),
            _vertex(x1 - tx, y1 - ty, u, v, color),
            _vertex(x2 + tx, y2 + ty, u, v, color),
            _vertex(x2 - tx, y2 - ty, u, v, color),
        )
        self._append(vertices, (0, 1, 2, 2, 1, 3))


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())
    last = draw_lists[-1]

    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture != command.texture:
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone, texture=command.texture))
    else:
        vertices, indices = command.estimate_triangles_budget()
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))
    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    """Add a command's geometry to the batches, starting a new one when needed.

    Returns the draw list the command went into.
    """
    target = _active_draw_list(draw_lists, command)

    if isinstance(command, Clip):
        target.clipping_zone = command.rect
    elif isinstance(command, DrawRect):
        if command.fill is not None:
            target.draw_rectangle(command.rect, command.source, command.fill)
        if command.stroke is not None:
            target.draw_rectangle_lines(command.rect, command.source, command.stroke)
    elif isinstance(command, DrawSprite):
        target.draw_sprite(
            command.rect,
            command.source,
            command.offsets or RectOffset(),
            command.offsets_uv or RectOffset(),
            command.color,
        )
    elif isinstance(command, DrawLine):
        target.draw_line(
            command.start.x,
            command.start.y,
            command.end.x,
            command.end.y,
            1.0,
            command.source,
            command.color,
        )
    elif isinstance(command, DrawCharacter):
        target.draw_rectangle(command.dest, command.source, command.color)
    elif isinstance(command, DrawRawTexture):
        target.draw_rectangle(
            command.rect, Rect(0.0, 0.0, 1.0, 1.0), Color(1.0, 1.0, 1.0, 1.0)
        )
    elif isinstance(command, DrawTriangle):
        target.draw_triangle(command.p0, command.p1, command.p2, command.color)
    else:
        raise TypeError(f"unknown draw command: {type(command).__name__}")
    return target