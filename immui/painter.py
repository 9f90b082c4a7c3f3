"""Turns drawing primitives and styles into recorded draw commands."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Hashable

from immui.commands import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    ElementState,
    LabelParams,
)
from immui.geometry import Color, Rect, RectOffset, Vec2
from immui.resources import Atlas, Font, TextDimensions
from immui.style import Style

_WHITE_SPRITE = 0


class Painter:
    """Records the draw commands of one window, honouring its clipping zone."""

    def __init__(self, font_atlas: Atlas) -> None:
        self.font_atlas = font_atlas
        self.commands: list[DrawCommand] = []
        self.clipping_zone: Rect | None = None

    def clear(self) -> None:
        self.commands.clear()
        self.clipping_zone = None

    def _clipped_out(self, rect: Rect) -> bool:
        return self.clipping_zone is not None and not self.clipping_zone.overlaps(rect)

    def _uv_rect(self, sprite: int) -> Rect:
        source = self.font_atlas.get_uv_rect(sprite)
        if source is None:
            raise LookupError(f"sprite {sprite} is not in the atlas")
        return source

    def character_advance(self, character: str, font: Font, font_size: int) -> float:
        """Horizontal distance to the next character, or 0 if the glyph is not cached."""
        glyph = font.get(character, font_size)
        return glyph.advance if glyph is not None else 0.0

    def element_size(self, style: Style, content: str) -> Vec2:
        """Size of a widget showing the given text in the given style."""
        background_margin = style.background_margin or RectOffset()
        margin = style.margin or RectOffset()
        measures = self.label_size(content, None, style.font, style.font_size)
        return Vec2(measures.width, float(style.font_size)) + Vec2(
            margin.left + margin.right + background_margin.left + background_margin.right,
            margin.top + margin.bottom + background_margin.top + background_margin.bottom,
        )

    def draw_element_background(
        self, style: Style, pos: Vec2, size: Vec2, element_state: ElementState
    ) -> None:
        color = style.color(element_state)
        rect = Rect(pos.x, pos.y, size.x, size.y)
        background = style.background_sprite(element_state)
        if background is not None:
            self.draw_sprite(rect, background, color, style.background_margin or RectOffset())
        else:
            self.draw_rect(rect, None, color)

    def draw_element_label(
        self, style: Style, pos: Vec2, label: str, element_state: ElementState
    ) -> None:
        font = style.font
        font_size = style.font_size
        measures = self.label_size(label, None, font, font_size)
        background_margin = style.background_margin or RectOffset()
        margin = style.margin or RectOffset()

        # Truncating keeps odd-height text on whole pixels.
        top = (
            font_size / 2.0
            - math.trunc(measures.height / 2.0)
            + margin.top
            + background_margin.top
        )
        self.draw_label(
            label,
            pos + Vec2(margin.left + background_margin.left, top + measures.offset_y),
            style.text_color,
            font,
            font_size,
        )

    def label_size(
        self, label: str, multiline: float | None, font: Font, font_size: int
    ) -> TextDimensions:
        return font.measure_text(label, font_size)

    def draw_character(
        self, character: str, position: Vec2, color: Color, font: Font, font_size: int
    ) -> float | None:
        """Draw one character; returns the advance to the next one, or None."""
        glyph = font.get(character, font_size)
        if glyph is None:
            glyph = font.cache_glyph(character, font_size)

        sprite_rect = self.font_atlas.get(glyph.sprite)
        if sprite_rect is None:
            return None
        dest = Rect(
            glyph.offset_x + position.x,
            -sprite_rect.h - glyph.offset_y + position.y,
            sprite_rect.w,
            sprite_rect.h,
        )
        if self._clipped_out(dest):
            return glyph.advance

        source = self.font_atlas.get_uv_rect(glyph.sprite)
        if source is None:
            return None
        self.commands.append(DrawCharacter(dest, source, color))
        return glyph.advance

    def draw_label(
        self,
        label: str,
        position: Vec2,
        params: Color | tuple | LabelParams | None,
        font: Font,
        font_size: int,
    ) -> None:
        if self._clipped_out(Rect(position.x - 150.0, position.y - 25.0, 200.0, 50.0)):
            return
        color = LabelParams.from_color(params).color
        total_width = 0.0
        for character in label:
            advance = self.draw_character(
                character, position + Vec2(total_width, 0.0), color, font, font_size
            )
            if advance is not None:
                total_width += advance

    def draw_raw_texture(self, rect: Rect, texture: Hashable) -> None:
        if self._clipped_out(rect):
            return
        self.commands.append(DrawRawTexture(replace(rect), texture))

    def draw_rect(self, rect: Rect, stroke: Color | None, fill: Color | None) -> None:
        if self._clipped_out(rect):
            return
        source = self._uv_rect(_WHITE_SPRITE)
        self.commands.append(DrawRect(replace(rect), source, fill=fill, stroke=stroke))

    def draw_sprite(
        self, rect: Rect, sprite: int, color: Color, margin: RectOffset | None
    ) -> None:
        """Draw an atlas sprite stretched over rect, keeping the margins unscaled."""
        if self._clipped_out(rect):
            return
        source = self._uv_rect(sprite)
        width, height = self.font_atlas.width, self.font_atlas.height
        offsets_uv = None
        if margin is not None:
            offsets_uv = RectOffset(
                left=margin.left / width,
                right=margin.right / width,
                top=margin.top / height,
                bottom=margin.bottom / height,
            )
        self.commands.append(DrawSprite(replace(rect), source, color, margin, offsets_uv))

    def draw_triangle(self, p0: Vec2, p1: Vec2, p2: Vec2, color: Color) -> None:
        clip = self.clipping_zone
        if clip is not None and not any(clip.contains(p) for p in (p0, p1, p2)):
            return
        self.commands.append(DrawTriangle(p0, p1, p2, color))

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        clip = self.clipping_zone
        if clip is not None and not clip.contains(start) and not clip.contains(end):
            return
        source = self._uv_rect(_WHITE_SPRITE)
        self.commands.append(DrawLine(start, end, source, color))

    def clip(self, rect: Rect | None) -> None:
        """Narrow the clipping zone to rect, or remove clipping with None."""
        if rect is None:
            self.clipping_zone = None
        else:
            narrowed = None
            if self.clipping_zone is not None:
                narrowed = self.clipping_zone.intersect(rect)
            self.clipping_zone = narrowed if narrowed is not None else replace(rect)
        zone = None if self.clipping_zone is None else replace(self.clipping_zone)
        self.commands.append(Clip(zone))