"""Images, a sprite atlas and a fixed-metric font for the UI."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from immui.geometry import Color, Rect

_PADDING = 1


@dataclass
class Image:
    """An RGBA8 image."""

    width: int
    height: int
    bytes: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        if len(self.bytes) != self.width * self.height * 4:
            raise ValueError("image data does not match its size")

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> Image:
        """An image of one solid colour."""
        pixel = bytes(int(min(255.0, max(0.0, c * 255.0))) for c in color.as_tuple())
        return cls(width, height, pixel * (width * height))


@dataclass(frozen=True)
class Glyph:
    """Placement metrics of one cached character."""

    sprite: int
    advance: float
    offset_x: int
    offset_y: int


@dataclass(frozen=True)
class TextDimensions:
    width: float
    height: float
    offset_y: float


class Atlas:
    """Packs sprites into one growing texture, row by row."""

    def __init__(self, width: int = 512, height: int = 512) -> None:
        self.width = width
        self.height = height
        self._sprites: dict[int, tuple[Rect, Image]] = {}
        self._cursor_x = 0
        self._cursor_y = 0
        self._row_height = 0
        self._next_id = 1

    def new_unique_id(self) -> int:
        """An id that is not used by any cached sprite."""
        while self._next_id in self._sprites:
            self._next_id += 1
        unique = self._next_id
        self._next_id += 1
        return unique

    def cache_sprite(self, key: int, image: Image) -> None:
        """Store an image under the given key, replacing any earlier one."""
        while image.width > self.width:
            self.width *= 2
        if self._cursor_x + image.width > self.width:
            self._cursor_x = 0
            self._cursor_y += self._row_height
            self._row_height = 0
        while self._cursor_y + image.height > self.height:
            self.height *= 2
        rect = Rect(float(self._cursor_x), float(self._cursor_y), float(image.width), float(image.height))
        self._cursor_x += image.width + _PADDING
        self._row_height = max(self._row_height, image.height + _PADDING)
        self._sprites[key] = (rect, image)

    def get(self, key: int) -> Rect | None:
        """The pixel rectangle of a sprite."""
        entry = self._sprites.get(key)
        return replace(entry[0]) if entry else None

    def get_uv_rect(self, key: int) -> Rect | None:
        """The rectangle of a sprite in texture coordinates."""
        entry = self._sprites.get(key)
        if entry is None:
            return None
        rect = entry[0]
        return Rect(rect.x / self.width, rect.y / self.height, rect.w / self.width, rect.h / self.height)


def _box_image(width: int, height: int, visible: bool) -> Image:
    data = bytearray(width * height * 4)
    if visible:
        for row in range(height):
            for column in range(width):
                if row in (0, height - 1) or column in (0, width - 1):
                    start = (row * width + column) * 4
                    data[start:start + 4] = b"\xff\xff\xff\xff"
    return Image(width, height, bytes(data))


class Font:
    """A monospaced font with fixed metrics; glyphs are drawn as outline boxes."""

    def __init__(self, atlas: Atlas, width_ratio: float = 0.5, ascent_ratio: float = 0.8) -> None:
        if not 0.0 < ascent_ratio <= 1.0:
            raise ValueError("ascent_ratio must be in (0, 1]")
        if width_ratio <= 0.0:
            raise ValueError("width_ratio must be positive")
        self.atlas = atlas
        self.width_ratio = width_ratio
        self.ascent_ratio = ascent_ratio
        self._glyphs: dict[tuple[str, int], Glyph] = {}

    def ascent(self, font_size: float) -> float:
        return font_size * self.ascent_ratio

    def descent(self, font_size: float) -> float:
        return -font_size * (1.0 - self.ascent_ratio)

    def get(self, character: str, font_size: int) -> Glyph | None:
        return self._glyphs.get((character, font_size))

    def cache_glyph(self, character: str, font_size: int) -> Glyph:
        """Make sure the glyph is in the atlas and return its metrics."""
        key = (character, font_size)
        glyph = self._glyphs.get(key)
        if glyph is not None:
            return glyph
        width = max(1, math.ceil(font_size * self.width_ratio))
        height = max(1, round(self.ascent(font_size) - self.descent(font_size)))
        sprite = self.atlas.new_unique_id()
        self.atlas.cache_sprite(sprite, _box_image(width, height, not character.isspace()))
        glyph = Glyph(sprite=sprite, advance=float(width), offset_x=0, offset_y=round(self.descent(font_size)))
        self._glyphs[key] = glyph
        return glyph

    def measure_text(self, text: str, font_size: int) -> TextDimensions:
        """Width, height and height above the baseline of a line of text."""
        glyphs = [self.cache_glyph(character, font_size) for character in text]
        if not glyphs:
            return TextDimensions(0.0, 0.0, 0.0)
        tops = []
        bottoms = []
        for glyph in glyphs:
            rect = self.atlas.get(glyph.sprite)
            bottoms.append(float(glyph.offset_y))
            tops.append(glyph.offset_y + rect.h)
        max_y = max(tops)
        return TextDimensions(sum(g.advance for g in glyphs), max_y - min(bottoms), max_y)