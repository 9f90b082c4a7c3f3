import pytest

from immui.commands import (
    Clip,
    DrawCharacter,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    ElementState,
    LabelParams,
)
from immui.geometry import Color, Rect, RectOffset, Vec2
from immui.painter import Painter
from immui.resources import Atlas, Font, Image
from immui.style import Style, StyleBuilder

WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)


@pytest.fixture
def atlas():
    atlas = Atlas()
    atlas.cache_sprite(0, Image.filled(1, 1, WHITE))
    return atlas


@pytest.fixture
def font(atlas):
    return Font(atlas)


@pytest.fixture
def painter(atlas):
    return Painter(atlas)


def _of(painter, kind):
    return [c for c in painter.commands if isinstance(c, kind)]


def test_draw_rect_records_command(painter, atlas):
    painter.draw_rect(Rect(1, 2, 3, 4), RED, WHITE)
    (cmd,) = painter.commands
    assert isinstance(cmd, DrawRect)
    assert cmd.rect == Rect(1, 2, 3, 4)
    assert cmd.source == atlas.get_uv_rect(0)
    assert cmd.stroke == RED
    assert cmd.fill == WHITE


def test_draw_rect_without_white_sprite_fails():
    painter = Painter(Atlas())
    with pytest.raises(LookupError):
        painter.draw_rect(Rect(0, 0, 1, 1), None, RED)


def test_clear_resets_state(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_rect(Rect(0, 0, 5, 5), None, RED)
    painter.clear()
    assert painter.commands == []
    assert painter.clipping_zone is None


def test_clip_intersects_with_previous_zone(painter):
    painter.clip(Rect(0, 0, 100, 100))
    painter.clip(Rect(50, 50, 100, 100))
    assert painter.clipping_zone == Rect(50, 50, 50, 50)
    assert painter.commands[-1] == Clip(Rect(50, 50, 50, 50))


def test_clip_disjoint_uses_new_rect(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.clip(Rect(500, 500, 10, 10))
    assert painter.clipping_zone == Rect(500, 500, 10, 10)


def test_clip_none_removes_clipping(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.clip(None)
    assert painter.clipping_zone is None
    assert painter.commands[-1] == Clip(None)


def test_rect_outside_clip_is_skipped(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_rect(Rect(100, 100, 5, 5), None, RED)
    painter.draw_raw_texture(Rect(100, 100, 5, 5), "tex")
    assert _of(painter, DrawRect) == []
    assert _of(painter, DrawRawTexture) == []


def test_raw_texture_recorded(painter):
    painter.draw_raw_texture(Rect(0, 0, 5, 5), "tex")
    assert painter.commands == [DrawRawTexture(Rect(0, 0, 5, 5), "tex")]


def test_line_clipping_checks_endpoints(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_line(Vec2(100, 100), Vec2(200, 200), RED)
    assert _of(painter, DrawLine) == []
    painter.draw_line(Vec2(5, 5), Vec2(200, 200), RED)
    assert len(_of(painter, DrawLine)) == 1


def test_triangle_clipping_checks_vertices(painter):
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_triangle(Vec2(20, 20), Vec2(30, 20), Vec2(20, 30), RED)
    assert _of(painter, DrawTriangle) == []
    painter.draw_triangle(Vec2(5, 5), Vec2(30, 20), Vec2(20, 30), RED)
    assert _of(painter, DrawTriangle) == [DrawTriangle(Vec2(5, 5), Vec2(30, 20), Vec2(20, 30), RED)]


def test_draw_sprite_scales_margins_to_uv(painter, atlas):
    atlas.cache_sprite(7, Image.filled(8, 8, WHITE))
    margin = RectOffset(4, 4, 2, 2)
    painter.draw_sprite(Rect(0, 0, 40, 40), 7, RED, margin)
    (cmd,) = painter.commands
    assert isinstance(cmd, DrawSprite)
    assert cmd.offsets == margin
    assert cmd.offsets_uv.left == pytest.approx(4 / atlas.width)
    assert cmd.offsets_uv.top == pytest.approx(2 / atlas.height)
    assert cmd.source == atlas.get_uv_rect(7)


def test_draw_sprite_unknown_sprite_fails(painter):
    with pytest.raises(LookupError):
        painter.draw_sprite(Rect(0, 0, 4, 4), 99, RED, None)


def test_character_advance(painter, font):
    assert painter.character_advance("q", font, 16) == 0.0
    glyph = font.cache_glyph("q", 16)
    assert painter.character_advance("q", font, 16) == glyph.advance


def test_draw_character(painter, font, atlas):
    advance = painter.draw_character("a", Vec2(10, 20), RED, font, 16)
    glyph = font.get("a", 16)
    assert advance == glyph.advance
    (cmd,) = painter.commands
    assert isinstance(cmd, DrawCharacter)
    sprite = atlas.get(glyph.sprite)
    assert (cmd.dest.w, cmd.dest.h) == (sprite.w, sprite.h)
    assert cmd.dest.x == 10 + glyph.offset_x
    assert cmd.source == atlas.get_uv_rect(glyph.sprite)
    assert cmd.color == RED


def test_draw_character_clipped_still_advances(painter, font):
    painter.clip(Rect(1000, 1000, 10, 10))
    advance = painter.draw_character("a", Vec2(0, 0), RED, font, 16)
    assert advance == font.get("a", 16).advance
    assert _of(painter, DrawCharacter) == []


def test_draw_label_places_characters_in_a_row(painter, font):
    painter.draw_label("abc", Vec2(0, 20), None, font, 16)
    chars = _of(painter, DrawCharacter)
    assert len(chars) == 3
    advance = font.get("a", 16).advance
    assert chars[1].dest.x - chars[0].dest.x == pytest.approx(advance)
    assert all(c.color == LabelParams().color for c in chars)


def test_draw_label_far_from_clip_is_skipped(painter, font):
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_label("abc", Vec2(1000, 1000), RED, font, 16)
    assert _of(painter, DrawCharacter) == []


def test_element_size_adds_margins(painter, font):
    plain = Style(font)
    padded = Style(font, margin=RectOffset(1, 2, 3, 4), background_margin=RectOffset(5, 6, 7, 8))
    text_width = font.measure_text("hi", 16).width
    assert painter.element_size(plain, "hi") == Vec2(text_width, 16.0)
    delta = painter.element_size(padded, "hi") - painter.element_size(plain, "hi")
    assert delta == Vec2(1 + 2 + 5 + 6, 3 + 4 + 7 + 8)


def test_background_without_sprite_is_rect(painter, font):
    style = Style(font, color_hovered=RED)
    state = ElementState(focused=True, hovered=True)
    painter.draw_element_background(style, Vec2(1, 2), Vec2(3, 4), state)
    (cmd,) = painter.commands
    assert isinstance(cmd, DrawRect)
    assert cmd.fill == RED
    assert cmd.rect == Rect(1, 2, 3, 4)


def test_background_with_sprite(painter, font, atlas):
    style = StyleBuilder(font, atlas).background(Image.filled(3, 3, WHITE)).build()
    painter.draw_element_background(style, Vec2(0, 0), Vec2(30, 30), ElementState(focused=True))
    (cmd,) = painter.commands
    assert isinstance(cmd, DrawSprite)
    assert cmd.source == atlas.get_uv_rect(style.background)


def test_element_label_uses_text_color(painter, font):
    style = Style(font, text_color=RED)
    painter.draw_element_label(style, Vec2(0, 0), "hey", ElementState(focused=True))
    chars = _of(painter, DrawCharacter)
    assert len(chars) == 3
    assert {c.color for c in chars} == {RED}