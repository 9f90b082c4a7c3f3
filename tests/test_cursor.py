import pytest

from immui.cursor import Cursor, Layout, Scroll
from immui.geometry import Rect, Vec2

MARGIN = 2.0


def make_cursor():
    return Cursor(Rect(10.0, 20.0, 200.0, 100.0), MARGIN)


def test_first_vertical_fit_is_at_margin():
    cursor = make_cursor()
    pos = cursor.fit(Vec2(50.0, 10.0), Layout.VERTICAL)
    assert pos == Vec2(cursor.area.x + MARGIN, cursor.area.y + MARGIN)


def test_vertical_fits_stack_down():
    cursor = make_cursor()
    size = Vec2(50.0, 10.0)
    first = cursor.fit(size, Layout.VERTICAL)
    second = cursor.fit(size, Layout.VERTICAL)
    assert second.x == first.x
    assert second.y - first.y == size.y + MARGIN


def test_same_line_places_beside():
    cursor = make_cursor()
    size = Vec2(30.0, 10.0)
    first = cursor.fit(size, Layout.VERTICAL)
    cursor.next_same_line = 0.0
    second = cursor.fit(size, Layout.VERTICAL)
    assert second.y == first.y
    assert second.x == first.x + size.x + MARGIN
    assert cursor.next_same_line is None


def test_horizontal_wraps_when_too_wide():
    cursor = make_cursor()
    size = Vec2(120.0, 10.0)
    first = cursor.fit(size, Layout.HORIZONTAL)
    second = cursor.fit(size, Layout.HORIZONTAL)
    assert second.x == first.x
    assert second.y > first.y


def test_free_layout_uses_point():
    cursor = make_cursor()
    point = Vec2(5.0, 6.0)
    pos = cursor.fit(Vec2(1.0, 1.0), Layout.free(point))
    assert pos == point + Vec2(cursor.area.x, cursor.area.y)


def test_ident_shifts_position():
    cursor = make_cursor()
    cursor.ident = 5.0
    assert cursor.current_position() == Vec2(
        cursor.area.x + MARGIN + 5.0, cursor.area.y + MARGIN
    )


def test_reset_moves_inner_rect_to_previous_frame():
    cursor = make_cursor()
    cursor.fit(Vec2(50.0, 300.0), Layout.VERTICAL)
    grown = cursor.scroll.inner_rect
    cursor.reset()
    assert cursor.scroll.inner_rect_previous_frame == grown
    assert cursor.scroll.inner_rect == Rect(0.0, 0.0, cursor.area.w, cursor.area.h)
    assert (cursor.x, cursor.y) == (MARGIN, MARGIN)


def test_scroll_to_clamps():
    scroll = Scroll(
        rect=Rect(0.0, 0.0, 100.0, 100.0),
        inner_rect=Rect(0.0, 0.0, 100.0, 100.0),
        inner_rect_previous_frame=Rect(0.0, 0.0, 100.0, 300.0),
    )
    scroll.scroll_to(50.0)
    assert scroll.rect.y == 50.0
    scroll.scroll_to(1000.0)
    assert scroll.rect.y == scroll.inner_rect_previous_frame.h - scroll.rect.h
    scroll.scroll_to(-5.0)
    assert scroll.rect.y == 0.0


def test_update_clamps_current_position():
    scroll = Scroll(
        rect=Rect(0.0, 500.0, 100.0, 100.0),
        inner_rect=Rect(0.0, 0.0, 100.0, 100.0),
        inner_rect_previous_frame=Rect(0.0, 0.0, 100.0, 100.0),
    )
    scroll.update()
    assert scroll.rect.y == 0.0


def test_layout_rejects_bad_kind():
    with pytest.raises(ValueError):
        Layout("diagonal")
    with pytest.raises(ValueError):
        Layout("free")