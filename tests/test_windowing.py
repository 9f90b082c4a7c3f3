import pytest

from immui.geometry import Rect, RectOffset, Vec2
from immui.resources import Atlas
from immui.windowing import Drag, DragState, Window


def make_window(parent=None, title_height=14.0, margin=RectOffset(1.0, 1.0, 1.0, 1.0)):
    return Window(
        7,
        parent,
        Vec2(10.0, 20.0),
        Vec2(200.0, 100.0),
        title_height,
        margin,
        2.0,
        True,
        False,
        Atlas(),
    )


def test_full_rect_matches_position_and_size():
    window = make_window()
    assert window.full_rect() == Rect(10.0, 20.0, 200.0, 100.0)


def test_top_level_depends_on_parent():
    assert make_window().top_level() is True
    assert make_window(parent=3).top_level() is False


def test_title_rect_has_title_height():
    window = make_window(title_height=14.0)
    title = window.title_rect()
    assert title.h == 14.0
    assert title.point() == window.full_rect().point()
    assert title.w == window.full_rect().w


def test_content_rect_starts_below_title():
    window = make_window(title_height=14.0)
    content = window.content_rect()
    full = window.full_rect()
    assert content.y - full.y == window.title_height
    assert content.bottom == full.bottom


def test_content_rect_excludes_scroll_bar():
    window = make_window()
    before = window.content_rect().w
    window.vertical_scroll_bar_width = 10.0
    assert before - window.content_rect().w == 10.0


def test_cursor_area_inside_margins():
    window = make_window(margin=RectOffset(0.0, 0.0, 0.0, 0.0), title_height=0.0)
    assert window.cursor.area == window.full_rect()


def test_set_position_moves_cursor_area():
    window = make_window(title_height=14.0)
    window.set_position(Vec2(50.0, 60.0))
    assert window.position == Vec2(50.0, 60.0)
    assert window.cursor.area.x == 50.0
    assert window.cursor.area.y - 60.0 == window.title_height


def test_same_line_sets_cursor():
    window = make_window()
    window.same_line(30.0)
    assert window.cursor.next_same_line == 30.0


def test_new_window_flags():
    window = make_window()
    assert (window.active, window.was_active, window.want_close) == (False, False, False)
    assert window.childs == []
    assert window.painter.commands == []


def test_drag_state_defaults_to_clicked():
    state = DragState(Vec2(1.0, 2.0))
    assert state.dragging is False
    assert DragState(Vec2(1.0, 2.0), dragging=True).origin == Vec2(1.0, 2.0)


def test_drag_default_is_no_drag():
    drag = Drag()
    assert drag.phase == "no"
    assert drag.position is None


def test_drag_dropped_keeps_target():
    drag = Drag("dropped", Vec2(3.0, 4.0), 9)
    assert (drag.phase, drag.position, drag.hovered) == ("dropped", Vec2(3.0, 4.0), 9)


def test_drag_rejects_unknown_phase():
    with pytest.raises(ValueError):
        Drag("flying", Vec2(0.0, 0.0))


def test_drag_requires_position_while_dragging():
    with pytest.raises(ValueError):
        Drag("dragging")
    with pytest.raises(ValueError):
        Drag("no", Vec2(0.0, 0.0))