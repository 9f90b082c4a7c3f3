"""Window records kept by the UI, and drag-and-drop states."""

from __future__ import annotations

from dataclasses import dataclass, field

from immui.cursor import Cursor
from immui.geometry import Rect, RectOffset, Vec2
from immui.painter import Painter
from immui.resources import Atlas

_DRAG_PHASES = ("no", "dragging", "dropped")


class Window:
    """A window's geometry, its draw commands, layout cursor and children."""

    def __init__(
        self,
        id: int,
        parent: int | None,
        position: Vec2,
        size: Vec2,
        title_height: float,
        window_margin: RectOffset,
        margin: float,
        movable: bool,
        force_focus: bool,
        atlas: Atlas,
    ) -> None:
        self.id = id
        self.parent = parent
        self.position = position
        self.size = size
        self.title_height = title_height
        self.vertical_scroll_bar_width = 0.0
        self.visible = True
        # Set while the window is being built this frame.
        self.active = False
        # Whether the window was built during the previous frame.
        self.was_active = False
        self.movable = movable
        self.force_focus = force_focus
        self.want_close = False
        self.painter = Painter(atlas)
        self.childs: list[int] = []
        self.cursor = Cursor(
            Rect(
                position.x + window_margin.left,
                position.y + title_height + window_margin.top,
                size.x - window_margin.left - window_margin.right,
                size.y - title_height - window_margin.top - window_margin.bottom,
            ),
            margin,
        )

    def top_level(self) -> bool:
        return self.parent is None

    def full_rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def content_rect(self) -> Rect:
        """The area below the title bar, without the vertical scroll bar."""
        return Rect(
            self.position.x,
            self.position.y + self.title_height,
            self.size.x - self.vertical_scroll_bar_width,
            self.size.y - self.title_height,
        )

    def set_position(self, position: Vec2) -> None:
        self.position = position
        self.cursor.area.x = position.x
        self.cursor.area.y = position.y + self.title_height

    def title_rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.title_height)

    def same_line(self, x: float) -> None:
        """Place the next widget on the current row, at x unless x is 0."""
        self.cursor.next_same_line = x


@dataclass(frozen=True)
class DragState:
    """A press on a draggable item: only clicked, or already being dragged."""

    origin: Vec2
    dragging: bool = False


@dataclass(frozen=True)
class Drag:
    """Outcome of a draggable group this frame.

    phase is "no", "dragging" or "dropped"; position is the mouse position and
    hovered the id of the group under it during the previous frame.
    """

    phase: str = "no"
    position: Vec2 | None = None
    hovered: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.phase not in _DRAG_PHASES:
            raise ValueError(f"unknown drag phase: {self.phase!r}")
        if (self.phase == "no") != (self.position is None):
            raise ValueError("a position is given exactly while dragging or dropped")
        if self.phase == "no" and self.hovered is not None:
            raise ValueError("no hovered target without a drag")