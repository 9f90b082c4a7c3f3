"""Layout cursor that decides where the next widget is placed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from immui.geometry import Rect, Vec2

_LAYOUT_KINDS = ("vertical", "horizontal", "free")


@dataclass
class Scroll:
    """Scroll position and extents of a scrollable area."""

    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    scroll: Vec2 = field(default_factory=Vec2)
    dragging_x: bool = False
    dragging_y: bool = False
    initial_scroll: Vec2 = field(default_factory=Vec2)

    def scroll_to(self, y: float) -> None:
        """Move the view to y, clamped to the content of the previous frame."""
        previous = self.inner_rect_previous_frame
        self.rect.y = min(max(y, previous.y), previous.h - self.rect.h + previous.y)

    def update(self) -> None:
        """Clamp the current view to the content of the previous frame."""
        self.scroll_to(self.rect.y)


@dataclass(frozen=True)
class Layout:
    """How a widget is placed: below, beside, or at a fixed point."""

    kind: str
    point: Vec2 | None = None

    VERTICAL: ClassVar[Layout]
    HORIZONTAL: ClassVar[Layout]

    def __post_init__(self) -> None:
        if self.kind not in _LAYOUT_KINDS:
            raise ValueError(f"unknown layout kind: {self.kind!r}")
        if (self.kind == "free") != (self.point is not None):
            raise ValueError("a point is given exactly for the free layout")

    @classmethod
    def free(cls, point: Vec2) -> Layout:
        return cls("free", point)


Layout.VERTICAL = Layout("vertical")
Layout.HORIZONTAL = Layout("horizontal")


class Cursor:
    """Placement state of widgets inside a window area."""

    def __init__(self, area: Rect, margin: float) -> None:
        self.margin = margin
        self.x = margin
        self.y = margin
        self.start_x = margin
        self.start_y = margin
        self.ident = 0.0
        self.area = area
        self.next_same_line: float | None = None
        self.max_row_y = 0.0
        self.scroll = Scroll(
            rect=Rect(0.0, 0.0, area.w, area.h),
            inner_rect=Rect(0.0, 0.0, area.w, area.h),
            inner_rect_previous_frame=Rect(0.0, 0.0, area.w, area.h),
        )

    def reset(self) -> None:
        """Start a new frame."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def _to_screen(self, local: Vec2) -> Vec2:
        return local + Vec2(self.area.x, self.area.y) + self.scroll.scroll + Vec2(self.ident, 0.0)

    def current_position(self) -> Vec2:
        return self._to_screen(Vec2(self.x, self.y))

    def fit(self, size: Vec2, layout: Layout) -> Vec2:
        """Reserve room for a widget of the given size and return its screen position."""
        if self.next_same_line is not None:
            x = self.next_same_line
            self.next_same_line = None
            if x != 0.0:
                self.x = x
            layout = Layout.HORIZONTAL

        if layout.kind == "horizontal":
            self.max_row_y = max(self.max_row_y, size.y)
            if not self.x + size.x < self.area.w - self.margin * 2.0:
                self.x = self.margin
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            result = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        elif layout.kind == "vertical":
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            result = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin
        else:
            result = layout.point

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(result.x, result.y, size.x, size.y)
        )
        return self._to_screen(result)