"""Widget styles, a builder for them, and the default skin."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from immui.commands import ElementState
from immui.geometry import Color, RectOffset
from immui.resources import Atlas, Font, Image

_BLACK = Color.from_rgba(0, 0, 0, 255)
_WHITE = Color.from_rgba(255, 255, 255, 255)


def _byte(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


@dataclass
class Style:
    """Colours, sprites, margins and font of one kind of widget."""

    font: Font
    background: int | None = None
    background_hovered: int | None = None
    background_clicked: int | None = None
    color_normal: Color = _WHITE
    color_inactive: Color | None = None
    color_hovered: Color = _WHITE
    color_clicked: Color = _WHITE
    color_selected: Color = _WHITE
    color_selected_hovered: Color = _WHITE
    # Margins of the background image; that part of the sprite is not scaled.
    background_margin: RectOffset | None = None
    # Space between the border and the content; does not affect textures.
    margin: RectOffset | None = None
    text_color: Color = _BLACK
    font_size: int = 16

    def border_margin(self) -> RectOffset:
        """Background margin and content margin added together."""
        outer = self.background_margin or RectOffset()
        inner = self.margin or RectOffset()
        return RectOffset(
            left=outer.left + inner.left,
            right=outer.right + inner.right,
            top=outer.top + inner.top,
            bottom=outer.bottom + inner.bottom,
        )

    def color(self, element_state: ElementState) -> Color:
        """The colour for a widget in the given state."""
        if not element_state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            base = self.color_normal
            return Color.from_rgba(
                _byte(base.r * 255.0),
                _byte(base.g * 255.0),
                _byte(base.b * 255.0),
                _byte(base.a * 255.0 * 0.8),
            )
        if element_state.clicked:
            return self.color_clicked
        if element_state.selected and element_state.hovered:
            return self.color_selected_hovered
        if element_state.selected:
            return self.color_selected
        if element_state.hovered:
            return self.color_hovered
        return self.color_normal

    def background_sprite(self, element_state: ElementState) -> int | None:
        """The atlas sprite for the background in the given state, if any."""
        if element_state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if element_state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background


class StyleBuilder:
    """Builds a Style; every setter returns a new builder."""

    def __init__(self, font: Font, atlas: Atlas) -> None:
        self._atlas = atlas
        self._settings: dict[str, object] = {
            "font": font,
            "font_size": 16,
            "text_color": _BLACK,
            "background": None,
            "background_margin": None,
            "margin": None,
            "background_hovered": None,
            "background_clicked": None,
            "color_normal": _WHITE,
            "color_inactive": None,
            "color_hovered": _WHITE,
            "color_selected": _WHITE,
            "color_selected_hovered": _WHITE,
            "color_clicked": _WHITE,
        }

    def _with(self, **changes: object) -> StyleBuilder:
        builder = copy.copy(self)
        builder._settings = {**self._settings, **changes}
        return builder

    def font(self, font: Font) -> StyleBuilder:
        return self._with(font=font)

    def background(self, background: Image) -> StyleBuilder:
        return self._with(background=background)

    def margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(margin=margin)

    def background_margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(background_margin=margin)

    def background_hovered(self, background_hovered: Image) -> StyleBuilder:
        return self._with(background_hovered=background_hovered)

    def background_clicked(self, background_clicked: Image) -> StyleBuilder:
        return self._with(background_clicked=background_clicked)

    def text_color(self, color: Color) -> StyleBuilder:
        return self._with(text_color=color)

    def font_size(self, font_size: int) -> StyleBuilder:
        if not 0 <= font_size <= 0xFFFF:
            raise ValueError("font size must fit in 16 bits")
        return self._with(font_size=font_size)

    def color(self, color: Color) -> StyleBuilder:
        return self._with(color_normal=color)

    def color_hovered(self, color_hovered: Color) -> StyleBuilder:
        return self._with(color_hovered=color_hovered)

    def color_clicked(self, color_clicked: Color) -> StyleBuilder:
        return self._with(color_clicked=color_clicked)

    def color_selected(self, color_selected: Color) -> StyleBuilder:
        return self._with(color_selected=color_selected)

    def color_selected_hovered(self, color_selected_hovered: Color) -> StyleBuilder:
        return self._with(color_selected_hovered=color_selected_hovered)

    def color_inactive(self, color_inactive: Color) -> StyleBuilder:
        return self._with(color_inactive=color_inactive)

    def _cache(self, image: Image | None) -> int | None:
        if image is None:
            return None
        sprite = self._atlas.new_unique_id()
        self._atlas.cache_sprite(sprite, image)
        return sprite

    def build(self) -> Style:
        """Put the background images into the atlas and make the style."""
        settings = dict(self._settings)
        for key in ("background", "background_hovered", "background_clicked"):
            settings[key] = self._cache(settings[key])
        return Style(**settings)


_WINDOW_BACKGROUND = bytes(
    [68, 68, 68, 255] * 4 + [238, 238, 238, 255] + [68, 68, 68, 255] * 4
)


@dataclass
class Skin:
    """The styles of all widgets plus shared layout metrics."""

    label_style: Style
    button_style: Style
    tabbar_style: Style
    window_style: Style
    editbox_style: Style
    window_titlebar_style: Style
    scrollbar_style: Style
    scrollbar_handle_style: Style
    checkbox_style: Style
    group_style: Style
    margin: float = 2.0
    title_height: float = 14.0
    scroll_width: float = 10.0
    scroll_multiplier: float = 3.0
    extra: dict = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, atlas: Atlas, font: Font) -> Skin:
        """The default skin."""
        rgba = Color.from_rgba
        margin = RectOffset(2.0, 2.0, 2.0, 2.0)
        return cls(
            label_style=Style(font, margin=margin, text_color=_BLACK),
            button_style=Style(
                font,
                margin=margin,
                color_normal=rgba(204, 204, 204, 235),
                color_clicked=rgba(187, 187, 187, 255),
                color_hovered=rgba(170, 170, 170, 235),
                text_color=_BLACK,
            ),
            tabbar_style=Style(
                font,
                margin=margin,
                color_normal=rgba(204, 204, 204, 235),
                color_clicked=rgba(187, 187, 187, 255),
                color_hovered=rgba(170, 170, 170, 235),
                color_selected=rgba(240, 240, 240, 235),
                text_color=_BLACK,
            ),
            window_style=StyleBuilder(font, atlas)
            .background_margin(RectOffset(1.0, 1.0, 1.0, 1.0))
            .color_inactive(rgba(238, 238, 238, 128))
            .text_color(_BLACK)
            .background(Image(3, 3, _WINDOW_BACKGROUND))
            .build(),
            window_titlebar_style=Style(
                font,
                color_normal=rgba(68, 68, 68, 255),
                color_inactive=rgba(102, 102, 102, 127),
                text_color=_BLACK,
            ),
            scrollbar_style=Style(font, color_normal=rgba(68, 68, 68, 255)),
            editbox_style=Style(
                font, text_color=_BLACK, color_selected=rgba(200, 200, 200, 255)
            ),
            scrollbar_handle_style=Style(
                font,
                color_normal=rgba(204, 204, 204, 235),
                color_inactive=rgba(204, 204, 204, 128),
                color_hovered=rgba(180, 180, 180, 235),
                color_clicked=rgba(170, 170, 170, 235),
            ),
            checkbox_style=Style(
                font,
                text_color=_BLACK,
                font_size=16,
                color_normal=rgba(200, 200, 200, 255),
                color_hovered=rgba(210, 210, 210, 255),
                color_clicked=rgba(150, 150, 150, 255),
                color_selected=rgba(128, 128, 128, 255),
                color_selected_hovered=rgba(140, 140, 140, 255),
            ),
            group_style=Style(
                font,
                color_normal=rgba(34, 34, 34, 68),
                color_hovered=rgba(34, 153, 34, 68),
                color_selected=rgba(34, 34, 255, 255),
                color_selected_hovered=rgba(55, 55, 55, 68),
            ),
            margin=2.0,
            title_height=14.0,
            scroll_width=10.0,
            scroll_multiplier=3.0,
        )