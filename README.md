# immui

Building blocks for an immediate mode user interface, in plain Python with no
third-party dependencies. The package has a layout cursor that places widgets,
styles and a default skin, a text editing model with selection and undo, a
painter that records draw commands, and a rasterizer that turns those commands
into triangle meshes that any renderer can draw.

## Installation

```
pip install immui
```

## Modules

- `immui.geometry`: value types `Vec2`, `Rect` (`contains`, `overlaps`,
  `intersect`, `combine_with`, `offset`, `point`, `size`), `RectOffset` and
  `Color` (`Color.from_rgba` takes 0..255 components).
- `immui.cursor`: `Cursor` decides where the next widget goes. `fit(size, layout)`
  reserves room and returns the screen position. `Layout.VERTICAL`,
  `Layout.HORIZONTAL` and `Layout.free(point)` are the layouts. `Scroll` keeps
  the scroll position, clamped to the content of the previous frame.
- `immui.resources`: `Image` (RGBA8, `Image.filled`), `Atlas`, which packs
  sprites row by row and gives their pixel and texture-coordinate rectangles,
  and `Font`. `Font` is a monospaced font with fixed metrics. It draws glyphs as
  outline boxes and does not load font files.
- `immui.style`: `Style` picks colours and background sprites from an
  `ElementState`. `StyleBuilder` builds styles and puts their background images
  into the atlas. `Skin.create(atlas, font)` makes the default skin.
- `immui.commands`: the draw commands (`DrawRect`, `DrawCharacter`,
  `DrawSprite`, `DrawLine`, `DrawTriangle`, `DrawRawTexture`, `Clip`),
  `ElementState` and `LabelParams`.
- `immui.painter`: `Painter` records draw commands for one area. Shapes that lie
  outside its clipping zone are dropped. It also measures and draws styled
  elements and labels.
- `immui.mesh`: `render_command(draw_lists, command)` appends a command's
  vertices and indices to a list of `DrawList` batches. A new batch starts when
  the clipping zone or texture changes, or when a batch is full.
- `immui.editor`: `EditboxState` holds the cursor, selection, click handling
  (double click selects a word, triple click selects a line) and undo/redo of
  one edit box. Methods that change the text take the text and return the new
  text.
- `immui.clipboard`: the `ClipboardObject` interface and the in-memory
  `LocalClipboard`.
- `immui.windowing`: the `Window` record (position, size, title bar, painter,
  cursor, children), plus the `DragState` and `Drag` values.

## Examples

Editing text:

```python
from immui.editor import EditboxState

state = EditboxState()
text = state.insert_string("", "hello world")
state.move_cursor(text, -5, shift=True)
assert state.selected_text(text) == "world"
text = state.delete_selected(text)    # "hello "
text = state.undo(text)               # "hello world"
```

Painting a button and turning it into meshes:

```python
from immui.commands import ElementState
from immui.geometry import Color, Vec2
from immui.mesh import render_command
from immui.painter import Painter
from immui.resources import Atlas, Font, Image
from immui.style import Skin

atlas = Atlas()
atlas.cache_sprite(0, Image.filled(1, 1, Color(1.0, 1.0, 1.0, 1.0)))  # plain white sprite used by rects and lines
font = Font(atlas)
skin = Skin.create(atlas, font)

painter = Painter(atlas)
state = ElementState(focused=True)
painter.draw_element_background(skin.button_style, Vec2(10, 10), Vec2(80, 20), state)
painter.draw_element_label(skin.button_style, Vec2(10, 10), "OK", state)

draw_lists = []
for command in painter.commands:
    render_command(draw_lists, command)
# each DrawList has vertices, indices, clipping_zone and texture
```

## What it does not do

This package has no root UI object. Nothing in it receives mouse or keyboard
events, runs frames, tracks window focus or hands out widget ids. It has no
ready-made widgets such as buttons, labels, windows or groups that place
themselves, either. Programs put these together from the cursor, style, painter
and editor pieces. It does not talk to the GPU: it produces draw lists, and
drawing them is up to the caller.

## Running the tests

```
pip install immui[test]
pytest
```