# quadgui

Building blocks for an immediate-mode GUI. They work on plain data and need
no window and no graphics device. They cover widget layout, per-frame input
state, styles, draw commands, batching into triangle meshes, and the editing
state of a text field.

## Modules

- `quadgui.cursor` provides `Vec2`, `Rect`, `Scroll`, `Layout`, `FreeLayout` and
  `Cursor`. `Cursor.fit` reserves space for a widget and returns its screen
  position. Widgets can be placed vertically (`Layout.VERTICAL`), in a row
  that wraps (`Layout.HORIZONTAL`), or at a fixed point (`FreeLayout`).
- `quadgui.input` provides:
  - `KeyCode` and `InputCharacter`.
  - The per-frame `Input` state. It has `mouse_held`, `clicked_down`,
    `clicked_up` and `reset`.
  - `KeyRepeat`, which emulates key auto-repeat after a half-second hold.
  - `Clipboard`, an in-memory clipboard that holds one string.
- `quadgui.style` provides `Color`, `RectOffset`, `ElementState` and `Style`.
  A style gives the body colour for an element state (`color_for`), the text
  colour (`text_color_for`) and the background sprite (`background_sprite`).
  It also gives its combined margins (`border_margin`).
- `quadgui.painter` provides the draw command types `DrawCharacter`,
  `DrawRect`, `DrawSprite`, `DrawTriangle`, `DrawLine`, `DrawRawTexture` and
  `Clip`, together with `estimate_triangles_budget`, `Alignment`,
  `LabelParams` and `Painter`. The `Painter` collects commands and drops any
  that fall outside the current clipping zone.
- `quadgui.mesh` provides `Vertex`, `DrawList` and `render_command`.
  `render_command` turns draw commands into vertex and index lists. It starts
  a new list when the clipping zone or the texture changes, or when a list
  gets full.
- `quadgui.text_editor` provides `EditboxState`, `ClickState` and
  `word_delimiter`. The state covers cursor movement, word and line selection
  from repeated clicks, and undo and redo. The caller owns the text: every
  method that edits it takes the current string and returns the edited one.

## Installing

```
pip install .
```

## Examples

Lay out widgets with a cursor:

```python
from quadgui.cursor import Cursor, Layout, Rect, Vec2

cursor = Cursor(Rect(0, 0, 200, 100), 2.0)
first = cursor.fit(Vec2(50, 20), Layout.VERTICAL)   # Vec2(2.0, 2.0)
second = cursor.fit(Vec2(50, 20), Layout.VERTICAL)  # Vec2(2.0, 24.0)
```

Paint a rectangle and batch it into a mesh:

```python
from quadgui.cursor import Rect
from quadgui.mesh import render_command
from quadgui.painter import Painter
from quadgui.style import Color

painter = Painter(white_source=Rect(0, 0, 1, 1))
painter.draw_rect(Rect(10, 10, 50, 20), fill=Color.from_rgba(200, 200, 200, 255))

draw_lists = []
for command in painter.commands:
    render_command(draw_lists, command)
# draw_lists[0] now holds 4 vertices and 6 indices
```

Edit text with undo:

```python
from quadgui.text_editor import EditboxState

state = EditboxState()
text = state.insert_string("", "hello")
text = state.insert_character(text, "!")
text = state.undo(text)   # "hello"
```

## What the package does not do

The package puts nothing on screen. It opens no window, sends no meshes to a
GPU, loads and measures no fonts, and has no ready-made widgets such as
buttons or windows. It has no map or level loading either. It produces
layout positions, draw commands, vertex and index lists and text-editing
state. Something else has to render them.

## Running the tests

```
pip install .[test]
pytest
```