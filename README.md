# widgetkit

A small, backend-agnostic widget toolkit. It provides:

- **Geometry** (`widgetkit.geometry`): frozen dataclasses `Point` (`add`,
  `subtract`, `distance`), `Rect` (`contains`, `center`, `intersects`),
  `Line` (`length`) and `Circle` (`area`).
- **Colours** (`widgetkit.graphics`): `Color` with `r`, `g`, `b`, `a` in the
  range 0.0 to 1.0, the constructors `Color.rgb(r, g, b)` (opaque) and
  `Color.rgba_u8(r, g, b, a)` (8-bit channels; raises `ValueError` outside
  0..255), and the constants `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`,
  `YELLOW`, `MAGENTA`, `CYAN` and `TRANSPARENT`. `Point` and `Rect` are also
  importable from this module.
- **Input events** (`widgetkit.event`): frozen dataclasses for mouse events
  (`MouseMoved`, `MouseButtonPressed`, `MouseButtonReleased`,
  `MouseWheelScrolled`, `MouseEntered`, `MouseLeft`), keyboard events
  (`KeyPressed`, `KeyReleased`, `TextInput`), window events (`WindowResized`,
  `WindowMoved`, `WindowClosed`, `WindowFocused`, `WindowUnfocused`) and touch
  events (`TouchEvent(phase, touches)` holding `Touch(id, position)` values),
  plus the enums `MouseButton`, `KeyboardKey` and `TouchPhase`. A non-standard
  mouse button is `OtherMouseButton(code)` with a code from 0 to 255.
  `TextInput` takes exactly one character; `WindowResized` and `Touch` reject
  negative sizes and ids with `ValueError`.
- **Widgets**: `Button` in `widgetkit.button` and `Label` (with
  `TextAlignment` `LEFT`, `CENTER` or `RIGHT`) in `widgetkit.label`.
- **Layouts** (`widgetkit.layout`): `VBox` and `HBox`, which divide their
  space evenly among their children, minus the `spacing` between them.

widgetkit draws nothing itself. Widgets draw through any object that has the
two methods of the `Renderer` protocol in `widgetkit.button`:
`draw_rect(rect, color)` and `draw_text(text, position, color)`.

## Installation

```
pip install widgetkit
```

To run the test suite:

```
pip install "widgetkit[test]"
pytest
```

## Example

```python
from widgetkit.button import Button
from widgetkit.event import MouseButton, MouseButtonPressed, MouseButtonReleased
from widgetkit.label import Label, TextAlignment
from widgetkit.layout import VBox
from widgetkit.graphics import Rect


class PrintRenderer:
    def draw_rect(self, rect, color):
        print("rect", rect, color)

    def draw_text(self, text, position, color):
        print("text", text, position, color)


clicks = []
ok = Button(Rect(0, 0, 10, 10), "OK")
ok.on_click = lambda: clicks.append("ok")

title = Label(Rect(0, 0, 10, 10), "Hello")
title.alignment = TextAlignment.CENTER

column = VBox(Rect(0, 0, 200, 100))
column.spacing = 10
column.add_child(title)
column.add_child(ok)
column.layout(Rect(0, 0, 200, 100))   # title: y 0..45, ok: y 55..100

ok.handle_event(MouseButtonPressed(MouseButton.LEFT, 100, 80))
ok.handle_event(MouseButtonReleased(MouseButton.LEFT, 100, 80))
assert clicks == ["ok"]

renderer = PrintRenderer()
title.draw(renderer)
ok.draw(renderer)
```

## Button behaviour

`Button.handle_event` reacts only to `MouseMoved`, `MouseButtonPressed` and
`MouseButtonReleased`; other events are ignored.

- A left-button press inside the rectangle puts the button in the `PRESSED`
  state.
- A left-button release inside the rectangle while pressed is a click: it
  calls `on_click` (if set) and leaves the button `HOVERED`.
- Any other release while pressed (outside the rectangle, or of another
  button) returns the button to `NORMAL`.
- Moving the pointer inside turns a `NORMAL` button `HOVERED`; moving it
  outside returns a hovered or pressed button to `NORMAL`.

Each state change is printed to standard output, for example
`Button 'OK' clicked`. `Button.draw` fills the rectangle with
`background_color` when normal, light grey (0.9) when hovered and darker grey
(0.7) when pressed, then draws the label at the rectangle's centre in
`text_color`.

`Label.draw` draws its text at the left edge, centre or right edge of its
rectangle according to `alignment`, centred vertically.

## What widgetkit does not do

widgetkit has no window, event loop or rendering backend: you supply a
renderer and feed events to widgets yourself. Layouts only assign rectangles
to their children; they do not draw them or pass events on. Labels do not
handle events.