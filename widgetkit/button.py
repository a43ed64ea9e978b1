"""A clickable push button widget and the renderer interface widgets draw to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from .event import Event, MouseButton, MouseButtonPressed, MouseButtonReleased, MouseMoved
from .graphics import Color, Point, Rect

__all__ = ["Button", "ButtonState", "Renderer"]


class Renderer(Protocol):
    """Something widgets can draw rectangles and text onto."""

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill ``rect`` with ``color``."""
        ...

    def draw_text(self, text: str, position: Point, color: Color) -> None:
        """Draw ``text`` at ``position`` in ``color``."""
        ...


class ButtonState(Enum):
    """Interaction state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()


_HOVERED_COLOR = Color.rgb(0.9, 0.9, 0.9)
_PRESSED_COLOR = Color.rgb(0.7, 0.7, 0.7)


@dataclass
class Button:
    """A push button that tracks hover and press state and fires ``on_click``."""

    rect: Rect
    label: str
    background_color: Color = field(default_factory=lambda: Color.rgb(0.8, 0.8, 0.8))
    text_color: Color = field(default_factory=lambda: Color.rgb(0.0, 0.0, 0.0))
    on_click: Optional[Callable[[], None]] = None
    state: ButtonState = ButtonState.NORMAL

    def _contains(self, x: float, y: float) -> bool:
        return self.rect.contains(Point(x, y))

    def handle_event(self, event: Event) -> None:
        """Update the button's state from a mouse event, firing ``on_click`` on a click."""
        match event:
            case MouseMoved(x=x, y=y):
                if self._contains(x, y):
                    if self.state is ButtonState.NORMAL:
                        self.state = ButtonState.HOVERED
                        print(f"Button '{self.label}' hovered")
                elif self.state in (ButtonState.HOVERED, ButtonState.PRESSED):
                    self.state = ButtonState.NORMAL
                    print(f"Button '{self.label}' unhovered")
            case MouseButtonPressed(button=button, x=x, y=y):
                if button is MouseButton.LEFT and self._contains(x, y):
                    self.state = ButtonState.PRESSED
                    print(f"Button '{self.label}' pressed")
            case MouseButtonReleased(button=button, x=x, y=y):
                if button is MouseButton.LEFT and self._contains(x, y):
                    if self.state is ButtonState.PRESSED:
                        print(f"Button '{self.label}' clicked")
                        if self.on_click is not None:
                            self.on_click()
                        self.state = ButtonState.HOVERED
                elif self.state is ButtonState.PRESSED:
                    self.state = ButtonState.NORMAL
                    print(f"Button '{self.label}' press released outside")
            case _:
                pass

    def draw(self, renderer: Renderer) -> None:
        """Draw the button background and its centred label."""
        color = {
            ButtonState.NORMAL: self.background_color,
            ButtonState.HOVERED: _HOVERED_COLOR,
            ButtonState.PRESSED: _PRESSED_COLOR,
        }[self.state]
        renderer.draw_rect(self.rect, color)
        renderer.draw_text(self.label, self.rect.center(), self.text_color)