"""A static text label widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .button import Renderer
from .graphics import Color, Point, Rect

__all__ = ["Label", "TextAlignment"]


class TextAlignment(Enum):
    """Horizontal placement of text within a widget."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


@dataclass
class Label:
    """A line of text drawn inside a rectangle."""

    rect: Rect
    text: str
    text_color: Color = field(default_factory=lambda: Color.rgb(0.0, 0.0, 0.0))
    alignment: TextAlignment = TextAlignment.LEFT

    def draw(self, renderer: Renderer) -> None:
        """Draw the text, aligned horizontally and centred vertically."""
        if self.alignment is TextAlignment.LEFT:
            text_x = self.rect.x
        elif self.alignment is TextAlignment.CENTER:
            text_x = self.rect.x + self.rect.width / 2.0
        else:
            text_x = self.rect.x + self.rect.width
        text_y = self.rect.y + self.rect.height / 2.0
        renderer.draw_text(self.text, Point(text_x, text_y), self.text_color)