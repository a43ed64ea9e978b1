"""Colours and the drawing primitives used by widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .geometry import Point, Rect

__all__ = ["Color", "Point", "Rect"]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """Return an opaque colour."""
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba_u8(cls, r: int, g: int, b: int, a: int) -> Color:
        """Return a colour from 8-bit channel values (0 to 255)."""
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


Color.WHITE = Color.rgb(1.0, 1.0, 1.0)
Color.BLACK = Color.rgb(0.0, 0.0, 0.0)
Color.RED = Color.rgb(1.0, 0.0, 0.0)
Color.GREEN = Color.rgb(0.0, 1.0, 0.0)
Color.BLUE = Color.rgb(0.0, 0.0, 1.0)
Color.YELLOW = Color.rgb(1.0, 1.0, 0.0)
Color.MAGENTA = Color.rgb(1.0, 0.0, 1.0)
Color.CYAN = Color.rgb(0.0, 1.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)