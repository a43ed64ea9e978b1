"""Basic 2D geometry: points, rectangles, lines and circles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point (or vector) in 2D space."""

    x: float
    y: float

    def add(self, other: Point) -> Point:
        """Return the component-wise sum of this point and ``other``."""
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Point) -> Point:
        """Return the component-wise difference of this point and ``other``."""
        return Point(self.x - other.x, self.y - other.y)

    def distance(self, other: Point) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies inside or on the edge of the rectangle."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def center(self) -> Point:
        """Return the centre point of the rectangle."""
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def intersects(self, other: Rect) -> bool:
        """Return True if the interiors of the two rectangles overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Line:
    """A line segment between two points."""

    start: Point
    end: Point

    def length(self) -> float:
        """Return the length of the segment."""
        return self.start.distance(self.end)


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float

    def area(self) -> float:
        """Return the area of the circle."""
        return math.pi * self.radius * self.radius