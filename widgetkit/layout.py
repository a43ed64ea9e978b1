"""Vertical and horizontal box layouts that share space equally among children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .graphics import Rect

__all__ = ["HBox", "LayoutItem", "VBox"]


class LayoutItem(Protocol):
    """Anything a layout can position: it has a settable ``rect``."""

    rect: Rect


def _share(total: float, count: int, spacing: float) -> float:
    spacing_total = spacing * max(count - 1, 0)
    return (total - spacing_total) / max(count, 1)


@dataclass
class VBox:
    """Stacks children top to bottom, each with the same height."""

    rect: Rect
    children: list[LayoutItem] = field(default_factory=list)
    spacing: float = 0.0

    def add_child(self, child: LayoutItem) -> None:
        """Append ``child`` to the layout."""
        self.children.append(child)

    def layout(self, available_rect: Rect) -> None:
        """Place the box in ``available_rect`` and assign each child its rectangle."""
        self.rect = available_rect
        child_height = _share(available_rect.height, len(self.children), self.spacing)
        current_y = available_rect.y
        for child in self.children:
            child.rect = Rect(available_rect.x, current_y, available_rect.width, child_height)
            current_y += child_height + self.spacing


@dataclass
class HBox:
    """Arranges children left to right, each with the same width."""

    rect: Rect
    children: list[LayoutItem] = field(default_factory=list)
    spacing: float = 0.0

    def add_child(self, child: LayoutItem) -> None:
        """Append ``child`` to the layout."""
        self.children.append(child)

    def layout(self, available_rect: Rect) -> None:
        """Place the box in ``available_rect`` and assign each child its rectangle."""
        self.rect = available_rect
        child_width = _share(available_rect.width, len(self.children), self.spacing)
        current_x = available_rect.x
        for child in self.children:
            child.rect = Rect(current_x, available_rect.y, child_width, available_rect.height)
            current_x += child_width + self.spacing