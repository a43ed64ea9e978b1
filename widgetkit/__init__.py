"""A small widget toolkit: geometry, colours, input events, a button, a label and box layouts."""

__version__ = "0.1.0"
__all__ = ["button", "event", "geometry", "graphics", "label", "layout"]