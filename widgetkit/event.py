"""Input and window events delivered to widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Union

from .geometry import Point

__all__ = [
    "Event",
    "KeyPressed",
    "KeyReleased",
    "KeyboardEvent",
    "KeyboardKey",
    "MouseButton",
    "MouseButtonPressed",
    "MouseButtonReleased",
    "MouseEntered",
    "MouseEvent",
    "MouseLeft",
    "MouseMoved",
    "MouseWheelScrolled",
    "OtherMouseButton",
    "Point",
    "TextInput",
    "Touch",
    "TouchEvent",
    "TouchPhase",
    "WindowClosed",
    "WindowEvent",
    "WindowFocused",
    "WindowMoved",
    "WindowResized",
    "WindowUnfocused",
]


class MouseButton(Enum):
    """The standard mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


@dataclass(frozen=True)
class OtherMouseButton:
    """A non-standard mouse button identified by an 8-bit code."""

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 255:
            raise ValueError(f"mouse button code out of range 0..255: {self.code}")


AnyMouseButton = Union[MouseButton, OtherMouseButton]


@dataclass(frozen=True)
class MouseMoved:
    x: float
    y: float


@dataclass(frozen=True)
class MouseButtonPressed:
    button: AnyMouseButton
    x: float
    y: float


@dataclass(frozen=True)
class MouseButtonReleased:
    button: AnyMouseButton
    x: float
    y: float


@dataclass(frozen=True)
class MouseWheelScrolled:
    delta_x: float
    delta_y: float


@dataclass(frozen=True)
class MouseEntered:
    x: float
    y: float


@dataclass(frozen=True)
class MouseLeft:
    x: float
    y: float


MouseEvent = Union[
    MouseMoved,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseWheelScrolled,
    MouseEntered,
    MouseLeft,
]


class KeyboardKey(Enum):
    """Physical keyboard keys."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    NUM0 = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()

    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    DELETE = auto()
    INSERT = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()

    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    CONTROL_LEFT = auto()
    CONTROL_RIGHT = auto()
    ALT_LEFT = auto()
    ALT_RIGHT = auto()
    SUPER_LEFT = auto()
    SUPER_RIGHT = auto()
    CAPS_LOCK = auto()
    NUM_LOCK = auto()
    SCROLL_LOCK = auto()

    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_EQUALS = auto()
    NUMPAD_PLUS = auto()
    NUMPAD_MINUS = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_DIVIDE = auto()

    GRAVE = auto()
    MINUS = auto()
    EQUALS = auto()
    BRACKET_LEFT = auto()
    BRACKET_RIGHT = auto()
    BACKSLASH = auto()
    SEMICOLON = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    PERIOD = auto()
    SLASH = auto()

    PRINT_SCREEN = auto()
    PAUSE = auto()

    UNKNOWN = auto()


@dataclass(frozen=True)
class KeyPressed:
    key: KeyboardKey


@dataclass(frozen=True)
class KeyReleased:
    key: KeyboardKey


@dataclass(frozen=True)
class TextInput:
    """A single character of text entered by the user."""

    character: str

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(
                f"text input must be exactly one character, got {self.character!r}"
            )


KeyboardEvent = Union[KeyPressed, KeyReleased, TextInput]


@dataclass(frozen=True)
class WindowResized:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"window size must not be negative: {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class WindowMoved:
    x: int
    y: int


@dataclass(frozen=True)
class WindowClosed:
    pass


@dataclass(frozen=True)
class WindowFocused:
    pass


@dataclass(frozen=True)
class WindowUnfocused:
    pass


WindowEvent = Union[WindowResized, WindowMoved, WindowClosed, WindowFocused, WindowUnfocused]


class TouchPhase(Enum):
    """The stage a touch gesture is in."""

    STARTED = auto()
    MOVED = auto()
    ENDED = auto()
    CANCELLED = auto()


@dataclass(frozen=True)
class Touch:
    """One contact point; ``id`` tells concurrent touches apart."""

    id: int
    position: Point

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"touch id must not be negative: {self.id}")


@dataclass(frozen=True)
class TouchEvent:
    """A change in phase for a set of touches."""

    phase: TouchPhase
    touches: tuple[Touch, ...]

    def __init__(self, phase: TouchPhase, touches: Iterable[Touch] = ()) -> None:
        object.__setattr__(self, "phase", phase)
        object.__setattr__(self, "touches", tuple(touches))


Event = Union[MouseEvent, KeyboardEvent, WindowEvent, TouchEvent]