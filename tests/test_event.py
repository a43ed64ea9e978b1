import pytest

from widgetkit.event import (
    KeyboardKey,
    KeyPressed,
    KeyReleased,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseEntered,
    MouseLeft,
    MouseMoved,
    MouseWheelScrolled,
    OtherMouseButton,
    Point,
    TextInput,
    Touch,
    TouchEvent,
    TouchPhase,
    WindowClosed,
    WindowFocused,
    WindowMoved,
    WindowResized,
    WindowUnfocused,
)


def test_mouse_events_compare_by_value():
    assert MouseMoved(1.0, 2.0) == MouseMoved(1.0, 2.0)
    assert MouseMoved(1.0, 2.0) != MouseMoved(2.0, 1.0)
    assert MouseButtonPressed(MouseButton.LEFT, 3.0, 4.0) == MouseButtonPressed(
        MouseButton.LEFT, 3.0, 4.0
    )
    assert MouseButtonPressed(MouseButton.LEFT, 3.0, 4.0) != MouseButtonReleased(
        MouseButton.LEFT, 3.0, 4.0
    )


def test_entered_and_left_are_distinct_kinds():
    assert MouseEntered(0.0, 0.0) != MouseLeft(0.0, 0.0)
    assert MouseWheelScrolled(0.0, -1.0).delta_y == -1.0


def test_other_mouse_button_equality_and_range():
    assert OtherMouseButton(4) == OtherMouseButton(4)
    assert OtherMouseButton(4) != OtherMouseButton(5)
    assert OtherMouseButton(4) != MouseButton.LEFT
    with pytest.raises(ValueError):
        OtherMouseButton(256)
    with pytest.raises(ValueError):
        OtherMouseButton(-1)


def test_events_work_as_dict_keys():
    handlers = {MouseMoved(1.0, 1.0): "move", MouseEntered(1.0, 1.0): "enter"}
    assert handlers[MouseMoved(1.0, 1.0)] == "move"
    assert handlers[MouseEntered(1.0, 1.0)] == "enter"
    assert MouseMoved(2.0, 1.0) not in handlers


def test_events_are_hashable():
    events = {
        KeyPressed(KeyboardKey.A),
        KeyPressed(KeyboardKey.A),
        KeyReleased(KeyboardKey.A),
    }
    assert len(events) == 2


@pytest.mark.parametrize(
    "name", ["A", "Z", "NUM0", "NUM9", "F1", "F24", "NUMPAD_DIVIDE", "PAUSE", "UNKNOWN"]
)
def test_keyboard_key_groups_present(name):
    event = KeyPressed(KeyboardKey[name])
    assert event.key.name == name


def test_keyboard_left_and_right_differ():
    assert KeyPressed(KeyboardKey.LEFT) != KeyPressed(KeyboardKey.RIGHT)


def test_text_input_accepts_single_character():
    assert TextInput("ş").character == "ş"


@pytest.mark.parametrize("text", ["", "ab"])
def test_text_input_rejects_other_lengths(text):
    with pytest.raises(ValueError):
        TextInput(text)


def test_window_events():
    assert WindowResized(800, 600) == WindowResized(800, 600)
    assert WindowMoved(-10, 20).x == -10
    assert WindowClosed() == WindowClosed()
    assert WindowFocused() != WindowUnfocused()
    with pytest.raises(ValueError):
        WindowResized(-1, 10)


def test_touch_requires_non_negative_id():
    with pytest.raises(ValueError):
        Touch(-1, Point(0.0, 0.0))


def test_touch_event_stores_touches_as_tuple():
    touches = [Touch(1, Point(1.0, 2.0)), Touch(2, Point(3.0, 4.0))]
    event = TouchEvent(TouchPhase.STARTED, touches)
    assert event.touches == tuple(touches)
    assert event.phase is TouchPhase.STARTED
    touches.append(Touch(3, Point(0.0, 0.0)))
    assert len(event.touches) == 2


def test_touch_event_equality_depends_on_phase():
    touch = Touch(7, Point(5.0, 5.0))
    assert TouchEvent(TouchPhase.MOVED, [touch]) == TouchEvent(TouchPhase.MOVED, (touch,))
    assert TouchEvent(TouchPhase.MOVED, [touch]) != TouchEvent(TouchPhase.ENDED, [touch])
    assert hash(TouchEvent(TouchPhase.CANCELLED, [touch])) == hash(
        TouchEvent(TouchPhase.CANCELLED, [touch])
    )