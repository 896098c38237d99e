"""Keyboard, mouse and controller state tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Sequence, Union

from . import locator
from .events import EventCode, EventContext
from .linalg import Vec2
from .mathfn import clamp

CONTROLLER_DEAD_ZONE_1D = 250
CONTROLLER_DEAD_ZONE_2D = 8000.0
CONTROLLER_MAX_VALUE = 30000


class ButtonState(Enum):
    """Transition of a button between two frames."""

    NONE = 0
    PRESSED = 1
    RELEASED = 2
    HELD = 3


class ControllerAxis(IntEnum):
    """Controller axes."""

    INVALID = -1
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    TRIGGER_LEFT = 4
    TRIGGER_RIGHT = 5
    MAX = 6


class ControllerButton(IntEnum):
    """Controller buttons."""

    INVALID = -1
    A = 0
    B = 1
    X = 2
    Y = 3
    BACK = 4
    GUIDE = 5
    START = 6
    LEFT_STICK = 7
    RIGHT_STICK = 8
    LEFT_SHOULDER = 9
    RIGHT_SHOULDER = 10
    DPAD_UP = 11
    DPAD_DOWN = 12
    DPAD_LEFT = 13
    DPAD_RIGHT = 14
    MISC1 = 15
    PADDLE1 = 16
    PADDLE2 = 17
    PADDLE3 = 18
    PADDLE4 = 19
    TOUCH_PAD = 20
    MAX = 21


CONTROLLER_BUTTON_COUNT = int(ControllerButton.MAX)


def button_state(previous: object, current: object) -> ButtonState:
    """Classify a button from its previous and current pressed values."""
    if not previous:
        return ButtonState.PRESSED if current else ButtonState.NONE
    return ButtonState.HELD if current else ButtonState.RELEASED


def filter_1d(value: int) -> float:
    """Map a raw trigger value to [-1, 1], ignoring the dead zone."""
    magnitude = abs(value)
    if magnitude <= CONTROLLER_DEAD_ZONE_1D:
        return 0.0
    result = (magnitude - CONTROLLER_DEAD_ZONE_1D) / (
        CONTROLLER_MAX_VALUE - CONTROLLER_DEAD_ZONE_1D
    )
    if value <= 0:
        result = -result
    return clamp(result, -1.0, 1.0)


def filter_2d(x: int, y: int) -> Vec2:
    """Map a raw stick position to a vector of length at most 1, with a circular dead zone."""
    direction = Vec2(float(x), float(y))
    length = direction.length()
    if length < CONTROLLER_DEAD_ZONE_2D:
        return Vec2(0.0, 0.0)
    f = (length - CONTROLLER_DEAD_ZONE_2D) / (CONTROLLER_MAX_VALUE - CONTROLLER_DEAD_ZONE_2D)
    f = clamp(f, 0.0, 1.0)
    return direction * (f / length)


@dataclass
class KeyboardState:
    """Pressed state of every scancode, this frame and the previous one."""

    current: Sequence[int] = ()
    previous: List[int] = field(default_factory=list)

    def key_value(self, key: int) -> bool:
        """Whether the key is down this frame."""
        return bool(self.current[key])

    def key_state(self, key: int) -> ButtonState:
        """Transition of the key since the previous frame."""
        return button_state(self.previous[key], self.current[key])


@dataclass
class MouseState:
    """Mouse position, buttons and wheel."""

    position: Vec2 = field(default_factory=Vec2)
    current_buttons: int = 0
    previous_buttons: int = 0
    scroll_wheel: Vec2 = field(default_factory=Vec2)
    is_relative_mode: bool = False

    def button_value(self, button: int) -> bool:
        """Whether the button is down this frame."""
        mask = locator.platform().mouse_button_mask(button)
        return bool(mask & self.current_buttons)

    def button_state(self, button: int) -> ButtonState:
        """Transition of the button since the previous frame."""
        mask = locator.platform().mouse_button_mask(button)
        return button_state(mask & self.previous_buttons, mask & self.current_buttons)


def _button_slots() -> List[int]:
    return [0] * CONTROLLER_BUTTON_COUNT


@dataclass
class ControllerState:
    """Buttons, sticks and triggers of a game controller."""

    current_buttons: List[int] = field(default_factory=_button_slots)
    previous_buttons: List[int] = field(default_factory=_button_slots)
    left_stick: Vec2 = field(default_factory=Vec2)
    right_stick: Vec2 = field(default_factory=Vec2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    is_connected: bool = False

    def button_value(self, button: Union[ControllerButton, int]) -> bool:
        """Whether the button is down this frame."""
        return self.current_buttons[int(button)] == 1

    def button_state(self, button: Union[ControllerButton, int]) -> ButtonState:
        """Transition of the button since the previous frame."""
        index = int(button)
        return button_state(self.previous_buttons[index], self.current_buttons[index])


@dataclass
class InputState:
    """Complete input snapshot handed to the game each frame."""

    keyboard: KeyboardState = field(default_factory=KeyboardState)
    mouse: MouseState = field(default_factory=MouseState)
    controller: ControllerState = field(default_factory=ControllerState)


@dataclass(frozen=True)
class QuitEvent:
    """The user asked to close the application."""


@dataclass(frozen=True)
class MouseWheelEvent:
    """The mouse wheel moved."""

    x: int = 0
    y: int = 0


class InputManager:
    """Polls the platform each frame and keeps the input state up to date."""

    def __init__(self, window_width: int = 1280, window_height: int = 720) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.is_cursor_displayed = False
        self._state = InputState()
        self._controller: Any = None

    @property
    def input_state(self) -> InputState:
        """Current input snapshot."""
        return self._state

    def init(self) -> bool:
        """Read initial keyboard state, reset the mouse and open the first controller."""
        platform = locator.platform()
        keyboard = self._state.keyboard
        keyboard.current = platform.keyboard_state() or ()
        keyboard.previous = [0] * platform.max_scancode()

        mouse = self._state.mouse
        mouse.current_buttons = 0
        mouse.previous_buttons = 0

        self._controller = platform.open_controller(0)
        controller = self._state.controller
        controller.is_connected = self._controller is not None
        controller.current_buttons = _button_slots()
        controller.previous_buttons = _button_slots()
        return True

    def close(self) -> None:
        """Close the opened controller, if any."""
        if self._controller is not None:
            locator.platform().close_controller(self._controller)
            self._controller = None

    def process_event(self, event: object) -> None:
        """Handle a platform event."""
        if isinstance(event, QuitEvent):
            locator.events().fire(EventCode.APPLICATION_QUIT, None, EventContext())
        elif isinstance(event, MouseWheelEvent):
            self._state.mouse.scroll_wheel = Vec2(float(event.x), float(event.y))

    def pre_update(self) -> None:
        """Move the current state into the previous state before polling."""
        platform = locator.platform()
        keyboard = self._state.keyboard
        keyboard.previous = list(keyboard.current[: platform.max_scancode()])

        mouse = self._state.mouse
        mouse.previous_buttons = mouse.current_buttons
        mouse.scroll_wheel = Vec2(0.0, 0.0)

        controller = self._state.controller
        controller.previous_buttons = list(controller.current_buttons)

    def update(self) -> None:
        """Poll keyboard, mouse and controller."""
        platform = locator.platform()
        self._state.keyboard.current = platform.keyboard_state() or ()

        mouse = self._state.mouse
        if mouse.is_relative_mode:
            buttons, x, y = platform.mouse_relative_state()
        else:
            buttons, x, y = platform.mouse_state()
        mouse.current_buttons = buttons
        if mouse.is_relative_mode:
            mouse.position = Vec2(float(x), float(y))
        else:
            # Centre the coordinates on the window, y pointing up.
            mouse.position = Vec2(
                float(x) - self.window_width * 0.5,
                self.window_height * 0.5 - float(y),
            )

        controller = self._state.controller
        device = self._controller
        controller.current_buttons = [
            platform.controller_button(device, ControllerButton(i))
            for i in range(CONTROLLER_BUTTON_COUNT)
        ]
        controller.left_trigger = filter_1d(
            platform.controller_axis(device, ControllerAxis.TRIGGER_LEFT)
        )
        controller.right_trigger = filter_1d(
            platform.controller_axis(device, ControllerAxis.TRIGGER_RIGHT)
        )
        controller.left_stick = filter_2d(
            platform.controller_axis(device, ControllerAxis.LEFT_X),
            -platform.controller_axis(device, ControllerAxis.LEFT_Y),
        )
        controller.right_stick = filter_2d(
            platform.controller_axis(device, ControllerAxis.RIGHT_X),
            -platform.controller_axis(device, ControllerAxis.RIGHT_Y),
        )

    def set_mouse_cursor(self, displayed: bool) -> None:
        """Show or hide the mouse cursor."""
        self.is_cursor_displayed = displayed
        locator.platform().show_cursor(displayed)

    def set_mouse_relative_mode(self, relative: bool) -> None:
        """Turn relative mouse mode on or off."""
        locator.platform().set_relative_mouse_mode(relative)
        self._state.mouse.is_relative_mode = relative