"""Platform service interface, its placeholder, and the window FPS counter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from .log import LogLevel, log


class Platform(ABC):
    """Operating-system services used by the engine."""

    @abstractmethod
    def init(self, application_name: str, x: int, y: int, width: int, height: int) -> bool:
        """Start the platform and open the window."""

    @abstractmethod
    def update(self, dt: int) -> None:
        """Per-frame platform work."""

    @abstractmethod
    def close(self) -> None:
        """Shut the platform down."""

    @abstractmethod
    def pump_messages(self) -> bool:
        """Process pending system messages."""

    @abstractmethod
    def allocate(self, size: int, aligned: bool) -> Optional[bytearray]:
        """Return a fresh block of memory."""

    @abstractmethod
    def free(self, block: Any, aligned: bool) -> None:
        """Release a block of memory."""

    @abstractmethod
    def zero_memory(self, block: Any, size: int) -> Any:
        """Zero the first size bytes of block."""

    @abstractmethod
    def copy_memory(self, dest: Any, source: Any, size: int) -> Any:
        """Copy size bytes from source into dest."""

    @abstractmethod
    def set_memory(self, dest: Any, value: int, size: int) -> Any:
        """Fill the first size bytes of dest with value."""

    @abstractmethod
    def console_write(self, message: str, level: LogLevel) -> None:
        """Write a message to standard output."""

    @abstractmethod
    def console_write_error(self, message: str, level: LogLevel) -> None:
        """Write a message to standard error."""

    @abstractmethod
    def absolute_time_ms(self) -> int:
        """Milliseconds since the platform started."""

    @abstractmethod
    def absolute_time_seconds(self) -> float:
        """Seconds since the platform started."""

    @abstractmethod
    def sleep(self, ms: int) -> None:
        """Block for the given number of milliseconds."""

    @abstractmethod
    def date(self) -> str:
        """Current local date and time as text."""

    @abstractmethod
    def keyboard_state(self) -> Optional[Sequence[int]]:
        """Current pressed state of every scancode."""

    @abstractmethod
    def mouse_button_mask(self, button: int) -> int:
        """Bit mask of a mouse button."""

    @abstractmethod
    def controller_button(self, controller: Any, button: int) -> int:
        """State of a controller button."""

    @abstractmethod
    def controller_axis(self, controller: Any, axis: Any) -> int:
        """Raw value of a controller axis."""

    @abstractmethod
    def open_controller(self, index: int) -> Any:
        """Open the controller at index, or return None."""

    @abstractmethod
    def close_controller(self, controller: Any) -> None:
        """Close an opened controller."""

    @abstractmethod
    def max_scancode(self) -> int:
        """Number of keyboard scancodes."""

    @abstractmethod
    def mouse_relative_state(self) -> Tuple[int, int, int]:
        """Mouse buttons and relative motion as (buttons, x, y)."""

    @abstractmethod
    def mouse_state(self) -> Tuple[int, int, int]:
        """Mouse buttons and position as (buttons, x, y)."""

    @abstractmethod
    def show_cursor(self, show: bool) -> None:
        """Show or hide the mouse cursor."""

    @abstractmethod
    def set_relative_mouse_mode(self, relative: bool) -> None:
        """Turn relative mouse mode on or off."""


class NullPlatform(Platform):
    """Placeholder platform: warns on every call and returns neutral values."""

    def __init__(self) -> None:
        self.placeholder_calls = 0

    def _placeholder(self, result: Any = None) -> Any:
        self.placeholder_calls += 1
        log(LogLevel.WARNING, "Usage of placeholder memory service.")
        return result

    def init(self, application_name, x, y, width, height):
        return self._placeholder(False)

    def update(self, dt):
        self._placeholder()

    def close(self):
        self._placeholder()

    def pump_messages(self):
        return self._placeholder(False)

    def allocate(self, size, aligned):
        return self._placeholder(None)

    def free(self, block, aligned):
        self._placeholder()

    def zero_memory(self, block, size):
        return self._placeholder(None)

    def copy_memory(self, dest, source, size):
        return self._placeholder(None)

    def set_memory(self, dest, value, size):
        return self._placeholder(None)

    def console_write(self, message, level):
        self._placeholder()

    def console_write_error(self, message, level):
        self._placeholder()

    def absolute_time_ms(self):
        return self._placeholder(0)

    def absolute_time_seconds(self):
        return self._placeholder(0.0)

    def sleep(self, ms):
        self._placeholder()

    def date(self):
        return self._placeholder("")

    def keyboard_state(self):
        return self._placeholder(None)

    def mouse_button_mask(self, button):
        return self._placeholder(0)

    def controller_button(self, controller, button):
        return self._placeholder(0)

    def controller_axis(self, controller, axis):
        return self._placeholder(0)

    def open_controller(self, index):
        return self._placeholder(None)

    def close_controller(self, controller):
        self._placeholder()

    def max_scancode(self):
        return self._placeholder(0)

    def mouse_relative_state(self):
        return self._placeholder((0, 0, 0))

    def mouse_state(self):
        return self._placeholder((0, 0, 0))

    def show_cursor(self, show):
        self._placeholder()

    def set_relative_mouse_mode(self, relative):
        self._placeholder()


class Window:
    """Window title bookkeeping with a frames-per-second counter."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.caption = title
        self.previous_seconds = 0.0
        self.current_seconds = 0.0
        self.frame_count = 0

    def update_fps_counter(self, dt: int) -> str:
        """Count a frame of dt milliseconds; refresh the caption at most 4 times a second."""
        self.current_seconds += dt / 1000.0
        elapsed = self.current_seconds - self.previous_seconds
        if elapsed > 0.25:
            self.previous_seconds = self.current_seconds
            fps = self.frame_count / elapsed
            self.caption = f"{self.title} @ fps: {fps:.2f}"
            self.frame_count = 0
        self.frame_count += 1
        return self.caption