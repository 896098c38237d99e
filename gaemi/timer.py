"""Frame timing: delta time and frame-rate capping."""

from __future__ import annotations

from . import locator

FPS = 60
FRAME_DELAY = 1000 // FPS

_U32_MASK = 0xFFFFFFFF


class Timer:
    """Computes per-frame delta time and waits when a frame runs fast."""

    FPS = FPS
    FRAME_DELAY = FRAME_DELAY

    def __init__(self) -> None:
        self.frame_start = 0
        self.last_frame = 0
        self.frame_time = 0

    def compute_delta_time(self, absolute_time: int) -> int:
        """Milliseconds since the previous call, as an unsigned 32-bit value."""
        self.frame_start = absolute_time
        dt = (self.frame_start - self.last_frame) & _U32_MASK
        self.last_frame = self.frame_start
        return dt

    def delay_time(self, absolute_time: int) -> int:
        """Sleep out the rest of the frame; return the milliseconds slept."""
        self.frame_time = (absolute_time - self.frame_start) & _U32_MASK
        if self.frame_time < self.FRAME_DELAY:
            wait = self.FRAME_DELAY - self.frame_time
            locator.platform().sleep(wait)
            return wait
        return 0