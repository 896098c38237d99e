"""Base class for games run by the engine."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from .input import InputState


class Game(ABC):
    """A game: loaded once, then updated and drawn every frame."""

    def __init__(self) -> None:
        self.input_state = InputState()

    @abstractmethod
    def load(self) -> None:
        """Load game resources."""

    @abstractmethod
    def update(self, dt: int) -> None:
        """Advance the game by dt milliseconds."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the current frame."""

    @abstractmethod
    def close(self) -> None:
        """Release game resources."""

    def set_input_state(self, input_state: InputState) -> None:
        """Store a copy of this frame's input state."""
        self.input_state = copy.deepcopy(input_state)