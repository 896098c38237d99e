"""Core game engine services: logging, math, memory accounting, events, timing and input."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "game",
    "input",
    "linalg",
    "locator",
    "log",
    "mathfn",
    "memory",
    "platform",
    "timer",
]