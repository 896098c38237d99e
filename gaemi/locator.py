"""Service locator for the application-wide platform, memory and event services."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .events import Events, NullEvents
from .memory import Memory, NullMemory
from .platform import NullPlatform, Platform

_PLACEHOLDERS: Dict[str, Any] = {
    "platform": NullPlatform(),
    "memory": NullMemory(),
    "events": NullEvents(),
}

_services: Dict[str, Any] = dict(_PLACEHOLDERS)


def reset() -> None:
    """Point every service back at its placeholder."""
    _services.update(_PLACEHOLDERS)


def platform() -> Platform:
    """The current platform service."""
    return _services["platform"]


def memory() -> Memory:
    """The current memory service."""
    return _services["memory"]


def events() -> Events:
    """The current event service."""
    return _services["events"]


def _provide(name: str, service: Any) -> None:
    _services[name] = service if service is not None else _PLACEHOLDERS[name]


def provide_platform(service: Optional[Platform]) -> None:
    """Install a platform service; None restores the placeholder."""
    _provide("platform", service)


def provide_memory(service: Optional[Memory]) -> None:
    """Install a memory service; None restores the placeholder."""
    _provide("memory", service)


def provide_events(service: Optional[Events]) -> None:
    """Install an event service; None restores the placeholder."""
    _provide("events", service)