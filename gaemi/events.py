"""Event codes, event payloads and a subscribe/fire event manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional, Union

from .log import LogLevel, log

MAX_EVENT_CODE = 16384
CONTEXT_SIZE = 16


class EventCode(IntEnum):
    """Events known to the engine."""

    APPLICATION_QUIT = 0
    WINDOW_RESIZED = 1
    MAX_EVENT_CODE = 2


@dataclass
class EventContext:
    """Sixteen bytes of event data, readable as arrays of any numeric type."""

    data: bytearray = field(default_factory=lambda: bytearray(CONTEXT_SIZE))

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)
        if len(self.data) != CONTEXT_SIZE:
            raise ValueError(f"event context holds exactly {CONTEXT_SIZE} bytes")

    def _view(self, fmt: str) -> memoryview:
        return memoryview(self.data).cast(fmt)

    @property
    def i64(self) -> memoryview:
        return self._view("q")

    @property
    def u64(self) -> memoryview:
        return self._view("Q")

    @property
    def f64(self) -> memoryview:
        return self._view("d")

    @property
    def i32(self) -> memoryview:
        return self._view("i")

    @property
    def u32(self) -> memoryview:
        return self._view("I")

    @property
    def f32(self) -> memoryview:
        return self._view("f")

    @property
    def i16(self) -> memoryview:
        return self._view("h")

    @property
    def u16(self) -> memoryview:
        return self._view("H")

    @property
    def i8(self) -> memoryview:
        return self._view("b")

    @property
    def u8(self) -> memoryview:
        return self._view("B")

    @property
    def c(self) -> memoryview:
        return self._view("c")


EventCallback = Callable[[Union[EventCode, int], Any, Any, EventContext], bool]


@dataclass(eq=False)
class Subscription:
    """A listener and the callback invoked for it."""

    listener: Any = None
    callback: Optional[EventCallback] = None

    def matches(self, listener: Any, callback: Optional[EventCallback]) -> bool:
        return self.listener is listener and self.callback == callback

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subscription):
            return NotImplemented
        return self.matches(other.listener, other.callback)

    __hash__ = None  # type: ignore[assignment]


def _index(code: Union[EventCode, int]) -> int:
    index = int(code)
    if not 0 <= index < MAX_EVENT_CODE:
        raise ValueError(f"event code {index} out of range")
    return index


class Events(ABC):
    """Event service interface."""

    @abstractmethod
    def subscribe(self, code, listener, callback) -> bool:
        """Listen for code; a listener already subscribed is refused."""

    @abstractmethod
    def unsubscribe(self, code, listener, callback) -> bool:
        """Stop a listener/callback pair from receiving code."""

    @abstractmethod
    def fire(self, code, sender, context=None) -> bool:
        """Dispatch code until a callback reports it handled."""


class NullEvents(Events):
    """Placeholder event service: warns on every call."""

    def __init__(self) -> None:
        self.placeholder_calls = 0

    def _placeholder(self, result: Any = None) -> Any:
        self.placeholder_calls += 1
        log(LogLevel.WARNING, "Usage of placeholder memory service.")
        return result

    def subscribe(self, code, listener, callback):
        return self._placeholder(False)

    def unsubscribe(self, code, listener, callback):
        return self._placeholder(False)

    def fire(self, code, sender, context=None):
        return self._placeholder(False)


class EventManager(Events):
    """Keeps subscriptions per event code and dispatches fired events."""

    def __init__(self) -> None:
        self._subscriptions: Dict[int, List[Subscription]] = {}
        self._initialized = False

    def init(self) -> bool:
        """Reset subscriptions and register as the event service, once."""
        if self._initialized:
            return False
        from . import locator

        self._subscriptions.clear()
        self._initialized = True
        locator.provide_events(self)
        return True

    def close(self) -> None:
        """Drop every subscription."""
        self._subscriptions.clear()

    def subscribe(self, code, listener, callback) -> bool:
        subs = self._subscriptions.setdefault(_index(code), [])
        if any(sub.listener is listener for sub in subs):
            return False
        subs.append(Subscription(listener, callback))
        return True

    def unsubscribe(self, code, listener, callback) -> bool:
        subs = self._subscriptions.get(_index(code), [])
        for position, sub in enumerate(subs):
            if sub.matches(listener, callback):
                del subs[position]
                return True
        return False

    def fire(self, code, sender, context: Optional[EventContext] = None) -> bool:
        subs = self._subscriptions.get(_index(code))
        if not subs:
            return False
        if context is None:
            context = EventContext()
        return any(
            sub.callback(code, sender, sub.listener, context) for sub in tuple(subs)
        )