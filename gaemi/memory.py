"""Tagged memory accounting on top of the platform's memory services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union

from .log import LogLevel, log


class MemoryTag(IntEnum):
    """Category an allocation is counted under."""

    UNKNOWN = 0
    ARRAY = 1
    DARRAY = 2
    DICT = 3
    RING_QUEUE = 4
    BST = 5
    STRING = 6
    APPLICATION = 7
    JOB = 8
    TEXTURE = 9
    MATERIAL_INSTANCE = 10
    RENDERER = 11
    GAME = 12
    TRANSFORM = 13
    ENTITY = 14
    ENTITY_NODE = 15
    SCENE = 16


MEMORY_TAG_MAX = len(MemoryTag)

_TAG_NAMES = (
    "Unknown",
    "Array",
    "DArray",
    "Dict",
    "RingQueue",
    "Bst",
    "String",
    "Application",
    "Job",
    "Texture",
    "MaterialInstance",
    "Renderer",
    "Game",
    "Transform",
    "Entity",
    "EntityNode",
    "Scene",
)

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


@dataclass(frozen=True)
class MemoryQuantity:
    """A byte count expressed in a readable unit."""

    amount: float = 1.0
    unit: str = " B"


def memory_tag_to_string(index: Union[MemoryTag, int]) -> str:
    """Display name of a memory tag index."""
    index = int(index)
    if 0 <= index < len(_TAG_NAMES):
        return _TAG_NAMES[index]
    return "ERROR MemoryManager tag not set"


def compute_unit_and_amount(size: int) -> MemoryQuantity:
    """Express a byte count in GB, MB, kB or bytes."""
    if size >= _GB:
        return MemoryQuantity(size / _GB, "GB")
    if size >= _MB:
        return MemoryQuantity(size / _MB, "MB")
    if size >= _KB:
        return MemoryQuantity(size / _KB, "kB")
    return MemoryQuantity(float(size), "B ")


class Memory(ABC):
    """Memory service interface."""

    @abstractmethod
    def allocate(self, size: int, tag: MemoryTag) -> Any:
        """Return a fresh zeroed block of size bytes."""

    @abstractmethod
    def free(self, block: Any, size: int, tag: MemoryTag) -> None:
        """Release a block previously allocated."""

    @abstractmethod
    def zero(self, block: Any, size: int) -> Any:
        """Zero the first size bytes of block."""

    @abstractmethod
    def copy(self, dest: Any, source: Any, size: int) -> Any:
        """Copy size bytes from source into dest."""

    @abstractmethod
    def set(self, dest: Any, value: int, size: int) -> Any:
        """Fill the first size bytes of dest with value."""

    @abstractmethod
    def log_memory_usage(self) -> None:
        """Log the amounts currently allocated."""


class NullMemory(Memory):
    """Placeholder memory service: warns on every call."""

    def __init__(self) -> None:
        self.placeholder_calls = 0

    def _placeholder(self, result: Any = None) -> Any:
        self.placeholder_calls += 1
        log(LogLevel.WARNING, "Usage of placeholder memory service.")
        return result

    def allocate(self, size, tag):
        return self._placeholder(None)

    def free(self, block, size, tag):
        self._placeholder()

    def zero(self, block, size):
        return self._placeholder(None)

    def copy(self, dest, source, size):
        return self._placeholder(None)

    def set(self, dest, value, size):
        return self._placeholder(None)

    def log_memory_usage(self):
        self._placeholder()


class MemoryManager(Memory):
    """Counts allocations per tag and delegates the work to a platform."""

    def __init__(self) -> None:
        self._platform = None
        self._total = 0
        self._tagged = [0] * MEMORY_TAG_MAX

    def init(self, platform) -> None:
        """Attach the platform and register as the memory service."""
        from . import locator

        self._platform = platform
        locator.provide_memory(self)

    def close(self) -> None:
        """Detach from the platform."""
        self._platform = None

    def _require_platform(self):
        if self._platform is None:
            raise RuntimeError("memory manager is not initialized")
        return self._platform

    def allocate(self, size: int, tag: MemoryTag) -> Any:
        platform = self._require_platform()
        tag = MemoryTag(tag)
        if tag is MemoryTag.UNKNOWN:
            log(
                LogLevel.WARNING,
                "Allocate used with MemoryTag::Unknown. Please reclass this allocation.",
            )
        self.add_allocated(size, tag)
        block = platform.allocate(size, False)
        platform.zero_memory(block, size)
        return block

    def free(self, block: Any, size: int, tag: MemoryTag) -> None:
        platform = self._require_platform()
        tag = MemoryTag(tag)
        if tag is MemoryTag.UNKNOWN:
            log(
                LogLevel.WARNING,
                "Free used with MemoryTag::Unknown. Please reclass this allocation.",
            )
        self._total -= size
        self._tagged[tag] -= size
        platform.free(block, False)

    def zero(self, block: Any, size: int) -> Any:
        return self._require_platform().zero_memory(block, size)

    def copy(self, dest: Any, source: Any, size: int) -> Any:
        return self._require_platform().copy_memory(dest, source, size)

    def set(self, dest: Any, value: int, size: int) -> Any:
        return self._require_platform().set_memory(dest, value, size)

    def log_memory_usage(self) -> None:
        total = compute_unit_and_amount(self._total)
        log(LogLevel.INFO, f"Total memory allocations: {total.amount:g} {total.unit}")
        for tag, amount in zip(MemoryTag, self._tagged):
            if amount > 0:
                quantity = compute_unit_and_amount(amount)
                log(
                    LogLevel.TRACE,
                    f"{memory_tag_to_string(tag)}: {quantity.amount:g} {quantity.unit}",
                )

    def add_allocated(self, size: int, tag: MemoryTag) -> None:
        """Count memory that was not obtained through allocate."""
        self._total += size
        self._tagged[MemoryTag(tag)] += size

    def allocated(self, tag: Optional[MemoryTag] = None) -> int:
        """Bytes counted under a tag, or in total when no tag is given."""
        if tag is None:
            return self._total
        return self._tagged[MemoryTag(tag)]