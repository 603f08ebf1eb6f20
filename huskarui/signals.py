"""Minimal observer signal used for change notification."""

from __future__ import annotations

from typing import Any, Callable, List


class Signal:
    """A list of callables invoked, in connection order, on every emit."""

    def __init__(self) -> None:
        self._slots: List[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Attach ``slot``; connecting the same slot twice calls it twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Detach every connection of ``slot``."""
        remaining = [existing for existing in self._slots if existing != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)