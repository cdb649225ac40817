"""Single-slot cache with compare-and-set publishing."""

from __future__ import annotations

import threading


class AtomicSlot:
    """Holds nothing, then exactly one string forever.

    ``get`` never blocks. ``try_set`` takes a lock only for the
    compare-and-set itself, so callers may compute their value concurrently
    and race to publish it.
    """

    def __init__(self) -> None:
        self._value: str | None = None
        self._lock = threading.Lock()

    def get(self) -> str | None:
        return self._value

    def try_set(self, value: str) -> bool:
        """Publish ``value`` if the slot is empty. Returns True if it won."""
        with self._lock:
            if self._value is not None:
                return False
            self._value = value
            return True
