"""aiologic integration for write-once settlement.

aiologic provides synchronization primitives that work across
asyncio, trio (through anyio), threading and green threads, so a value
settled from a worker thread wakes coroutines waiting on the event loop.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import aiologic

from klaw_match.errors import NotSettledError

__all__ = ['WriteOnce']


class WriteOnce[T]:
    """A cell that can be written exactly once and awaited until it is.

    Thread-safe and async-safe using aiologic.Lock. The first ``set`` wins;
    later calls return False and leave the value unchanged. Readers either
    ``get()`` (non-blocking) or await the cell.

    Examples:
        >>> cell: WriteOnce[int] = WriteOnce()
        >>> cell.is_set()
        False
        >>> cell.set(42)
        True
        >>> cell.set(100)  # Returns False, value unchanged
        False
        >>> cell.get()
        42
    """

    __slots__ = ('_event', '_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._event = aiologic.Event()
        self._value: T | None = None
        self._is_set = False

    def set(self, value: T) -> bool:
        """Store the value if the cell is still empty.

        Args:
            value: The value to store.

        Returns:
            True if the value was stored, False if the cell was already set.
        """
        if self._is_set:
            return False

        with self._lock:
            if self._is_set:
                return False
            self._value = value
            self._is_set = True
        self._event.set()
        return True

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set

    def get(self) -> T:
        """Return the value without waiting.

        Raises:
            NotSettledError: If the cell is still empty.
        """
        if not self._is_set:
            raise NotSettledError
        return self._value  # type: ignore[return-value]

    async def wait(self) -> T:
        """Wait until the cell is set and return the value."""
        if not self._is_set:
            await self._event
        return self._value  # type: ignore[return-value]

    def __await__(self) -> Generator[Any, Any, T]:
        return self.wait().__await__()
