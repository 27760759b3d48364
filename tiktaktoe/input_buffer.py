"""A bounded, thread-safe FIFO of input bytes."""

from __future__ import annotations

import threading
from collections import deque

DEFAULT_SIZE = 128


class BufferFullError(Exception):
    """Raised when a byte arrives while the buffer is full."""


class InputBuffer:
    """Ring buffer of received bytes.

    Like a classic ring buffer with ``size`` slots, one slot stays unused, so
    it holds at most ``size - 1`` bytes.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 2:
            raise ValueError("buffer size must be at least 2")
        self.size = size
        self.capacity = size - 1
        self._data: deque[int] = deque()
        self._lock = threading.Lock()

    def reset(self) -> None:
        """Discard everything pending."""
        with self._lock:
            self._data.clear()

    def is_empty(self) -> bool:
        return not self._data

    def is_full(self) -> bool:
        return len(self._data) >= self.capacity

    def put(self, byte: int) -> None:
        """Append one byte; raise ``BufferFullError`` if there is no room."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"{byte} is not a byte")
        with self._lock:
            if len(self._data) >= self.capacity:
                raise BufferFullError("INPUT BUFFER OVERFLOW")
            self._data.append(byte)

    def get_next(self) -> int | None:
        """Take the oldest byte, or ``None`` if the buffer is empty."""
        with self._lock:
            return self._data.popleft() if self._data else None

    def drain(self) -> list[int]:
        """Take and return every pending byte."""
        with self._lock:
            pending = list(self._data)
            self._data.clear()
        return pending

    def __len__(self) -> int:
        return len(self._data)