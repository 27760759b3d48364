"""Reading key presses from a terminal into an input buffer."""

from __future__ import annotations

import io
import os
import select
import sys
from typing import IO, Any

from .input_buffer import BufferFullError, InputBuffer

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]

_READ_CHUNK = 64


class KeyReader:
    """Moves incoming bytes into an :class:`InputBuffer` and hands them out.

    Used as a context manager on a terminal, it switches the terminal to
    unbuffered input without echo for its duration.  Bytes that arrive while
    the buffer is full are dropped and counted in ``overflows``.
    """

    def __init__(self, stream: IO[Any] | None = None, buffer: InputBuffer | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.buffer = buffer if buffer is not None else InputBuffer()
        self.eof = False
        self.overflows = 0
        self._fd = self._fileno()
        self._saved_mode: list[Any] | None = None

    def _fileno(self) -> int | None:
        try:
            return self.stream.fileno()
        except (AttributeError, OSError, io.UnsupportedOperation, ValueError):
            return None

    def __enter__(self) -> KeyReader:
        fd = self._fd
        if termios is not None and fd is not None and os.isatty(fd):
            self._saved_mode = termios.tcgetattr(fd)
            mode = termios.tcgetattr(fd)
            mode[0] &= ~termios.ICRNL
            mode[3] &= ~(termios.ECHO | termios.ICANON)
            mode[6][termios.VMIN] = 1
            mode[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, mode)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_mode is not None and termios is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def _store(self, data: bytes) -> None:
        for byte in data:
            try:
                self.buffer.put(byte)
            except BufferFullError:
                self.overflows += 1

    def _receive(self, timeout: float | None) -> None:
        if self.eof:
            return
        if self._fd is None:
            data = self.stream.read(1)
            if isinstance(data, str):
                data = data.encode("utf-8")
        else:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            if not ready:
                return
            data = os.read(self._fd, _READ_CHUNK)
        if not data:
            self.eof = True
            return
        self._store(data)

    def poll(self, timeout: float | None = 0.0) -> int | None:
        """The next byte, waiting up to ``timeout`` seconds; ``None`` if none came.

        A ``timeout`` of ``None`` waits until something arrives or input ends.
        """
        self._receive(timeout if self.buffer.is_empty() else 0.0)
        return self.buffer.get_next()

    def wait_key(self) -> int:
        """Block until a byte is available; ``EOFError`` once input has ended."""
        while True:
            byte = self.poll(None)
            if byte is not None:
                return byte
            if self.eof:
                raise EOFError("input closed")