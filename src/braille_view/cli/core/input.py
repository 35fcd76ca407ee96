"""Blocking keyboard input for the viewer loop."""

from __future__ import annotations

import os
import select
import signal
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class KeyEvent:
    """One keypress, one escape sequence read as a unit, or a resize."""
    raw: str
    resize: bool = False
    
    @property
    def char(self) -> Optional[str]:
        """The character typed, None for escape sequences and control keys."""
        if len(self.raw) == 1 and self.raw.isprintable():
            return self.raw
        return None


class InputReader:
    """
    Reads key events from a file descriptor.
    
    Uses os.read() to bypass Python's I/O buffering so that a whole
    escape sequence (arrow keys etc.) arrives as one event. Inside
    resize_events(), a terminal resize also ends the wait.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending: list[str] = []
        self._wake_r: Optional[int] = None
        self._wake_w: Optional[int] = None

    @contextmanager
    def resize_events(self) -> Iterator[None]:
        """Deliver SIGWINCH as a resize KeyEvent (Unix only)."""
        if not hasattr(signal, "SIGWINCH"):
            yield
            return
        self._wake_r, self._wake_w = os.pipe()
        os.set_blocking(self._wake_w, False)
        previous = signal.signal(signal.SIGWINCH, self._on_resize)
        try:
            yield
        finally:
            signal.signal(signal.SIGWINCH, previous)
            os.close(self._wake_r)
            os.close(self._wake_w)
            self._wake_r = self._wake_w = None

    def _on_resize(self, signum: int, frame: object) -> None:
        if self._wake_w is None:
            return
        try:
            os.write(self._wake_w, b"\0")
        except BlockingIOError:
            pass  # pipe full, a wakeup is already pending

    def read_blocking(self) -> KeyEvent:
        """Wait, with no timeout, for the next key event or resize."""
        while not self._pending:
            fds = [self._fd] if self._wake_r is None else [self._fd, self._wake_r]
            ready, _, _ = select.select(fds, [], [])
            if self._wake_r is not None and self._wake_r in ready:
                os.read(self._wake_r, 1024)
                return KeyEvent("", resize=True)
            data = os.read(self._fd, 1024)
            if not data:
                raise EOFError("Input closed")
            self._pending.extend(self._split(data.decode('utf-8', errors='replace')))
        return KeyEvent(self._pending.pop(0))

    @staticmethod
    def _split(text: str) -> list[str]:
        """Split a chunk into single keys, keeping escape sequences whole."""
        keys: list[str] = []
        i = 0
        while i < len(text):
            if text[i] != '\x1b':
                keys.append(text[i])
                i += 1
                continue
            
            nxt = text[i + 1] if i + 1 < len(text) else ''
            if nxt in ('[', 'O'):
                # CSI/SS3: runs up to a final letter or ~
                j = i + 2
                while j < len(text) and text[j] != '\x1b':
                    ch = text[j]
                    j += 1
                    if ch.isalpha() or ch == '~':
                        break
            elif nxt and nxt != '\x1b':
                j = i + 2  # Alt+key
            else:
                j = i + 1  # Bare escape
            keys.append(text[i:j])
            i = j
        return keys
