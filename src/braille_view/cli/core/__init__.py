"""Terminal I/O and keyboard input."""

from braille_view.cli.core.terminal import Terminal, TerminalSize
from braille_view.cli.core.input import InputReader, KeyEvent

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
]
