"""Full-screen image viewer loop."""

from __future__ import annotations

import sys
from typing import Optional, Protocol

from braille_view.cli.core.input import InputReader, KeyEvent
from braille_view.cli.core.terminal import Terminal
from braille_view.config import ViewerConfig
from braille_view.core.pixel import PixelGrid
from braille_view.render.frame import compose_frame
from braille_view.render.terminal import TerminalRenderer


class KeySource(Protocol):
    def read_blocking(self) -> KeyEvent:
        ...


class ViewerApp:
    """
    Shows one image until the quit key is pressed.
    
    Every keypress and every terminal resize triggers a redraw sized
    to the current terminal.
    """

    def __init__(
        self,
        grid: PixelGrid,
        config: Optional[ViewerConfig] = None,
        keys: Optional[KeySource] = None,
    ) -> None:
        self.grid = grid
        self.config = config or ViewerConfig()
        self.running = False
        self.frames = 0
        self._keys = keys
        self._renderer = TerminalRenderer()

    def run(self) -> None:
        """Main application loop."""
        self.running = True
        with Terminal.managed_mode():
            if self._keys is not None:
                self._loop(self._keys)
                return
            reader = InputReader()
            with reader.resize_events():
                self._loop(reader)

    def _loop(self, keys: KeySource) -> None:
        # Any event other than the quit key, resizes included, redraws
        while self.running:
            self._render()
            self._handle_input(keys.read_blocking())

    def render_lines(self, cols: int, rows: int) -> list[str]:
        """ANSI lines for a full frame of the given size."""
        canvas = compose_frame(self.grid, cols, rows, self.config)
        return self._renderer.render_lines(canvas)

    def _render(self) -> None:
        size = Terminal.size()
        lines = self.render_lines(size.cols, size.rows)
        
        # Raw mode: no implicit carriage return on newline
        Terminal.move_to(1, 1)
        sys.stdout.write('\r\n'.join(lines))
        sys.stdout.flush()
        self.frames += 1

    def _handle_input(self, event: KeyEvent) -> None:
        if event.char == self.config.quit_key:
            self.running = False


def run_viewer(grid: PixelGrid, config: Optional[ViewerConfig] = None) -> None:
    """Launch the viewer application."""
    app = ViewerApp(grid, config)
    app.run()
