"""Tests for the viewer loop with a fake keyboard and terminal."""

from contextlib import contextmanager
from typing import Iterator

import pytest

from braille_view.cli.core.input import KeyEvent
from braille_view.cli.core.terminal import Terminal, TerminalSize
from braille_view.cli.viewer import ViewerApp
from braille_view.config import ViewerConfig
from braille_view.core.pixel import PixelGrid


class ScriptedKeys:
    """Returns a fixed sequence of key events."""

    def __init__(self, *events: "str | KeyEvent") -> None:
        self._events = [e if isinstance(e, KeyEvent) else KeyEvent(e) for e in events]
        self.reads = 0

    def read_blocking(self) -> KeyEvent:
        self.reads += 1
        return self._events.pop(0)


@pytest.fixture
def fake_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    @contextmanager
    def managed_mode() -> Iterator[None]:
        yield

    monkeypatch.setattr(Terminal, "managed_mode", staticmethod(managed_mode))
    monkeypatch.setattr(Terminal, "size", staticmethod(lambda: TerminalSize(10, 40)))


class TestViewerApp:
    """Tests for ViewerApp."""

    @pytest.mark.usefixtures("fake_terminal")
    def test_quits_on_q(self, small_grid: PixelGrid) -> None:
        keys = ScriptedKeys("q")
        app = ViewerApp(small_grid, keys=keys)
        app.run()
        assert app.running is False
        assert app.frames == 1
        assert keys.reads == 1

    @pytest.mark.usefixtures("fake_terminal")
    def test_other_keys_redraw(self, small_grid: PixelGrid) -> None:
        keys = ScriptedKeys("x", "\x1b[A", "Q", "q")
        app = ViewerApp(small_grid, keys=keys)
        app.run()
        assert app.frames == 4

    @pytest.mark.usefixtures("fake_terminal")
    def test_resize_redraws(self, small_grid: PixelGrid) -> None:
        keys = ScriptedKeys(KeyEvent("", resize=True), KeyEvent("", resize=True), "q")
        app = ViewerApp(small_grid, keys=keys)
        app.run()
        assert app.frames == 3
        assert app.running is False

    @pytest.mark.usefixtures("fake_terminal")
    def test_writes_frame(self, small_grid: PixelGrid, capsys: pytest.CaptureFixture[str]) -> None:
        app = ViewerApp(small_grid, ViewerConfig(show_info=False), keys=ScriptedKeys("q"))
        app.run()
        out = capsys.readouterr().out
        assert out.startswith("\x1b[1;1H")
        assert "Image Display (2x1 Braille)" in out
        assert "\x1b[31m⣿⣿" in out
        assert out.count("\r\n") == 9

    def test_render_lines_size(self, small_grid: PixelGrid) -> None:
        lines = ViewerApp(small_grid).render_lines(30, 6)
        assert len(lines) == 6
