"""Renderers for putting images on a terminal."""

from braille_view.render.terminal import TerminalRenderer
from braille_view.render.frame import compose_frame, draw_image

__all__ = ["TerminalRenderer", "compose_frame", "draw_image"]
