"""Core data structures and the pixel mapping."""

from braille_view.core.pixel import Pixel, PixelGrid
from braille_view.core.color import Color, ColorMode
from braille_view.core.cell import Cell, DisplayCell
from braille_view.core.canvas import Canvas
from braille_view.core.layout import CellScale, Rect, cell_positions, required_size
from braille_view.core.mapper import classify, glyph_for, map_pixel

__all__ = [
    "Pixel",
    "PixelGrid",
    "Color",
    "ColorMode",
    "Cell",
    "DisplayCell",
    "Canvas",
    "CellScale",
    "Rect",
    "cell_positions",
    "required_size",
    "classify",
    "glyph_for",
    "map_pixel",
]
