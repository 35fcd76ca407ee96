"""Cells - what a pixel becomes, and what the screen holds."""

from dataclasses import dataclass
from typing import Optional

from braille_view.core.color import Color


@dataclass(frozen=True, slots=True)
class DisplayCell:
    """A glyph and the color to draw it in, computed from one pixel."""
    char: str
    color: Color


@dataclass(slots=True)
class Cell:
    """
    A single character cell on screen.
    
    ``fg`` of None means the terminal's default foreground.
    """
    char: str = ' '
    fg: Optional[Color] = None
    bold: bool = False
