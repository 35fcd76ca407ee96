"""Pixel to terminal cell mapping.

Every RGBA pixel maps to exactly one terminal color and braille glyph, or
to nothing at all when it is fully transparent:

- alpha 0: transparent, the cell is left untouched
- pure black and the seven fully saturated primaries/secondaries: the
  matching named ANSI color
- everything else: the nearest entry of the 6x6x6 color cube (16-231)

Black is drawn with the empty braille pattern so that it occupies the cell
without painting anything, which keeps it distinct from the untouched
background of a transparent pixel.
"""

from __future__ import annotations

from typing import Optional

from braille_view.core.cell import DisplayCell
from braille_view.core.color import Color
from braille_view.core.pixel import Pixel

BRAILLE_BLANK = "⠀"  # All dots off
BRAILLE_FULL = "⣿"   # All dots on

SATURATED = 0xFF
CUBE_OFFSET = 16
CUBE_STEP = 51.0

# Checked in order, first match wins
NAMED_COLORS: tuple[tuple[tuple[bool, bool, bool], Color], ...] = (
    ((False, False, False), Color.BLACK),
    ((True, False, False), Color.RED),
    ((False, True, False), Color.GREEN),
    ((False, False, True), Color.BLUE),
    ((True, True, False), Color.YELLOW),
    ((False, True, True), Color.CYAN),
    ((True, False, True), Color.MAGENTA),
    ((True, True, True), Color.WHITE),
)


def _matches(channel: int, lit: bool) -> bool:
    return channel >= SATURATED if lit else channel == 0


def cube_index(r: int, g: int, b: int) -> int:
    """Index of the 216-color cube entry nearest to an RGB triple."""
    # c / 51 never lands on .5 for integer c, so round() has no ties here
    qr = round(r / CUBE_STEP)
    qg = round(g / CUBE_STEP)
    qb = round(b / CUBE_STEP)
    return CUBE_OFFSET + 36 * qr + 6 * qg + qb


def classify(pixel: Pixel) -> Color:
    """Map a pixel to its terminal color class."""
    if pixel.transparent:
        return Color.TRANSPARENT
    
    for (lit_r, lit_g, lit_b), color in NAMED_COLORS:
        if (
            _matches(pixel.r, lit_r)
            and _matches(pixel.g, lit_g)
            and _matches(pixel.b, lit_b)
        ):
            return color
    
    return Color.from_256(cube_index(*pixel.rgb))


def glyph_for(color: Color) -> Optional[str]:
    """Glyph used to draw a color class, None if nothing should be drawn."""
    if color.is_transparent:
        return None
    if color == Color.BLACK:
        return BRAILLE_BLANK
    return BRAILLE_FULL


def map_pixel(pixel: Pixel) -> Optional[DisplayCell]:
    """Convert a pixel to a display cell, or None to skip it."""
    color = classify(pixel)
    glyph = glyph_for(color)
    if glyph is None:
        return None
    return DisplayCell(glyph, color)
