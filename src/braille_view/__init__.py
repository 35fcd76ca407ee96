"""
braille-view: show images in the terminal

Each image pixel is drawn as colored braille cells using ANSI colors.

Quick Start:
    >>> import braille_view as bv
    >>> grid = bv.load_image("sprite.png")
    >>> bv.classify(grid.get(0, 0))
    >>> bv.run_viewer(grid)

Features:
    - Named ANSI colors for pure black and saturated primaries
    - 216-color cube quantization for everything else
    - Transparent pixels leave the terminal untouched
    - Full-screen viewer with border, size info and a too-small warning
"""

__version__ = "0.1.0"

# Core types
from braille_view.core.pixel import Pixel, PixelGrid
from braille_view.core.color import Color, ColorMode
from braille_view.core.cell import DisplayCell
from braille_view.core.layout import CellScale, Rect, cell_positions

# Mapping
from braille_view.core.mapper import classify, glyph_for, map_pixel

# Configuration
from braille_view.config import ViewerConfig

# Image loading
from braille_view.image import ImageLoadError, load_image


def run_viewer(grid: PixelGrid, config: ViewerConfig | None = None) -> None:
    """Show grid full-screen until the quit key is pressed."""
    from braille_view.cli.viewer import run_viewer as _run
    _run(grid, config)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Pixel",
    "PixelGrid",
    "Color",
    "ColorMode",
    "DisplayCell",
    "CellScale",
    "Rect",
    "cell_positions",
    # Mapping
    "classify",
    "glyph_for",
    "map_pixel",
    # Config
    "ViewerConfig",
    # Images
    "ImageLoadError",
    "load_image",
    "run_viewer",
]
