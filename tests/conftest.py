"""Shared fixtures: small images built in memory or written to tmp_path."""

from pathlib import Path

import pytest
from PIL import Image

from braille_view.core.pixel import PixelGrid

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)
ORANGE = (128, 64, 32, 255)


@pytest.fixture
def small_grid() -> PixelGrid:
    """A 3x2 image: one row of named colors, one row with a hole."""
    return PixelGrid.from_rows([
        [RED, BLACK, ORANGE],
        [CLEAR, RED, BLACK],
    ])


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A 2x2 RGBA PNG on disk."""
    img = Image.new("RGBA", (2, 2))
    img.putpixel((0, 0), RED)
    img.putpixel((1, 0), BLACK)
    img.putpixel((0, 1), ORANGE)
    img.putpixel((1, 1), CLEAR)
    path = tmp_path / "sprite.png"
    img.save(path)
    return path
