"""Decode image files into pixel grids.

Any format Pillow can open is accepted. The image is converted to RGBA and
kept at its original size; one image pixel becomes one run of terminal
cells, so large images are simply clipped by the viewer.

Example:
    from braille_view.image import load_image
    
    grid = load_image("sprite.png")
    print(grid.width, grid.height)
"""

from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from braille_view.core.pixel import PixelGrid


class ImageLoadError(Exception):
    """An image file could not be read or decoded."""
    
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def from_pil(img: "Image.Image") -> PixelGrid:
    """Convert an already opened Pillow image to a PixelGrid."""
    rgba = img.convert("RGBA")
    width, height = rgba.size
    data = rgba.load()
    return PixelGrid.from_rows(
        [[data[x, y] for x in range(width)] for y in range(height)]
    )


def load_image(path: Union[str, Path]) -> PixelGrid:
    """
    Load an image file as an RGBA pixel grid.
    
    Raises:
        ImageLoadError: If the file is missing, unreadable, or not an image
    """
    path = Path(path)
    
    if not path.exists():
        raise ImageLoadError(path, "file not found")
    if path.is_dir():
        raise ImageLoadError(path, "is a directory")
    
    try:
        with Image.open(path) as img:
            return from_pil(img)
    except Image.DecompressionBombError as e:
        raise ImageLoadError(path, f"image too large: {e}") from e
    except UnidentifiedImageError:
        raise ImageLoadError(path, "unrecognized image format") from None
    except OSError as e:
        raise ImageLoadError(path, e.strerror or str(e)) from e
