from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

@dataclass(frozen=True, slots=True)
class Pixel:
    """A single decoded RGBA pixel (8 bits per channel)."""
    r: int
    g: int
    b: int
    a: int = 255
    
    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b, self.a)):
            raise ValueError(
                f"RGBA values must be 0-255, got ({self.r}, {self.g}, {self.b}, {self.a})"
            )
    
    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
    
    @property
    def transparent(self) -> bool:
        return self.a == 0
    
    @classmethod
    def from_rgba(cls, rgba: tuple[int, int, int, int]) -> Pixel:
        r, g, b, a = rgba
        return cls(r, g, b, a)


@dataclass(frozen=True)
class PixelGrid:
    """
    An immutable decoded image.
    
    Pixels are stored row-major; ``pixels[y * width + x]`` is the pixel
    at column x, row y.
    """
    width: int
    height: int
    pixels: tuple[Pixel, ...]
    
    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid image size {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )
    
    def get(self, x: int, y: int) -> Pixel:
        """Get the pixel at position (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Position ({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self.pixels[y * self.width + x]
    
    def items(self) -> Iterator[tuple[int, int, Pixel]]:
        """Iterate over all pixels as (x, y, pixel) tuples."""
        for i, pixel in enumerate(self.pixels):
            yield i % self.width, i // self.width, pixel
    
    @classmethod
    def from_rows(cls, rows: list[list[tuple[int, int, int, int]]]) -> PixelGrid:
        """Build a grid from nested lists of RGBA tuples."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        pixels: list[Pixel] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
            pixels.extend(Pixel.from_rgba(rgba) for rgba in row)
        return cls(width, height, tuple(pixels))
