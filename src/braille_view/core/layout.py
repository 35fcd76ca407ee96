"""Placement of image pixels onto the terminal cell grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """Rectangle bounds in terminal cells."""
    x: int
    y: int
    width: int
    height: int
    
    @property
    def right(self) -> int:
        return self.x + self.width
    
    @property
    def bottom(self) -> int:
        return self.y + self.height
    
    def inner(self, margin: int = 1) -> Rect:
        """Shrink by margin on every side, never below zero size."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


class CellScale(str, Enum):
    """How many terminal cells one image pixel occupies."""
    WIDE = "wide"    # 2 columns x 1 row
    BLOCK = "block"  # 2 columns x 2 rows
    
    @property
    def factor(self) -> tuple[int, int]:
        """(columns, rows) per pixel."""
        if self == CellScale.WIDE:
            return (2, 1)
        return (2, 2)
    
    @property
    def label(self) -> str:
        cols, rows = self.factor
        return f"{cols}x{rows}"


def required_size(width: int, height: int, scale: CellScale) -> tuple[int, int]:
    """Cells (columns, rows) needed to show a width x height image unclipped."""
    sx, sy = scale.factor
    return (width * sx, height * sy)


def cell_positions(
    x: int,
    y: int,
    bounds: Rect,
    scale: CellScale = CellScale.WIDE,
) -> list[tuple[int, int]]:
    """
    Absolute (column, row) cells covered by the pixel at (x, y).
    
    Positions are laid out from the top-left of bounds. Cells outside
    bounds are dropped, so the result may be empty.
    """
    sx, sy = scale.factor
    positions: list[tuple[int, int]] = []
    for dy in range(sy):
        row = y * sy + dy
        if row < 0 or row >= bounds.height:
            continue
        for dx in range(sx):
            col = x * sx + dx
            if col < 0 or col >= bounds.width:
                continue
            positions.append((bounds.x + col, bounds.y + row))
    return positions
