"""Canvas - fixed-size 2D grid of screen cells."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from braille_view.core.cell import Cell
from braille_view.core.color import Color


@dataclass
class Canvas:
    """
    A fixed-size grid of Cells, one per terminal position.
    
    Writes outside the grid are silently dropped; reads outside it
    raise IndexError.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)
    
    def __post_init__(self) -> None:
        self.width = max(0, self.width)
        self.height = max(0, self.height)
        if not self._buffer:
            self._buffer = [
                [Cell() for _ in range(self.width)] for _ in range(self.height)
            ]
    
    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
    
    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]
    
    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y), ignoring positions off the grid."""
        if self.contains(x, y):
            self._buffer[y][x] = cell
    
    def put_char(
        self,
        x: int,
        y: int,
        char: str,
        fg: Optional[Color] = None,
        bold: bool = False,
    ) -> None:
        """Put a character at position with optional styling."""
        self.set(x, y, Cell(char, fg, bold))
    
    def put_text(
        self,
        x: int,
        y: int,
        text: str,
        fg: Optional[Color] = None,
        bold: bool = False,
        max_width: Optional[int] = None,
    ) -> None:
        """Put a string of text starting at position, clipped to max_width."""
        if max_width is not None:
            text = text[:max(0, max_width)]
        for i, char in enumerate(text):
            self.put_char(x + i, y, char, fg, bold)
    
    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer
    
    def row_text(self, y: int) -> str:
        """Characters of a row without styling."""
        return ''.join(cell.char for cell in self._buffer[y])
