"""Color classes produced by pixel classification."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    TRANSPARENT = "none"    # Not drawn at all
    STANDARD_16 = "16"      # Named colors (SGR 30-37, 40-47)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)


@dataclass(frozen=True)
class Color:
    """
    A terminal color value.
    
    Either transparent, one of the 8 named ANSI colors, or an index
    into the 256-color palette.
    """
    mode: ColorMode
    value: int
    
    TRANSPARENT: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    
    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)
    
    @property
    def is_transparent(self) -> bool:
        return self.mode == ColorMode.TRANSPARENT
    
    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            return str(30 + self.value)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRANSPARENT
            return "39"


Color.TRANSPARENT = Color(ColorMode.TRANSPARENT, 0)
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
