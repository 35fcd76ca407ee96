"""Viewer configuration."""

from dataclasses import dataclass

from braille_view.core.layout import CellScale


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for one viewer session."""
    scale: CellScale = CellScale.WIDE
    show_info: bool = True
    quit_key: str = "q"
    
    @property
    def title(self) -> str:
        return f"Image Display ({self.scale.label} Braille)"
