"""Render a Canvas to terminal-compatible escape sequences."""

from typing import Optional

from braille_view.core.canvas import Canvas
from braille_view.core.color import Color


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.
    
    Optimizes output by only emitting SGR codes when attributes change.
    """
    
    def render_lines(self, canvas: Canvas) -> list[str]:
        """Render canvas to one ANSI string per row."""
        lines: list[str] = []
        
        for row in canvas.rows():
            line_parts: list[str] = []
            last_fg: Optional[Color] = None
            last_bold = False
            
            for cell in row:
                sgr_parts: list[str] = []
                
                if cell.bold != last_bold:
                    sgr_parts.append('1' if cell.bold else '22')
                    last_bold = cell.bold
                
                if cell.fg != last_fg:
                    sgr_parts.append(cell.fg.to_sgr_fg() if cell.fg else '39')
                    last_fg = cell.fg
                
                if sgr_parts:
                    line_parts.append(f"\x1b[{';'.join(sgr_parts)}m")
                
                line_parts.append(cell.char)
            
            # Reset at end of each line to prevent color bleeding into the next
            if last_fg is not None or last_bold:
                line_parts.append('\x1b[0m')
            
            lines.append(''.join(line_parts))
        
        return lines
