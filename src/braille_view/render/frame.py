"""Compose a full viewer screen: border, image, info box and warnings."""

from __future__ import annotations

from braille_view.config import ViewerConfig
from braille_view.core.canvas import Canvas
from braille_view.core.cell import Cell
from braille_view.core.color import Color
from braille_view.core.layout import CellScale, Rect, cell_positions, required_size
from braille_view.core.mapper import map_pixel
from braille_view.core.pixel import PixelGrid

# Box drawing
TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
HORIZONTAL, VERTICAL = "─", "│"

INFO_HEIGHT = 5
WARNING_TEXT = "Warning: Terminal too small!"


def draw_box(canvas: Canvas, bounds: Rect, title: str = "") -> None:
    """Draw a single-line border around bounds, with an optional title."""
    if bounds.width < 2 or bounds.height < 2:
        return
    
    left, top = bounds.x, bounds.y
    right, bottom = bounds.right - 1, bounds.bottom - 1
    
    for x in range(left + 1, right):
        canvas.put_char(x, top, HORIZONTAL)
        canvas.put_char(x, bottom, HORIZONTAL)
    for y in range(top + 1, bottom):
        canvas.put_char(left, y, VERTICAL)
        canvas.put_char(right, y, VERTICAL)
    
    canvas.put_char(left, top, TOP_LEFT)
    canvas.put_char(right, top, TOP_RIGHT)
    canvas.put_char(left, bottom, BOTTOM_LEFT)
    canvas.put_char(right, bottom, BOTTOM_RIGHT)
    
    if title:
        canvas.put_text(left + 1, top, title, bold=True, max_width=bounds.width - 2)


def draw_image(
    canvas: Canvas,
    grid: PixelGrid,
    bounds: Rect,
    scale: CellScale = CellScale.WIDE,
) -> int:
    """
    Paint every visible pixel of grid into bounds.
    
    Transparent pixels leave their cells untouched. Returns the number
    of cells written.
    """
    written = 0
    for x, y, pixel in grid.items():
        positions = cell_positions(x, y, bounds, scale)
        if not positions:
            continue
        display = map_pixel(pixel)
        if display is None:
            continue
        for col, row in positions:
            canvas.set(col, row, Cell(display.char, display.color))
            written += 1
    return written


def info_lines(grid: PixelGrid, area: Rect, config: ViewerConfig) -> list[str]:
    return [
        f"Image: {grid.width}x{grid.height} pixels",
        f"Terminal area: {area.width}x{area.height} cells",
        f"Press '{config.quit_key}' to quit",
    ]


def draw_info(canvas: Canvas, grid: PixelGrid, area: Rect, config: ViewerConfig) -> None:
    """Boxed debug info in the top-right corner of area."""
    lines = info_lines(grid, area, config)
    width = min(area.width, max(len(line) for line in lines) + 2)
    height = min(area.height, INFO_HEIGHT)
    if width < 3 or height < 3:
        return
    
    box = Rect(area.right - width, area.y, width, height)
    body = box.inner()
    for y in range(body.y, body.bottom):
        for x in range(body.x, body.right):
            canvas.put_char(x, y, ' ')
    draw_box(canvas, box)
    for i, line in enumerate(lines[:body.height]):
        canvas.put_text(body.x, body.y + i, line, max_width=body.width)


def is_too_small(grid: PixelGrid, area: Rect, scale: CellScale) -> bool:
    """Whether area cannot show the whole image."""
    need_w, need_h = required_size(grid.width, grid.height, scale)
    return area.width < need_w or area.height < need_h


def compose_frame(
    grid: PixelGrid,
    cols: int,
    rows: int,
    config: ViewerConfig = ViewerConfig(),
) -> Canvas:
    """Build the complete screen for a cols x rows terminal."""
    canvas = Canvas(cols, rows)
    screen = Rect(0, 0, canvas.width, canvas.height)
    if screen.width < 2 or screen.height < 2:
        return canvas
    
    draw_box(canvas, screen, config.title)
    area = screen.inner()
    
    draw_image(canvas, grid, area, config.scale)
    
    if config.show_info:
        draw_info(canvas, grid, area, config)
    
    if area.height > 0 and is_too_small(grid, area, config.scale):
        canvas.put_text(
            area.x, area.bottom - 1, WARNING_TEXT,
            fg=Color.RED, bold=True, max_width=area.width,
        )
    
    return canvas
