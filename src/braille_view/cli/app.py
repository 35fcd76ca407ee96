"""Typer CLI application."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from braille_view.config import ViewerConfig
from braille_view.core.layout import CellScale


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="braille-view",
        help="Show an image in the terminal with colored braille cells.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)
    
    @app.command()
    def view(
        image: Annotated[Path, typer.Argument(help="Image file to display (PNG, GIF, JPEG, ...)")],
        scale: Annotated[CellScale, typer.Option(
            "--scale", "-s",
            envvar="BRAILLE_VIEW_SCALE",
            help="Cells per pixel: wide = 2x1, block = 2x2",
        )] = CellScale.WIDE,
        no_info: Annotated[bool, typer.Option(
            "--no-info",
            envvar="BRAILLE_VIEW_NO_INFO",
            help="Hide the image/terminal size box",
        )] = False,
    ) -> None:
        """Display IMAGE until 'q' is pressed."""
        from braille_view.cli.viewer import run_viewer
        from braille_view.image import ImageLoadError, load_image
        
        try:
            grid = load_image(image)
        except ImageLoadError as e:
            console.print(f"[red]Cannot load image {escape(str(e.path))}:[/] {escape(e.reason)}", soft_wrap=True)
            raise typer.Exit(1)
        
        config = ViewerConfig(scale=scale, show_info=not no_info)
        
        try:
            run_viewer(grid, config)
        except (OSError, EOFError) as e:
            # Terminal state is restored by the time we get here
            console.print(f"[red]Terminal error:[/] {escape(str(e))}", soft_wrap=True)
            raise typer.Exit(1)
    
    return app
