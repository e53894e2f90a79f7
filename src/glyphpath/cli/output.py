"""Console output for the glyphpath CLI, rendered with Rich."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from glyphpath.core.serializer import float_to_string
from glyphpath.domain import BoundingBox

console = Console()

MARK_STEP = "▸"
MARK_DONE = "✓"
MARK_FAIL = "✗"


def create_progress() -> Progress:
    """Create the export progress display.

    The task's ``glyph`` field shows the glyph being written.

    Returns:
        Progress with a bar, an n/total counter and the elapsed time
    """
    return Progress(
        TextColumn("  [dim]{task.fields[glyph]:<12}[/dim]"),
        BarColumn(bar_width=32),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def print_header(version: str) -> None:
    console.print(f"\n[bold]glyphpath[/bold] [dim]{version}[/dim]")


def print_step(message: str) -> None:
    console.print(f"{MARK_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print a one-line font summary.

    Args:
        font_path: Path to the font file
        font_type: "TrueType" or "OpenType"
        glyph_count: Number of glyphs in the font
        upm: Units per em
    """
    console.print(f"  [bold]{font_path}[/bold] [dim]{font_type}, {glyph_count} glyphs, {upm} UPM[/dim]")


def print_bounds_table(rows: list[tuple[str, BoundingBox]], decimal_places: int) -> None:
    """Print glyph bounding boxes as a table.

    Args:
        rows: (glyph name, bounding box) pairs
        decimal_places: Precision for the printed numbers
    """
    table = Table(show_header=True, header_style="bold")
    for column in ("glyph", "x1", "y1", "x2", "y2", "width", "height"):
        table.add_column(column, justify="left" if column == "glyph" else "right")

    for name, box in rows:
        values = (box.x1, box.y1, box.x2, box.y2, box.width, box.height)
        table.add_row(name, *(float_to_string(v, decimal_places) for v in values))

    console.print(table)


def print_success(
    output_dir: str,
    total_time_s: float,
    exported: int,
    skipped: int,
    errors: int,
) -> None:
    """Print the export summary.

    Args:
        output_dir: Directory the SVG files went to
        total_time_s: Export duration in seconds
        exported: Glyphs written
        skipped: Glyphs without contours
        errors: Glyphs that failed
    """
    mark = f"[red]{MARK_FAIL}[/red]" if errors else f"[green]{MARK_DONE}[/green]"
    console.print(f"{mark} {exported} written to [bold]{output_dir}[/bold] in {total_time_s:.2f}s")
    if skipped:
        console.print(f"  [dim]{skipped} empty glyphs skipped[/dim]")
    if errors:
        console.print(f"  [red]{errors} failed[/red]")


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional second line with more context
    """
    console.print(f"[bold red]{MARK_FAIL} {message}[/bold red]")
    if details:
        console.print(f"  {details}")
