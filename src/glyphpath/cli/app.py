"""Typer application behind the ``glyphpath`` command."""

from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import (
    console,
    create_progress,
    print_bounds_table,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
)
from glyphpath.config import (
    ExportConfig,
    GlyphPathSettings,
    LoggingConfig,
    SVGOutputOptions,
)
from glyphpath.exceptions import FontLoadError, GlyphPathError
from glyphpath.exporter import GlyphExporter
from glyphpath.io import FontReader

app = typer.Typer(
    name="glyphpath",
    help="Turn font glyph outlines into compact SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)

FontArgument = Annotated[
    Path,
    typer.Argument(help="TTF or OTF font to read", show_default=False),
]
GlyphsArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Glyph names such as A, zero or uni00E9", show_default=False),
]
CharsOption = Annotated[
    str | None,
    typer.Option("--chars", "-c", help="Characters to resolve through the cmap"),
]
DecimalPlacesOption = Annotated[
    int,
    typer.Option("--decimal-places", "-d", min=0, help="Digits after the decimal point"),
]
OptimizeOption = Annotated[
    bool,
    typer.Option("--optimize/--no-optimize", help="Drop redundant line segments"),
]
FlipYOption = Annotated[
    bool,
    typer.Option("--flip-y/--no-flip-y", help="Mirror y so outlines read top-down as in SVG"),
]


def _show_version(value: bool) -> None:
    if value:
        console.print(f"glyphpath {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Print the version and exit",
            callback=_show_version,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Turn font glyph outlines into compact SVG paths."""


def _check_font_file(font: Path) -> None:
    if not font.is_file():
        reason = "is not a file" if font.exists() else "does not exist"
        print_error(f"Font {font} {reason}")
        raise typer.Exit(code=1)


def _resolve_glyph_names(reader: FontReader, glyphs: list[str] | None, chars: str | None) -> list[str]:
    """Combine glyph names and cmap lookups of characters, keeping order."""
    names = list(glyphs or [])
    names.extend(reader.glyph_name_for_char(char) for char in chars or "")
    return list(dict.fromkeys(names))


@app.command()
def export(
    input_font: FontArgument,
    glyphs: GlyphsArgument = None,
    chars: CharsOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Target directory [default: <font>-svg]"),
    ] = None,
    decimal_places: DecimalPlacesOption = 2,
    optimize: OptimizeOption = True,
    flip_y: FlipYOption = True,
    fill: Annotated[str, typer.Option("--fill", help="Fill color, or 'none'")] = "black",
    stroke: Annotated[str | None, typer.Option("--stroke", help="Stroke color")] = None,
    stroke_width: Annotated[
        float, typer.Option("--stroke-width", min=0.0, help="Stroke width in font units")
    ] = 1.0,
    padding: Annotated[
        float, typer.Option("--padding", min=0.0, help="Margin around each viewBox in font units")
    ] = 0.0,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Also log to this file")] = None,
    log_level: Annotated[
        str, typer.Option("--log-level", help="Console log level (DEBUG|INFO|WARNING|ERROR)")
    ] = "WARNING",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="List failed glyphs")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print nothing on success")] = False,
) -> None:
    """Write one SVG file per glyph.

    With neither glyph names nor --chars, every glyph in the font is written.

    Example:
        glyphpath export Roboto-Regular.ttf A B --chars "&?" -o glyphs/
    """
    if verbose and quiet:
        print_error("--verbose and --quiet are mutually exclusive")
        raise typer.Exit(code=1)

    _check_font_file(input_font)
    output_dir = output or input_font.with_name(f"{input_font.stem}-svg")

    try:
        settings = GlyphPathSettings(
            export=ExportConfig(
                fill=fill,
                stroke=stroke,
                stroke_width=stroke_width,
                padding=padding,
                output=SVGOutputOptions(
                    decimal_places=decimal_places, optimize=optimize, flip_y=flip_y
                ),
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
                quiet=quiet,
            ),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        try:
            with FontReader(input_font) as reader:
                if not quiet:
                    print_font_info(str(input_font), reader.format, reader.glyph_count, reader.units_per_em)
                names = _resolve_glyph_names(reader, glyphs, chars) or reader.glyph_names
        except GlyphPathError:
            raise
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        exporter = GlyphExporter(settings)
        if quiet:
            stats = exporter.export(input_font, names, output_dir)
        else:
            print_step(f"Writing {len(names)} glyphs")
            with create_progress() as progress:
                task_id = progress.add_task("export", total=len(names), glyph="")

                def advance(done: int, _total: int, glyph_name: str) -> None:
                    progress.update(task_id, completed=done, glyph=glyph_name)

                stats = exporter.export(input_font, names, output_dir, advance)

            print_success(
                output_dir=str(output_dir),
                total_time_s=stats.duration_seconds,
                exported=stats.exported_count,
                skipped=stats.skipped_count,
                errors=stats.error_count,
            )
            if verbose:
                for glyph_name, message in stats.errors:
                    console.print(f"  {glyph_name}: {message}")
    except FontLoadError as e:
        print_error("Could not load font", details=e.reason)
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if stats.error_count:
        raise typer.Exit(code=1)


@app.command()
def data(
    input_font: FontArgument,
    glyphs: GlyphsArgument = None,
    chars: CharsOption = None,
    decimal_places: DecimalPlacesOption = 2,
    optimize: OptimizeOption = True,
    flip_y: FlipYOption = True,
) -> None:
    """Print SVG path data, one "name<TAB>d" line per glyph."""
    _check_font_file(input_font)
    options = SVGOutputOptions(decimal_places=decimal_places, optimize=optimize, flip_y=flip_y)

    try:
        with FontReader(input_font) as reader:
            for name in _resolve_glyph_names(reader, glyphs, chars):
                typer.echo(f"{name}\t{reader.get_path(name).to_path_data(options)}")
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def bounds(
    input_font: FontArgument,
    glyphs: GlyphsArgument = None,
    chars: CharsOption = None,
    decimal_places: DecimalPlacesOption = 2,
) -> None:
    """Print glyph bounding boxes in font units."""
    _check_font_file(input_font)

    try:
        with FontReader(input_font) as reader:
            rows = [
                (name, reader.get_path(name).get_bounding_box())
                for name in _resolve_glyph_names(reader, glyphs, chars)
            ]
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_bounds_table(rows, decimal_places)


def cli() -> None:
    """Run the glyphpath command line."""
    app()


def main() -> None:
    """Alias of cli."""
    cli()


if __name__ == "__main__":
    cli()
