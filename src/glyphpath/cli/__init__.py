"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Export glyphs as SVG files with progress bars
- Print raw SVG path data for scripting
- Print glyph bounding boxes as a table
"""

from glyphpath.cli.app import cli, main

__all__ = ["cli", "main"]
