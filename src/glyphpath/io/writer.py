"""SVG writer for saving paths as standalone SVG documents.

This module provides the SVGWriter class for writing one or more paths
into an SVG file whose viewBox encloses all of them.
"""

from collections.abc import Mapping
from pathlib import Path as FilePath
from typing import Any

from glyphpath.config.settings import SVGOutputOptions
from glyphpath.core.serializer import float_to_string
from glyphpath.domain.bbox import BoundingBox
from glyphpath.exceptions import ExportError
from glyphpath.path import SVG_NAMESPACE, Path


class SVGWriter:
    """Writes paths to an SVG document.

    Mirroring a path around its own bounding box keeps the box in place,
    so the viewBox is the union of the paths' bounding boxes whichever
    Y flip setting is used.

    Example:
        writer = SVGWriter(FilePath("glyph.svg"))
        writer.add_path(path)
        writer.save()
    """

    def __init__(
        self,
        output_path: FilePath,
        options: SVGOutputOptions | Mapping[str, Any] | int | None = None,
        padding: float = 0.0,
    ) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the SVG will be saved
            options: Path data output options for every path
            padding: Extra space added around the viewBox on all sides
        """
        self._output_path = output_path
        self._options = SVGOutputOptions.coerce(options)
        self._padding = padding
        self._paths: list[Path] = []

    @property
    def paths(self) -> list[Path]:
        """Paths added so far."""
        return list(self._paths)

    def add_path(self, path: Path) -> None:
        """Queue a path for writing."""
        self._paths.append(path)

    def view_box(self) -> BoundingBox:
        """Compute the box enclosing every queued path, including padding.

        Returns:
            BoundingBox; (0, 0, 0, 0) plus padding when nothing was added
        """
        box = BoundingBox()
        for path in self._paths:
            box.add_box(path.get_bounding_box())
        if box.is_empty():
            box.add_point(0, 0)
        box.add_point(box.x1 - self._padding, box.y1 - self._padding)
        box.add_point(box.x2 + self._padding, box.y2 + self._padding)
        return box

    def render(self) -> str:
        """Render the SVG document text."""
        places = self._options.decimal_places
        box = self.view_box()
        view_box = " ".join(
            float_to_string(v, places) for v in (box.x1, box.y1, box.width, box.height)
        )
        lines = [f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{view_box}">']
        lines.extend(f"  {path.to_svg(self._options)}" for path in self._paths)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self) -> None:
        """Save the SVG document to the output path.

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            self._output_path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise ExportError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_svg_path(output_dir: FilePath, glyph_name: str) -> FilePath:
        """Generate the output file path for a glyph.

        Converts: ("out", "A") -> out/A.svg

        Args:
            output_dir: Directory to write into
            glyph_name: Name of the glyph

        Returns:
            Path of the SVG file for the glyph
        """
        return output_dir / f"{glyph_name}.svg"
