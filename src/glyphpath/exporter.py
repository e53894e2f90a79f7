"""Glyph export orchestration.

This module coordinates the export workflow: load a font, convert the
requested glyphs to paths, apply paint settings and write one SVG file
per glyph.
"""

import time
from collections.abc import Callable, Iterable
from pathlib import Path as FilePath

from glyphpath.config import GlyphPathSettings
from glyphpath.exceptions import ExportError, GlyphNotFoundError
from glyphpath.io import FontReader, SVGWriter
from glyphpath.path import Path
from glyphpath.utils import ExportLogger, ExportStats, configure_logging


class GlyphExporter:
    """Exports glyph outlines from a font as SVG files.

    Example:
        settings = GlyphPathSettings()
        exporter = GlyphExporter(settings)
        stats = exporter.export(
            font_path=FilePath("font.ttf"),
            glyph_names=["A", "B"],
            output_dir=FilePath("out"),
        )
    """

    def __init__(self, config: GlyphPathSettings) -> None:
        """Initialize the exporter with configuration.

        Args:
            config: Settings containing export and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )
        self.export_logger = ExportLogger(self.logger)

    def style_path(self, path: Path) -> Path:
        """Apply the configured fill and stroke to a path.

        Args:
            path: Path to paint

        Returns:
            The same path, painted
        """
        export = self.config.export
        path.fill = export.fill
        path.stroke = export.stroke
        path.stroke_width = export.stroke_width
        return path

    def export(
        self,
        font_path: FilePath,
        glyph_names: Iterable[str],
        output_dir: FilePath,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> ExportStats:
        """Export glyphs as SVG files.

        Missing glyphs and write failures are logged and counted; the
        remaining glyphs are still exported. Glyphs without contours are
        skipped.

        Args:
            font_path: Path to the input font
            glyph_names: Names of the glyphs to export
            output_dir: Directory receiving one <name>.svg per glyph
            progress_callback: Called with (completed, total, glyph name)
                after each glyph

        Returns:
            ExportStats for the run

        Raises:
            FileNotFoundError: If the font file does not exist
        """
        names = list(glyph_names)
        stats = self.export_logger.stats
        stats.start_time = time.time()
        output_dir.mkdir(parents=True, exist_ok=True)

        self.logger.info(
            "Starting export",
            font=str(font_path),
            glyphs=len(names),
            output_dir=str(output_dir),
        )

        with FontReader(font_path) as reader:
            for done, name in enumerate(names, start=1):
                self.export_logger.log_glyph_start(name)
                try:
                    path = reader.get_path(name)
                    if len(path) == 0:
                        self.export_logger.log_glyph_skipped(name, "empty outline")
                    else:
                        output_path = SVGWriter.get_svg_path(output_dir, name)
                        writer = SVGWriter(
                            output_path,
                            options=self.config.export.output,
                            padding=self.config.export.padding,
                        )
                        writer.add_path(self.style_path(path))
                        writer.save()
                        self.export_logger.log_glyph_exported(
                            name, len(path), str(output_path)
                        )
                except (GlyphNotFoundError, ExportError) as e:
                    self.export_logger.log_glyph_error(name, e)

                if progress_callback is not None:
                    progress_callback(done, len(names), name)

        stats.end_time = time.time()
        self.logger.info(
            "Export complete",
            exported=stats.exported_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats
