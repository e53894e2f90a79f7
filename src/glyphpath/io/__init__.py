"""Font and SVG I/O layer for glyphpath.

This module reads glyph outlines from fonts using fonttools and writes
paths out as SVG documents. It keeps fonttools out of the path model.

Key responsibilities:
- Load TTF/OTF fonts
- Convert fonttools glyph outlines to Path objects (and back to pens)
- Write SVG documents sized to their paths

Key classes:
- FontReader: Load fonts and extract glyph paths
- PathPen: fonttools pen recording into a Path
- SVGWriter: Save paths as SVG
"""

from glyphpath.io.converter import PathPen, fonttools_glyph_to_path, path_to_pen
from glyphpath.io.reader import FontReader
from glyphpath.io.writer import SVGWriter

__all__ = [
    "FontReader",
    "PathPen",
    "SVGWriter",
    "fonttools_glyph_to_path",
    "path_to_pen",
]
