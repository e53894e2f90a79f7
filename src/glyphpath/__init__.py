"""glyphpath - Vector glyph paths with SVG path-data output.

glyphpath models glyph and shape outlines as an ordered list of drawing
commands (move, line, cubic curve, quadratic curve, close). A path can report
its bounding box, replay itself onto a canvas-like drawing surface, and
serialize itself to compact SVG path data.

Example:
    $ glyphpath export Roboto-Regular.ttf A B C -o glyphs/

This will write glyphs/A.svg, glyphs/B.svg and glyphs/C.svg.
"""

__version__ = "0.1.0"

from glyphpath.domain import (
    BoundingBox,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)
from glyphpath.path import Path

__all__ = [
    "BoundingBox",
    "ClosePath",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "Path",
    "QuadraticCurveTo",
    "__version__",
]
