"""Converters between fonttools pens and glyphpath paths.

This module handles the conversion in both directions:
- PathPen: a fonttools pen that records a glyph outline into a Path
- path_to_pen: replays a Path into any fonttools pen
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from glyphpath.core.renderer import PenSurface, draw_path
from glyphpath.path import Path


class PathPen(BasePen):
    """A fonttools pen that builds a Path.

    TrueType quadratic splines with implied on-curve points are split into
    single QuadraticCurveTo commands by BasePen before they reach this pen.

    Points are mapped as (x + px * scale, y + py * scale), so the default
    keeps font units unchanged.

    Example:
        pen = PathPen(glyph_set)
        glyph_set["A"].draw(pen)
        pen.path.to_path_data()
    """

    def __init__(
        self,
        glyph_set: Any = None,
        x: float = 0.0,
        y: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        """Initialize the pen.

        Args:
            glyph_set: Glyph set used to resolve components (may be None)
            x: Horizontal offset added to every point
            y: Vertical offset added to every point
            scale: Factor applied to every point before offsetting
        """
        super().__init__(glyph_set)
        self.path = Path()
        self._x = x
        self._y = y
        self._scale = scale

    def _map(self, pt: tuple[float, float]) -> tuple[float, float]:
        return (self._x + pt[0] * self._scale, self._y + pt[1] * self._scale)

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.path.move_to(*self._map(pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.line_to(*self._map(pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.curve_to(*self._map(pt1), *self._map(pt2), *self._map(pt3))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.quad_to(*self._map(pt1), *self._map(pt2))

    def _closePath(self) -> None:
        self.path.close()

    def _endPath(self) -> None:
        # Open contours end without ClosePath
        pass


def fonttools_glyph_to_path(
    fonttools_glyph: Any,
    glyph_set: Any = None,
    scale: float = 1.0,
) -> Path:
    """Convert a fonttools glyph to a Path.

    Handles both TrueType (quadratic curves) and OpenType/CFF (cubic
    curves) outlines, and resolves composite glyphs through the glyph set.

    Args:
        fonttools_glyph: The fonttools glyph object from a GlyphSet
        glyph_set: The GlyphSet the glyph came from
        scale: Factor applied to every coordinate

    Returns:
        Path in font units (y up) times scale
    """
    pen = PathPen(glyph_set, scale=scale)
    fonttools_glyph.draw(pen)
    return pen.path


def path_to_pen(path: Path, pen: Any) -> None:
    """Replay a Path into a fonttools pen.

    Args:
        path: Path to replay
        pen: Any fonttools pen (RecordingPen, BoundsPen, TTGlyphPen, ...)
    """
    surface = PenSurface(pen)
    draw_path(path, surface)
    surface.finish()
