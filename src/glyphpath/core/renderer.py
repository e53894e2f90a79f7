"""Rendering adapter replaying paths onto a drawing surface.

The surface is anything with the canvas-like 2D context methods listed in
DrawingSurface. Commands are replayed one to one: no transform, no
optimization and no Y flip.
"""

from typing import TYPE_CHECKING, Any, Protocol

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)

if TYPE_CHECKING:
    from glyphpath.path import Path


class DrawingSurface(Protocol):
    """Canvas-like 2D drawing context a path can be drawn on."""

    fill_style: Any
    stroke_style: Any
    line_width: float

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None: ...

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


def is_paint(value: object) -> bool:
    """Check if a fill or stroke value actually paints something.

    Returns:
        False for None, empty strings and "none"
    """
    return bool(value) and value != "none"


def draw_path(path: "Path", surface: DrawingSurface) -> None:
    """Draw a path onto a surface, then fill and/or stroke it.

    Fill and stroke are independent: a path with both set is filled and
    then stroked.

    Args:
        path: The path to draw
        surface: Canvas-like drawing context
    """
    surface.begin_path()
    for cmd in path.commands:
        if isinstance(cmd, MoveTo):
            surface.move_to(cmd.x, cmd.y)
        elif isinstance(cmd, LineTo):
            surface.line_to(cmd.x, cmd.y)
        elif isinstance(cmd, CubicCurveTo):
            surface.bezier_curve_to(cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
        elif isinstance(cmd, QuadraticCurveTo):
            surface.quadratic_curve_to(cmd.x1, cmd.y1, cmd.x, cmd.y)
        elif isinstance(cmd, ClosePath):
            surface.close_path()

    if is_paint(path.fill):
        surface.fill_style = path.fill
        surface.fill()

    if is_paint(path.stroke):
        surface.stroke_style = path.stroke
        surface.line_width = path.stroke_width
        surface.stroke()


class PenSurface:
    """Drawing surface that forwards outlines to a fontTools pen.

    Lets a path be drawn into any fontTools pen (RecordingPen, BoundsPen,
    TTGlyphPen, ...). Paint settings are accepted and ignored, since pens
    only record outlines.

    A pen requires every contour to start with moveTo, so a subpath that
    begins without one is given a moveTo at the current point. Open
    subpaths are finished with endPath.

    Example:
        pen = RecordingPen()
        path.draw(PenSurface(pen))
    """

    def __init__(self, pen: Any) -> None:
        self._pen = pen
        self._current: tuple[float, float] = (0.0, 0.0)
        self._start: tuple[float, float] = (0.0, 0.0)
        self._open = False
        self.fill_style: Any = None
        self.stroke_style: Any = None
        self.line_width: float = 1

    def _ensure_open(self) -> None:
        if not self._open:
            self._pen.moveTo(self._current)
            self._start = self._current
            self._open = True

    def begin_path(self) -> None:
        self._current = (0.0, 0.0)
        self._start = (0.0, 0.0)
        self._open = False

    def move_to(self, x: float, y: float) -> None:
        if self._open:
            self._pen.endPath()
        self._pen.moveTo((x, y))
        self._current = self._start = (x, y)
        self._open = True

    def line_to(self, x: float, y: float) -> None:
        self._ensure_open()
        self._pen.lineTo((x, y))
        self._current = (x, y)

    def bezier_curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._ensure_open()
        self._pen.curveTo((x1, y1), (x2, y2), (x, y))
        self._current = (x, y)

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._ensure_open()
        self._pen.qCurveTo((x1, y1), (x, y))
        self._current = (x, y)

    def close_path(self) -> None:
        if self._open:
            self._pen.closePath()
            self._open = False
        self._current = self._start

    def finish(self) -> None:
        """End a trailing open subpath, if any."""
        if self._open:
            self._pen.endPath()
            self._open = False

    def fill(self) -> None:
        self.finish()

    def stroke(self) -> None:
        self.finish()
