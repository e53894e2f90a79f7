"""Bounding box accumulator for points and Bezier curves.

The box starts empty and grows as points and curves are added. Curves
contribute their true extrema (not only their end points); the extrema math
is delegated to fontTools.
"""

import math
from typing import Any

from fontTools.misc.bezierTools import calcCubicBounds, calcQuadraticBounds


class BoundingBox:
    """A minimal axis-aligned rectangle enclosing everything added to it.

    An empty box has NaN bounds. Once anything is added, x1 <= x2 and
    y1 <= y2 hold.

    Attributes:
        x1: Minimum x
        y1: Minimum y
        x2: Maximum x
        y2: Maximum y
    """

    def __init__(self) -> None:
        self.x1 = math.nan
        self.y1 = math.nan
        self.x2 = math.nan
        self.y2 = math.nan

    def is_empty(self) -> bool:
        """Check if nothing has been added to the box yet.

        Returns:
            True if any bound is still unset
        """
        return (
            math.isnan(self.x1)
            or math.isnan(self.y1)
            or math.isnan(self.x2)
            or math.isnan(self.y2)
        )

    def add_x(self, x: float) -> None:
        """Grow the box horizontally to include x."""
        if math.isnan(self.x1) or x < self.x1:
            self.x1 = x
        if math.isnan(self.x2) or x > self.x2:
            self.x2 = x

    def add_y(self, y: float) -> None:
        """Grow the box vertically to include y."""
        if math.isnan(self.y1) or y < self.y1:
            self.y1 = y
        if math.isnan(self.y2) or y > self.y2:
            self.y2 = y

    def add_point(self, x: float, y: float) -> None:
        """Grow the box to include the point (x, y)."""
        self.add_x(x)
        self.add_y(y)

    def add_quad(
        self, x0: float, y0: float, x1: float, y1: float, x: float, y: float
    ) -> None:
        """Grow the box to include a quadratic Bezier curve.

        Args:
            x0: X of the start point
            y0: Y of the start point
            x1: X of the control point
            y1: Y of the control point
            x: X of the end point
            y: Y of the end point
        """
        x_min, y_min, x_max, y_max = calcQuadraticBounds((x0, y0), (x1, y1), (x, y))
        self.add_point(x_min, y_min)
        self.add_point(x_max, y_max)

    def add_bezier(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x: float,
        y: float,
    ) -> None:
        """Grow the box to include a cubic Bezier curve.

        Args:
            x0: X of the start point
            y0: Y of the start point
            x1: X of the first control point
            y1: Y of the first control point
            x2: X of the second control point
            y2: Y of the second control point
            x: X of the end point
            y: Y of the end point
        """
        x_min, y_min, x_max, y_max = calcCubicBounds((x0, y0), (x1, y1), (x2, y2), (x, y))
        self.add_point(x_min, y_min)
        self.add_point(x_max, y_max)

    def add_box(self, other: "BoundingBox") -> None:
        """Grow the box to include another, non-empty box."""
        if other.is_empty():
            return
        self.add_point(other.x1, other.y1)
        self.add_point(other.x2, other.y2)

    @property
    def width(self) -> float:
        """float: Horizontal extent of the box."""
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        """float: Vertical extent of the box."""
        return self.y2 - self.y1

    @property
    def extent(self) -> tuple[float, float, float, float]:
        """The box as (x1, y1, x2, y2)."""
        return (self.x1, self.y1, self.x2, self.y2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x1, y1, x2, y2 fields
        """
        return {"x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}

    def __repr__(self) -> str:
        return f"BoundingBox(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"
