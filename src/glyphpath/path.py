"""Bezier path made of SVG-like drawing commands.

A Path holds an ordered list of commands (the drawing script) plus the
fill and stroke it is painted with. Paths can report their bounding box,
draw themselves onto a canvas-like surface, and serialize to SVG.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from xml.etree import ElementTree
from xml.sax.saxutils import quoteattr

from glyphpath.config.settings import SVGOutputOptions
from glyphpath.core.bounds import compute_bounding_box
from glyphpath.core.renderer import DrawingSurface, draw_path, is_paint
from glyphpath.core.serializer import format_attribute_number, to_path_data
from glyphpath.domain.bbox import BoundingBox
from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    command_from_dict,
    command_to_dict,
)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

OutputOptions = SVGOutputOptions | Mapping[str, Any] | int | None


class Path:
    """A Bezier path containing a list of drawing commands.

    Commands are appended through the builder methods or ``extend`` and are
    never validated: a LineTo before any MoveTo simply starts at (0, 0).

    Example:
        path = Path()
        path.move_to(0, 0)
        path.line_to(100, 0)
        path.quad_to(100, 100, 0, 100)
        path.close()
        path.to_path_data(0)  # "M0 0L100 0Q100 100 0 100Z"

    Attributes:
        commands: Drawing commands in order
        fill: Fill color; None or "none" for no fill
        stroke: Stroke color; None for no stroke
        stroke_width: Stroke width, used only when stroke is set
    """

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []
        self.fill: str | None = "black"
        self.stroke: str | None = None
        self.stroke_width: float = 1

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        self.commands.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        """Draw a line to (x, y)."""
        self.commands.append(LineTo(x, y))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Draw a cubic curve to (x, y).

        Args:
            x1: X of the first control point
            y1: Y of the first control point
            x2: X of the second control point
            y2: Y of the second control point
            x: X of the end point
            y: Y of the end point
        """
        self.commands.append(CubicCurveTo(x1, y1, x2, y2, x, y))

    bezier_curve_to = curve_to

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Draw a quadratic curve to (x, y).

        Args:
            x1: X of the control point
            y1: Y of the control point
            x: X of the end point
            y: Y of the end point
        """
        self.commands.append(QuadraticCurveTo(x1, y1, x, y))

    quadratic_curve_to = quad_to

    def close(self) -> None:
        """Close the current subpath."""
        self.commands.append(ClosePath())

    close_path = close

    def extend(self, source: "Path | BoundingBox | Iterable[PathCommand]") -> None:
        """Add another path, a bounding box, or a list of commands to this path.

        Commands taken from another path or list are the same objects, not
        copies. They are immutable, so later changes to the source's list do
        not reach this path.

        A bounding box is added as a closed rectangle:
        M(x1, y1) L(x2, y1) L(x2, y2) L(x1, y2) Z.

        Args:
            source: Another Path (or anything with a ``commands`` list),
                a BoundingBox, or an iterable of commands
        """
        if hasattr(source, "commands"):
            source = source.commands
        elif isinstance(source, BoundingBox):
            box = source
            self.move_to(box.x1, box.y1)
            self.line_to(box.x2, box.y1)
            self.line_to(box.x2, box.y2)
            self.line_to(box.x1, box.y2)
            self.close()
            return

        self.commands.extend(source)

    def get_bounding_box(self) -> BoundingBox:
        """Calculate the bounding box of the path.

        Returns:
            BoundingBox of the outline; (0, 0, 0, 0) for an empty path

        Raises:
            UnexpectedCommandError: If the command list holds a foreign object
        """
        return compute_bounding_box(self.commands)

    def draw(self, surface: DrawingSurface) -> None:
        """Draw the path onto a canvas-like 2D surface.

        Args:
            surface: Drawing context (see DrawingSurface)
        """
        draw_path(self, surface)

    def to_path_data(self, options: OutputOptions = None, **overrides: Any) -> str:
        """Convert the path to an SVG path data string.

        Args:
            options: SVGOutputOptions, a mapping of option values, or a bare
                number of decimal places (which also disables the Y flip)
            **overrides: Individual option values applied on top of options

        Returns:
            Path data string; the path itself is never modified
        """
        resolved = SVGOutputOptions.coerce(options)
        if overrides:
            resolved = SVGOutputOptions(**{**resolved.model_dump(), **overrides})
        return to_path_data(self.commands, resolved)

    def to_svg(self, options: OutputOptions = None) -> str:
        """Convert the path to an SVG <path> element, as a string.

        Black fill is the SVG default and is left out.

        Args:
            options: Same as for to_path_data

        Returns:
            Self-closing <path/> element text
        """
        svg = f'<path d="{self.to_path_data(options)}"'
        if not is_paint(self.fill):
            svg += ' fill="none"'
        elif self.fill != "black":
            svg += f" fill={quoteattr(self.fill)}"

        if is_paint(self.stroke):
            svg += f" stroke={quoteattr(self.stroke)}"
            svg += f' stroke-width="{format_attribute_number(self.stroke_width)}"'

        svg += "/>"
        return svg

    def to_dom_element(self, options: OutputOptions = None) -> ElementTree.Element:
        """Convert the path to a namespaced SVG path element.

        Args:
            options: Same as for to_path_data

        Returns:
            ElementTree element {http://www.w3.org/2000/svg}path with "d" set
        """
        element = ElementTree.Element(f"{{{SVG_NAMESPACE}}}path")
        element.set("d", self.to_path_data(options))
        return element

    def copy(self) -> "Path":
        """Return a new path with the same commands and paint settings."""
        other = Path()
        other.commands = list(self.commands)
        other.fill = self.fill
        other.stroke = self.stroke
        other.stroke_width = self.stroke_width
        return other

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __repr__(self) -> str:
        return f"Path(commands={len(self.commands)}, fill={self.fill!r}, stroke={self.stroke!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with commands and paint settings
        """
        return {
            "commands": [command_to_dict(cmd) for cmd in self.commands],
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            Path instance

        Raises:
            UnexpectedCommandError: If a command has an unknown type tag
        """
        path = cls()
        path.commands = [command_from_dict(cmd) for cmd in data["commands"]]
        path.fill = data.get("fill", "black")
        path.stroke = data.get("stroke")
        path.stroke_width = data.get("stroke_width", 1)
        return path
