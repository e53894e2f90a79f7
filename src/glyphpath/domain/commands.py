"""Path command types.

This module defines the five drawing commands a path is made of:
- MoveTo: start a new subpath at (x, y)
- LineTo: straight line from the current point to (x, y)
- CubicCurveTo: cubic Bezier with two control points ending at (x, y)
- QuadraticCurveTo: quadratic Bezier with one control point ending at (x, y)
- ClosePath: close the subpath back to its starting MoveTo

Each command carries its single-letter SVG tag as the class attribute ``type``.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Union

from glyphpath.exceptions import UnexpectedCommandError


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    type: ClassVar[str] = "M"

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    """Draw a straight line from the current point to (x, y)."""

    type: ClassVar[str] = "L"

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Draw a cubic Bezier curve from the current point to (x, y).

    Attributes:
        x1: X of the first control point
        y1: Y of the first control point
        x2: X of the second control point
        y2: Y of the second control point
        x: X of the end point
        y: Y of the end point
    """

    type: ClassVar[str] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """Draw a quadratic Bezier curve from the current point to (x, y).

    Attributes:
        x1: X of the control point
        y1: Y of the control point
        x: X of the end point
        y: Y of the end point
    """

    type: ClassVar[str] = "Q"

    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""

    type: ClassVar[str] = "Z"


PathCommand = Union[MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath]

COMMAND_TYPES: dict[str, type] = {
    cls.type: cls for cls in (MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath)
}


def command_type(command: object) -> object:
    """Return the tag of a command, or its class name if it has none."""
    return getattr(command, "type", type(command).__name__)


def end_point(command: object) -> tuple[float, float] | None:
    """Return the (x, y) a command ends at.

    Returns:
        End point tuple, or None for ClosePath and anything without coordinates
    """
    if isinstance(command, (MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo)):
        return (command.x, command.y)
    return None


def command_to_dict(command: PathCommand) -> dict[str, Any]:
    """Serialize a command to a dictionary.

    Args:
        command: The command to serialize

    Returns:
        Dictionary with a "type" tag and the command's coordinate fields
    """
    return {"type": command.type, **asdict(command)}


def command_from_dict(data: dict[str, Any]) -> PathCommand:
    """Deserialize a command from a dictionary.

    Args:
        data: Dictionary with a "type" tag and coordinate fields

    Returns:
        The matching command instance

    Raises:
        UnexpectedCommandError: If the tag is not a known command
    """
    tag = data.get("type")
    cls = COMMAND_TYPES.get(tag)  # type: ignore[arg-type]
    if cls is None:
        raise UnexpectedCommandError(tag)
    return cls(**{f.name: data[f.name] for f in fields(cls)})
