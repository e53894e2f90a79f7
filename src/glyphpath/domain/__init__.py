"""Domain models for glyphpath.

This module contains the value types paths are built from. All command
types are frozen dataclasses, so command objects can be shared between
paths safely.

Key classes:
- MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath: Path commands
- BoundingBox: Accumulating bounding box with curve extrema support
"""

from glyphpath.domain.bbox import BoundingBox
from glyphpath.domain.commands import (
    COMMAND_TYPES,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    command_from_dict,
    command_to_dict,
    command_type,
    end_point,
)

__all__: list[str] = [
    # Core types
    "BoundingBox",
    "ClosePath",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadraticCurveTo",
    # Helpers
    "COMMAND_TYPES",
    "command_from_dict",
    "command_to_dict",
    "command_type",
    "end_point",
]
