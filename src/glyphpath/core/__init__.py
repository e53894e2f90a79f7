"""Core path algorithms for glyphpath.

This module contains the core algorithms for:

- Bounding box computation over curve extrema
- Path optimization (redundant segment removal)
- SVG path data serialization (rounding, compact packing, Y flip)
- Replaying paths onto canvas-like drawing surfaces

All functions are pure: they read command lists and never modify them.

Key functions:
- compute_bounding_box: Replay commands into a BoundingBox
- optimize_commands: Remove redundant lines per subpath
- split_subpaths: Split commands on ClosePath boundaries
- to_path_data: Serialize commands to an SVG "d" string
- float_to_string: Format a number for path data
- pack_values: Join a command's numbers compactly
- draw_path: Replay a path onto a drawing surface

Key classes:
- DrawingSurface: Protocol for canvas-like drawing contexts
- PenSurface: DrawingSurface forwarding to a fontTools pen
"""

from glyphpath.core.bounds import compute_bounding_box
from glyphpath.core.optimizer import optimize_commands, split_subpaths
from glyphpath.core.renderer import DrawingSurface, PenSurface, draw_path, is_paint
from glyphpath.core.serializer import (
    float_to_string,
    format_attribute_number,
    pack_values,
    round_decimal,
    to_path_data,
)

__all__ = [
    "DrawingSurface",
    "PenSurface",
    "compute_bounding_box",
    "draw_path",
    "float_to_string",
    "format_attribute_number",
    "is_paint",
    "optimize_commands",
    "pack_values",
    "round_decimal",
    "split_subpaths",
    "to_path_data",
]
