"""Bounding box computation over a path command list."""

from collections.abc import Iterable

from glyphpath.domain.bbox import BoundingBox
from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    command_type,
)
from glyphpath.exceptions import UnexpectedCommandError


def compute_bounding_box(commands: Iterable[object]) -> BoundingBox:
    """Calculate the bounding box of a command list.

    Replays the commands tracking the current point and the start of the
    current subpath, so curves are measured from where they actually begin.
    Curves contribute their extrema, not just their end points.

    An empty result is never returned: if nothing was registered the origin
    is added, so callers always get a valid box.

    Args:
        commands: Path commands in drawing order

    Returns:
        BoundingBox enclosing the drawn outline

    Raises:
        UnexpectedCommandError: If a command is not one of M, L, C, Q, Z
    """
    box = BoundingBox()

    start_x = start_y = 0.0
    prev_x = prev_y = 0.0
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            box.add_point(cmd.x, cmd.y)
            start_x = prev_x = cmd.x
            start_y = prev_y = cmd.y
        elif isinstance(cmd, LineTo):
            box.add_point(cmd.x, cmd.y)
            prev_x, prev_y = cmd.x, cmd.y
        elif isinstance(cmd, QuadraticCurveTo):
            box.add_quad(prev_x, prev_y, cmd.x1, cmd.y1, cmd.x, cmd.y)
            prev_x, prev_y = cmd.x, cmd.y
        elif isinstance(cmd, CubicCurveTo):
            box.add_bezier(prev_x, prev_y, cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
            prev_x, prev_y = cmd.x, cmd.y
        elif isinstance(cmd, ClosePath):
            prev_x, prev_y = start_x, start_y
        else:
            raise UnexpectedCommandError(command_type(cmd))

    if box.is_empty():
        box.add_point(0, 0)
    return box
