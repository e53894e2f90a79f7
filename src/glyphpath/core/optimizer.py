"""Path optimization removing redundant segments.

Two rewrites are applied per subpath:
- A LineTo returning exactly to the subpath start right before ClosePath is
  dropped, since ClosePath draws that line anyway.
  The MoveTo is kept and the returning LineTo goes, rather than dropping
  the MoveTo and promoting the LineTo after it to the subpath start.
- A LineTo ending exactly where the previous command ended is dropped.

Coordinates are compared exactly, with no tolerance.
"""

import logging

from glyphpath.domain.commands import (
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    end_point,
)

logger = logging.getLogger(__name__)


def split_subpaths(commands: list[PathCommand]) -> list[list[PathCommand]]:
    """Split a command list into subpaths on ClosePath boundaries.

    Each subpath includes its closing ClosePath. A trailing run without
    ClosePath forms the last subpath.

    Args:
        commands: Path commands in drawing order

    Returns:
        List of subpaths, each a list of commands
    """
    subpaths: list[list[PathCommand]] = [[]]
    for i, cmd in enumerate(commands):
        subpaths[-1].append(cmd)
        if isinstance(cmd, ClosePath) and i + 1 < len(commands):
            subpaths.append([])
    if not subpaths[-1]:
        subpaths.pop()
    return subpaths


def _is_redundant_close(subpath: list[PathCommand]) -> bool:
    """Check if the line before a closing ClosePath only returns to the start."""
    if len(subpath) < 3:
        return False
    first, second, previous = subpath[0], subpath[1], subpath[-1]
    return (
        isinstance(first, MoveTo)
        and isinstance(second, LineTo)
        and isinstance(previous, LineTo)
        and previous.x == first.x
        and previous.y == first.y
    )


def _optimize_subpath(commands: list[PathCommand]) -> list[PathCommand]:
    subpath: list[PathCommand] = []
    for cmd in commands:
        if isinstance(cmd, ClosePath):
            if _is_redundant_close(subpath):
                subpath.pop()
        elif isinstance(cmd, LineTo) and subpath:
            if end_point(subpath[-1]) == (cmd.x, cmd.y):
                continue
        subpath.append(cmd)
    return subpath


def optimize_commands(commands: list[PathCommand]) -> list[PathCommand]:
    """Remove redundant segments from a command list.

    The input list is left untouched; a new list is returned. Curves are
    never altered and subpath order is preserved. Applying the function
    to its own output changes nothing.

    Args:
        commands: Path commands in drawing order

    Returns:
        New list of commands with redundant lines removed

    Examples:
        >>> optimize_commands([MoveTo(0, 0), LineTo(10, 0), LineTo(0, 0), ClosePath()])
        [MoveTo(x=0, y=0), LineTo(x=10, y=0), ClosePath()]
    """
    optimized: list[PathCommand] = []
    for subpath in split_subpaths(commands):
        optimized.extend(_optimize_subpath(subpath))

    removed = len(commands) - len(optimized)
    if removed:
        logger.debug("Removed %d redundant commands", removed)
    return optimized
