"""SVG path data serialization.

This module converts path commands into the compact text form used by the
``d`` attribute of an SVG ``<path>`` element:
- Numbers are rounded to a fixed number of decimal places
- Integral values are written without a decimal point
- A space separates values only where the next value is non-negative
- Y coordinates can be mirrored around the path's own bounding box
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from glyphpath.config.settings import SVGOutputOptions
from glyphpath.core.bounds import compute_bounding_box
from glyphpath.core.optimizer import optimize_commands
from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)


def round_decimal(value: float, places: int) -> Decimal:
    """Round a float to decimal places, halves away from zero.

    The float is read through its shortest repr, so 1.005 rounds to 1.01
    the way it reads rather than the way it is stored in binary. Precision
    grows with the magnitude and the places, so any finite value rounds.

    Args:
        value: Finite number to round
        places: Number of decimal places

    Returns:
        Rounded value with exactly ``places`` digits after the point
    """
    decimal = Decimal(repr(float(value)))
    context = Context(prec=max(28, decimal.adjusted() + places + 2))
    return decimal.quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context
    )


def float_to_string(value: float, places: int = 2) -> str:
    """Format a number for path data.

    Examples:
        >>> float_to_string(1.005, 2)
        '1.01'
        >>> float_to_string(3.999, 2)
        '4'
        >>> float_to_string(0.5, 2)
        '0.50'

    Args:
        value: Finite number to format
        places: Number of decimal places

    Returns:
        Bare integer text when the rounded value is integral, otherwise
        fixed-point text with exactly ``places`` decimals
    """
    rounded = round_decimal(value, places)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return f"{rounded:f}"


def pack_values(values: list[float], places: int = 2) -> str:
    """Join formatted numbers for one command's argument list.

    A space is inserted before every value after the first unless that value
    is negative, in which case its minus sign already delimits it.

    Args:
        values: Numbers to format
        places: Number of decimal places

    Returns:
        Concatenated argument text
    """
    parts: list[str] = []
    for i, value in enumerate(values):
        text = float_to_string(value, places)
        if i > 0 and not text.startswith("-"):
            parts.append(" ")
        parts.append(text)
    return "".join(parts)


def to_path_data(
    commands: list[PathCommand],
    options: SVGOutputOptions | Mapping[str, Any] | int | None = None,
) -> str:
    """Convert path commands to an SVG path data string.

    See http://www.w3.org/TR/SVG/paths.html#PathData

    Args:
        commands: Path commands in drawing order (never modified)
        options: Output options, a mapping of option values, or a bare
            number of decimal places (which also turns off the Y flip)

    Unknown commands are skipped when writing; with ``flip_y`` on they still
    fail the bounding box pass.

    Returns:
        Path data string such as "M1 4L4 5Z"

    Raises:
        UnexpectedCommandError: If ``flip_y`` is on and a command is not one
            of M, L, C, Q, Z
    """
    options = SVGOutputOptions.coerce(options)
    places = options.decimal_places

    if options.optimize:
        commands = optimize_commands(list(commands))

    flip: float | None = None
    if options.flip_y:
        box = compute_bounding_box(commands)
        flip = box.y1 + box.y2

    def y(value: float) -> float:
        return value if flip is None else flip - value

    d: list[str] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            d.append("M" + pack_values([cmd.x, y(cmd.y)], places))
        elif isinstance(cmd, LineTo):
            d.append("L" + pack_values([cmd.x, y(cmd.y)], places))
        elif isinstance(cmd, CubicCurveTo):
            d.append(
                "C"
                + pack_values(
                    [cmd.x1, y(cmd.y1), cmd.x2, y(cmd.y2), cmd.x, y(cmd.y)], places
                )
            )
        elif isinstance(cmd, QuadraticCurveTo):
            d.append("Q" + pack_values([cmd.x1, y(cmd.y1), cmd.x, y(cmd.y)], places))
        elif isinstance(cmd, ClosePath):
            d.append("Z")

    return "".join(d)


def format_attribute_number(value: float) -> str:
    """Format a plain attribute number, dropping a trailing ".0"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
