"""Configuration settings for glyphpath."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class SVGOutputOptions(BaseModel):
    """Options controlling SVG path data output.

    A bare integer is still accepted wherever options are expected (see
    ``coerce``). In that form it sets ``decimal_places`` and disables the
    Y flip, matching the older ``to_path_data(2)`` call style.
    """

    decimal_places: int = Field(
        default=2,
        ge=0,
        description="Decimal places for every emitted number",
    )
    optimize: bool = Field(
        default=True,
        description="Remove redundant segments before serializing",
    )
    flip_y: bool = Field(
        default=True,
        description="Mirror the path vertically around its own bounding box",
    )

    @classmethod
    def coerce(cls, value: "SVGOutputOptions | Mapping[str, Any] | int | None") -> "SVGOutputOptions":
        """Build options from any of the accepted call shapes.

        Args:
            value: None for defaults, an options instance, a mapping of
                option values, or a bare int (legacy decimal places form)

        Returns:
            SVGOutputOptions instance

        Raises:
            TypeError: If value has none of the accepted shapes
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(decimal_places=value, flip_y=False)
        if isinstance(value, Mapping):
            return cls(**value)
        raise TypeError(f"Unsupported SVG output options: {value!r}")


class ExportConfig(BaseModel):
    """Configuration for glyph export."""

    fill: str | None = Field(
        default="black",
        description="Fill color, or None/'none' for no fill",
    )
    stroke: str | None = Field(
        default=None,
        description="Stroke color, or None for no stroke",
    )
    stroke_width: float = Field(
        default=1,
        gt=0,
        description="Stroke width in path units",
    )
    padding: float = Field(
        default=0.0,
        ge=0.0,
        description="Extra space around the written viewBox",
    )
    output: SVGOutputOptions = Field(default_factory=SVGOutputOptions)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only errors reach the console",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
