"""Exception hierarchy for glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class PathError(GlyphPathError):
    """Errors related to path command data."""

    pass


class UnexpectedCommandError(PathError):
    """A path command carries a tag that is not M, L, C, Q or Z."""

    def __init__(self, command_type: object) -> None:
        self.command_type = command_type
        super().__init__(f"Unexpected path command {command_type}")


class FontError(GlyphPathError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class ExportError(GlyphPathError):
    """Error writing SVG output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
