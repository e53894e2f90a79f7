"""Font reader for loading glyph outlines as paths.

This module provides the FontReader class for loading font files
and extracting glyph outlines into Path objects.
"""

from collections.abc import Iterator
from pathlib import Path as FilePath

from fontTools.ttLib import TTFont

from glyphpath.exceptions import GlyphNotFoundError
from glyphpath.io.converter import fonttools_glyph_to_path
from glyphpath.path import Path


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    Paths are in font units with y pointing up, which is what the default
    Y flip of ``Path.to_path_data`` expects.

    Example:
        with FontReader(FilePath("font.ttf")) as reader:
            for name, path in reader.iter_paths():
                print(name, path.to_path_data())
    """

    def __init__(self, font_path: FilePath) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-based fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def glyph_names(self) -> list[str]:
        """Return glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return list(self._require_font().getGlyphOrder())

    def glyph_name_for_char(self, char: str) -> str:
        """Look up the glyph mapped to a character.

        Args:
            char: A single character

        Returns:
            Glyph name from the font's best cmap

        Raises:
            GlyphNotFoundError: If the character is not mapped
            RuntimeError: If font has not been loaded yet
        """
        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(char)
        return name

    def get_path(self, name: str, scale: float = 1.0) -> Path:
        """Get the outline of a glyph by name.

        Args:
            name: Name of the glyph to retrieve
            scale: Factor applied to every coordinate (e.g. size / UPM)

        Returns:
            Path of the glyph outline; empty for glyphs without contours

        Raises:
            GlyphNotFoundError: If the glyph is not in the font
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyph_set = font.getGlyphSet()
        return fonttools_glyph_to_path(glyph_set[name], glyph_set, scale=scale)

    def iter_paths(self, scale: float = 1.0) -> Iterator[tuple[str, Path]]:
        """Iterate over all glyphs as (name, path) pairs in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        for name in self.glyph_names:
            yield name, self.get_path(name, scale=scale)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
