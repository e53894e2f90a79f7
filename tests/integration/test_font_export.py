"""End-to-end tests against a small TrueType font built on the fly.

The font holds four glyphs:
- .notdef: a rectangle
- space: no contours
- A: a triangle of straight lines
- D: a stem closed by two quadratic curves
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from typer.testing import CliRunner

from glyphpath import ClosePath, LineTo, MoveTo, QuadraticCurveTo
from glyphpath.cli.app import app
from glyphpath.config import ExportConfig, GlyphPathSettings
from glyphpath.exporter import GlyphExporter
from glyphpath.io import FontReader

runner = CliRunner()

A_PATH_DATA = "M100 700L300 0L500 700Z"


def _draw_notdef(pen: TTGlyphPen) -> None:
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()


def _draw_a(pen: TTGlyphPen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((300, 700))
    pen.lineTo((500, 0))
    pen.closePath()


def _draw_d(pen: TTGlyphPen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.qCurveTo((600, 700), (600, 350))
    pen.qCurveTo((600, 0), (100, 0))
    pen.closePath()


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """Build a TrueType test font and return its path."""
    glyphs = {}
    for name, draw in ((".notdef", _draw_notdef), ("space", None), ("A", _draw_a), ("D", _draw_d)):
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(glyphs))
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x44: "D"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyphs})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "GlyphPathTest", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path = tmp_path / "test.ttf"
    fb.save(str(path))
    return path


class TestFontReaderIntegration:
    """Tests reading real glyph outlines."""

    def test_font_info(self, font_path):
        with FontReader(font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 4
            assert reader.glyph_names == [".notdef", "space", "A", "D"]
            assert reader.glyph_name_for_char("D") == "D"

    def test_line_glyph(self, font_path):
        with FontReader(font_path) as reader:
            path = reader.get_path("A")

        assert path.commands == [MoveTo(100, 0), LineTo(300, 700), LineTo(500, 0), ClosePath()]
        assert path.get_bounding_box().extent == (100, 0, 500, 700)
        assert path.to_path_data() == A_PATH_DATA

    def test_quadratic_glyph(self, font_path):
        with FontReader(font_path) as reader:
            path = reader.get_path("D")

        kinds = [type(cmd) for cmd in path.commands]
        assert kinds == [MoveTo, LineTo, QuadraticCurveTo, QuadraticCurveTo, ClosePath]
        assert path.get_bounding_box().extent == pytest.approx((100, 0, 600, 700))

    def test_empty_glyph(self, font_path):
        with FontReader(font_path) as reader:
            path = reader.get_path("space")

        assert len(path) == 0
        assert path.to_path_data() == ""

    def test_iter_paths(self, font_path):
        with FontReader(font_path) as reader:
            names = [name for name, _ in reader.iter_paths()]
        assert names == [".notdef", "space", "A", "D"]

    def test_scaled_path(self, font_path):
        with FontReader(font_path) as reader:
            path = reader.get_path("A", scale=0.1)
        assert path.to_path_data(0) == "M10 0L30 70L50 0Z"


class TestGlyphExporter:
    """Tests for GlyphExporter."""

    def test_export(self, font_path, tmp_path):
        output_dir = tmp_path / "svg"
        progress = []

        exporter = GlyphExporter(GlyphPathSettings())
        stats = exporter.export(
            font_path,
            ["A", "space", "missing"],
            output_dir,
            lambda done, total, name: progress.append((done, total, name)),
        )

        assert stats.exported_count == 1
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors[0][0] == "missing"
        assert stats.commands_written == 4
        assert progress == [(1, 3, "A"), (2, 3, "space"), (3, 3, "missing")]

        assert (output_dir / "A.svg").read_text(encoding="utf-8") == (
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="100 0 400 700">\n'
            f'  <path d="{A_PATH_DATA}"/>\n'
            "</svg>\n"
        )
        assert not (output_dir / "space.svg").exists()

    def test_export_paint_settings(self, font_path, tmp_path):
        settings = GlyphPathSettings(
            export=ExportConfig(fill="none", stroke="red", stroke_width=2, padding=10)
        )

        GlyphExporter(settings).export(font_path, ["A"], tmp_path)

        svg = (tmp_path / "A.svg").read_text(encoding="utf-8")
        assert 'viewBox="90 -10 420 720"' in svg
        assert 'fill="none" stroke="red" stroke-width="2"' in svg


class TestCli:
    """Tests for the command line interface."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "glyphpath" in result.output

    def test_export(self, font_path, tmp_path):
        output_dir = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(font_path), "A", "-c", "D", "-o", str(output_dir), "-q"]
        )

        assert result.exit_code == 0
        assert (output_dir / "A.svg").exists()
        assert (output_dir / "D.svg").exists()

    def test_export_default_output_dir(self, font_path):
        result = runner.invoke(app, ["export", str(font_path), "A", "-q"])

        assert result.exit_code == 0
        assert (font_path.parent / "test-svg" / "A.svg").exists()

    def test_export_options(self, font_path, tmp_path):
        result = runner.invoke(
            app,
            ["export", str(font_path), "A", "-o", str(tmp_path), "--no-flip-y", "-q"],
        )

        assert result.exit_code == 0
        svg = (tmp_path / "A.svg").read_text(encoding="utf-8")
        assert 'd="M100 0L300 700L500 0Z"' in svg

    def test_export_missing_glyph(self, font_path, tmp_path):
        result = runner.invoke(
            app, ["export", str(font_path), "missing", "-o", str(tmp_path), "-q"]
        )
        assert result.exit_code == 1

    def test_export_unmapped_char(self, font_path, tmp_path):
        result = runner.invoke(app, ["export", str(font_path), "-c", "Z", "-o", str(tmp_path), "-q"])
        assert result.exit_code == 1

    def test_export_missing_font(self, tmp_path):
        result = runner.invoke(app, ["export", str(tmp_path / "nope.ttf")])
        assert result.exit_code == 1

    def test_data(self, font_path):
        result = runner.invoke(app, ["data", str(font_path), "A", "-d", "0"])

        assert result.exit_code == 0
        assert result.output == f"A\t{A_PATH_DATA}\n"

    def test_data_many_decimal_places(self, font_path):
        result = runner.invoke(app, ["data", str(font_path), "A", "-d", "30"])

        assert result.exit_code == 0
        assert result.output == f"A\t{A_PATH_DATA}\n"

    def test_data_by_chars(self, font_path):
        result = runner.invoke(app, ["data", str(font_path), "-c", "AA"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [f"A\t{A_PATH_DATA}"]

    def test_data_missing_glyph(self, font_path):
        result = runner.invoke(app, ["data", str(font_path), "missing"])
        assert result.exit_code == 1

    def test_bounds(self, font_path):
        result = runner.invoke(app, ["bounds", str(font_path), "A", "D"])

        assert result.exit_code == 0
        assert "A" in result.output
        assert "400" in result.output
