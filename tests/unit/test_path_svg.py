"""Unit tests for Path bounding box and SVG output."""

import pytest
from pydantic import ValidationError

from glyphpath import Path
from glyphpath.config import SVGOutputOptions
from glyphpath.path import SVG_NAMESPACE


@pytest.fixture
def triangle() -> Path:
    path = Path()
    path.move_to(0, 0)
    path.line_to(10, 0)
    path.line_to(10, 10)
    path.close()
    return path


class TestPathBoundingBox:
    """Tests for Path.get_bounding_box."""

    def test_empty_path(self):
        assert Path().get_bounding_box().extent == (0, 0, 0, 0)

    def test_triangle(self, triangle):
        assert triangle.get_bounding_box().extent == (0, 0, 10, 10)


class TestPathData:
    """Tests for Path.to_path_data."""

    def test_default_flips(self, triangle):
        """Test the default output mirrors Y within the bounding box."""
        assert triangle.to_path_data() == "M0 10L10 10L10 0Z"

    def test_legacy_int(self, triangle):
        """Test the bare decimal places form does not flip."""
        assert triangle.to_path_data(0) == "M0 0L10 0L10 10Z"

    def test_keyword_overrides(self, triangle):
        """Test keyword options override the given options."""
        options = SVGOutputOptions(decimal_places=3)
        assert triangle.to_path_data(options, flip_y=False) == "M0 0L10 0L10 10Z"

    def test_invalid_decimal_places(self, triangle):
        """Test negative decimal places are rejected."""
        with pytest.raises(ValidationError):
            triangle.to_path_data(decimal_places=-1)

    def test_path_unchanged(self, triangle):
        """Test serializing does not optimize the path in place."""
        triangle.line_to(10, 10)
        before = list(triangle.commands)

        triangle.to_path_data()

        assert triangle.commands == before


class TestPathSvg:
    """Tests for Path.to_svg and Path.to_dom_element."""

    def test_default_fill_omitted(self, triangle):
        assert triangle.to_svg() == '<path d="M0 10L10 10L10 0Z"/>'

    def test_custom_fill(self, triangle):
        triangle.fill = "red"
        assert triangle.to_svg(0) == '<path d="M0 0L10 0L10 10Z" fill="red"/>'

    @pytest.mark.parametrize("no_fill", [None, "none", ""])
    def test_no_fill(self, triangle, no_fill):
        triangle.fill = no_fill
        assert triangle.to_svg(0) == '<path d="M0 0L10 0L10 10Z" fill="none"/>'

    def test_stroke(self, triangle):
        triangle.stroke = "blue"
        triangle.stroke_width = 2
        assert triangle.to_svg(0) == (
            '<path d="M0 0L10 0L10 10Z" stroke="blue" stroke-width="2"/>'
        )

    def test_fractional_stroke_width(self, triangle):
        triangle.fill = None
        triangle.stroke = "blue"
        triangle.stroke_width = 1.5
        assert triangle.to_svg(0) == (
            '<path d="M0 0L10 0L10 10Z" fill="none" stroke="blue" stroke-width="1.5"/>'
        )

    def test_attribute_escaping(self, triangle):
        triangle.fill = 'url("#grad")'
        assert "fill='url(\"#grad\")'" in triangle.to_svg(0)

    def test_dom_element(self, triangle):
        element = triangle.to_dom_element(0)
        assert element.tag == f"{{{SVG_NAMESPACE}}}path"
        assert element.get("d") == "M0 0L10 0L10 10Z"

    def test_dom_element_default_options(self, triangle):
        assert triangle.to_dom_element().get("d") == triangle.to_path_data()
