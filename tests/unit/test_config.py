"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from glyphpath.config import (
    ExportConfig,
    GlyphPathSettings,
    SVGOutputOptions,
    get_default_settings,
)


class TestSVGOutputOptions:
    """Tests for SVGOutputOptions model."""

    def test_defaults(self):
        options = SVGOutputOptions()
        assert options.decimal_places == 2
        assert options.optimize is True
        assert options.flip_y is True

    def test_negative_decimal_places(self):
        with pytest.raises(ValidationError):
            SVGOutputOptions(decimal_places=-1)

    def test_coerce_none(self):
        assert SVGOutputOptions.coerce(None) == SVGOutputOptions()

    def test_coerce_instance(self):
        options = SVGOutputOptions(decimal_places=4)
        assert SVGOutputOptions.coerce(options) is options

    def test_coerce_int(self):
        """Test the legacy int form sets places and disables flipping."""
        options = SVGOutputOptions.coerce(3)
        assert options.decimal_places == 3
        assert options.flip_y is False
        assert options.optimize is True

    def test_coerce_mapping(self):
        options = SVGOutputOptions.coerce({"optimize": False})
        assert options.optimize is False
        assert options.decimal_places == 2
        assert options.flip_y is True

    @pytest.mark.parametrize("value", [True, "2", 1.5, [2]])
    def test_coerce_rejects(self, value):
        with pytest.raises(TypeError):
            SVGOutputOptions.coerce(value)


class TestExportConfig:
    """Tests for ExportConfig model."""

    def test_defaults(self):
        config = ExportConfig()
        assert config.fill == "black"
        assert config.stroke is None
        assert config.stroke_width == 1
        assert config.padding == 0
        assert config.output == SVGOutputOptions()

    def test_stroke_width_positive(self):
        with pytest.raises(ValidationError):
            ExportConfig(stroke_width=0)

    def test_padding_non_negative(self):
        with pytest.raises(ValidationError):
            ExportConfig(padding=-1)


class TestSettings:
    """Tests for GlyphPathSettings model."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, GlyphPathSettings)
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.export.output.decimal_places == 2
