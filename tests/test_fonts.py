"""Tests for text measurement."""

from unittest.mock import MagicMock, patch

import pytest

from shield_maker.fonts import (
    EstimatedFontMetrics,
    FontFamily,
    TrueTypeFontMetrics,
    load_font_metrics,
)


class TestFontFamily:
    def test_parse_member_name(self):
        assert FontFamily.parse("dejavu-sans") is FontFamily.DEJAVU_SANS
        assert FontFamily.parse("default") is FontFamily.DEFAULT

    def test_parse_css_value(self):
        assert FontFamily.parse("Verdana,Geneva,DejaVu Sans,sans-serif") is FontFamily.DEFAULT

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            FontFamily.parse("Comic Sans")


class TestEstimatedFontMetrics:
    def test_empty_string(self):
        assert EstimatedFontMetrics().measure_width("", FontFamily.DEFAULT) == 0

    def test_narrow_char(self):
        assert EstimatedFontMetrics().measure_width("i", FontFamily.DEFAULT) == pytest.approx(3.1)

    def test_default_width_char(self):
        assert EstimatedFontMetrics().measure_width("a", FontFamily.DEFAULT) == 7.0

    def test_wide_beats_narrow(self):
        metrics = EstimatedFontMetrics()
        assert metrics.measure_width("mmm", FontFamily.DEFAULT) > metrics.measure_width("iii", FontFamily.DEFAULT)


class TestTrueTypeFontMetrics:
    @patch("shield_maker.fonts.ImageFont.truetype")
    def test_measures_at_oversampled_size(self, mock_truetype):
        font = MagicMock()
        font.getlength.return_value = 513.0
        mock_truetype.return_value = font
        metrics = TrueTypeFontMetrics("DejaVuSans.ttf")
        assert metrics.measure_width("coverage", FontFamily.DEFAULT) == pytest.approx(51.3)
        mock_truetype.assert_called_once_with("DejaVuSans.ttf", 110)
        font.getlength.assert_called_once_with("coverage")

    @patch("shield_maker.fonts.ImageFont.truetype")
    def test_accepts_font_bytes(self, mock_truetype):
        mock_truetype.return_value = MagicMock()
        TrueTypeFontMetrics(b"\x00\x01\x00\x00")
        handle = mock_truetype.call_args[0][0]
        assert handle.read() == b"\x00\x01\x00\x00"


class TestLoadFontMetrics:
    def test_none_uses_estimate(self):
        assert isinstance(load_font_metrics(None), EstimatedFontMetrics)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            load_font_metrics(tmp_path / "missing.ttf")

    @patch("shield_maker.fonts.ImageFont.truetype")
    def test_path_uses_truetype(self, mock_truetype):
        mock_truetype.return_value = MagicMock()
        assert isinstance(load_font_metrics("/fonts/DejaVuSans.ttf"), TrueTypeFontMetrics)
