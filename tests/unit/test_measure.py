"""Unit tests for width measurers."""

from __future__ import annotations

import pytest

from ellipsize.engine import TruncationEngine
from ellipsize.measure import BaseMeasurer, CellWidthMeasurer, WidthMeasurer
from ellipsize.measure.font import FontMeasurer

pytestmark = pytest.mark.unit


class TestCellWidthMeasurer:
    def test_ascii_is_one_cell_per_character(self):
        assert CellWidthMeasurer().measure("hello") == 5

    def test_wide_characters_take_two_cells(self):
        assert CellWidthMeasurer().measure("日本語") == 6

    def test_ellipsis_width(self):
        assert CellWidthMeasurer().ellipsis_width() == 1
        assert CellWidthMeasurer(ellipsis="...").ellipsis_width() == 3

    def test_satisfies_protocol(self):
        assert isinstance(CellWidthMeasurer(), WidthMeasurer)

    def test_truncates_wide_text_by_cells(self):
        engine = TruncationEngine(CellWidthMeasurer())

        result = engine.run("日本語のテキスト", engine.budget(7, 1))

        assert result is not None
        assert str(result.lines[0]) == "日本語…"


class TestBaseMeasurer:
    def test_measure_is_abstract(self):
        with pytest.raises(NotImplementedError):
            BaseMeasurer().measure("x")

    def test_repr_names_ellipsis(self):
        assert repr(CellWidthMeasurer("~")) == "CellWidthMeasurer(ellipsis='~')"


class TestFontMeasurer:
    @pytest.fixture
    def font_measurer(self) -> FontMeasurer:
        return FontMeasurer.default(size=16)

    def test_empty_string_has_no_width(self, font_measurer: FontMeasurer):
        assert font_measurer.measure("") == 0.0

    def test_width_grows_with_text(self, font_measurer: FontMeasurer):
        short = font_measurer.measure("ab")
        longer = font_measurer.measure("abc")

        assert 0 < short <= longer

    def test_ellipsis_width_is_positive(self, font_measurer: FontMeasurer):
        assert font_measurer.ellipsis_width() > 0

    def test_larger_font_is_wider(self):
        small = FontMeasurer.default(size=10).measure("width")
        large = FontMeasurer.default(size=40).measure("width")

        assert large > small

    def test_lines_fit_pixel_budget(self, font_measurer: FontMeasurer):
        engine = TruncationEngine(font_measurer)
        text = "The quick brown fox jumps over the lazy dog " * 3
        width = font_measurer.measure("The quick brown fox")

        result = engine.run(text, engine.budget(width, 2))

        assert result is not None
        assert len(result.lines) == 2
        assert result.truncated is True
        for line in result.lines:
            reserved = font_measurer.ellipsis_width() if line.is_truncated else 0
            assert font_measurer.measure(line.text) + reserved <= width

    def test_set_font(self, font_measurer: FontMeasurer):
        before = font_measurer.measure("text")
        font_measurer.set_font(FontMeasurer.default(size=32).font)

        assert font_measurer.measure("text") > before
