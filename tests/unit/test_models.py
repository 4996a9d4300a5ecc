"""Unit tests for the value types."""

from __future__ import annotations

import dataclasses

import pytest

from ellipsize.text.models import Line, LineBudget, TruncationResult

pytestmark = pytest.mark.unit


class TestLineBudget:
    @pytest.mark.parametrize("max_lines", [0, -1, True])
    def test_rejects_invalid_line_limits(self, max_lines):
        with pytest.raises(ValueError, match="max_lines"):
            LineBudget(target_width=10, max_lines=max_lines)

    def test_false_disables(self):
        budget = LineBudget(target_width=10, max_lines=False)  # type: ignore[arg-type]

        assert budget.max_lines is None
        assert budget.disabled

    @pytest.mark.parametrize(("width", "ready"), [(None, False), (0, False), (-1, False), (0.5, True)])
    def test_is_ready(self, width, ready):
        assert LineBudget(target_width=width, max_lines=1).is_ready is ready

    def test_frozen(self):
        budget = LineBudget(target_width=10, max_lines=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            budget.max_lines = 2  # type: ignore[misc]


class TestLine:
    def test_plain_line(self):
        line = Line("hello")

        assert str(line) == "hello"
        assert not line.is_truncated

    def test_truncated_line(self):
        line = Line("hel").with_ellipsis("…")

        assert str(line) == "hel…"
        assert line.is_truncated
        assert line.text == "hel"

    def test_with_ellipsis_appends_to_existing_marker(self):
        line = Line("hel", "…").with_ellipsis("…")

        assert line == Line("hel", "……")
        assert str(line) == "hel……"

    def test_empty_line(self):
        assert str(Line()) == ""


class TestTruncationResult:
    def test_render_joins_lines(self):
        result = TruncationResult(lines=(Line("a"), Line(), Line("b", "…")), truncated=True)

        assert result.text == "a\n\nb…"
        assert result.render(" | ") == "a |  | b…"
        assert len(result) == 3
