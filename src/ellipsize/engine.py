"""Truncation engine: normalization, line breaking and truncation policy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ellipsize.limits import DEFAULT_ELLIPSIS
from ellipsize.text.breaker import break_lines
from ellipsize.text.models import Line, LineBudget, TruncationResult
from ellipsize.text.normalizer import normalize

if TYPE_CHECKING:
    from ellipsize.measure.base import WidthMeasurer

log = logging.getLogger(__name__)


def force_ellipsis(result: TruncationResult, ellipsis: str) -> TruncationResult:
    """Append ``ellipsis`` to the last line and mark the result truncated.

    The marker is appended even when the breaker already cut that line.
    """
    lines = list(result.lines) or [Line()]
    lines[-1] = lines[-1].with_ellipsis(ellipsis)
    return TruncationResult(lines=tuple(lines), truncated=True)


class TruncationEngine:
    """Runs the line breaker against a measurer.

    The engine keeps no state between runs other than the measurer, so a
    host can call ``run`` whenever its text or width changes.
    """

    def __init__(self, measurer: WidthMeasurer) -> None:
        self.measurer = measurer

    def budget(
        self,
        target_width: float | None,
        max_lines: int | None,
        ellipsis: str | None = None,
    ) -> LineBudget:
        """Budget for the marker that will be drawn, the measurer's by default."""
        return LineBudget.for_measurer(self.measurer, target_width, max_lines, ellipsis)

    def run(
        self,
        raw: str | None,
        budget: LineBudget,
        ellipsis: str = DEFAULT_ELLIPSIS,
        always_truncate: bool = False,
        *,
        hard_newlines: bool = False,
    ) -> TruncationResult | None:
        """Truncate ``raw`` to the budget.

        Returns:
            The truncation result, or None while the budget has no usable
            width yet.
        """
        if not budget.is_ready:
            log.debug("Deferring truncation: target width %r not ready", budget.target_width)
            return None

        if budget.disabled:
            return TruncationResult(lines=(Line(raw or ""),), truncated=False)

        paragraphs = normalize(raw, hard_newlines=hard_newlines)
        result = break_lines(paragraphs, budget, self.measurer.measure, ellipsis)

        if always_truncate:
            result = force_ellipsis(result, ellipsis)

        log.debug(
            "Truncated to %d/%d line(s) at width %s, truncated=%s",
            len(result.lines),
            budget.max_lines,
            budget.target_width,
            result.truncated,
        )
        return result
