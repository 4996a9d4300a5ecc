"""Line breaking with ellipsis truncation.

Words are packed greedily into lines using a binary search over the word
count. The last allowed line is cut at character granularity so that the
prefix plus the ellipsis fits the target width. Both searches rely on the
measure function being monotone non-decreasing in string length.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ellipsize.limits import DEFAULT_ELLIPSIS
from ellipsize.text.models import Line, TruncationResult

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TypeAlias

    from ellipsize.text.models import LineBudget, NormalizedText

    Measure: TypeAlias = Callable[[str], float]

log = logging.getLogger(__name__)


def longest_fit(count: int, fits: Callable[[int], bool]) -> int:
    """Return the largest ``n`` in ``[0, count]`` for which ``fits(n)`` holds.

    ``fits`` must be true-then-false over ``1..count``; ``fits(0)`` is assumed
    to hold and is never evaluated.
    """
    lower = 0
    upper = count - 1
    while lower <= upper:
        middle = (lower + upper) // 2
        if fits(middle + 1):
            lower = middle + 1
        else:
            upper = middle - 1
    return lower


def fit_chars(text: str, target_width: float, ellipsis_width: float, measure: Measure) -> int:
    """Longest prefix length of ``text`` that fits together with the ellipsis."""
    return longest_fit(len(text), lambda n: measure(text[:n]) + ellipsis_width <= target_width)


def fit_words(words: list[str], target_width: float, measure: Measure) -> int:
    """Number of leading words that fit on one line when joined by spaces."""
    return longest_fit(len(words), lambda n: measure(" ".join(words[:n])) <= target_width)


def break_lines(
    text: NormalizedText,
    budget: LineBudget,
    measure: Measure,
    ellipsis: str = DEFAULT_ELLIPSIS,
) -> TruncationResult:
    """Break normalized text into at most ``budget.max_lines`` lines.

    Args:
        text: Paragraphs of words, as produced by ``normalize``.
        budget: A ready budget with a line limit.
        measure: Width of a string in the same unit as the budget.
        ellipsis: Marker appended where content is cut.

    Returns:
        The lines and whether anything was omitted.

    Raises:
        ValueError: If the budget is disabled or not ready. Callers are
            expected to handle both states before breaking lines.
    """
    if budget.max_lines is None or budget.target_width is None or not budget.is_ready:
        raise ValueError(f"break_lines needs a ready, enabled budget, got {budget!r}")

    target_width = budget.target_width
    max_lines = budget.max_lines
    paragraphs = [list(words) for words in text]
    lines: list[Line] = []
    cursor = 1
    index = 0

    while index < len(paragraphs):
        words = paragraphs[index]
        last_paragraph = index == len(paragraphs) - 1
        # Blank lines leave the cursor alone but still occupy an output row.
        last_row = cursor >= max_lines or len(lines) >= max_lines - 1

        if not words:
            if last_row and not last_paragraph:
                lines.append(Line("", ellipsis))
                return _finish(lines, truncated=True)
            lines.append(Line())
            index += 1
            continue

        rest = " ".join(words)
        if last_paragraph and measure(rest) <= target_width:
            lines.append(Line(rest))
            return _finish(lines, truncated=False)

        if last_row:
            keep = fit_chars(rest, target_width, budget.ellipsis_width, measure)
            lines.append(Line(rest[:keep], ellipsis))
            return _finish(lines, truncated=True)

        count = fit_words(words, target_width, measure)
        if count == 0:
            # The first word alone overflows: cut it on this row.
            cursor = max_lines
            continue

        lines.append(Line(" ".join(words[:count])))
        del words[:count]
        if not words:
            index += 1
        cursor += 1

    return _finish(lines, truncated=False)


def _finish(lines: list[Line], *, truncated: bool) -> TruncationResult:
    log.debug("Broke text into %d line(s), truncated=%s", len(lines), truncated)
    return TruncationResult(lines=tuple(lines), truncated=truncated)
