"""Terminal cell width measurement."""

from __future__ import annotations

from rich.cells import cell_len

from ellipsize.measure.base import BaseMeasurer


class CellWidthMeasurer(BaseMeasurer):
    """Measure text in terminal cells.

    Wide East Asian characters and most emoji occupy two cells, combining
    marks none.
    """

    def measure(self, text: str) -> float:
        return cell_len(text)
