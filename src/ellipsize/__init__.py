"""Ellipsize: fit text into a fixed number of lines with an ellipsis."""

from ellipsize.engine import TruncationEngine
from ellipsize.measure import CellWidthMeasurer, WidthMeasurer
from ellipsize.text import Line, LineBudget, TruncationResult, break_lines, normalize

__version__ = "0.1.0"

__all__ = [
    "CellWidthMeasurer",
    "Line",
    "LineBudget",
    "TruncationEngine",
    "TruncationResult",
    "WidthMeasurer",
    "break_lines",
    "normalize",
]
