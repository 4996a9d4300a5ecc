"""Width measurers for terminal cells and rasterised fonts."""

from __future__ import annotations

from ellipsize.measure.base import BaseMeasurer, WidthMeasurer
from ellipsize.measure.cells import CellWidthMeasurer

__all__ = ["BaseMeasurer", "CellWidthMeasurer", "WidthMeasurer"]
