"""Measurer protocol consumed by the truncation engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ellipsize.limits import DEFAULT_ELLIPSIS


@runtime_checkable
class WidthMeasurer(Protocol):
    """Measures rendered text width for the active font.

    Implementations must be monotone: appending characters never makes a
    string narrower.
    """

    def measure(self, text: str) -> float: ...

    def ellipsis_width(self) -> float: ...


class BaseMeasurer:
    """Shared ellipsis handling; subclasses implement ``measure``."""

    def __init__(self, ellipsis: str = DEFAULT_ELLIPSIS) -> None:
        self.ellipsis = ellipsis

    def measure(self, text: str) -> float:
        raise NotImplementedError

    def ellipsis_width(self) -> float:
        return self.measure(self.ellipsis)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ellipsis={self.ellipsis!r})"
