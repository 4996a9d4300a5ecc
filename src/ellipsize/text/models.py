"""Value types shared by the normalizer, the line breaker and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from ellipsize.measure.base import WidthMeasurer


Word: TypeAlias = str
Paragraph: TypeAlias = tuple[Word, ...]
NormalizedText: TypeAlias = tuple[Paragraph, ...]


@dataclass(frozen=True, slots=True)
class LineBudget:
    """Width and line-count constraints for one truncation run.

    ``max_lines=None`` disables truncation entirely. ``target_width`` may be
    missing or zero while the host has not been laid out yet; such a budget is
    not ready and produces no result.
    """

    target_width: float | None
    max_lines: int | None
    ellipsis_width: float = 0.0

    def __post_init__(self) -> None:
        # bool is an int subclass; False means "disabled" in host configuration
        if self.max_lines is False:
            object.__setattr__(self, "max_lines", None)
        elif self.max_lines is not None and (
            isinstance(self.max_lines, bool) or self.max_lines < 1
        ):
            raise ValueError(f"max_lines must be >= 1 or None, got {self.max_lines!r}")

    @classmethod
    def for_measurer(
        cls,
        measurer: WidthMeasurer,
        target_width: float | None,
        max_lines: int | None,
        ellipsis: str | None = None,
    ) -> LineBudget:
        """Build a budget reserving room for ``ellipsis``.

        Without an explicit marker the measurer's own ellipsis is reserved.
        """
        if ellipsis is None:
            ellipsis_width = measurer.ellipsis_width()
        else:
            ellipsis_width = measurer.measure(ellipsis)
        return cls(
            target_width=target_width,
            max_lines=max_lines,
            ellipsis_width=ellipsis_width,
        )

    @property
    def is_ready(self) -> bool:
        return self.target_width is not None and self.target_width > 0

    @property
    def disabled(self) -> bool:
        return self.max_lines is None


@dataclass(frozen=True, slots=True)
class Line:
    """A rendered line: plain text, or a prefix followed by an ellipsis."""

    text: str = ""
    ellipsis: str | None = None

    def __str__(self) -> str:
        if self.ellipsis is None:
            return self.text
        return f"{self.text}{self.ellipsis}"

    @property
    def is_truncated(self) -> bool:
        return self.ellipsis is not None

    def with_ellipsis(self, ellipsis: str) -> Line:
        """Append ``ellipsis`` after any marker the line already carries."""
        return replace(self, ellipsis=(self.ellipsis or "") + ellipsis)


@dataclass(frozen=True, slots=True)
class TruncationResult:
    """Lines produced for a host, plus whether any content was omitted."""

    lines: tuple[Line, ...] = field(default_factory=tuple)
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return self.render()

    def render(self, separator: str = "\n") -> str:
        """Join the rendered lines with ``separator``."""
        return separator.join(str(line) for line in self.lines)
