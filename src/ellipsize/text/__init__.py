"""Text normalization and line breaking."""

from __future__ import annotations

from ellipsize.text.breaker import break_lines, longest_fit
from ellipsize.text.models import (
    Line,
    LineBudget,
    NormalizedText,
    Paragraph,
    TruncationResult,
)
from ellipsize.text.normalizer import normalize

__all__ = [
    "Line",
    "LineBudget",
    "NormalizedText",
    "Paragraph",
    "TruncationResult",
    "break_lines",
    "longest_fit",
    "normalize",
]
