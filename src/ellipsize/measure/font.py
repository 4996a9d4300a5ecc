"""Pixel width measurement with Pillow fonts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import ImageFont

from ellipsize.limits import DEFAULT_ELLIPSIS, DEFAULT_FONT_SIZE
from ellipsize.measure.base import BaseMeasurer

if TYPE_CHECKING:
    from pathlib import Path


class FontMeasurer(BaseMeasurer):
    """Measure text in pixels using a Pillow font.

    The font is the "active font" of the measurer; swap it between
    truncation runs with ``set_font``, never during one.
    """

    def __init__(
        self,
        font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
        ellipsis: str = DEFAULT_ELLIPSIS,
    ) -> None:
        super().__init__(ellipsis)
        self.font = font

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        size: int = DEFAULT_FONT_SIZE,
        ellipsis: str = DEFAULT_ELLIPSIS,
    ) -> FontMeasurer:
        """Load a TrueType/OpenType font file."""
        return cls(ImageFont.truetype(str(path), size), ellipsis)

    @classmethod
    def default(cls, size: int = DEFAULT_FONT_SIZE, ellipsis: str = DEFAULT_ELLIPSIS) -> FontMeasurer:
        """Use Pillow's bundled default font."""
        return cls(ImageFont.load_default(size), ellipsis)

    def set_font(self, font: ImageFont.ImageFont | ImageFont.FreeTypeFont) -> None:
        self.font = font

    def measure(self, text: str) -> float:
        if not text:
            return 0.0
        return float(self.font.getlength(text))
