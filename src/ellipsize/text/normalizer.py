"""Split raw text into paragraphs of words.

Literal newlines are soft: they collapse to spaces the same way a browser
collapses them in inline content. Hard breaks are ``<br>`` tags, which split
the text into paragraphs. Plain terminal text has no markup, so callers can
opt into treating literal newlines as hard breaks instead.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ellipsize.text.models import NormalizedText, Paragraph

NEWLINE = re.compile(r"\r\n|\r|\n")
BREAK_MARKER = re.compile(r"<br\b[^>]*?/?>", re.IGNORECASE)


def split_paragraphs(raw: str | None, *, hard_newlines: bool = False) -> list[str]:
    """Split raw text at hard breaks, collapsing soft newlines to spaces."""
    if not raw:
        return [""]
    if hard_newlines:
        # A final newline ends the last line rather than opening a new one.
        text = NEWLINE.sub("\n", raw).removesuffix("\n")
    else:
        text = NEWLINE.sub(" ", raw)
    return BREAK_MARKER.sub("\n", text).split("\n")


def normalize(raw: str | None, *, hard_newlines: bool = False) -> NormalizedText:
    """Convert raw text into paragraphs of whitespace-free words.

    Args:
        raw: Source text, possibly containing ``<br>`` markers.
        hard_newlines: Treat literal newlines as hard breaks.

    Returns:
        One tuple of words per paragraph. A blank paragraph is an empty
        tuple; empty input yields a single blank paragraph.
    """
    paragraphs: list[Paragraph] = [
        tuple(segment.split()) for segment in split_paragraphs(raw, hard_newlines=hard_newlines)
    ]
    return tuple(paragraphs)


def denormalize(text: NormalizedText) -> str:
    """Join paragraphs back into whitespace-collapsed text, one per line."""
    return "\n".join(" ".join(words) for words in text)
