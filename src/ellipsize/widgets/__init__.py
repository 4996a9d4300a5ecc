"""Textual widgets."""

from __future__ import annotations

from ellipsize.widgets.truncate import Truncate

__all__ = ["Truncate"]
