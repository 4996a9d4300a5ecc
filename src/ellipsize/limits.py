"""Defaults and numeric limits - no circular dependencies."""

from __future__ import annotations

DEFAULT_ELLIPSIS = "…"
DEFAULT_LINES = 1

DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_FONT_SIZE = 16

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
