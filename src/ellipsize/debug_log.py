"""Debug logging into an in-memory ring buffer.

Captures Python ``logging`` records from the ``ellipsize`` loggers so that
the CLI can dump them after a run.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime

from ellipsize.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

TRUNCATED_SUFFIX = "... [truncated]"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name
    message: str
    timestamp: float

    def format(self) -> str:
        ts = datetime.fromtimestamp(self.timestamp).strftime("%H:%M:%S.%f")[:-3]
        return f"{ts} [{self.group}] {self.message}"


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


def _clip(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + TRUNCATED_SUFFIX
    return message


class DebugLogHandler(logging.Handler):
    """Logging handler that captures records to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=_clip(self.format(record)),
                    timestamp=record.created,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> DebugLogHandler:
    """Attach the buffer handler to the ``ellipsize`` logger.

    Idempotent: later calls only adjust the level.
    """
    global _handler

    package_logger = logging.getLogger("ellipsize")
    package_logger.setLevel(level)
    if _handler is None:
        _handler = DebugLogHandler()
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.addHandler(_handler)
        package_logger.debug("Debug logging initialized")
    return _handler


def teardown_debug_logging() -> None:
    """Detach the buffer handler installed by ``setup_debug_logging``."""
    global _handler

    if _handler is not None:
        logging.getLogger("ellipsize").removeHandler(_handler)
        _handler = None


def clear_log_buffer() -> None:
    log_buffer.clear()


def format_log_buffer() -> list[str]:
    """Render buffered entries oldest first, one string per entry."""
    return [entry.format() for entry in log_buffer]

