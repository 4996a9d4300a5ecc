"""Deferred, cancellable truncation notifications."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


class DeferredNotifier:
    """Delivers the truncation outcome on the next event loop iteration.

    Hosts call ``schedule`` after every recomputation. A pending call from an
    earlier recomputation is cancelled first, so the callback only ever sees
    the newest outcome. ``cancel`` is the teardown hook.
    """

    def __init__(
        self,
        callback: Callable[[bool], object] | None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.callback = callback
        self._loop = loop
        self._handle: asyncio.Handle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, did_truncate: bool) -> asyncio.Handle | None:
        """Supersede any pending notification and queue a new one."""
        self.cancel()
        if self.callback is None:
            return None
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_soon(self._fire, did_truncate)
        return self._handle

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, did_truncate: bool) -> None:
        self._handle = None
        if self.callback is not None:
            log.debug("Notifying truncated=%s", did_truncate)
            self.callback(did_truncate)
