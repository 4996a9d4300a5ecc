"""Truncate widget: text clamped to a number of lines with an ellipsis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from rich.text import Text
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from ellipsize.engine import TruncationEngine
from ellipsize.limits import DEFAULT_ELLIPSIS, DEFAULT_LINES
from ellipsize.measure.cells import CellWidthMeasurer
from ellipsize.notify import DeferredNotifier

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual import events

    from ellipsize.measure.base import WidthMeasurer
    from ellipsize.text.models import TruncationResult


class Truncate(Widget):
    """Shows text in at most ``lines`` rows of the widget's width.

    The text is recomputed whenever it, the line limit, the ellipsis or the
    widget width changes. Until the widget has a width the raw text is shown.
    Each recomputation posts a ``Truncated`` message (and calls
    ``on_truncate``) on the next loop iteration; a newer recomputation
    supersedes a pending notification.
    """

    DEFAULT_CSS = """
    Truncate {
        height: auto;
    }

    Truncate > .truncate--ellipsis {
        color: $text-muted;
    }
    """

    COMPONENT_CLASSES: ClassVar[set[str]] = {"truncate--ellipsis"}

    text: reactive[str] = reactive("", layout=True)
    lines: reactive[int | None] = reactive(DEFAULT_LINES, layout=True)
    ellipsis: reactive[str] = reactive(DEFAULT_ELLIPSIS, layout=True)
    always_truncate: reactive[bool] = reactive(False, layout=True)
    hard_newlines: reactive[bool] = reactive(False, layout=True)

    @dataclass
    class Truncated(Message):
        """Posted after a recomputation with the truncation outcome."""

        truncate: Truncate
        truncated: bool

        @property
        def control(self) -> Truncate:
            return self.truncate

    def __init__(
        self,
        text: str = "",
        *,
        lines: int | None = DEFAULT_LINES,
        ellipsis: str = DEFAULT_ELLIPSIS,
        always_truncate: bool = False,
        hard_newlines: bool = False,
        measurer: WidthMeasurer | None = None,
        on_truncate: Callable[[bool], object] | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.set_reactive(Truncate.text, text)
        self.set_reactive(Truncate.lines, None if lines is False else lines)
        self.set_reactive(Truncate.ellipsis, ellipsis)
        self.set_reactive(Truncate.always_truncate, always_truncate)
        self.set_reactive(Truncate.hard_newlines, hard_newlines)
        self._owns_measurer = measurer is None
        self._engine = TruncationEngine(measurer or CellWidthMeasurer(ellipsis))
        self._on_truncate = on_truncate
        self._notifier = DeferredNotifier(self._deliver)
        self._result: TruncationResult | None = None

    @property
    def result(self) -> TruncationResult | None:
        """The latest truncation result, None until the widget has a width."""
        return self._result

    @property
    def truncated(self) -> bool:
        return self._result is not None and self._result.truncated

    @property
    def measurer(self) -> WidthMeasurer:
        return self._engine.measurer

    def on_resize(self, event: events.Resize) -> None:
        self.recompute()

    def on_unmount(self) -> None:
        self._notifier.cancel()

    def watch_text(self) -> None:
        self.recompute()

    def watch_lines(self, lines: int | None) -> None:
        if lines is False:
            self.lines = None
            return
        self.recompute()

    def watch_ellipsis(self, ellipsis: str) -> None:
        if self._owns_measurer:
            self._engine = TruncationEngine(CellWidthMeasurer(ellipsis))
        self.recompute()

    def watch_always_truncate(self) -> None:
        self.recompute()

    def watch_hard_newlines(self) -> None:
        self.recompute()

    def recompute(self) -> TruncationResult | None:
        """Truncate for the current width; None while the width is unknown."""
        if not self.is_mounted:
            return None
        budget = self._engine.budget(self.content_size.width, self.lines, self.ellipsis)
        result = self._engine.run(
            self.text,
            budget,
            self.ellipsis,
            self.always_truncate,
            hard_newlines=self.hard_newlines,
        )
        if result is None:
            return None
        self._result = result
        self._notifier.schedule(result.truncated)
        self.refresh(layout=True)
        return result

    def render(self) -> Text:
        if self._result is None:
            return Text(self.text)

        ellipsis_style = self.get_component_rich_style("truncate--ellipsis")
        rendered = Text(end="")
        for index, line in enumerate(self._result.lines):
            if index:
                rendered.append("\n")
            rendered.append(line.text)
            if line.ellipsis is not None:
                rendered.append(line.ellipsis, style=ellipsis_style)
        return rendered

    def _deliver(self, did_truncate: bool) -> None:
        self.post_message(self.Truncated(self, did_truncate))
        if self._on_truncate is not None:
            self._on_truncate(did_truncate)
