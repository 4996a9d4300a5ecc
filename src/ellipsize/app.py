"""Demo application showing a Truncate widget in a resizable terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App
from textual.binding import Binding, BindingType
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ellipsize.config import EllipsizeConfig
from ellipsize.widgets.truncate import Truncate

if TYPE_CHECKING:
    from textual.app import ComposeResult

SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "Resize the terminal to watch the text reflow, "
    "and use the bindings below to change the line limit."
)


class EllipsizeDemoApp(App):
    """Interactive playground for the Truncate widget."""

    TITLE = "ellipsize"

    CSS = """
    #demo-body {
        padding: 1 2;
    }

    #demo-text {
        border: round $primary;
        padding: 0 1;
    }

    #demo-status {
        margin-top: 1;
        color: $text-muted;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("plus,equals_sign", "more_lines", "More lines"),
        Binding("minus", "fewer_lines", "Fewer lines"),
        Binding("a", "toggle_always", "Always truncate"),
        Binding("d", "toggle_limit", "Toggle limit"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, text: str = SAMPLE_TEXT, config: EllipsizeConfig | None = None) -> None:
        super().__init__()
        self.config = config or EllipsizeConfig()
        self._text = text
        self._last_lines = self.config.truncate.max_lines or 1
        self.status_line = ""

    def compose(self) -> ComposeResult:
        settings = self.config.truncate
        yield Header()
        with Vertical(id="demo-body"):
            yield Truncate(
                self._text,
                lines=settings.max_lines,
                ellipsis=settings.ellipsis,
                always_truncate=settings.always_truncate,
                hard_newlines=settings.hard_newlines,
                id="demo-text",
            )
            yield Static("", id="demo-status")
        yield Footer()

    @property
    def truncate(self) -> Truncate:
        return self.query_one("#demo-text", Truncate)

    def on_truncate_truncated(self, message: Truncate.Truncated) -> None:
        widget = message.truncate
        limit = "off" if widget.lines is None else str(widget.lines)
        state = "truncated" if message.truncated else "fits"
        self.status_line = f"lines: {limit}  always: {widget.always_truncate}  {state}"
        self.query_one("#demo-status", Static).update(self.status_line)

    def action_more_lines(self) -> None:
        widget = self.truncate
        if widget.lines is not None:
            widget.lines += 1
            self._last_lines = widget.lines

    def action_fewer_lines(self) -> None:
        widget = self.truncate
        if widget.lines is not None and widget.lines > 1:
            widget.lines -= 1
            self._last_lines = widget.lines

    def action_toggle_always(self) -> None:
        self.truncate.always_truncate = not self.truncate.always_truncate

    def action_toggle_limit(self) -> None:
        widget = self.truncate
        widget.lines = self._last_lines if widget.lines is None else None
