"""One-shot truncation from the command line."""

from __future__ import annotations

import shutil
from pathlib import Path

import click
from pydantic import ValidationError

from ellipsize.config import EllipsizeConfig
from ellipsize.engine import TruncationEngine
from ellipsize.limits import DEFAULT_FONT_SIZE, DEFAULT_TERMINAL_WIDTH
from ellipsize.measure.base import BaseMeasurer
from ellipsize.measure.cells import CellWidthMeasurer


def load_config(ctx: click.Context) -> EllipsizeConfig:
    """Config loaded by the root group, or the default file when run standalone."""
    if isinstance(ctx.obj, EllipsizeConfig):
        return ctx.obj
    try:
        return EllipsizeConfig.load()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


def _read_text(text: str | None, file_path: Path | None) -> str:
    if text is not None and file_path is not None:
        raise click.UsageError("Pass TEXT or --file, not both")
    if text is not None:
        return text
    if file_path is not None:
        return file_path.read_text(encoding="utf-8")
    with click.open_file("-") as stream:
        return stream.read()


def _make_measurer(font: Path | None, font_size: int, ellipsis: str) -> BaseMeasurer:
    if font is None:
        return CellWidthMeasurer(ellipsis)

    from ellipsize.measure.font import FontMeasurer

    try:
        return FontMeasurer.from_path(font, font_size, ellipsis)
    except OSError as exc:
        raise click.BadParameter(f"cannot load font: {exc}", param_hint="--font") from exc


@click.command()
@click.argument("text", required=False, default=None)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    help="Read text from a file",
)
@click.option(
    "-w",
    "--width",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Line width in cells (pixels with --font); defaults to the terminal width",
)
@click.option("-n", "--lines", type=click.IntRange(min=1), default=None, help="Maximum lines")
@click.option("--no-limit", is_flag=True, help="Disable truncation and print the text as is")
@click.option("-e", "--ellipsis", default=None, help="Marker inserted where text is cut")
@click.option(
    "--always-truncate/--no-always-truncate",
    default=None,
    help="Always end the last line with the ellipsis",
)
@click.option(
    "--hard-newlines/--soft-newlines",
    default=None,
    help="Treat literal newlines as line breaks",
)
@click.option(
    "--font",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    help="TrueType/OpenType font used to measure pixel widths",
)
@click.option(
    "--font-size",
    type=click.IntRange(min=1),
    default=DEFAULT_FONT_SIZE,
    show_default=True,
    help="Font size for --font",
)
@click.option("--report", is_flag=True, help="Print whether the text was truncated to stderr")
@click.pass_context
def cut(
    ctx: click.Context,
    text: str | None,
    file_path: Path | None,
    width: float | None,
    lines: int | None,
    no_limit: bool,
    ellipsis: str | None,
    always_truncate: bool | None,
    hard_newlines: bool | None,
    font: Path | None,
    font_size: int,
    report: bool,
) -> None:
    """Truncate text to a number of lines of a given width.

    \b
    Examples:
        ellipsize cut "The quick brown fox jumps over the lazy dog" -w 16 -n 2
        ellipsize cut --file notes.txt --hard-newlines -n 5
        echo "long caption" | ellipsize cut -w 200 --font DejaVuSans.ttf
    """
    settings = load_config(ctx).truncate
    source = _read_text(text, file_path)

    if font is not None and width is None:
        raise click.BadParameter("required when measuring with --font", param_hint="--width")
    if width is None:
        width = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns

    marker = settings.ellipsis if ellipsis is None else ellipsis
    max_lines = None if no_limit else (lines or settings.max_lines)
    engine = TruncationEngine(_make_measurer(font, font_size, marker))
    result = engine.run(
        source,
        engine.budget(width, max_lines, marker),
        marker,
        settings.always_truncate if always_truncate is None else always_truncate,
        hard_newlines=settings.hard_newlines if hard_newlines is None else hard_newlines,
    )
    if result is None:
        raise click.BadParameter("must be positive", param_hint="--width")

    click.echo(result.render())
    if report:
        click.echo(f"truncated: {'yes' if result.truncated else 'no'}", err=True)
