"""CLI entry point for Ellipsize."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from ellipsize import __version__
from ellipsize.cli.cut import cut, load_config
from ellipsize.config import EllipsizeConfig
from ellipsize.debug_log import format_log_buffer, setup_debug_logging
from ellipsize.paths import get_config_path


def _dump_debug_log() -> None:
    for line in format_log_buffer():
        click.echo(line, err=True)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="ELLIPSIZE_CONFIG",
    help="Path to config.toml",
)
@click.option("--debug", is_flag=True, help="Print debug log to stderr on exit")
@click.pass_context
def cli(ctx: click.Context, version: bool, config_path: Path | None, debug: bool) -> None:
    """Fit text into a fixed number of lines with an ellipsis."""
    if version:
        click.echo(f"ellipsize {__version__}")
        ctx.exit(0)

    if debug:
        setup_debug_logging()
        ctx.call_on_close(_dump_debug_log)

    try:
        ctx.obj = EllipsizeConfig.load(config_path)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(cut)


@cli.command()
@click.argument("text", required=False, default=None)
@click.pass_context
def demo(ctx: click.Context, text: str | None) -> None:
    """Open an interactive demo of the Truncate widget."""
    from ellipsize.app import SAMPLE_TEXT, EllipsizeDemoApp

    app = EllipsizeDemoApp(text or SAMPLE_TEXT, config=load_config(ctx))
    app.run()


@cli.command(name="config")
@click.option("--init", is_flag=True, help="Write a config file with the current settings")
@click.pass_context
def config_cmd(ctx: click.Context, init: bool) -> None:
    """Show the config file location and effective settings."""
    path = ctx.parent.params.get("config_path") if ctx.parent else None
    path = path or get_config_path()
    config = load_config(ctx)

    click.echo(f"Config file: {path}{'' if path.exists() else ' (not found, using defaults)'}")
    for key, value in config.truncate.model_dump().items():
        click.echo(f"  {key} = {value!r}")

    if init:
        if path.exists():
            raise click.ClickException(f"{path} already exists")
        config.save(path)
        click.secho(f"Wrote {path}", fg="green")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
