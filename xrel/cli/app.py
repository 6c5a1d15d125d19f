from __future__ import annotations

import typer

from xrel import __version__
from xrel.cli.commands.release_cmd import release
from xrel.cli.commands.version_cmds import bump, show


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(release)
app.command()(bump)
app.command()(show)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Release packager for Renoise tools."""


def main() -> None:
    app()
