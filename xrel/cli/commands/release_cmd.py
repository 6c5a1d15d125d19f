from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

from xrel.cli.commands._helpers import exit_on_error
from xrel.cli.context import build_context
from xrel.output.console import Style
from xrel.release.service import ReleaseService


class LayoutChoice(str, Enum):
    flat = "flat"
    wrapped = "wrapped"


def release(
    project: Path | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Tool directory containing manifest.xml (default: current directory)",
    ),
    layout: LayoutChoice | None = typer.Option(
        None,
        "--layout",
        help="Archive layout: files at the root (flat) or under <Id>.xrnx/ (wrapped)",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show the bump and archive contents without writing"
    ),
) -> None:
    """Bump the manifest's minor version and build release/<Id>.xrnx."""
    ctx = build_context(project, layout=layout.value if layout else None)
    service = ReleaseService(
        project_dir=ctx.project_dir,
        config=ctx.config,
        console=ctx.console,
    )

    result = service.run(dry_run=dry_run)
    exit_on_error(result, ctx)
    outcome = result.unwrap()

    if outcome.dry_run:
        for member in outcome.members:
            ctx.console.print(f"  {member}", Style.DIM)
        return

    ctx.console.success(f"Created {outcome.archive_path}")
