from __future__ import annotations

from pathlib import Path

import typer

from xrel.cli.commands._helpers import exit_on_error
from xrel.cli.context import build_console_context, build_context
from xrel.release.service import ReleaseService
from xrel.release.version import bump_version


def bump(
    version: str = typer.Argument(..., help="Version string, e.g. 1.4 or 1.2.3-beta"),
) -> None:
    """Print the version a release would bump VERSION to."""
    ctx = build_console_context()
    result = bump_version(version)
    exit_on_error(result, ctx)
    ctx.console.print(result.unwrap())


def show(
    project: Path | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Tool directory containing manifest.xml (default: current directory)",
    ),
) -> None:
    """Show the tool id, its current version and the next release version."""
    ctx = build_context(project)
    service = ReleaseService(
        project_dir=ctx.project_dir,
        config=ctx.config,
        console=ctx.console,
    )

    result = service.plan()
    exit_on_error(result, ctx)
    plan = result.unwrap()

    manifest = plan.manifest
    ctx.console.print(f"id:       {manifest.identifier}")
    if manifest.name:
        ctx.console.print(f"name:     {manifest.name}")
    if manifest.author:
        ctx.console.print(f"author:   {manifest.author}")
    ctx.console.print(f"version:  {manifest.version}")
    ctx.console.print(f"next:     {plan.new_version}")
    ctx.console.print(f"archive:  {plan.archive_path}")
