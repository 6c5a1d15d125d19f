from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from xrel.core.config import ArchiveLayout, ReleaseConfig, load_project_config
from xrel.core.errors import ErrorCode
from xrel.core.result import Err
from xrel.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_dir: Path
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context(
    project: Path | None = None,
    *,
    layout: ArchiveLayout | None = None,
) -> CLIContext:
    console = RichConsole()
    project_dir = (project or Path.cwd()).expanduser().resolve()

    config_result = load_project_config(project_dir)
    if isinstance(config_result, Err):
        error = config_result.error
        console.error(error.message)
        if error.hint:
            console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        project_dir=project_dir,
        config=config_result.value.with_layout(layout),
        console=console,
    )


def build_console_context() -> CLIContext:
    """Context for commands that never read the project (no config loading)."""
    return CLIContext(
        project_dir=Path.cwd(),
        config=ReleaseConfig(),
        console=RichConsole(),
    )
