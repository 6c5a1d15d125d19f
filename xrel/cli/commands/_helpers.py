"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from xrel.core.errors import ErrorCode
from xrel.core.result import Err, Result
from xrel.output.console import Style
from xrel.release.errors import IOFailure, ManifestNotFound

T = TypeVar("T")
E = TypeVar("E")

if TYPE_CHECKING:
    from xrel.cli.context import CLIContext


def error_code_for(error: object) -> ErrorCode:
    """Map a release error to the process exit code."""
    if isinstance(error, ManifestNotFound):
        return ErrorCode.ENV_ERROR
    if isinstance(error, IOFailure):
        return ErrorCode.IO_ERROR
    return ErrorCode.USER_ERROR


def exit_on_error(result: Result[T, E], ctx: CLIContext) -> None:
    """Print the error and exit if result is Err, otherwise return.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code_for(error)))
