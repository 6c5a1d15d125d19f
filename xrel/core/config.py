"""Typed release configuration.

A project may carry an ``xrel.toml`` next to its manifest. Every key is
optional; a missing file means defaults.

    [release]
    manifest = "manifest.xml"
    script_suffix = ".lua"
    archive_extension = "xrnx"
    output_dir = "release"
    layout = "flat"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, cast

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "ArchiveLayout",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_project_config",
]

CONFIG_FILE_NAME = "xrel.toml"

ArchiveLayout = Literal["flat", "wrapped"]

_LAYOUTS: tuple[ArchiveLayout, ...] = ("flat", "wrapped")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Where things live and how the archive is laid out."""

    manifest: str = "manifest.xml"
    script_suffix: str = ".lua"
    archive_extension: str = "xrnx"
    output_dir: str = "release"
    layout: ArchiveLayout = "flat"

    def archive_name(self, identifier: str) -> str:
        return f"{identifier}.{self.archive_extension}"

    def with_layout(self, layout: ArchiveLayout | None) -> ReleaseConfig:
        if layout is None:
            return self
        return replace(self, layout=layout)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[ReleaseConfig, ConfigError]:
        """Create a config from a parsed TOML mapping."""
        release: StrDict = get_table(data, "release") or {}
        defaults = cls()

        layout = get_str(release, "layout") or defaults.layout
        if layout not in _LAYOUTS:
            return Err(
                ConfigError(
                    f"Invalid layout: {layout!r}",
                    hint="Use 'flat' or 'wrapped'",
                )
            )

        suffix = get_str(release, "script_suffix") or defaults.script_suffix
        if not suffix.startswith("."):
            suffix = f".{suffix}"

        extension = get_str(release, "archive_extension") or defaults.archive_extension

        return Ok(
            cls(
                manifest=get_str(release, "manifest") or defaults.manifest,
                script_suffix=suffix,
                archive_extension=extension.lstrip("."),
                output_dir=get_str(release, "output_dir") or defaults.output_dir,
                layout=cast(ArchiveLayout, layout),
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_bytes().decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    match _parse_toml(path):
        case Err() as err:
            return err
        case Ok(data):
            return ReleaseConfig.from_dict(data).map_err(lambda e: replace(e, path=path))


def load_project_config(project_dir: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load ``xrel.toml`` from the project directory, or defaults if absent."""
    path = project_dir / CONFIG_FILE_NAME
    if not path.is_file():
        return Ok(ReleaseConfig())
    return load_config(path)
