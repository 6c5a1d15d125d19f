"""Core types: results, exit codes, configuration."""

from .config import ArchiveLayout, ConfigError, ReleaseConfig, load_config, load_project_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ArchiveLayout",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_project_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
