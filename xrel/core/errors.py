"""Process exit codes.

The numeric values are part of the command-line contract and must stay stable:
- 0: Success
- 1: User error (malformed manifest, bad version, bad config)
- 2: Environment error (manifest missing from the project directory)
- 5: I/O error (unreadable source, archive write failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
