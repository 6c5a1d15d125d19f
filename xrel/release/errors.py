"""Release error taxonomy.

Every error carries a ``message`` for the user and an optional ``hint``.
None of them are retried: all operations are local filesystem work.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ManifestNotFound:
    path: Path

    @property
    def message(self) -> str:
        return f"{self.path.name} not found in {self.path.parent}"

    @property
    def hint(self) -> str | None:
        return "Run from the tool's project directory or pass --project"


@dataclass(frozen=True, slots=True)
class MalformedDocument:
    detail: str

    @property
    def message(self) -> str:
        return f"manifest is not well-formed XML: {self.detail}"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class MissingField:
    field: str

    @property
    def message(self) -> str:
        return f"manifest is missing required field <{self.field}>"

    @property
    def hint(self) -> str | None:
        return f"Add a non-empty <{self.field}> element to the manifest"


@dataclass(frozen=True, slots=True)
class InvalidIdentifier:
    identifier: str

    @property
    def message(self) -> str:
        return f"invalid <Id> {self.identifier!r}: it names the archive file"

    @property
    def hint(self) -> str | None:
        return "Use an Id without path separators, e.g. com.example.MyTool"


@dataclass(frozen=True, slots=True)
class InvalidVersion:
    version: str

    @property
    def message(self) -> str:
        return f"invalid version: {self.version!r}"

    @property
    def hint(self) -> str | None:
        return "Expected MAJOR[.MINOR[.PATCH]] with an optional -pre / +build suffix"


@dataclass(frozen=True, slots=True)
class PatchMismatch:
    version: str

    @property
    def message(self) -> str:
        return f"<Version>{self.version}</Version> not found verbatim in manifest"

    @property
    def hint(self) -> str | None:
        return "Write the version element on one line without surrounding whitespace"


@dataclass(frozen=True, slots=True)
class IOFailure:
    path: Path
    detail: str
    manifest_bumped_to: str | None = None

    @property
    def message(self) -> str:
        return f"{self.path}: {self.detail}"

    @property
    def hint(self) -> str | None:
        if self.manifest_bumped_to is None:
            return None
        return (
            f"manifest was already bumped to {self.manifest_bumped_to}; "
            "fix the problem and rerun (the version will be bumped again)"
        )


ManifestError = MalformedDocument | MissingField | InvalidIdentifier

ReleaseError = (
    ManifestNotFound
    | MalformedDocument
    | MissingField
    | InvalidIdentifier
    | InvalidVersion
    | PatchMismatch
    | IOFailure
)
