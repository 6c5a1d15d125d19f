"""Manifest bump and archive packaging."""

from .archive import build_archive
from .collector import ReleaseFile, collect_release_files
from .errors import (
    InvalidIdentifier,
    InvalidVersion,
    IOFailure,
    MalformedDocument,
    ManifestNotFound,
    MissingField,
    PatchMismatch,
    ReleaseError,
)
from .manifest import Manifest, parse_manifest
from .patcher import patch_manifest
from .service import ReleaseOutcome, ReleasePlan, ReleaseService
from .version import SemVer, bump_version, normalize_version, parse_version

__all__ = [
    # archive
    "build_archive",
    # collector
    "ReleaseFile",
    "collect_release_files",
    # errors
    "InvalidIdentifier",
    "InvalidVersion",
    "IOFailure",
    "MalformedDocument",
    "ManifestNotFound",
    "MissingField",
    "PatchMismatch",
    "ReleaseError",
    # manifest
    "Manifest",
    "parse_manifest",
    # patcher
    "patch_manifest",
    # service
    "ReleaseOutcome",
    "ReleasePlan",
    "ReleaseService",
    # version
    "SemVer",
    "bump_version",
    "normalize_version",
    "parse_version",
]
