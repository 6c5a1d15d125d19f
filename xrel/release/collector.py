"""Selects the files that go into a release.

Only the top level of the project directory is scanned. Results are sorted
explicitly so that the archive does not depend on directory listing order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from xrel.core.config import ReleaseConfig

README_NAME = "README.md"
MANIFEST_ARCNAME = "manifest.xml"


@dataclass(frozen=True, slots=True)
class ReleaseFile:
    """One archive member: its name inside the archive and where its bytes come from."""

    arcname: str
    source: Path | None = None
    content: bytes | None = None

    def read_bytes(self) -> bytes:
        if self.content is not None:
            return self.content
        if self.source is None:
            raise ValueError(f"release file {self.arcname!r} has no source")
        return self.source.read_bytes()

    @property
    def origin(self) -> str:
        return str(self.source) if self.source is not None else f"<memory:{self.arcname}>"


def _top_level_files(project_dir: Path) -> list[Path]:
    return sorted((p for p in project_dir.iterdir() if p.is_file()), key=lambda p: p.name)


def _is_reserved(name: str, config: ReleaseConfig) -> bool:
    """Readme and manifest files get fixed member names, whatever the script suffix."""
    return name in (config.manifest, MANIFEST_ARCNAME) or name.lower() == README_NAME.lower()


def find_readme(candidates: list[Path]) -> Path | None:
    """Pick the readme: ``readme.md`` wins over other casings, then name order."""
    matches = [p for p in candidates if p.name.lower() == README_NAME.lower()]
    if not matches:
        return None
    for p in matches:
        if p.name == p.name.lower():
            return p
    return matches[0]


def collect_release_files(
    project_dir: Path,
    *,
    manifest_bytes: bytes,
    config: ReleaseConfig,
) -> list[ReleaseFile]:
    """List release members: scripts by name, then the readme, then the manifest.

    ``manifest_bytes`` is the already-patched manifest, so the archive never
    carries the pre-bump version.
    """
    files = _top_level_files(project_dir)
    readme = find_readme(files)

    out = [
        ReleaseFile(arcname=p.name, source=p)
        for p in files
        if p.name.endswith(config.script_suffix) and not _is_reserved(p.name, config)
    ]

    if readme is not None:
        out.append(ReleaseFile(arcname=README_NAME, source=readme))

    out.append(ReleaseFile(arcname=MANIFEST_ARCNAME, content=manifest_bytes))
    return out
