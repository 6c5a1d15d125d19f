"""Release orchestration: bump the manifest, then package the tool.

Steps run strictly in order and the first failure aborts the run:

    read manifest -> parse -> bump -> patch -> write manifest
    -> collect files -> build archive -> report

The manifest write is not rolled back if packaging fails afterwards. Errors
raised after that point carry ``manifest_bumped_to`` so the caller can say so.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from xrel.core.config import ReleaseConfig
from xrel.core.result import Err, Ok, Result
from xrel.output.console import ConsoleProtocol, Style
from xrel.platform.files import atomic_write_text
from xrel.release.archive import archive_members, build_archive
from xrel.release.collector import ReleaseFile, collect_release_files
from xrel.release.errors import IOFailure, ManifestNotFound, ReleaseError
from xrel.release.manifest import Manifest, parse_manifest
from xrel.release.patcher import patch_manifest
from xrel.release.version import bump_version


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    """Everything decided before the first write."""

    manifest: Manifest
    bumped_manifest: Manifest
    patched_text: str
    manifest_path: Path
    archive_path: Path

    @property
    def new_version(self) -> str:
        return self.bumped_manifest.version


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    identifier: str
    old_version: str
    new_version: str
    archive_path: Path
    members: tuple[str, ...]
    dry_run: bool = False


class ReleaseService:
    def __init__(
        self,
        *,
        project_dir: Path,
        config: ReleaseConfig,
        console: ConsoleProtocol,
    ) -> None:
        self._project_dir = project_dir
        self._config = config
        self._console = console

    @property
    def manifest_path(self) -> Path:
        return self._project_dir / self._config.manifest

    @property
    def release_dir(self) -> Path:
        return self._project_dir / self._config.output_dir

    def _read_manifest(self) -> Result[str, ReleaseError]:
        path = self.manifest_path
        if not path.is_file():
            return Err(ManifestNotFound(path))
        try:
            # Decoded without newline translation so the rewrite is byte-exact.
            return Ok(path.read_bytes().decode("utf-8"))
        except UnicodeDecodeError as e:
            return Err(IOFailure(path, f"not valid UTF-8: {e.reason}"))
        except OSError as e:
            return Err(IOFailure(path, e.strerror or str(e)))

    def plan(self) -> Result[ReleasePlan, ReleaseError]:
        """Read, parse, bump and patch the manifest without writing anything."""
        text = self._read_manifest()
        if isinstance(text, Err):
            return text

        manifest = parse_manifest(text.value)
        if isinstance(manifest, Err):
            return manifest

        old_version = manifest.value.version
        new_version = bump_version(old_version)
        if isinstance(new_version, Err):
            return new_version

        patched = patch_manifest(text.value, old_version, new_version.value)
        if isinstance(patched, Err):
            return patched

        archive_name = self._config.archive_name(manifest.value.identifier)
        return Ok(
            ReleasePlan(
                manifest=manifest.value,
                bumped_manifest=manifest.value.with_version(new_version.value),
                patched_text=patched.value,
                manifest_path=self.manifest_path,
                archive_path=self.release_dir / archive_name,
            )
        )

    def _collect(self, plan: ReleasePlan) -> Result[list[ReleaseFile], IOFailure]:
        try:
            return Ok(
                collect_release_files(
                    self._project_dir,
                    manifest_bytes=plan.patched_text.encode("utf-8"),
                    config=self._config,
                )
            )
        except OSError as e:
            return Err(IOFailure(self._project_dir, e.strerror or str(e)))

    def _outcome(
        self, plan: ReleasePlan, files: list[ReleaseFile], *, dry_run: bool
    ) -> ReleaseOutcome:
        members = archive_members(
            files,
            layout=self._config.layout,
            root_name=plan.archive_path.name,
        )
        return ReleaseOutcome(
            identifier=plan.manifest.identifier,
            old_version=plan.manifest.version,
            new_version=plan.new_version,
            archive_path=plan.archive_path,
            members=tuple(members),
            dry_run=dry_run,
        )

    def run(self, *, dry_run: bool = False) -> Result[ReleaseOutcome, ReleaseError]:
        """Perform one release.

        With ``dry_run`` the manifest is validated and the archive contents
        are listed, but nothing is written.
        """
        planned = self.plan()
        if isinstance(planned, Err):
            return planned
        plan = planned.value

        self._console.info(
            f"{plan.manifest.identifier}: {plan.manifest.version} -> {plan.new_version}"
        )

        if dry_run:
            files = self._collect(plan)
            if isinstance(files, Err):
                return files
            self._console.print(f"dry-run: would write {plan.archive_path}", Style.DIM)
            return Ok(self._outcome(plan, files.value, dry_run=True))

        try:
            atomic_write_text(plan.manifest_path, plan.patched_text)
        except OSError as e:
            return Err(IOFailure(plan.manifest_path, e.strerror or str(e)))
        self._console.success(f"{plan.manifest_path.name} bumped to {plan.new_version}")

        result = self._package(plan)
        if isinstance(result, Err):
            self._console.warning(
                f"{plan.manifest_path.name} keeps version {plan.new_version} "
                "although packaging failed"
            )
            return Err(replace(result.error, manifest_bumped_to=plan.new_version))
        return result

    def _package(self, plan: ReleasePlan) -> Result[ReleaseOutcome, IOFailure]:
        files = self._collect(plan)
        if isinstance(files, Err):
            return files

        try:
            self.release_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(IOFailure(self.release_dir, e.strerror or str(e)))

        built = build_archive(
            files.value,
            plan.archive_path,
            layout=self._config.layout,
            root_name=plan.archive_path.name,
        )
        if isinstance(built, Err):
            return built

        return Ok(self._outcome(plan, files.value, dry_run=False))
