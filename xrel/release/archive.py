"""Deterministic zip assembly.

Archives are reproducible: entries are written in the order given, with a
fixed timestamp and fixed permission bits, so two builds of the same files
are byte-identical. The file is built next to its destination and moved into
place only once complete.
"""

from __future__ import annotations

from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from xrel.core.config import ArchiveLayout
from xrel.core.result import Err, Ok, Result
from xrel.platform.files import atomic_target
from xrel.release.collector import ReleaseFile
from xrel.release.errors import IOFailure

# Earliest timestamp the zip format can represent.
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
FILE_MODE = 0o100644
DIR_MODE = 0o040755
_MSDOS_DIR_FLAG = 0x10


def _file_info(arcname: str) -> ZipInfo:
    info = ZipInfo(arcname, date_time=ZIP_EPOCH)
    info.compress_type = ZIP_DEFLATED
    info.create_system = 3
    info.external_attr = FILE_MODE << 16
    return info


def _dir_info(arcname: str) -> ZipInfo:
    info = ZipInfo(arcname.rstrip("/") + "/", date_time=ZIP_EPOCH)
    info.create_system = 3
    info.external_attr = (DIR_MODE << 16) | _MSDOS_DIR_FLAG
    return info


def archive_members(
    files: list[ReleaseFile],
    *,
    layout: ArchiveLayout,
    root_name: str,
) -> list[str]:
    """Return member names in write order (directory entry first when wrapped)."""
    names = [f.arcname.replace("\\", "/") for f in files]
    if layout == "flat":
        return names
    return [f"{root_name}/"] + [f"{root_name}/{name}" for name in names]


def _read_all(files: list[ReleaseFile]) -> Result[list[bytes], IOFailure]:
    out: list[bytes] = []
    for f in files:
        try:
            out.append(f.read_bytes())
        except OSError as e:
            return Err(IOFailure(Path(f.origin), e.strerror or str(e)))
    return Ok(out)


def build_archive(
    files: list[ReleaseFile],
    out_path: Path,
    *,
    layout: ArchiveLayout = "flat",
    root_name: str | None = None,
) -> Result[Path, IOFailure]:
    """Write ``files`` into a zip at ``out_path``.

    Args:
        files: Members in the order they should appear.
        out_path: Final archive path. Whatever is there is replaced.
        layout: ``"flat"`` puts every file at the root, ``"wrapped"`` puts
            them under a single ``root_name/`` directory.
        root_name: Wrapping directory name; defaults to ``out_path.name``.

    Returns:
        Ok(out_path), or Err(IOFailure) if a source could not be read or the
        archive could not be written. On failure ``out_path`` is untouched.
    """
    root = root_name or out_path.name

    read = _read_all(files)
    if isinstance(read, Err):
        return read
    contents = read.value

    members = archive_members(files, layout=layout, root_name=root)
    dir_entry: str | None = None
    if layout == "wrapped":
        dir_entry, members = members[0], members[1:]

    try:
        with atomic_target(out_path) as tmp_path:
            with ZipFile(tmp_path, "w", compression=ZIP_DEFLATED) as zf:
                if dir_entry is not None:
                    zf.writestr(_dir_info(dir_entry), b"")
                for name, data in zip(members, contents, strict=True):
                    zf.writestr(_file_info(name), data)
    except OSError as e:
        return Err(IOFailure(out_path, e.strerror or str(e)))

    return Ok(out_path)
