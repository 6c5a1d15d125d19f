"""Filesystem helpers."""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

__all__ = ["atomic_target", "atomic_write_text"]


def _mkstemp_beside(path: Path) -> tuple[int, Path]:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    return fd, Path(tmp_name)


def _publish(tmp_path: Path, path: Path) -> None:
    # os.replace cannot overwrite a directory.
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    os.replace(tmp_path, path)


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace.

    Newlines are written as given and the existing file mode is kept.
    """
    fd, tmp_path = _mkstemp_beside(path)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.is_file():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


@contextmanager
def atomic_target(path: Path, *, mode: int | None = 0o644) -> Iterator[Path]:
    """Yield a temp path in ``path``'s directory; move it over ``path`` on success.

    Anything already at ``path`` (file or directory) is replaced. If the body
    raises, the temp file is removed and ``path`` is left as it was.
    """
    fd, tmp_path = _mkstemp_beside(path)
    os.close(fd)

    try:
        yield tmp_path
        if mode is not None:
            os.chmod(tmp_path, mode)
        _publish(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
