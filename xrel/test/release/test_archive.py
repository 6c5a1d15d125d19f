from __future__ import annotations

import os
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

import pytest

from xrel.core.result import Err, Ok
from xrel.release.archive import archive_members, build_archive
from xrel.release.collector import ReleaseFile
from xrel.release.errors import IOFailure


def _files(root: Path) -> list[ReleaseFile]:
    (root / "a.lua").write_bytes(b"print('a')\n" * 50)
    (root / "b.lua").write_bytes(b"print('b')\n")
    return [
        ReleaseFile(arcname="a.lua", source=root / "a.lua"),
        ReleaseFile(arcname="b.lua", source=root / "b.lua"),
        ReleaseFile(arcname="manifest.xml", content=b"<Version>1.1.0</Version>"),
    ]


def test_flat_layout(tmp_path: Path) -> None:
    out = tmp_path / "release" / "MyTool.xrnx"

    result = build_archive(_files(tmp_path), out)

    assert result == Ok(out)
    with ZipFile(out) as zf:
        assert zf.namelist() == ["a.lua", "b.lua", "manifest.xml"]
        assert zf.read("a.lua") == (tmp_path / "a.lua").read_bytes()
        assert zf.read("manifest.xml") == b"<Version>1.1.0</Version>"
        for info in zf.infolist():
            assert info.compress_type == ZIP_DEFLATED
            assert info.date_time == (1980, 1, 1, 0, 0, 0)
            assert (info.external_attr >> 16) & 0o777 == 0o644


def test_wrapped_layout(tmp_path: Path) -> None:
    out = tmp_path / "MyTool.xrnx"

    result = build_archive(_files(tmp_path), out, layout="wrapped")

    assert isinstance(result, Ok)
    with ZipFile(out) as zf:
        assert zf.namelist() == [
            "MyTool.xrnx/",
            "MyTool.xrnx/a.lua",
            "MyTool.xrnx/b.lua",
            "MyTool.xrnx/manifest.xml",
        ]
        assert zf.getinfo("MyTool.xrnx/").is_dir()
        assert zf.read("MyTool.xrnx/b.lua") == b"print('b')\n"


def test_archive_is_reproducible(tmp_path: Path) -> None:
    files = _files(tmp_path)
    first = tmp_path / "one.xrnx"
    second = tmp_path / "two.xrnx"

    build_archive(files, first, root_name="MyTool.xrnx")
    os.utime(tmp_path / "a.lua", (1_000_000_000, 1_000_000_000))
    build_archive(files, second, root_name="MyTool.xrnx")

    assert first.read_bytes() == second.read_bytes()


def test_manifest_only_archive(tmp_path: Path) -> None:
    out = tmp_path / "MyTool.xrnx"

    result = build_archive([ReleaseFile(arcname="manifest.xml", content=b"<m/>")], out)

    assert result == Ok(out)
    with ZipFile(out) as zf:
        assert zf.namelist() == ["manifest.xml"]


def test_unreadable_source_names_the_file(tmp_path: Path) -> None:
    out = tmp_path / "MyTool.xrnx"
    out.write_bytes(b"previous release")
    missing = tmp_path / "gone.lua"

    result = build_archive([ReleaseFile(arcname="gone.lua", source=missing)], out)

    assert isinstance(result, Err)
    assert isinstance(result.error, IOFailure)
    assert result.error.path == missing
    assert out.read_bytes() == b"previous release"


def test_replaces_existing_directory(tmp_path: Path) -> None:
    out = tmp_path / "MyTool.xrnx"
    (out / "old").mkdir(parents=True)

    result = build_archive([ReleaseFile(arcname="manifest.xml", content=b"<m/>")], out)

    assert result == Ok(out)
    assert out.is_file()


def test_write_failure_leaves_no_partial_archive(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    out = tmp_path / "MyTool.xrnx"

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", fail_replace)

    result = build_archive([ReleaseFile(arcname="manifest.xml", content=b"<m/>")], out)

    assert result == Err(IOFailure(out, "No space left on device"))
    assert not out.exists()
    assert list(tmp_path.iterdir()) == []


def test_archive_members_use_forward_slashes() -> None:
    files = [ReleaseFile(arcname="sub\\x.lua", content=b"")]
    assert archive_members(files, layout="flat", root_name="T.xrnx") == ["sub/x.lua"]
    assert archive_members(files, layout="wrapped", root_name="T.xrnx") == [
        "T.xrnx/",
        "T.xrnx/sub/x.lua",
    ]
