from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from munir_release.platform.files import atomic_write_text


def test_atomic_write_text_creates_file(tmp_path: Path) -> None:
    path = tmp_path / ".releaserc"
    atomic_write_text(path, '{"branches": []}\n')

    assert path.read_text(encoding="utf-8") == '{"branches": []}\n'


def test_atomic_write_text_replaces_existing_content(tmp_path: Path) -> None:
    path = tmp_path / ".releaserc"
    path.write_text("old content that is longer than the new one", encoding="utf-8")

    atomic_write_text(path, "new", encoding="utf-8")

    assert path.read_text(encoding="utf-8") == "new"


def test_atomic_write_text_keeps_previous_file_on_replace_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / ".releaserc"
    path.write_text("previous", encoding="utf-8")

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_text(path, "payload", encoding="utf-8")

    assert path.read_text(encoding="utf-8") == "previous"
    assert list(tmp_path.glob(f".{path.name}.*.tmp")) == []


def test_atomic_write_text_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        atomic_write_text(tmp_path / "missing" / ".releaserc", "x")


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_atomic_write_text_keeps_existing_mode(tmp_path: Path) -> None:
    path = tmp_path / ".releaserc"
    path.write_text("old", encoding="utf-8")
    path.chmod(0o644)

    atomic_write_text(path, "new")

    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_atomic_write_text_new_file_follows_umask(tmp_path: Path) -> None:
    path = tmp_path / ".releaserc"
    umask = os.umask(0o022)
    try:
        atomic_write_text(path, "new")
    finally:
        os.umask(umask)

    assert stat.S_IMODE(path.stat().st_mode) == 0o644
