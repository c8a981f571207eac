"""Tests for file I/O helpers."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from nsbuild.io import digest_files, make_directory, read_trimmed, write_text_atomic


def test_write_text_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "lib" / "foo.ml"
    temp_prefix = ".tmp-"
    temp_suffix = ".txt"

    with pytest.raises(TypeError):
        write_text_atomic(
            path=out_path,
            content=object(),  # type: ignore[arg-type]
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item
        for item in out_path.parent.iterdir()
        if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_text_atomic_replaces_existing(tmp_path: Path) -> None:
    out_path = tmp_path / "foo.mllib"
    out_path.write_text("old", encoding="utf-8")

    write_text_atomic(path=out_path, content="Foo__a\nFoo")

    assert out_path.read_text(encoding="utf-8") == "Foo__a\nFoo"


def test_write_text_atomic_follows_umask(tmp_path: Path) -> None:
    out_path = tmp_path / "foo.ml"
    umask = os.umask(0)
    os.umask(umask)

    write_text_atomic(path=out_path, content="module A = Foo__a\n")

    assert stat.S_IMODE(out_path.stat().st_mode) == 0o666 & ~umask


def test_digest_files_depends_on_paths_and_content(tmp_path: Path) -> None:
    (tmp_path / "a.ml").write_text("let x = 1\n", encoding="utf-8")
    (tmp_path / "b.ml").write_text("let x = 1\n", encoding="utf-8")

    first = digest_files(tmp_path, ["a.ml"])

    assert first == digest_files(tmp_path, ["a.ml"])
    assert len(first) == 64
    assert first != digest_files(tmp_path, ["b.ml"])
    assert digest_files(tmp_path, ["a.ml", "b.ml"]) != digest_files(tmp_path, ["b.ml", "a.ml"])

    (tmp_path / "a.ml").write_text("let x = 2\n", encoding="utf-8")
    assert digest_files(tmp_path, ["a.ml"]) != first


def test_digest_files_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        digest_files(tmp_path, ["absent.ml"])


def test_make_directory_and_read_trimmed(tmp_path: Path) -> None:
    make_directory(tmp_path, "lib/foo/foo.mllib")

    assert (tmp_path / "lib" / "foo").is_dir()
    (tmp_path / "lib" / "foo.digest").write_text("  abc123\n", encoding="utf-8")
    assert read_trimmed(tmp_path / "lib" / "foo.digest") == "abc123"
