"""File-level helpers for hashing and generated output directories."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

from nsbuild.constants.engine import FILE_HASH_CHUNK_SIZE


def digest_files(build_dir: Path, paths: Iterable[str]) -> str:
    """Return a SHA-256 hex digest over the ordered ``(path, content)`` pairs.

    Each path is hashed together with its content so that moving a file
    within the list changes the digest even when no byte of content changes.
    """
    digest = hashlib.sha256()
    for relative in paths:
        digest.update(relative.encode("utf-8"))
        digest.update(b"\0")
        with (build_dir / relative).open("rb") as handle:
            for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
                digest.update(chunk)
        digest.update(b"\0")
    return digest.hexdigest()


def make_directory(build_dir: Path, for_file: str) -> None:
    """Create the parent directory of a build-relative file, like ``mkdir -p``."""
    (build_dir / for_file).parent.mkdir(parents=True, exist_ok=True)


def read_trimmed(path: Path) -> str:
    return path.read_text(encoding="utf-8").strip()
