"""Build actions returned by rule bodies and their materialization."""

from __future__ import annotations

import logging
import os
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from nsbuild.io import digest_files, write_text_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Nop:
    """Nothing to do; the rule's products are already up to date."""


@dataclass(frozen=True)
class Echo:
    """Write the concatenation of ``contents`` to ``path``."""

    contents: tuple[str, ...]
    path: str


@dataclass(frozen=True)
class Symlink:
    """Make ``path`` a symbolic link to ``source_name``, relative to its directory."""

    source_name: str
    path: str


@dataclass(frozen=True)
class Stamp:
    """Record the digest of ``dependencies`` at ``path``."""

    path: str
    dependencies: tuple[str, ...]


type Action = Nop | Echo | Symlink | Stamp


def perform_action(action: Action, build_dir: Path) -> None:
    """Carry out an action against files under ``build_dir``."""
    if isinstance(action, Nop):
        return

    if isinstance(action, Echo):
        write_text_atomic(path=build_dir / action.path, content="".join(action.contents))
        return

    if isinstance(action, Symlink):
        link = build_dir / action.path
        link.parent.mkdir(parents=True, exist_ok=True)
        with suppress(FileNotFoundError):
            link.unlink()
        os.symlink(action.source_name, link)
        logger.debug("Linked %s -> %s", action.path, action.source_name)
        return

    if isinstance(action, Stamp):
        digest = digest_files(build_dir, action.dependencies)
        write_text_atomic(path=build_dir / action.path, content=f"{digest}\n")
        logger.debug("Stamped %s with %s", action.path, digest)
        return

    raise TypeError(f"Unsupported build action: {action!r}")
