"""Protocol implemented by the host build engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from nsbuild.engine.outcome import Outcome
from nsbuild.types import Tags


@runtime_checkable
class BuildEngine(Protocol):
    """The subset of a rule-based incremental build engine that rules rely on.

    ``build`` takes batches of alternative targets and may be called
    recursively from inside a rule body; it blocks until every batch resolves.
    """

    @property
    def build_dir(self) -> Path: ...

    def build(self, batches: Sequence[Sequence[str]]) -> list[Outcome]: ...

    def tags_of(self, path: str) -> Tags: ...

    def tag_file(self, path: str, tags: Iterable[str]) -> None: ...
