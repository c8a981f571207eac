"""Shared pytest fixtures: an in-memory build engine and source trees."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pytest

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Bad, FailureTable, Good, Outcome, RuleRegistry, apply_rule
from nsbuild.metadata import NamespaceTree


class NoRuleError(LookupError):
    """Raised by the fake engine when no rule can build a target."""


class FakeEngine:
    """Minimal rule-matching engine over a real build directory.

    Files present when the engine is created are sources unless ``sources``
    names them explicitly. Other targets are built by the first registered
    rule that succeeds, after building the rule's declared dependencies.
    Successful builds are cached.
    """

    def __init__(
        self,
        build_dir: Path,
        registry: RuleRegistry,
        failures: FailureTable | None = None,
        on_built: Callable[[str], None] | None = None,
        sources: Iterable[str] | None = None,
    ) -> None:
        self._build_dir = build_dir
        self.registry = registry
        self.failures = failures if failures is not None else FailureTable()
        if sources is None:
            sources = (path.relative_to(build_dir).as_posix() for path in build_dir.rglob("*") if path.is_file())
        self.sources = set(sources)
        self.tags: dict[str, set[str]] = {}
        self.requests: list[list[list[str]]] = []
        self.built: dict[str, str] = {}
        self.invoked: list[tuple[str, str]] = []
        self.on_built = on_built

    @property
    def build_dir(self) -> Path:
        return self._build_dir

    def tags_of(self, path: str) -> frozenset[str]:
        return frozenset(self.tags.get(path, ()))

    def tag_file(self, path: str, tags: Iterable[str]) -> None:
        self.tags.setdefault(path, set()).update(tags)

    def build(self, batches: Sequence[Sequence[str]]) -> list[Outcome]:
        self.requests.append([list(batch) for batch in batches])
        return [self._build_batch(batch) for batch in batches]

    def _build_batch(self, batch: Sequence[str]) -> Outcome:
        error: BaseException = NoRuleError("empty batch")
        for target in batch:
            try:
                return Good(self.build_target(target))
            except Exception as exc:
                error = exc
        return Bad(error)

    def build_target(self, target: str) -> str:
        if target in self.built:
            return self.built[target]
        if target in self.sources:
            return target

        error: BaseException = NoRuleError(f"No rule to build {target}")
        for rule, env in self.registry.matching(target):
            try:
                for dep in rule.deps:
                    self.build_target(env(dep))
                self.invoked.append((rule.name, target))
                apply_rule(rule, env, self, self.failures)
            except Exception as exc:
                error = exc
                continue
            self.built[target] = target
            if self.on_built is not None:
                self.on_built(target)
            return target
        raise error


@pytest.fixture
def write_sources() -> Callable[[Path, dict[str, str]], Path]:
    """Return a helper writing ``{relative path: content}`` under a root."""

    def _write(root: Path, files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def make_engine() -> Callable[..., FakeEngine]:
    """Return a factory for :class:`FakeEngine` instances."""

    def _make(
        build_dir: Path,
        registry: RuleRegistry | None = None,
        failures: FailureTable | None = None,
        on_built: Callable[[str], None] | None = None,
        sources: Iterable[str] | None = None,
    ) -> FakeEngine:
        return FakeEngine(
            build_dir, registry if registry is not None else RuleRegistry(), failures, on_built, sources
        )

    return _make


@pytest.fixture
def foo_sources(tmp_path: Path, write_sources: Callable[[Path, dict[str, str]], Path]) -> Path:
    """A build root with the library namespace ``lib/foo`` holding ``a.ml`` and ``b.ml``."""
    return write_sources(
        tmp_path,
        {
            "lib/foo/a.ml": "let x = 1\n",
            "lib/foo/b.ml": "let y = A.x + 1\n",
        },
    )


@pytest.fixture
def foo_config() -> NsbuildConfig:
    return NsbuildConfig(namespaces=("lib/foo",), libraries=("lib/foo",))


@pytest.fixture
def foo_tree(foo_sources: Path, foo_config: NsbuildConfig) -> NamespaceTree:
    return NamespaceTree.scan(foo_sources, foo_config)


@pytest.fixture
def foo_source_paths() -> tuple[str, ...]:
    """Sources of ``foo_sources``, for engines created after earlier builds left products behind."""
    return ("lib/foo/a.ml", "lib/foo/b.ml")
