"""Tests for the dependency filter rules."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Bad, Good, RuleRegistry, signal_key
from nsbuild.exceptions import AnalyzerInvocationError, MalformedAnalyzerOutputError
from nsbuild.metadata import NamespaceTree
from nsbuild.rules import add_all


class RecordingAnalyzer:
    def __init__(self, output: str | BaseException) -> None:
        self.output = output
        self.calls: list[tuple[tuple[str, ...], Path]] = []

    def __call__(self, command: Sequence[str], cwd: Path) -> str:
        self.calls.append((tuple(command), cwd))
        if isinstance(self.output, BaseException):
            raise self.output
        return self.output


@pytest.fixture
def engine(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    foo_tree: NamespaceTree,
    make_engine: Callable[..., object],
) -> object:
    registry = RuleRegistry()
    add_all(registry, config=foo_config, metadata=foo_tree)
    return make_engine(foo_sources, registry)


def test_dependencies_are_flattened(
    engine: object, foo_sources: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    analyzer = RecordingAnalyzer("lib/foo/foo__b.ml: A List\n")
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", analyzer)

    [outcome] = engine.build([["lib/foo/foo__b.ml.depends"]])

    assert isinstance(outcome, Good)
    assert (foo_sources / "lib/foo/foo__b.ml.depends").read_text(encoding="utf-8") == (
        "lib/foo/foo__b.ml: Foo__a List\n"
    )
    [(command, cwd)] = analyzer.calls
    assert command == ("ocamlfind", "ocamldep", "-modules", "lib/foo/foo__b.ml")
    assert cwd == foo_sources


def test_analyzer_receives_tag_flags(engine: object, monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = RecordingAnalyzer("lib/foo/foo__a.ml:\n")
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", analyzer)
    engine.tag_file("lib/foo/foo__a.ml.depends", {"package(str)", "debug"})

    engine.build([["lib/foo/foo__a.ml.depends"]])

    [(command, _)] = analyzer.calls
    assert command == ("ocamlfind", "ocamldep", "-package", "str", "-modules", "lib/foo/foo__a.ml")


def test_no_dependencies_renders_bare_target(
    engine: object, foo_sources: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", RecordingAnalyzer("lib/foo/foo__a.ml:\n"))

    engine.build([["lib/foo/foo__a.ml.depends"]])

    assert (foo_sources / "lib/foo/foo__a.ml.depends").read_text(encoding="utf-8") == "lib/foo/foo__a.ml:\n"


def test_malformed_output_is_a_hard_error(engine: object, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", RecordingAnalyzer("garbage"))

    [outcome] = engine.build([["lib/foo/foo__a.ml.depends"]])

    assert isinstance(outcome, Bad)
    assert isinstance(outcome.error, MalformedAnalyzerOutputError)
    assert signal_key("lib/foo/foo__a.ml.depends", "not a namespaced file") not in engine.failures


def test_analyzer_failure_propagates(engine: object, monkeypatch: pytest.MonkeyPatch) -> None:
    error = AnalyzerInvocationError(("ocamlfind", "ocamldep"), "exit status 2")
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", RecordingAnalyzer(error))

    [outcome] = engine.build([["lib/foo/foo__a.ml.depends"]])

    assert isinstance(outcome, Bad)
    assert outcome.error is error


def test_non_namespaced_source_is_signaled(engine: object, monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = RecordingAnalyzer("unused")
    monkeypatch.setattr("nsbuild.rules.dependencies.run_analyzer", analyzer)

    [outcome] = engine.build([["lib/foo.ml.depends"]])

    assert isinstance(outcome, Bad)
    assert signal_key("lib/foo.ml.depends", "not a namespaced file") in engine.failures
    assert analyzer.calls == []
