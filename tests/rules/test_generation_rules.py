"""Tests for alias file and namespace root module generation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Bad, Good, RuleRegistry, signal_key
from nsbuild.metadata import NamespaceTree
from nsbuild.rules import add_all


def _registry(config: NsbuildConfig, tree: NamespaceTree) -> RuleRegistry:
    registry = RuleRegistry()
    add_all(registry, config=config, metadata=tree)
    return registry


def test_alias_file_lists_members(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    foo_tree: NamespaceTree,
    make_engine: Callable[..., object],
) -> None:
    engine = make_engine(foo_sources, _registry(foo_config, foo_tree))

    [outcome] = engine.build([["lib/foo__aliases.ml"]])

    assert isinstance(outcome, Good)
    assert (foo_sources / "lib/foo__aliases.ml").read_text(encoding="utf-8") == (
        "module A = Foo__a\nmodule B = Foo__b\n"
    )


def test_namespace_file_embeds_digest(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    foo_tree: NamespaceTree,
    make_engine: Callable[..., object],
) -> None:
    engine = make_engine(foo_sources, _registry(foo_config, foo_tree))

    [outcome] = engine.build([["lib/foo.ml"]])

    assert isinstance(outcome, Good)
    digest = (foo_sources / "lib/foo.digest").read_text(encoding="utf-8").strip()
    assert (foo_sources / "lib/foo.ml").read_text(encoding="utf-8") == (
        f"(* Foo {digest} *)\nmodule A = Foo__a\nmodule B = Foo__b\n"
    )
    assert ("namespace: directory -> .digest", "lib/foo.digest") in engine.invoked


def test_namespace_file_regenerates_identically(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    foo_tree: NamespaceTree,
    foo_source_paths: tuple[str, ...],
    make_engine: Callable[..., object],
) -> None:
    registry = _registry(foo_config, foo_tree)
    root = foo_sources / "lib/foo.ml"

    make_engine(foo_sources, registry, sources=foo_source_paths).build([["lib/foo.ml"]])
    first = root.read_bytes()
    make_engine(foo_sources, registry, sources=foo_source_paths).build([["lib/foo.ml"]])

    assert root.read_bytes() == first


def test_alias_file_for_unknown_directory_is_signaled(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    foo_tree: NamespaceTree,
    make_engine: Callable[..., object],
) -> None:
    engine = make_engine(foo_sources, _registry(foo_config, foo_tree))

    [outcome] = engine.build([["lib/bar__aliases.ml"]])

    assert isinstance(outcome, Bad)
    assert signal_key("lib/bar", "not a namespace") in engine.failures
