"""Tests for the long-name link rules."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Bad, Good, RuleRegistry, signal_key
from nsbuild.metadata import NamespaceTree
from nsbuild.rules import add_all


def _engine(
    build_dir: Path, config: NsbuildConfig, make_engine: Callable[..., object]
) -> object:
    registry = RuleRegistry()
    add_all(registry, config=config, metadata=NamespaceTree.scan(build_dir, config))
    return make_engine(build_dir, registry)


def test_virtual_file_links_to_original(
    foo_sources: Path, foo_config: NsbuildConfig, make_engine: Callable[..., object]
) -> None:
    engine = _engine(foo_sources, foo_config, make_engine)

    [outcome] = engine.build([["lib/foo/foo__a.ml"]])

    assert isinstance(outcome, Good)
    link = foo_sources / "lib/foo/foo__a.ml"
    assert link.is_symlink()
    assert os.readlink(link) == "a.ml"
    assert link.read_text(encoding="utf-8") == "let x = 1\n"


def test_link_copies_original_tags(
    foo_sources: Path, foo_config: NsbuildConfig, make_engine: Callable[..., object]
) -> None:
    engine = _engine(foo_sources, foo_config, make_engine)
    engine.tag_file("lib/foo/b.ml", {"package(str)", "warn(-32)"})

    engine.build([["lib/foo/foo__b.ml"]])

    assert engine.tags_of("lib/foo/foo__b.ml") == frozenset({"package(str)", "warn(-32)"})


def test_interface_gets_its_own_link(
    foo_sources: Path,
    foo_config: NsbuildConfig,
    write_sources: Callable[[Path, dict[str, str]], Path],
    make_engine: Callable[..., object],
) -> None:
    write_sources(foo_sources, {"lib/foo/a.mli": "val x : int\n"})
    engine = _engine(foo_sources, foo_config, make_engine)

    [outcome] = engine.build([["lib/foo/foo__a.mli"]])

    assert isinstance(outcome, Good)
    assert os.readlink(foo_sources / "lib/foo/foo__a.mli") == "a.mli"
    assert ("namespace: mli -> mli (long name)", "lib/foo/foo__a.mli") in engine.invoked


def test_unknown_virtual_file_is_signaled(
    foo_sources: Path, foo_config: NsbuildConfig, make_engine: Callable[..., object]
) -> None:
    engine = _engine(foo_sources, foo_config, make_engine)

    [outcome] = engine.build([["lib/foo/foo__c.ml"]])

    assert isinstance(outcome, Bad)
    assert signal_key("lib/foo/foo__c.ml", "not a namespaced file") in engine.failures
    assert not (foo_sources / "lib/foo/foo__c.ml").exists()
