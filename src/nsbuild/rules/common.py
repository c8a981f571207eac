"""Helpers shared by the namespace rules."""

from __future__ import annotations

from nsbuild.engine import BuildEngine, Env, ignore_good
from nsbuild.exceptions import NotANamespaceError, NotNamespacedFileError
from nsbuild.metadata import NamespaceMetadata
from nsbuild.model import Namespace, NamespacedFile


def get_namespace(env: Env, metadata: NamespaceMetadata) -> Namespace:
    """Resolve the rule stem to a namespace, or declare the rule inapplicable."""
    namespace = metadata.namespace_of(env.stem)
    if namespace is None:
        raise NotANamespaceError(env.stem)
    return namespace


def get_namespaced_file(path: str, target: str, metadata: NamespaceMetadata) -> NamespacedFile:
    """Resolve a virtual path; ``target`` names the product in the failure signal."""
    file = metadata.file_by_virtual_path(path)
    if file is None:
        raise NotNamespacedFileError(target)
    return file


def build_all(engine: BuildEngine, targets: list[str]) -> None:
    """Build each target as its own batch and require that all succeed."""
    for outcome in engine.build([[target] for target in targets]):
        ignore_good(outcome)
