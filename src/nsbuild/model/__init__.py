"""Core data models for nsbuild."""

from .entities import (
    LibraryManifest,
    Namespace,
    NamespacedFile,
    NamespaceMember,
    RawDependencyLine,
    ResolvedDependencyLine,
)

__all__ = [
    "LibraryManifest",
    "Namespace",
    "NamespaceMember",
    "NamespacedFile",
    "RawDependencyLine",
    "ResolvedDependencyLine",
]
