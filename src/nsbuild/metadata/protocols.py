"""Protocol for the namespace metadata service consumed by the rules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from nsbuild.model import Namespace, NamespacedFile, NamespaceMember
from nsbuild.types import ModuleName


@runtime_checkable
class NamespaceMetadata(Protocol):
    """Maps directories to namespaces and virtual paths to real files."""

    def namespace_of(self, stem: str) -> Namespace | None: ...

    def dependency_closure(self, namespace: Namespace) -> list[str]: ...

    def members(self, namespace: Namespace) -> list[NamespaceMember]: ...

    def library_members(self, stem: str) -> list[str] | None: ...

    def file_by_virtual_path(self, path: str) -> NamespacedFile | None: ...

    def resolve(self, file: NamespacedFile, raw_name: str) -> ModuleName: ...

    def original_path(self, file: NamespacedFile) -> str: ...

    def alias_file_contents(self, namespace: Namespace) -> str: ...

    def namespace_file_contents(self, namespace: Namespace, digest: str) -> str: ...

    def library_tags(self) -> tuple[str, ...]: ...
