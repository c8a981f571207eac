"""Namespace, file and dependency records."""

from __future__ import annotations

from dataclasses import dataclass, field

from nsbuild.types import MemberKind, ModuleName, SourceKind


@dataclass(frozen=True)
class NamespaceMember:
    """A direct member of a namespace, as seen from inside it."""

    name: ModuleName
    module_name: ModuleName
    kind: MemberKind


@dataclass(frozen=True)
class Namespace:
    """A directory given build-system identity.

    ``path`` holds the directory components below the namespace root, so
    ``src/foo/bar`` under the root ``src/foo`` has path ``("foo", "bar")``.
    ``stem`` is the target stem of the namespace's generated files.
    """

    directory: str
    path: tuple[str, ...]
    stem: str
    module_name: ModuleName
    members: tuple[NamespaceMember, ...] = ()
    parent: str | None = None

    @property
    def final_directory(self) -> str:
        return self.path[-1]


@dataclass(frozen=True)
class NamespacedFile:
    """Mapping between a flattened virtual module path and its real source file."""

    virtual_path: str
    original_path: str
    original_name: str
    module_name: ModuleName
    kind: SourceKind
    namespace: str


@dataclass(frozen=True)
class RawDependencyLine:
    """Analyzer output for one file: unresolved module names in source order."""

    target: str
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedDependencyLine:
    """Dependency line with every module name mapped into the flat module space."""

    target: str
    dependencies: tuple[str, ...] = ()

    def render(self) -> str:
        """Render as ``<target>: dep dep ...`` followed by a newline."""
        return " ".join((f"{self.target}:", *self.dependencies)) + "\n"


@dataclass(frozen=True)
class LibraryManifest:
    """Library members in compiler invocation order."""

    stem: str
    modules: tuple[ModuleName, ...] = field(default_factory=tuple)

    def render(self) -> str:
        return "\n".join(self.modules)
