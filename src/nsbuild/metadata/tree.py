"""Namespace metadata derived from a directory tree of source files.

Every directory below a configured namespace root is a namespace. A source
file ``src/foo/bar/a.ml`` under the root ``src/foo`` lives in the namespace
with path ``("foo", "bar")`` and is presented to the compiler as the virtual
file ``src/foo/bar/foo__bar__a.ml`` (module ``Foo__bar__a``). The namespace
itself is generated at the stem ``src/foo/foo__bar`` (module ``Foo__bar``);
top-level namespaces keep their directory as stem (``src/foo``, module
``Foo``).
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterable
from pathlib import Path

from nsbuild.config import NsbuildConfig
from nsbuild.constants.config import DEFAULT_SOURCE_EXTENSIONS
from nsbuild.constants.naming import (
    DIGEST_SUFFIX,
    INTERFACE_EXTENSION,
    LIBRARY_TAG_PREFIX,
)
from nsbuild.exceptions import ConfigError
from nsbuild.metadata.naming import capitalize, chop_extensions, flatten, is_flattened
from nsbuild.metadata.rendering import render_alias_file, render_namespace_file
from nsbuild.model import Namespace, NamespacedFile, NamespaceMember
from nsbuild.types import ModuleName

logger = logging.getLogger(__name__)


class NamespaceTree:
    """In-memory :class:`~nsbuild.metadata.protocols.NamespaceMetadata` implementation."""

    def __init__(
        self,
        namespaces: Iterable[Namespace],
        files: Iterable[NamespacedFile],
        libraries: Iterable[str] = (),
    ) -> None:
        self._namespaces: dict[str, Namespace] = {}
        self._by_module_name: dict[ModuleName, Namespace] = {}
        for namespace in namespaces:
            self._namespaces[namespace.stem] = namespace
            self._by_module_name[namespace.module_name] = namespace

        self._files: dict[str, NamespacedFile] = {}
        self._files_by_namespace: dict[str, list[NamespacedFile]] = {}
        for file in sorted(files, key=lambda f: f.virtual_path):
            self._files[file.virtual_path] = file
            self._files_by_namespace.setdefault(file.namespace, []).append(file)

        self._libraries: tuple[str, ...] = tuple(libraries)
        unknown = [stem for stem in self._libraries if stem not in self._namespaces]
        if unknown:
            raise ConfigError(f"Library stems are not namespaces: {', '.join(unknown)}")

    @classmethod
    def scan(cls, build_dir: Path, config: NsbuildConfig) -> NamespaceTree:
        """Discover namespaces by listing source files under the configured roots."""
        paths: list[str] = []
        for root in config.namespaces:
            root_dir = build_dir / root
            if not root_dir.is_dir():
                raise ConfigError(f"Namespace root does not exist or is not a directory: {root_dir}")
            for candidate in root_dir.rglob("*"):
                if candidate.is_file() and not candidate.is_symlink():
                    paths.append(candidate.relative_to(build_dir).as_posix())

        tree = cls.from_paths(
            paths,
            namespace_roots=config.namespaces,
            libraries=config.libraries,
            source_extensions=config.source_extensions,
        )
        logger.info("Discovered %d namespaces and %d namespaced files", len(tree.namespaces), len(tree.files))
        return tree

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str],
        *,
        namespace_roots: Iterable[str],
        libraries: Iterable[str] = (),
        source_extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS,
    ) -> NamespaceTree:
        """Build the tree from build-relative source paths."""
        roots = tuple(root.rstrip("/") for root in namespace_roots)
        for root in roots:
            nested_in = [other for other in roots if other != root and root.startswith(f"{other}/")]
            if nested_in:
                raise ConfigError(f"Namespace root {root} is nested inside {nested_in[0]}")

        directories: dict[str, list[str]] = {root: [] for root in roots}
        for path in sorted(set(paths)):
            directory, filename = posixpath.split(path)
            extension = filename.rpartition(".")[2] if "." in filename else ""
            if extension not in source_extensions:
                continue
            root = _owning_root(directory, roots)
            if root is None:
                continue
            if is_flattened(chop_extensions(filename)):
                logger.debug("Skipping generated or flattened file: %s", path)
                continue
            directories.setdefault(directory, []).append(filename)
            parent = directory
            while parent != root:
                parent = posixpath.dirname(parent)
                directories.setdefault(parent, [])

        namespaces: list[Namespace] = []
        files: list[NamespacedFile] = []
        originals: dict[str, str] = {}
        for directory in sorted(directories):
            root = _owning_root(directory, roots)
            assert root is not None
            path = _namespace_path(directory, root)
            stem = _namespace_stem(directory, root, path)
            children = sorted(child for child in directories if posixpath.dirname(child) == directory)

            members: dict[str, NamespaceMember] = {}
            for filename in directories[directory]:
                leaf = chop_extensions(filename)
                extension = filename.rpartition(".")[2]
                module_name = capitalize(flatten((*path, leaf)))
                virtual_path = f"{directory}/{flatten((*path, leaf))}.{extension}"
                if virtual_path in originals:
                    raise ConfigError(
                        f"{originals[virtual_path]} and {directory}/{filename} both map to {virtual_path}"
                    )
                originals[virtual_path] = f"{directory}/{filename}"
                members[capitalize(leaf)] = NamespaceMember(
                    name=capitalize(leaf), module_name=module_name, kind="module"
                )
                files.append(
                    NamespacedFile(
                        virtual_path=virtual_path,
                        original_path=originals[virtual_path],
                        original_name=filename,
                        module_name=module_name,
                        kind="interface" if extension == INTERFACE_EXTENSION else "implementation",
                        namespace=stem,
                    )
                )
            for child in children:
                name = capitalize(posixpath.basename(child))
                if name in members:
                    raise ConfigError(f"{child} is both a module and a namespace in {directory}")
                child_path = _namespace_path(child, root)
                members[name] = NamespaceMember(
                    name=name, module_name=capitalize(flatten(child_path)), kind="namespace"
                )

            parent = None
            if directory != root:
                parent_directory = posixpath.dirname(directory)
                parent = _namespace_stem(parent_directory, root, _namespace_path(parent_directory, root))

            namespaces.append(
                Namespace(
                    directory=directory,
                    path=path,
                    stem=stem,
                    module_name=capitalize(flatten(path)),
                    members=tuple(members[name] for name in sorted(members)),
                    parent=parent,
                )
            )

        library_stems: list[str] = []
        for library in libraries:
            library = library.rstrip("/")
            root = _owning_root(library, roots)
            if root is None or library not in directories:
                raise ConfigError(f"Library directory is not a namespace: {library}")
            library_stems.append(_namespace_stem(library, root, _namespace_path(library, root)))

        return cls(namespaces, files, library_stems)

    @property
    def namespaces(self) -> tuple[Namespace, ...]:
        return tuple(self._namespaces[stem] for stem in sorted(self._namespaces))

    @property
    def files(self) -> tuple[NamespacedFile, ...]:
        return tuple(self._files[path] for path in sorted(self._files))

    @property
    def libraries(self) -> tuple[str, ...]:
        return self._libraries

    def namespace_of(self, stem: str) -> Namespace | None:
        return self._namespaces.get(stem)

    def members(self, namespace: Namespace) -> list[NamespaceMember]:
        return list(namespace.members)

    def dependency_closure(self, namespace: Namespace) -> list[str]:
        """Files whose state the namespace digest covers, in member order.

        Module members contribute their virtual source files; sub-namespaces
        contribute their own digest, which makes the closure transitive.
        """
        namespace_files = self._files_by_namespace.get(namespace.stem, [])
        closure: list[str] = []
        for member in namespace.members:
            if member.kind == "namespace":
                closure.append(self._by_module_name[member.module_name].stem + DIGEST_SUFFIX)
                continue
            closure.extend(file.virtual_path for file in namespace_files if file.module_name == member.module_name)
        return closure

    def library_members(self, stem: str) -> list[str] | None:
        """Extensionless paths of every module archived in the library at ``stem``."""
        if stem not in self._libraries:
            return None
        return self._collect_library_members(self._namespaces[stem])

    def _collect_library_members(self, namespace: Namespace) -> list[str]:
        collected: list[str] = []
        for member in namespace.members:
            if member.kind == "namespace":
                collected.extend(self._collect_library_members(self._by_module_name[member.module_name]))
                continue
            collected.extend(
                chop_extensions(file.virtual_path)
                for file in self._files_by_namespace.get(namespace.stem, [])
                if file.module_name == member.module_name and file.kind == "implementation"
            )
        collected.append(namespace.stem)
        return collected

    def file_by_virtual_path(self, path: str) -> NamespacedFile | None:
        return self._files.get(path)

    def resolve(self, file: NamespacedFile, raw_name: str) -> ModuleName:
        """Map a module name as written in ``file`` to its flat name.

        The file's own namespace is searched first, then each enclosing one.
        Names that match no member are returned unchanged.
        """
        namespace = self._namespaces.get(file.namespace)
        while namespace is not None:
            for member in namespace.members:
                if member.name == raw_name:
                    return member.module_name
            namespace = self._namespaces.get(namespace.parent) if namespace.parent else None
        return raw_name

    def original_path(self, file: NamespacedFile) -> str:
        return file.original_path

    def alias_file_contents(self, namespace: Namespace) -> str:
        return render_alias_file(namespace)

    def namespace_file_contents(self, namespace: Namespace, digest: str) -> str:
        return render_namespace_file(namespace, digest)

    def library_tags(self) -> tuple[str, ...]:
        return tuple(f"{LIBRARY_TAG_PREFIX}{posixpath.basename(stem)}" for stem in self._libraries)


def _owning_root(directory: str, roots: tuple[str, ...]) -> str | None:
    for root in roots:
        if directory == root or directory.startswith(f"{root}/"):
            return root
    return None


def _namespace_path(directory: str, root: str) -> tuple[str, ...]:
    relative = directory[len(root) :].strip("/")
    components = (posixpath.basename(root), *(relative.split("/") if relative else ()))
    flattened = [component for component in components if is_flattened(component)]
    if flattened:
        raise ConfigError(f"Namespace directory names must not contain '__': {directory}")
    return components


def _namespace_stem(directory: str, root: str, path: tuple[str, ...]) -> str:
    if directory == root:
        return directory
    return f"{posixpath.dirname(directory)}/{flatten(path)}"
