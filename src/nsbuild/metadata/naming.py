"""Flattened module naming."""

from __future__ import annotations

import posixpath

from nsbuild.constants.naming import FLAT_SEPARATOR
from nsbuild.types import ModuleName


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def chop_extensions(path: str) -> str:
    """Drop every extension from the last path component: ``a/b.ml.depends`` -> ``a/b``."""
    head, tail = posixpath.split(path)
    base = tail.split(".", 1)[0]
    return posixpath.join(head, base) if head else base


def module_name_of_path(path: str) -> ModuleName:
    """Return the compiler's module name for a source path: ``src/foo/foo__a.ml`` -> ``Foo__a``."""
    return capitalize(posixpath.basename(chop_extensions(path)))


def flatten(components: tuple[str, ...]) -> str:
    """Join namespace components into one flat, lowercase-first file stem."""
    return FLAT_SEPARATOR.join(components)


def is_flattened(name: str) -> bool:
    return FLAT_SEPARATOR in name
