"""Namespace metadata: directories as namespaces, files as flattened modules."""

from .naming import chop_extensions, flatten, module_name_of_path
from .protocols import NamespaceMetadata
from .rendering import render_alias_file, render_namespace_file
from .tree import NamespaceTree

__all__ = [
    "NamespaceMetadata",
    "NamespaceTree",
    "chop_extensions",
    "flatten",
    "module_name_of_path",
    "render_alias_file",
    "render_namespace_file",
]
