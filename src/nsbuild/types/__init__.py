"""Shared type aliases for nsbuild."""

from .common import MemberKind, ModuleName, RuleInsert, SourceKind, Tags
from .config import AnalyzerConfig, LibraryConfig

__all__ = [
    "AnalyzerConfig",
    "LibraryConfig",
    "MemberKind",
    "ModuleName",
    "RuleInsert",
    "SourceKind",
    "Tags",
]
