"""Config data model for nsbuild."""

from __future__ import annotations

from dataclasses import dataclass, field

from nsbuild.constants.config import (
    DEFAULT_BUILD_LOG,
    DEFAULT_EXECUTABLE_EXTENSIONS,
    DEFAULT_SOURCE_EXTENSIONS,
)
from nsbuild.constants.naming import IMPLEMENTATION_EXTENSION
from nsbuild.types.config import AnalyzerConfig, LibraryConfig


@dataclass(frozen=True)
class NsbuildConfig:
    """Resolved build config."""

    build_log: str = DEFAULT_BUILD_LOG
    source_extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS
    executable_extensions: tuple[str, ...] = DEFAULT_EXECUTABLE_EXTENSIONS
    namespaces: tuple[str, ...] = ()
    libraries: tuple[str, ...] = ()
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    library: LibraryConfig = field(default_factory=LibraryConfig)

    @property
    def implementation_extension(self) -> str:
        """Extension of compiled implementation files, used for manifests."""
        return IMPLEMENTATION_EXTENSION
