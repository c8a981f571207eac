"""Typed configuration structures for nsbuild settings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nsbuild.constants.config import (
    DEFAULT_ANALYZER_COMMAND,
    DEFAULT_ANALYZER_TAGS,
    DEFAULT_TAG_FLAGS,
    DEFAULT_UNCOMPILED_PLACEMENT,
)
from nsbuild.constants.parsing import COMPILER_INVOCATION_PATTERN


@dataclass(frozen=True)
class AnalyzerConfig:
    """How to invoke the external dependency analyzer."""

    command: tuple[str, ...] = DEFAULT_ANALYZER_COMMAND
    tags: tuple[str, ...] = DEFAULT_ANALYZER_TAGS
    tag_flags: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_TAG_FLAGS)), hash=False
    )


@dataclass(frozen=True)
class LibraryConfig:
    """Library manifest ordering settings."""

    uncompiled: str = DEFAULT_UNCOMPILED_PLACEMENT
    compiler_pattern: re.Pattern[str] = COMPILER_INVOCATION_PATTERN
