"""Config loading and normalization for nsbuild."""

from __future__ import annotations

import difflib
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from nsbuild.config.model import NsbuildConfig
from nsbuild.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_ANALYZER_COMMAND,
    DEFAULT_ANALYZER_TAGS,
    DEFAULT_BUILD_LOG,
    DEFAULT_EXECUTABLE_EXTENSIONS,
    DEFAULT_SOURCE_EXTENSIONS,
    DEFAULT_TAG_FLAGS,
    DEFAULT_UNCOMPILED_PLACEMENT,
    VALID_UNCOMPILED_PLACEMENTS,
)
from nsbuild.constants.parsing import COMPILER_INVOCATION_PATTERN
from nsbuild.exceptions import ConfigError
from nsbuild.types.config import AnalyzerConfig, LibraryConfig

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {"build_log", "source_extensions", "executable_extensions", "namespaces", "libraries", "analyzer", "library"}
)
ALLOWED_ANALYZER_KEYS: frozenset[str] = frozenset({"command", "tags", "tag_flags"})
ALLOWED_LIBRARY_KEYS: frozenset[str] = frozenset({"uncompiled", "compiler_pattern"})


def load_config(root: Path, config_path: Path | None = None) -> NsbuildConfig:
    """Load and validate build config from ``nsbuild.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return NsbuildConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, "")

    analyzer_raw = _ensure_mapping(raw.get("analyzer"), "analyzer")
    library_raw = _ensure_mapping(raw.get("library"), "library")
    _reject_unknown_keys(analyzer_raw, ALLOWED_ANALYZER_KEYS, "analyzer.")
    _reject_unknown_keys(library_raw, ALLOWED_LIBRARY_KEYS, "library.")

    build_log = raw.get("build_log", DEFAULT_BUILD_LOG)
    if not isinstance(build_log, str) or not build_log.strip():
        raise ConfigError("build_log must be a non-empty string")

    namespaces = _normalize_directories(_ensure_string_list(raw.get("namespaces", []), "namespaces"))
    libraries = _normalize_directories(_ensure_string_list(raw.get("libraries", []), "libraries"))
    unknown_libraries = sorted(
        library
        for library in libraries
        if not any(library == ns or library.startswith(f"{ns}/") for ns in namespaces)
    )
    if unknown_libraries:
        raise ConfigError(f"libraries must lie inside configured namespaces: {', '.join(unknown_libraries)}")

    return NsbuildConfig(
        build_log=build_log.strip(),
        source_extensions=_normalize_extensions(
            _ensure_string_list(raw.get("source_extensions", list(DEFAULT_SOURCE_EXTENSIONS)), "source_extensions"),
            "source_extensions",
        ),
        executable_extensions=_normalize_extensions(
            _ensure_string_list(
                raw.get("executable_extensions", list(DEFAULT_EXECUTABLE_EXTENSIONS)),
                "executable_extensions",
            ),
            "executable_extensions",
        ),
        namespaces=namespaces,
        libraries=libraries,
        analyzer=_build_analyzer_config(analyzer_raw),
        library=_build_library_config(library_raw),
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _reject_unknown_keys(raw: dict[Any, Any], allowed: frozenset[str], prefix: str) -> None:
    for key in raw:
        if key in allowed:
            continue
        suggestion = difflib.get_close_matches(str(key), sorted(allowed), n=1)
        hint = f" (did you mean '{prefix}{suggestion[0]}'?)" if suggestion else ""
        raise ConfigError(f"Unknown config key '{prefix}{key}'{hint}")


def _normalize_directories(directories: list[str]) -> tuple[str, ...]:
    """Strip, convert to posix form and drop trailing slashes, keeping first-seen order."""
    normalized = [Path(entry.strip()).as_posix().rstrip("/") for entry in directories if entry.strip()]
    return tuple(dict.fromkeys(normalized))


def _normalize_extensions(extensions: list[str], key_name: str) -> tuple[str, ...]:
    normalized = tuple(ext.strip().lstrip(".") for ext in extensions if ext.strip())
    if not normalized:
        raise ConfigError(f"{key_name} must not be empty")
    return normalized


def _build_analyzer_config(raw: dict[str, Any]) -> AnalyzerConfig:
    command = tuple(_ensure_string_list(raw.get("command", list(DEFAULT_ANALYZER_COMMAND)), "analyzer.command"))
    if not command:
        raise ConfigError("analyzer.command must not be empty")

    tag_flags_raw = raw.get("tag_flags")
    tag_flags: dict[str, tuple[str, ...]] = dict(DEFAULT_TAG_FLAGS)
    if tag_flags_raw is not None:
        if not isinstance(tag_flags_raw, dict):
            raise ConfigError("analyzer.tag_flags must be a mapping")
        for tag, flags in tag_flags_raw.items():
            tag_flags[str(tag)] = tuple(_ensure_string_list(flags, f"analyzer.tag_flags.{tag}"))

    return AnalyzerConfig(
        command=command,
        tags=tuple(_ensure_string_list(raw.get("tags", list(DEFAULT_ANALYZER_TAGS)), "analyzer.tags")),
        tag_flags=MappingProxyType(tag_flags),
    )


def _build_library_config(raw: dict[str, Any]) -> LibraryConfig:
    uncompiled = raw.get("uncompiled", DEFAULT_UNCOMPILED_PLACEMENT)
    if not isinstance(uncompiled, str) or uncompiled not in VALID_UNCOMPILED_PLACEMENTS:
        raise ConfigError(
            f"library.uncompiled must be one of {sorted(VALID_UNCOMPILED_PLACEMENTS)}, got {uncompiled!r}"
        )

    pattern_raw = raw.get("compiler_pattern")
    pattern = COMPILER_INVOCATION_PATTERN
    if pattern_raw is not None:
        if not isinstance(pattern_raw, str):
            raise ConfigError("library.compiler_pattern must be a string")
        try:
            pattern = re.compile(pattern_raw)
        except re.error as exc:
            raise ConfigError(f"library.compiler_pattern is not a valid regex: {exc}") from exc
        if "path" not in pattern.groupindex:
            raise ConfigError("library.compiler_pattern must define a named group 'path'")

    return LibraryConfig(uncompiled=uncompiled, compiler_pattern=pattern)
