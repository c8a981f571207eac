"""Configuration-related exceptions."""

from __future__ import annotations

from nsbuild.exceptions.base import NsbuildError


class ConfigError(NsbuildError, ValueError):
    """Raised when build configuration is invalid."""
