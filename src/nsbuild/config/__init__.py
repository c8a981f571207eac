"""Configuration loading and normalization for nsbuild."""

from __future__ import annotations

from nsbuild.config.loader import load_config
from nsbuild.config.model import NsbuildConfig

__all__ = [
    "NsbuildConfig",
    "load_config",
]
