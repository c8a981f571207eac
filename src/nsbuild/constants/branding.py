"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "nsbuild: namespace-aware build rules.\n\n"
    "Inspect namespace layouts, validate configuration and reproduce library\n"
    "manifest ordering from a build log."
)
