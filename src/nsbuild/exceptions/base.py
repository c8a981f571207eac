"""Root of the nsbuild exception hierarchy."""

from __future__ import annotations


class NsbuildError(Exception):
    """Base class for all nsbuild errors."""
