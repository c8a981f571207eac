"""Shared exception hierarchy for nsbuild."""

from __future__ import annotations

from .analysis import AnalyzerInvocationError, MalformedAnalyzerOutputError, MissingBuildLogError
from .base import NsbuildError
from .config import ConfigError
from .engine import FailureCaptureError
from .resolution import (
    InapplicableRuleError,
    NotALibraryNamespaceError,
    NotANamespaceError,
    NotNamespacedFileError,
)

__all__ = [
    "AnalyzerInvocationError",
    "ConfigError",
    "FailureCaptureError",
    "InapplicableRuleError",
    "MalformedAnalyzerOutputError",
    "MissingBuildLogError",
    "NotALibraryNamespaceError",
    "NotANamespaceError",
    "NotNamespacedFileError",
    "NsbuildError",
]
