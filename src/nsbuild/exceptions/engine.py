"""Exceptions raised while talking to the host build engine."""

from __future__ import annotations

from nsbuild.exceptions.base import NsbuildError


class FailureCaptureError(NsbuildError, RuntimeError):
    """Raised when the engine does not fail a synthetic signal target."""
