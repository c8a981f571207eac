"""Hard failures from the dependency analyzer and the build log.

These are never routed through the failure signaling protocol: a broken
dependency graph must stop the build.
"""

from __future__ import annotations

from nsbuild.exceptions.base import NsbuildError


class AnalyzerInvocationError(NsbuildError):
    """Raised when the dependency analyzer cannot be run or exits non-zero."""

    def __init__(self, command: tuple[str, ...], detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"Dependency analyzer failed: {' '.join(command)} ({detail})")


class MalformedAnalyzerOutputError(NsbuildError, ValueError):
    """Raised when analyzer output has no ``target: deps`` line."""

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(f"Malformed dependency analyzer output (no ':' found): {output!r}")


class MissingBuildLogError(NsbuildError, FileNotFoundError):
    """Raised when the build log needed for library ordering is absent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} not present; is the build engine running with logging disabled?")
