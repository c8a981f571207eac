"""Grammar for analyzer output: ``<target>: <dep> <dep> ...``."""

from __future__ import annotations

from collections.abc import Callable

from nsbuild.constants.parsing import WHITESPACE_PATTERN
from nsbuild.exceptions import MalformedAnalyzerOutputError
from nsbuild.model import RawDependencyLine, ResolvedDependencyLine


def parse_dependency_line(output: str) -> RawDependencyLine:
    """Parse analyzer output, splitting at the first colon.

    Everything after the colon, across line breaks, is read as a
    whitespace-separated list of module names.
    """
    target, colon, remainder = output.partition(":")
    if not colon:
        raise MalformedAnalyzerOutputError(output)

    dependencies = tuple(token for token in WHITESPACE_PATTERN.split(remainder) if token)
    return RawDependencyLine(target=target.strip(), dependencies=dependencies)


def resolve_dependency_line(
    line: RawDependencyLine,
    target: str,
    resolve: Callable[[str], str],
) -> ResolvedDependencyLine:
    """Map each raw dependency through ``resolve`` and retarget the line.

    The analyzer's own target is discarded in favour of ``target``, the path
    the build engine knows the file by.
    """
    return ResolvedDependencyLine(
        target=target,
        dependencies=tuple(resolve(name) for name in line.dependencies),
    )
