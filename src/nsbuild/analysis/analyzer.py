"""Invocation of the external dependency analyzer."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Mapping
from pathlib import Path

from nsbuild.constants.naming import STEM_PLACEHOLDER
from nsbuild.constants.parsing import PARAMETERIZED_TAG_PATTERN
from nsbuild.exceptions import AnalyzerInvocationError
from nsbuild.types import AnalyzerConfig

logger = logging.getLogger(__name__)


def flags_for_tags(tags: Iterable[str], tag_flags: Mapping[str, tuple[str, ...]]) -> tuple[str, ...]:
    """Expand build tags into analyzer flags.

    A tag matches a ``tag_flags`` key either exactly or, for parameterized
    tags such as ``package(lwt)``, through a ``package(%)`` key whose flags
    get the argument substituted for ``%``. Tags are expanded in sorted order.
    """
    flags: list[str] = []
    for tag in sorted(set(tags)):
        exact = tag_flags.get(tag)
        if exact is not None:
            flags.extend(exact)
            continue

        match = PARAMETERIZED_TAG_PATTERN.match(tag)
        if match is None:
            continue
        template = tag_flags.get(f"{match.group('name')}({STEM_PLACEHOLDER})")
        if template is not None:
            argument = match.group("argument")
            flags.extend(flag.replace(STEM_PLACEHOLDER, argument) for flag in template)
    return tuple(flags)


def analyzer_command(config: AnalyzerConfig, tags: Iterable[str], path: str) -> tuple[str, ...]:
    """Return the argv for analyzing ``path`` with module-name output."""
    return (*config.command, *flags_for_tags((*tags, *config.tags), config.tag_flags), "-modules", path)


def run_analyzer(command: tuple[str, ...], *, cwd: Path) -> str:
    """Run the analyzer once and return its standard output.

    Failing to start the process or to decode its output is fatal, as is a
    non-zero exit status.
    """
    logger.debug("Running dependency analyzer: %s", " ".join(command))
    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as exc:
        raise AnalyzerInvocationError(command, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise AnalyzerInvocationError(command, f"output is not valid UTF-8: {exc.reason}") from exc

    if completed.returncode != 0:
        detail = completed.stderr.strip() or f"exit status {completed.returncode}"
        raise AnalyzerInvocationError(command, detail)
    return completed.stdout
