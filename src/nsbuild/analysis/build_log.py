"""Compile order as recorded in the build engine's log."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from nsbuild.constants.parsing import COMPILER_INVOCATION_PATTERN
from nsbuild.exceptions import MissingBuildLogError
from nsbuild.metadata.naming import module_name_of_path
from nsbuild.types import ModuleName

logger = logging.getLogger(__name__)


def parse_log_line(line: str, pattern: re.Pattern[str] = COMPILER_INVOCATION_PATTERN) -> str | None:
    """Return the compiled source path if ``line`` is a compiler invocation."""
    match = pattern.match(line)
    if match is None:
        return None
    return match.group("path")


def compile_order(text: str, pattern: re.Pattern[str] = COMPILER_INVOCATION_PATTERN) -> list[ModuleName]:
    """Module names in chronological order of their first compilation."""
    seen: dict[ModuleName, None] = {}
    for line in text.splitlines():
        path = parse_log_line(line, pattern)
        if path is not None:
            seen.setdefault(module_name_of_path(path), None)
    return list(seen)


class BuildLog:
    """Oracle over the append-only build log of the running engine process."""

    def __init__(self, path: Path, pattern: re.Pattern[str] = COMPILER_INVOCATION_PATTERN) -> None:
        self.path = path
        self.pattern = pattern

    def compile_order(self) -> list[ModuleName]:
        """Read the log and return module names in first-compiled order.

        Bytes that are not UTF-8 are replaced; they only ever occur in output
        the compiler pattern ignores.
        """
        if not self.path.is_file():
            raise MissingBuildLogError(str(self.path))
        order = compile_order(self.path.read_text(encoding="utf-8", errors="replace"), self.pattern)
        logger.debug("Build log %s records %d compiled modules", self.path, len(order))
        return order
