"""Constants for the failure signaling protocol and rule registration."""

from __future__ import annotations

import re

# Synthetic targets are wrapped in this fence so they cannot match a real file.
SIGNAL_FENCE: str = "___"
SIGNAL_FILLER: str = "_"
SIGNAL_WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s")

EXECUTABLE_SENTINEL_MESSAGE: str = "__dummy_target__"

NOT_A_NAMESPACE_MESSAGE: str = "not a namespace"
NOT_NAMESPACED_MESSAGE: str = "not a namespaced file"
NOT_A_LIBRARY_MESSAGE: str = "not a namespace library"

INSERT_TOP: str = "top"
INSERT_BOTTOM: str = "bottom"

TEXT_TEMP_PREFIX: str = ".nsbuild-"
TEXT_TEMP_SUFFIX: str = ".tmp"
FILE_HASH_CHUNK_SIZE: int = 65536
