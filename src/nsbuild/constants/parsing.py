"""Grammars for analyzer output and build log lines."""

from __future__ import annotations

import re

WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"[ \n\t\r]+")

# A compiler invocation of an implementation file, as recorded in the build log.
COMPILER_INVOCATION_PATTERN: re.Pattern[str] = re.compile(r"ocamlfind ocaml(?:c|opt).* (?P<path>[^ ]+\.ml)$")

# Parameterized build tags, e.g. ``package(lwt.unix)``.
PARAMETERIZED_TAG_PATTERN: re.Pattern[str] = re.compile(r"^(?P<name>[^()]+)\((?P<argument>.*)\)$")
