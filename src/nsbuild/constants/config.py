"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "nsbuild.yaml"

DEFAULT_BUILD_LOG: str = "_log"
DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = ("ml", "mli")
DEFAULT_EXECUTABLE_EXTENSIONS: tuple[str, ...] = ("byte", "native")

DEFAULT_ANALYZER_COMMAND: tuple[str, ...] = ("ocamlfind", "ocamldep")
DEFAULT_ANALYZER_TAGS: tuple[str, ...] = ("ocamldep", "pp:dep")
DEFAULT_TAG_FLAGS: dict[str, tuple[str, ...]] = {
    "package(%)": ("-package", "%"),
    "pp(%)": ("-pp", "%"),
    "ppx(%)": ("-ppx", "%"),
    "thread": ("-thread",),
}

UNCOMPILED_LAST: str = "last"
UNCOMPILED_FIRST: str = "first"
VALID_UNCOMPILED_PLACEMENTS: frozenset[str] = frozenset({UNCOMPILED_LAST, UNCOMPILED_FIRST})
DEFAULT_UNCOMPILED_PLACEMENT: str = UNCOMPILED_LAST
