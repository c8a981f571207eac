"""Target naming conventions for generated namespace files."""

from __future__ import annotations

# Separator between flattened namespace components, e.g. ``foo__bar__a``.
FLAT_SEPARATOR: str = "__"

IMPLEMENTATION_EXTENSION: str = "ml"
INTERFACE_EXTENSION: str = "mli"

DIGEST_SUFFIX: str = ".digest"
ALIAS_SUFFIX: str = "__aliases.ml"
LIBRARY_SUFFIX: str = ".mllib"
DEPENDS_SUFFIX: str = ".depends"

LIBRARY_TAG_PREFIX: str = "use_"

# Target stem placeholder used in rule product and dependency patterns.
STEM_PLACEHOLDER: str = "%"
