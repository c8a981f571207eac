"""Library manifest rule.

Member compile order is not recomputed here. Requesting every member's
dependency file makes the engine compile the members in true dependency
order, and the engine's log of compiler invocations is then read back as
the ordering.
"""

from __future__ import annotations

import logging

from nsbuild.analysis import BuildLog, sort_by_compile_order
from nsbuild.config import NsbuildConfig
from nsbuild.constants.naming import DEPENDS_SUFFIX, LIBRARY_SUFFIX
from nsbuild.engine import Echo, Rule, RuleContext, RuleRegistry
from nsbuild.exceptions import NotALibraryNamespaceError
from nsbuild.io import make_directory
from nsbuild.metadata import NamespaceMetadata
from nsbuild.model import LibraryManifest
from nsbuild.rules.common import build_all

logger = logging.getLogger(__name__)


def library_rule(registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata) -> Rule:
    """Register ``* -> .mllib``."""
    prod = f"%{LIBRARY_SUFFIX}"
    extension = f".{config.implementation_extension}"

    @registry.rule(f"namespace: * -> {LIBRARY_SUFFIX.lstrip('.')}", prod=prod)
    def library(context: RuleContext) -> Echo:
        members = metadata.library_members(context.env.stem)
        if members is None:
            raise NotALibraryNamespaceError(context.env(prod))

        build_all(
            context.engine,
            [(member if member.endswith(extension) else member + extension) + DEPENDS_SUFFIX for member in members],
        )

        log = BuildLog(context.build_dir / config.build_log, config.library.compiler_pattern)
        manifest = LibraryManifest(
            stem=context.env.stem,
            modules=tuple(sort_by_compile_order(members, log.compile_order(), uncompiled=config.library.uncompiled)),
        )

        make_directory(context.build_dir, context.env(prod))
        logger.info("Library %s: %s", context.env(prod), " ".join(manifest.modules))
        return Echo((manifest.render(),), context.env(prod))

    return library
