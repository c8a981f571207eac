"""Stamp rule tracking the state of a namespace's dependency closure."""

from __future__ import annotations

import logging

from nsbuild.config import NsbuildConfig
from nsbuild.constants.naming import DIGEST_SUFFIX
from nsbuild.engine import Rule, RuleContext, RuleRegistry, Stamp
from nsbuild.metadata import NamespaceMetadata
from nsbuild.rules.common import build_all, get_namespace

logger = logging.getLogger(__name__)


def digest_file_rule(registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata) -> Rule:
    """Register ``directory -> .digest``.

    Building the stamp brings every file of the closure up to date; the stamp
    content is the digest of those files.
    """
    prod = f"%{DIGEST_SUFFIX}"

    @registry.rule(f"namespace: directory -> {DIGEST_SUFFIX}", prod=prod, stamp=True)
    def digest_file(context: RuleContext) -> Stamp:
        namespace = get_namespace(context.env, metadata)
        closure = metadata.dependency_closure(namespace)
        logger.debug("Namespace %s depends on %d files", namespace.module_name, len(closure))
        build_all(context.engine, closure)
        return Stamp(path=context.env(prod), dependencies=tuple(closure))

    return digest_file
