"""Rules generating the alias file and the root module of each namespace."""

from __future__ import annotations

from nsbuild.config import NsbuildConfig
from nsbuild.constants.naming import ALIAS_SUFFIX, DIGEST_SUFFIX, IMPLEMENTATION_EXTENSION
from nsbuild.engine import Echo, Rule, RuleContext, RuleRegistry
from nsbuild.io import make_directory, read_trimmed
from nsbuild.metadata import NamespaceMetadata
from nsbuild.rules.common import get_namespace


def alias_file_generation_rule(registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata) -> Rule:
    """Register ``directory -> __aliases.ml``, regenerated on every request."""
    prod = f"%{ALIAS_SUFFIX}"

    @registry.rule(f"namespace: directory -> {ALIAS_SUFFIX}", prod=prod)
    def alias_file(context: RuleContext) -> Echo:
        namespace = get_namespace(context.env, metadata)
        make_directory(context.build_dir, context.env(prod))
        return Echo((metadata.alias_file_contents(namespace),), context.env(prod))

    return alias_file


def namespace_file_generation_rule(
    registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata
) -> Rule:
    """Register ``directory -> ml``, the namespace root module stamped with its digest."""
    prod = f"%.{IMPLEMENTATION_EXTENSION}"
    dep = f"%{DIGEST_SUFFIX}"

    @registry.rule(f"namespace: directory -> {IMPLEMENTATION_EXTENSION}", prod=prod, deps=(dep,))
    def namespace_file(context: RuleContext) -> Echo:
        namespace = get_namespace(context.env, metadata)
        digest = read_trimmed(context.build_dir / context.env(dep))
        make_directory(context.build_dir, context.env(prod))
        return Echo((metadata.namespace_file_contents(namespace, digest),), context.env(prod))

    return namespace_file
