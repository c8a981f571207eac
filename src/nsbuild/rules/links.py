"""Long-name rules: expose each virtual path as a link to its real file."""

from __future__ import annotations

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Rule, RuleContext, RuleRegistry, Symlink
from nsbuild.metadata import NamespaceMetadata
from nsbuild.rules.common import build_all, get_namespaced_file


def long_name_rules(registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata) -> list[Rule]:
    """Register one link rule per source extension."""
    return [_long_name_rule(registry, metadata, extension) for extension in config.source_extensions]


def _long_name_rule(registry: RuleRegistry, metadata: NamespaceMetadata, extension: str) -> Rule:
    prod = f"%.{extension}"

    @registry.rule(f"namespace: {extension} -> {extension} (long name)", prod=prod)
    def long_name(context: RuleContext) -> Symlink:
        target = context.env(prod)
        file = get_namespaced_file(target, target, metadata)
        original = metadata.original_path(file)
        build_all(context.engine, [original])

        # Tags select compiler flags, so the link must carry exactly the original's.
        context.engine.tag_file(target, context.engine.tags_of(original))
        return Symlink(source_name=file.original_name, path=target)

    return long_name
