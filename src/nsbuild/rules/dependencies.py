"""Dependency filter rules: analyze the real file, answer in flattened names."""

from __future__ import annotations

import logging

from nsbuild.analysis import analyzer_command, parse_dependency_line, resolve_dependency_line, run_analyzer
from nsbuild.config import NsbuildConfig
from nsbuild.constants.engine import INSERT_TOP
from nsbuild.constants.naming import DEPENDS_SUFFIX
from nsbuild.engine import Echo, Rule, RuleContext, RuleRegistry
from nsbuild.metadata import NamespaceMetadata
from nsbuild.rules.common import get_namespaced_file

logger = logging.getLogger(__name__)


def dependency_filter_rules(
    registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata
) -> list[Rule]:
    """Register one filter per source extension, ahead of the generic dependency rules."""
    return [_dependency_filter_rule(registry, config, metadata, extension) for extension in config.source_extensions]


def _dependency_filter_rule(
    registry: RuleRegistry,
    config: NsbuildConfig,
    metadata: NamespaceMetadata,
    extension: str,
) -> Rule:
    prod = f"%.{extension}{DEPENDS_SUFFIX}"
    dep = f"%.{extension}"

    @registry.rule(f"namespace dependencies {extension}", prod=prod, deps=(dep,), insert=INSERT_TOP)
    def dependency_filter(context: RuleContext) -> Echo:
        source = context.env(dep)
        file = get_namespaced_file(source, context.env(prod), metadata)

        command = analyzer_command(config.analyzer, context.engine.tags_of(context.env(prod)), source)
        output = run_analyzer(command, cwd=context.build_dir)
        raw = parse_dependency_line(output)
        resolved = resolve_dependency_line(raw, source, lambda name: metadata.resolve(file, name))
        logger.debug("%s depends on %s", source, " ".join(resolved.dependencies) or "nothing")
        return Echo((resolved.render(),), context.env(prod))

    return dependency_filter
