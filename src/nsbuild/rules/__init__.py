"""Namespace rules for the host build engine."""

from __future__ import annotations

from nsbuild.config import NsbuildConfig
from nsbuild.engine import Rule, RuleRegistry
from nsbuild.metadata import NamespaceMetadata
from nsbuild.rules.dependencies import dependency_filter_rules
from nsbuild.rules.digest import digest_file_rule
from nsbuild.rules.executables import executable_rules
from nsbuild.rules.generation import alias_file_generation_rule, namespace_file_generation_rule
from nsbuild.rules.library import library_rule
from nsbuild.rules.links import long_name_rules

__all__ = [
    "add_all",
    "alias_file_generation_rule",
    "dependency_filter_rules",
    "digest_file_rule",
    "executable_rules",
    "library_rule",
    "long_name_rules",
    "namespace_file_generation_rule",
]


def add_all(registry: RuleRegistry, *, config: NsbuildConfig, metadata: NamespaceMetadata) -> list[Rule]:
    """Register every namespace rule and return them in registration order."""
    return [
        digest_file_rule(registry, config, metadata),
        alias_file_generation_rule(registry, config, metadata),
        namespace_file_generation_rule(registry, config, metadata),
        *long_name_rules(registry, config, metadata),
        *dependency_filter_rules(registry, config, metadata),
        library_rule(registry, config, metadata),
        *executable_rules(registry, config, metadata),
    ]
