"""Side-effecting rules tagging executables with the project's libraries.

The command-line target names are not the targets the engine really builds
(``main.byte`` may resolve to ``src/main.byte``), so the tags are attached
from a rule that sees the real target and then steps aside.
"""

from __future__ import annotations

from nsbuild.config import NsbuildConfig
from nsbuild.constants.engine import EXECUTABLE_SENTINEL_MESSAGE, INSERT_TOP
from nsbuild.engine import Inapplicable, Rule, RuleContext, RuleRegistry
from nsbuild.metadata import NamespaceMetadata


def executable_rules(registry: RuleRegistry, config: NsbuildConfig, metadata: NamespaceMetadata) -> list[Rule]:
    """Register one tagging rule per executable extension."""
    return [_executable_rule(registry, metadata, extension) for extension in config.executable_extensions]


def _executable_rule(registry: RuleRegistry, metadata: NamespaceMetadata, extension: str) -> Rule:
    prod = f"%.{extension}"

    @registry.rule(f"executable dependencies {extension}", prod=prod, insert=INSERT_TOP)
    def executable(context: RuleContext) -> Inapplicable:
        target = context.env(prod)
        context.engine.tag_file(target, metadata.library_tags())
        return Inapplicable(target=target, message=EXECUTABLE_SENTINEL_MESSAGE)

    return executable
