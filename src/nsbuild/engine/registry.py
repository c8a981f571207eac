"""Rule declarations and the ordered registry the host engine matches against."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from nsbuild.constants.engine import INSERT_BOTTOM, INSERT_TOP
from nsbuild.engine.actions import Action
from nsbuild.engine.patterns import Env, match_pattern
from nsbuild.engine.protocols import BuildEngine
from nsbuild.engine.signals import Inapplicable
from nsbuild.exceptions import ConfigError
from nsbuild.types import RuleInsert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """What a rule body sees: the bound stem and the engine that invoked it."""

    env: Env
    engine: BuildEngine

    @property
    def build_dir(self) -> Path:
        return self.engine.build_dir


type RuleBody = Callable[[RuleContext], Action | Inapplicable]


@dataclass(frozen=True)
class Rule:
    """A named rule producing ``prod`` from ``deps``.

    When ``stamp`` is set, ``prod`` is a stamp file: its content is a digest
    written by the rule's ``Stamp`` action, not a real artifact.
    """

    name: str
    prod: str
    body: RuleBody
    deps: tuple[str, ...] = ()
    stamp: bool = False
    insert: RuleInsert = "bottom"

    def match(self, target: str) -> Env | None:
        return match_pattern(self.prod, target)


class RuleRegistry:
    """Ordered collection of rules; ``insert="top"`` rules are tried first."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add(self, rule: Rule) -> Rule:
        """Register a rule, rejecting duplicate names."""
        if any(existing.name == rule.name for existing in self._rules):
            raise ConfigError(f"Duplicate rule name '{rule.name}'")
        if rule.insert == INSERT_TOP:
            self._rules.insert(0, rule)
        elif rule.insert == INSERT_BOTTOM:
            self._rules.append(rule)
        else:
            raise ConfigError(f"Rule '{rule.name}' has unknown insert position {rule.insert!r}")
        logger.debug("Registered rule: %s (%s)", rule.name, rule.prod)
        return rule

    def rule(
        self,
        name: str,
        *,
        prod: str,
        deps: tuple[str, ...] = (),
        stamp: bool = False,
        insert: RuleInsert = "bottom",
    ) -> Callable[[RuleBody], Rule]:
        """Decorator form of :meth:`add`."""

        def decorator(body: RuleBody) -> Rule:
            return self.add(Rule(name=name, prod=prod, body=body, deps=deps, stamp=stamp, insert=insert))

        return decorator

    def matching(self, target: str) -> Iterator[tuple[Rule, Env]]:
        """Yield rules whose product pattern matches ``target``, in priority order."""
        for rule in self._rules:
            env = rule.match(target)
            if env is not None:
                yield rule, env

    def get(self, name: str) -> Rule | None:
        return next((rule for rule in self._rules if rule.name == name), None)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def __len__(self) -> int:
        return len(self._rules)
