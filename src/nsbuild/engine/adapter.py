"""Run rule bodies on behalf of the host engine."""

from __future__ import annotations

import logging

from nsbuild.engine.actions import Action, Stamp, perform_action
from nsbuild.engine.patterns import Env
from nsbuild.engine.protocols import BuildEngine
from nsbuild.engine.registry import Rule, RuleContext
from nsbuild.engine.signals import FailureTable, Inapplicable
from nsbuild.exceptions import InapplicableRuleError

logger = logging.getLogger(__name__)


def invoke_rule(rule: Rule, env: Env, engine: BuildEngine, failures: FailureTable) -> Action:
    """Run ``rule`` and return its action.

    Inapplicable results, whether returned or raised as
    :class:`InapplicableRuleError`, are turned into the engine failure
    recorded in ``failures``; hard errors propagate unchanged. A rule
    declared with ``stamp`` must answer with a :class:`Stamp` action.
    """
    try:
        result = rule.body(RuleContext(env=env, engine=engine))
    except InapplicableRuleError as exc:
        result = Inapplicable(target=exc.target, message=exc.message)

    if isinstance(result, Inapplicable):
        logger.debug("Rule %s does not apply to %s: %s", rule.name, result.target, result.message)
        failures.signal(engine, result.target, result.message)
    if rule.stamp and not isinstance(result, Stamp):
        raise TypeError(f"Stamp rule '{rule.name}' must return a Stamp action, got {result!r}")
    return result


def apply_rule(rule: Rule, env: Env, engine: BuildEngine, failures: FailureTable) -> Action:
    """Invoke ``rule`` and materialize its action under the engine's build directory."""
    action = invoke_rule(rule, env, engine, failures)
    perform_action(action, engine.build_dir)
    return action
