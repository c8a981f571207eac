"""Interface to the host build engine: rules, outcomes, actions and failure signals."""

from .actions import Action, Echo, Nop, Stamp, Symlink, perform_action
from .adapter import apply_rule, invoke_rule
from .outcome import Bad, Good, Outcome, ignore_good
from .patterns import Env, match_pattern
from .protocols import BuildEngine
from .registry import Rule, RuleContext, RuleRegistry
from .signals import FailureTable, Inapplicable, default_failure_table, signal_key

__all__ = [
    "Action",
    "Bad",
    "BuildEngine",
    "Echo",
    "Env",
    "FailureTable",
    "Good",
    "Inapplicable",
    "Nop",
    "Outcome",
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "Stamp",
    "Symlink",
    "apply_rule",
    "default_failure_table",
    "ignore_good",
    "invoke_rule",
    "match_pattern",
    "perform_action",
    "signal_key",
]
