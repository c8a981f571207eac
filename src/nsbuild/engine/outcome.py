"""Results of build requests made from inside a rule body."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Good:
    """A target that was built; ``value`` is the built path."""

    value: str


@dataclass(frozen=True)
class Bad:
    """A target that could not be built."""

    error: BaseException


type Outcome = Good | Bad


def ignore_good(outcome: Outcome) -> None:
    """Require a successful outcome, discarding its payload."""
    if isinstance(outcome, Bad):
        raise outcome.error
