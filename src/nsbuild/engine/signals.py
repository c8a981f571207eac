"""Failure signaling protocol.

A rule tells the host engine "I do not apply to this target" by failing. The
engine's only primitive for a failure it understands is a failed build, so the
protocol builds a synthetic target that no rule can produce and re-raises the
engine's own failure. Failures are memoized per ``(target, message)`` so that
repeated signals raise the very same exception object.
"""

from __future__ import annotations

import functools
import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from nsbuild.constants.engine import SIGNAL_FENCE, SIGNAL_FILLER, SIGNAL_WHITESPACE_PATTERN
from nsbuild.engine.outcome import Bad
from nsbuild.exceptions import FailureCaptureError

if TYPE_CHECKING:
    from nsbuild.engine.protocols import BuildEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Inapplicable:
    """Result of a rule that ran its side effects but does not produce ``target``."""

    target: str
    message: str


def signal_key(target: str, message: str) -> str:
    """Return the synthetic, unmatchable target for a ``(target, message)`` pair."""
    filled = SIGNAL_WHITESPACE_PATTERN.sub(SIGNAL_FILLER, message)
    return f"{SIGNAL_FENCE}{target}{SIGNAL_FENCE}{filled}{SIGNAL_FENCE}"


class FailureTable:
    """Captured engine failures, keyed by synthetic signal target.

    Entries are never evicted. Concurrent signals for the same key may each
    ask the engine for a failure, but only the first stored one is ever
    raised.
    """

    def __init__(self) -> None:
        self._failures: dict[str, BaseException] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._failures)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._failures

    def get(self, key: str) -> BaseException | None:
        with self._lock:
            return self._failures.get(key)

    def signal(self, engine: BuildEngine, target: str, message: str) -> NoReturn:
        """Raise the engine's failure for ``(target, message)``, capturing it on first use."""
        key = signal_key(target, message)
        failure = self.get(key)
        if failure is None:
            failure = self._capture(engine, key)
        raise failure.with_traceback(None)

    def _capture(self, engine: BuildEngine, key: str) -> BaseException:
        outcomes = engine.build([[key]])
        if len(outcomes) != 1 or not isinstance(outcomes[0], Bad):
            raise FailureCaptureError(f"Couldn't capture solver failure exception for {key}")

        with self._lock:
            stored = self._failures.setdefault(key, outcomes[0].error)
        logger.debug("Captured failure for %s", key)
        return stored


@functools.cache
def default_failure_table() -> FailureTable:
    """Return the process-wide failure table."""
    return FailureTable()
