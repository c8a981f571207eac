"""Recoverable resolution failures.

These are expected conditions: they tell the host engine that a rule does not
apply to a target, so that it can fall back to another rule.
"""

from __future__ import annotations

from nsbuild.constants.engine import NOT_A_LIBRARY_MESSAGE, NOT_A_NAMESPACE_MESSAGE, NOT_NAMESPACED_MESSAGE
from nsbuild.exceptions.base import NsbuildError


class InapplicableRuleError(NsbuildError):
    """Raised by a rule body when the rule does not apply to its target."""

    message: str = "rule does not apply"

    def __init__(self, target: str, message: str | None = None) -> None:
        self.target = target
        if message is not None:
            self.message = message
        super().__init__(f"{target}: {self.message}")


class NotANamespaceError(InapplicableRuleError):
    """Raised when a target stem does not name a namespace directory."""

    message = NOT_A_NAMESPACE_MESSAGE


class NotNamespacedFileError(InapplicableRuleError):
    """Raised when a path is not the virtual path of a namespaced file."""

    message = NOT_NAMESPACED_MESSAGE


class NotALibraryNamespaceError(InapplicableRuleError):
    """Raised when a target stem does not name a library namespace."""

    message = NOT_A_LIBRARY_MESSAGE
