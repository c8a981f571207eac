"""Target patterns with a single ``%`` stem placeholder."""

from __future__ import annotations

from dataclasses import dataclass

from nsbuild.constants.naming import STEM_PLACEHOLDER


@dataclass(frozen=True)
class Env:
    """Substitutes the matched stem into rule patterns."""

    stem: str

    def __call__(self, pattern: str) -> str:
        return pattern.replace(STEM_PLACEHOLDER, self.stem)


def match_pattern(pattern: str, target: str) -> Env | None:
    """Match ``target`` against ``pattern``, returning the bound stem or ``None``."""
    prefix, placeholder, suffix = pattern.partition(STEM_PLACEHOLDER)
    if not placeholder:
        return Env("") if pattern == target else None

    if len(target) <= len(prefix) + len(suffix):
        return None
    if not target.startswith(prefix) or not target.endswith(suffix):
        return None
    return Env(target[len(prefix) : len(target) - len(suffix)])
