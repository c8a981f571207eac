"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type ModuleName = str
type Tags = frozenset[str]
type SourceKind = Literal["interface", "implementation"]
type RuleInsert = Literal["top", "bottom"]
type MemberKind = Literal["module", "namespace"]
