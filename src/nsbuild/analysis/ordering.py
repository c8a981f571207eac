"""Order library members by when the compiler actually built them."""

from __future__ import annotations

from collections.abc import Sequence

from nsbuild.constants.config import UNCOMPILED_FIRST, UNCOMPILED_LAST
from nsbuild.metadata.naming import module_name_of_path
from nsbuild.types import ModuleName

NOT_COMPILED: int = -1


def order_index(name: ModuleName, trace: Sequence[ModuleName]) -> int:
    """Position of ``name``'s first occurrence in ``trace``, or ``-1``."""
    try:
        return trace.index(name)
    except ValueError:
        return NOT_COMPILED


def sort_by_compile_order(
    members: Sequence[str],
    trace: Sequence[ModuleName],
    *,
    uncompiled: str = UNCOMPILED_LAST,
) -> list[ModuleName]:
    """Return the module names of ``members`` sorted by first compile.

    The sort is stable. Members that never appear in ``trace`` keep their
    relative order and are placed after every compiled member, or before
    them with ``uncompiled="first"``.
    """
    if uncompiled not in (UNCOMPILED_LAST, UNCOMPILED_FIRST):
        raise ValueError(f"uncompiled must be {UNCOMPILED_LAST!r} or {UNCOMPILED_FIRST!r}, got {uncompiled!r}")

    first_seen = {name: index for index, name in reversed(list(enumerate(trace)))}
    absent = len(trace) if uncompiled == UNCOMPILED_LAST else NOT_COMPILED
    names = [module_name_of_path(member) for member in members]
    return sorted(names, key=lambda name: first_seen.get(name, absent))
