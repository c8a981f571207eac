"""Dependency analyzer invocation, build log scraping and compile-order sorting."""

from .analyzer import analyzer_command, flags_for_tags, run_analyzer
from .build_log import BuildLog, compile_order, parse_log_line
from .dependency_line import parse_dependency_line, resolve_dependency_line
from .ordering import order_index, sort_by_compile_order

__all__ = [
    "BuildLog",
    "analyzer_command",
    "compile_order",
    "flags_for_tags",
    "order_index",
    "parse_dependency_line",
    "parse_log_line",
    "resolve_dependency_line",
    "run_analyzer",
    "sort_by_compile_order",
]
