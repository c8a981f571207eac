"""Command-line interface for nsbuild."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
