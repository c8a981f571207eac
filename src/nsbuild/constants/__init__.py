"""Shared constants for nsbuild."""
