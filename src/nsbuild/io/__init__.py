"""Shared file I/O helpers."""

from .files import digest_files, make_directory, read_trimmed
from .text_io import write_text_atomic

__all__ = ["digest_files", "make_directory", "read_trimmed", "write_text_atomic"]
