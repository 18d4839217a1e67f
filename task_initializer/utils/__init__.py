"""
Utility functions for the task initializer.

This package provides path normalization, file operations and
confirmation providers.
"""

from .file_ops import copy_tree, list_entries, list_subdirectories, rename_entries
from .paths import resolve_absolute
from .prompts import ConfirmationProvider, always_confirm, console_confirm

__all__ = [
    # file_ops
    "copy_tree",
    "list_entries",
    "list_subdirectories",
    "rename_entries",
    # paths
    "resolve_absolute",
    # prompts
    "ConfirmationProvider",
    "always_confirm",
    "console_confirm",
]
