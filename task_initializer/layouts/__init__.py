"""
Layout repository management.

Layouts are template directory trees copied to create new tasks.
"""

from .repository import (
    ensure_layout_repository,
    get_layout_path,
    get_layout_repository,
    list_layouts,
)

__all__ = [
    "ensure_layout_repository",
    "get_layout_path",
    "get_layout_repository",
    "list_layouts",
]
