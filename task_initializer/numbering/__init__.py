"""
Numbering engine for task directories.

This package assigns ordinals to new tasks and computes contiguous
renumberings of existing ones.
"""

from .ordinals import (
    build_task_name,
    format_ordinal,
    is_task_name,
    list_task_names,
    next_ordinal,
    strip_ordinal,
)
from .renumber import compute_renumbering, list_renumber_candidates, parse_ordinal

__all__ = [
    # ordinals
    "build_task_name",
    "format_ordinal",
    "is_task_name",
    "list_task_names",
    "next_ordinal",
    "strip_ordinal",
    # renumber
    "compute_renumbering",
    "list_renumber_candidates",
    "parse_ordinal",
]
