"""
Task Initializer Package.

Scaffolds task directories from template layouts and keeps the numbering
of sibling task directories contiguous.

This package provides:
- Task creation from layouts with automatic ordinal prefixes
- Contiguous renumbering of existing tasks (decimal ordinals to insert)
- Safe, non-overwriting directory tree copy
- Layout repository lookup and first-run setup
- CLI interface

Usage:
    From command line:
        task-init projects/report --layout analysis
        task-init projects --renumber

    From Python code:
        from task_initializer import create_task, get_layout_repository, renumber_tasks

        create_task("projects/report", "analysis", get_layout_repository())
        renumber_tasks("projects", force=True)
"""

__version__ = "1.0.0"

# Constants
from .constants import DEFAULT_LAYOUT, LAYOUT_REPOSITORY_ENV

# Exceptions
from .exceptions import (
    DestinationExistsError,
    FileOperationError,
    LayoutNotFoundError,
    OrdinalOverflowError,
    TaskInitializerError,
    ValidationError,
    WorkingDirectoryError,
)

# Layout repository
from .layouts import (
    ensure_layout_repository,
    get_layout_path,
    get_layout_repository,
    list_layouts,
)

# Numbering
from .numbering import (
    build_task_name,
    compute_renumbering,
    list_renumber_candidates,
    list_task_names,
    next_ordinal,
    parse_ordinal,
    strip_ordinal,
)

# Task workflows
from .task import create_task, renumber_tasks

# Utilities
from .utils import (
    always_confirm,
    console_confirm,
    copy_tree,
    rename_entries,
    resolve_absolute,
)

__all__ = [
    # Constants
    "DEFAULT_LAYOUT",
    "LAYOUT_REPOSITORY_ENV",
    # Exceptions
    "DestinationExistsError",
    "FileOperationError",
    "LayoutNotFoundError",
    "OrdinalOverflowError",
    "TaskInitializerError",
    "ValidationError",
    "WorkingDirectoryError",
    # Layout repository
    "ensure_layout_repository",
    "get_layout_path",
    "get_layout_repository",
    "list_layouts",
    # Numbering
    "build_task_name",
    "compute_renumbering",
    "list_renumber_candidates",
    "list_task_names",
    "next_ordinal",
    "parse_ordinal",
    "strip_ordinal",
    # Task workflows
    "create_task",
    "renumber_tasks",
    # Utilities
    "always_confirm",
    "console_confirm",
    "copy_tree",
    "rename_entries",
    "resolve_absolute",
]
