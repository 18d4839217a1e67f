"""
Task creation.

Creates a new task directory by copying a layout from the layout
repository, adding the next free ordinal to its name.
"""

from pathlib import Path
from typing import Union

from ..layouts import get_layout_path
from ..numbering import build_task_name
from ..utils.file_ops import copy_tree
from ..utils.paths import resolve_absolute


def create_task(
    task_path: Union[str, Path],
    layout: str,
    layout_repository: Path,
    numbering: bool = True,
    dry_run: bool = False,
) -> dict:
    """
    Create a task directory from a layout.

    Args:
        task_path: Parent directory plus desired task name, absolute or relative
        layout: Name of the layout to copy
        layout_repository: Directory holding the layouts
        numbering: If True, replace any leading number with the next free ordinal
        dry_run: If True, show what would be created without copying

    Returns:
        Dict with 'status', 'layout', 'task_name' and 'destination'

    Raises:
        LayoutNotFoundError: If the layout does not exist
        ValidationError: If the task name is empty once its number is removed
        DestinationExistsError: If the task directory already exists
        FileOperationError: If copying fails

    Example:
        >>> summary = create_task("projects/report", "default", Path.home() / ".task_initializer")
        >>> print(summary["task_name"])
        004_report
    """
    task_path = Path(task_path)
    layout_dir = get_layout_path(layout_repository, layout)

    parent_dir = task_path.parent
    task_name = build_task_name(task_path.name, parent_dir, numbering=numbering)
    destination = parent_dir / task_name
    absolute_destination = resolve_absolute(destination)

    summary = {
        "status": "created",
        "layout": layout,
        "task_name": task_name,
        "destination": str(absolute_destination),
    }

    if dry_run:
        print(f"[DRY RUN] Would copy layout '{layout}' from {layout_dir}")
        print(f"[DRY RUN] Would create {absolute_destination}")
        summary["status"] = "dry-run"
        return summary

    copy_tree(layout_dir, destination)
    print(f"Successfully created {absolute_destination}")

    return summary
