"""
Task renumbering.

Renames the numbered task directories under a parent so their ordinals
run 000, 001, ... without gaps, keeping their current order.
"""

from pathlib import Path
from typing import Optional, Union

from ..numbering import compute_renumbering, list_renumber_candidates
from ..utils.file_ops import rename_entries
from ..utils.paths import resolve_absolute
from ..utils.prompts import ConfirmationProvider, always_confirm, console_confirm


def renumber_tasks(
    parent_dir: Union[str, Path],
    force: bool = False,
    confirm: Optional[ConfirmationProvider] = None,
    dry_run: bool = False,
) -> dict:
    """
    Renumber the task directories under a parent directory.

    The whole batch is confirmed once, up front, unless force is set.
    Declining leaves every name untouched.

    Args:
        parent_dir: Directory holding the tasks
        force: If True, skip the confirmation
        confirm: Confirmation provider (defaults to asking on the console)
        dry_run: If True, only show the planned renames

    Returns:
        Dict with 'status' ('renamed', 'canceled', 'unchanged' or 'dry-run'),
        'target', 'renames' (old, new pairs that change) and 'renamed' (count)

    Raises:
        FileOperationError: If the directory cannot be read or a rename fails
        OrdinalOverflowError: If there are more tasks than ordinals

    Example:
        >>> renumber_tasks("projects", force=True)["renames"]
        [('001.5_cleanup', '002_cleanup'), ('002_deploy', '003_deploy')]
    """
    parent_dir = Path(parent_dir)
    target = resolve_absolute(parent_dir)

    mappings = compute_renumbering(list_renumber_candidates(parent_dir))
    renames = [(old, new) for old, new in mappings if old != new]

    summary = {
        "status": "renamed",
        "target": str(target),
        "renames": renames,
        "renamed": 0,
    }

    if not renames:
        print(f"Tasks in {target} are already numbered contiguously.")
        summary["status"] = "unchanged"
        return summary

    if dry_run:
        print(f"[DRY RUN] Would rename in {target}:")
        for old, new in renames:
            print(f"  {old} -> {new}")
        summary["status"] = "dry-run"
        return summary

    if force:
        confirm = always_confirm
    else:
        print(f"This will rename the contents of the folder {target}")
        for old, new in renames:
            print(f"  {old} -> {new}")
        if confirm is None:
            confirm = console_confirm

    if not confirm(target):
        print("Renaming canceled by user.")
        summary["status"] = "canceled"
        return summary

    summary["renamed"] = rename_entries(parent_dir, mappings)
    print("Renaming completed successfully.")

    return summary
