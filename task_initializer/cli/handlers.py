"""
Command handlers for the task initializer CLI.

Maps parsed arguments to the creation and renumbering workflows.
"""

import sys
from pathlib import Path
from typing import Optional

from ..layouts import ensure_layout_repository, get_layout_repository
from ..task import create_task, renumber_tasks
from ..utils.paths import resolve_absolute
from ..utils.prompts import ConfirmationProvider


def print_debug(args, layout_repository: Path) -> None:
    """Print the resolved target, layout repository and parsed options."""
    print(f"[DEBUG] Task Name: {resolve_absolute(args.task_name)}")
    print(f"[DEBUG] Layout: {args.layout}")
    print(f"[DEBUG] Numbering: {args.numbering}")
    print(f"[DEBUG] Renumber: {args.renumber}")
    print(f"[DEBUG] Force Renumber?: {args.force}")
    print(f"[DEBUG] Looking for layouts in: {layout_repository}")


def handle_command(args, confirm: Optional[ConfirmationProvider] = None) -> int:
    """
    Handle CLI command execution.

    Args:
        args: Parsed command-line arguments
        confirm: Confirmation provider for renumbering (defaults to the console)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        layout_repository = get_layout_repository(args.layouts_dir)

        if args.debug:
            print_debug(args, layout_repository)

        if ensure_layout_repository(layout_repository):
            print(
                "This must be your first time running. Created the layout "
                "repository directory. Put some layouts in here and run this "
                f"again:\n{layout_repository}"
            )
            return 0

        if args.renumber:
            renumber_tasks(
                args.task_name,
                force=args.force,
                confirm=confirm,
                dry_run=args.dry_run,
            )
            return 0

        create_task(
            args.task_name,
            args.layout,
            layout_repository,
            numbering=args.numbering,
            dry_run=args.dry_run,
        )
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
