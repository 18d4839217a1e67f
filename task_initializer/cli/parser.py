"""
Command-line argument parsing for the task initializer.

Defines the argument parser for task creation and renumbering.
"""

import argparse

from .. import __version__
from ..constants import DEFAULT_LAYOUT, LAYOUT_REPOSITORY_DIRNAME, LAYOUT_REPOSITORY_ENV


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the task initializer.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="task-init",
        description=(
            "Create a task folder structure from a template layout. "
            "Can also renumber tasks so their numbering is contiguous."
        ),
        epilog=(
            f"Layouts are the subdirectories of ~/{LAYOUT_REPOSITORY_DIRNAME} "
            f"(override with ${LAYOUT_REPOSITORY_ENV} or --layouts-dir)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "task_name",
        help=(
            "Directory of the task to create, absolute or relative to the cwd. "
            "With --renumber, the parent directory whose tasks are renamed."
        ),
    )
    parser.add_argument(
        "-l",
        "--layout",
        default=DEFAULT_LAYOUT,
        help=f"Layout to copy (default: {DEFAULT_LAYOUT})",
    )
    parser.add_argument(
        "--numbering",
        dest="numbering",
        action="store_true",
        default=True,
        help="Replace any leading number with the next free ordinal (default)",
    )
    parser.add_argument(
        "-n",
        "--no-numbering",
        dest="numbering",
        action="store_false",
        help="Use the task name verbatim, without an ordinal",
    )
    parser.add_argument(
        "-r",
        "--renumber",
        action="store_true",
        help=(
            "Renumber all tasks in the directory so numbering is contiguous. "
            "Keeps the task order; use decimals (e.g. 001.5) to insert a task."
        ),
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Answer yes to prompts (renumber asks for confirmation otherwise)",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Print resolved paths and options"
    )
    parser.add_argument("--dry-run", action="store_true", help="Preview only")
    parser.add_argument("--layouts-dir", help="Layout repository (optional)")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser
