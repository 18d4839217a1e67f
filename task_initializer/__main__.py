"""
Main entry point for the task initializer CLI.

Allows running the package as a module:
    python -m task_initializer projects/report --layout analysis
"""

import sys
from typing import List, Optional

from .cli import create_parser, handle_command


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    return handle_command(args)


if __name__ == "__main__":
    sys.exit(main())
