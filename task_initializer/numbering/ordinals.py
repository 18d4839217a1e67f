"""
Ordinal prefixes for new task directories.

Works out the name a new task directory gets: any number the user typed
is dropped and the next free ordinal among the existing siblings is put
in front.
"""

import re
from pathlib import Path
from typing import List

from ..constants import (
    FIRST_ORDINAL,
    ORDINAL_MAX,
    ORDINAL_SEPARATOR,
    ORDINAL_WIDTH,
    TASK_PREFIX_PATTERN,
    USER_PREFIX_PATTERN,
)
from ..exceptions import OrdinalOverflowError, ValidationError
from ..utils.file_ops import list_subdirectories

_TASK_PREFIX_RE = re.compile(TASK_PREFIX_PATTERN)
_USER_PREFIX_RE = re.compile(USER_PREFIX_PATTERN)


def format_ordinal(number: int) -> str:
    """
    Format an ordinal as a zero-padded fixed-width prefix.

    Args:
        number: Ordinal value

    Returns:
        Prefix such as "007"

    Raises:
        OrdinalOverflowError: If the value does not fit in the prefix
    """
    if number < 0 or number > ORDINAL_MAX:
        raise OrdinalOverflowError(
            f"Ordinal {number} does not fit in {ORDINAL_WIDTH} digits "
            f"(0-{ORDINAL_MAX})"
        )
    return f"{number:0{ORDINAL_WIDTH}d}"


def strip_ordinal(name: str) -> str:
    """
    Remove a user-supplied ordinal from the front of a task name.

    A leading number (with an optional decimal fraction) is dropped, then
    a single leading separator. Prefixing a name with the separator keeps
    digits that are part of the name itself.

    Example:
        >>> strip_ordinal("012_report")
        'report'
        >>> strip_ordinal("_9F_evo")
        '9F_evo'
    """
    stripped = _USER_PREFIX_RE.sub("", name, count=1)
    if stripped.startswith(ORDINAL_SEPARATOR):
        stripped = stripped[len(ORDINAL_SEPARATOR):]
    return stripped


def is_task_name(name: str) -> bool:
    """Check whether a directory name carries a task ordinal."""
    return _TASK_PREFIX_RE.match(name) is not None


def list_task_names(parent_dir: Path) -> List[str]:
    """
    List the numbered task directories under a parent directory.

    Args:
        parent_dir: Directory holding the tasks

    Returns:
        Task directory names, sorted lexicographically (empty if the
        parent does not exist yet)
    """
    parent_dir = Path(parent_dir)
    if not parent_dir.is_dir():
        return []

    return sorted(name for name in list_subdirectories(parent_dir) if is_task_name(name))


def next_ordinal(existing_names: List[str]) -> str:
    """
    Get the ordinal following the lexicographically last task name.

    Args:
        existing_names: Names of existing numbered task directories

    Returns:
        Next ordinal prefix, "000" when there are no tasks

    Raises:
        OrdinalOverflowError: If the last task already uses the highest ordinal

    Example:
        >>> next_ordinal(["000_setup", "004_analysis", "001_data"])
        '005'
    """
    if not existing_names:
        return FIRST_ORDINAL

    last_name = sorted(existing_names)[-1]
    return format_ordinal(int(last_name[:ORDINAL_WIDTH]) + 1)


def build_task_name(base_name: str, parent_dir: Path, numbering: bool = True) -> str:
    """
    Build the directory name for a new task.

    Args:
        base_name: Name as given by the user
        parent_dir: Directory the task will be created in
        numbering: If False, base_name is used verbatim

    Returns:
        Final directory name, e.g. "005_report"

    Raises:
        ValidationError: If nothing is left of the name once its ordinal is removed
        OrdinalOverflowError: If no ordinal is left
    """
    if not numbering:
        return base_name

    stripped = strip_ordinal(base_name)
    if not stripped:
        raise ValidationError(
            f"Task name '{base_name}' is empty once its number is removed. "
            f"Prefix it with '{ORDINAL_SEPARATOR}' to keep leading digits."
        )

    ordinal = next_ordinal(list_task_names(parent_dir))
    return f"{ordinal}{ORDINAL_SEPARATOR}{stripped}"
