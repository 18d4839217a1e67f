"""
Contiguous renumbering of task directories.

Tasks are ordered by the numeric value of their prefix, so a decimal
ordinal such as ``001.5`` can be used to slot a task in between two
others. The result always uses whole, contiguous ordinals from ``000``.
"""

import re
from pathlib import Path
from typing import List, Tuple

from ..constants import ORDINAL_MAX, RENUMBER_PREFIX_PATTERN
from ..exceptions import FileOperationError, OrdinalOverflowError, ValidationError
from ..utils.file_ops import list_subdirectories
from .ordinals import format_ordinal

_RENUMBER_PREFIX_RE = re.compile(RENUMBER_PREFIX_PATTERN)


def _match_prefix(name: str) -> re.Match:
    match = _RENUMBER_PREFIX_RE.match(name)
    if match is None:
        raise ValidationError(f"'{name}' does not start with a task ordinal")
    return match


def parse_ordinal(name: str) -> float:
    """
    Get the numeric value of a task name's ordinal.

    Example:
        >>> parse_ordinal("001.5_cleanup")
        1.5
        >>> parse_ordinal("002._draft")
        2.0
    """
    return float(_match_prefix(name).group(0))


def list_renumber_candidates(parent_dir: Path) -> List[str]:
    """
    List the directories under a parent that take part in renumbering.

    Args:
        parent_dir: Directory holding the tasks

    Returns:
        Matching directory names, sorted lexicographically

    Raises:
        FileOperationError: If parent_dir is not an existing directory
    """
    parent_dir = Path(parent_dir)
    if not parent_dir.is_dir():
        raise FileOperationError(f"Directory not found: {parent_dir}")

    return [
        name
        for name in list_subdirectories(parent_dir)
        if _RENUMBER_PREFIX_RE.match(name)
    ]


def compute_renumbering(names: List[str]) -> List[Tuple[str, str]]:
    """
    Compute contiguous new names for a set of task directories.

    Names are ordered by ordinal value; equal values keep lexicographic
    order. The matched prefix is replaced by 000, 001, ... and the rest of
    the name, separator included, is kept as is.

    Args:
        names: Task directory names

    Returns:
        (old_name, new_name) pairs in the new order

    Raises:
        ValidationError: If a name has no ordinal
        OrdinalOverflowError: If there are more tasks than ordinals

    Example:
        >>> compute_renumbering(["000_a", "001_b", "001.5_c", "002_d"])
        [('000_a', '000_a'), ('001_b', '001_b'), ('001.5_c', '002_c'), ('002_d', '003_d')]
    """
    if len(names) > ORDINAL_MAX + 1:
        raise OrdinalOverflowError(
            f"Cannot renumber {len(names)} tasks; at most {ORDINAL_MAX + 1} fit"
        )

    ordered = sorted(sorted(names), key=parse_ordinal)

    mappings = []
    for index, name in enumerate(ordered):
        remainder = name[_match_prefix(name).end():]
        mappings.append((name, f"{format_ordinal(index)}{remainder}"))

    return mappings
