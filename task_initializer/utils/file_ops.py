"""
File operation utilities for the task initializer.

Provides directory listing, the non-overwriting tree copy used to
instantiate layouts, and the batch rename used by renumbering.
"""

import shutil
import uuid
from pathlib import Path
from typing import List, Tuple

from ..constants import RENAME_TEMP_PREFIX
from ..exceptions import DestinationExistsError, FileOperationError


def list_entries(parent_dir: Path) -> List[str]:
    """
    List the names of all entries directly under a directory.

    Args:
        parent_dir: Directory to scan

    Returns:
        Entry names, sorted

    Raises:
        FileOperationError: If the directory cannot be read
    """
    try:
        return sorted(entry.name for entry in Path(parent_dir).iterdir())
    except OSError as e:
        raise FileOperationError(f"Failed to read directory {parent_dir}: {e}") from e


def list_subdirectories(parent_dir: Path) -> List[str]:
    """
    List the names of the directories directly under a directory.

    Args:
        parent_dir: Directory to scan

    Returns:
        Subdirectory names, sorted lexicographically

    Raises:
        FileOperationError: If the directory cannot be read
    """
    try:
        return sorted(
            entry.name for entry in Path(parent_dir).iterdir() if entry.is_dir()
        )
    except OSError as e:
        raise FileOperationError(f"Failed to read directory {parent_dir}: {e}") from e


def copy_tree(source_dir: Path, destination_dir: Path) -> None:
    """
    Recursively copy a directory tree to a destination that must not exist.

    Directories are recreated and every other entry is copied byte for byte.
    File metadata is not preserved. If copying fails part way, whatever was
    already written stays on disk.

    Args:
        source_dir: Existing directory to copy
        destination_dir: Path to create; missing ancestors are created too

    Raises:
        FileOperationError: If the source is not a directory or any copy step fails
        DestinationExistsError: If destination_dir already exists

    Example:
        >>> copy_tree(Path("~/.task_initializer/default"), Path("tasks/003_report"))
    """
    source_dir = Path(source_dir)
    destination_dir = Path(destination_dir)

    if not source_dir.is_dir():
        raise FileOperationError(f"Source directory not found: {source_dir}")

    if destination_dir.exists() or destination_dir.is_symlink():
        raise DestinationExistsError(
            f"Destination directory already exists: {destination_dir}"
        )

    try:
        _copy_contents(source_dir, destination_dir)
    except OSError as e:
        raise FileOperationError(
            f"Failed to copy {source_dir} to {destination_dir}: {e}"
        ) from e


def _copy_contents(source_dir: Path, destination_dir: Path) -> None:
    destination_dir.mkdir(parents=True)

    for entry in source_dir.iterdir():
        target = destination_dir / entry.name
        if entry.is_dir() and not entry.is_symlink():
            _copy_contents(entry, target)
        else:
            shutil.copyfile(entry, target)


def rename_entries(parent_dir: Path, mappings: List[Tuple[str, str]]) -> int:
    """
    Rename entries of a directory according to an old -> new name mapping.

    Every final name is checked against the rest of the directory before
    anything is touched. Renames then go through unique temporary names so
    that a new name equal to another entry's old name never collides.

    A failure part way through is not rolled back as a whole: entries that
    already reached their new name keep it, and entries still parked under
    a temporary name are moved back to their old name (or on to their new
    one when the old name has been taken in the meantime).

    Args:
        parent_dir: Directory holding the entries
        mappings: (old_name, new_name) pairs; unchanged pairs are skipped

    Returns:
        Number of entries renamed

    Raises:
        FileOperationError: On a name clash (nothing renamed) or a failed rename
    """
    parent_dir = Path(parent_dir)

    targets = [new for _, new in mappings]
    if len(set(targets)) != len(targets):
        raise FileOperationError("Rename plan maps several entries to the same name")

    pending = [(old, new) for old, new in mappings if old != new]
    if not pending:
        return 0

    participants = {old for old, _ in mappings}
    existing = set(list_entries(parent_dir))
    for _, new in pending:
        if new in existing and new not in participants:
            raise FileOperationError(
                f"Cannot rename to '{new}': an entry with that name already "
                f"exists in {parent_dir}"
            )

    token = uuid.uuid4().hex
    staged = [
        (old, f"{RENAME_TEMP_PREFIX}{token}_{index}", new)
        for index, (old, new) in enumerate(pending)
    ]

    # Entries currently sitting under their temporary name
    parked = []

    try:
        for old, temp, new in staged:
            (parent_dir / old).rename(parent_dir / temp)
            parked.append((old, temp, new))
        for old, temp, new in staged:
            (parent_dir / temp).rename(parent_dir / new)
            parked.remove((old, temp, new))
    except OSError as e:
        stranded = _unpark(parent_dir, parked)
        if stranded:
            leftovers = ", ".join(f"{temp} -> {name}" for temp, name in stranded)
            raise FileOperationError(
                f"Renaming stopped part way in {parent_dir}: {e}. "
                f"Could not restore these entries, rename them by hand: {leftovers}"
            ) from e
        raise FileOperationError(
            f"Renaming stopped part way in {parent_dir}: {e}. "
            f"Entries that already had their new name kept it; the others "
            f"got their old name back, or their new one if the old was taken."
        ) from e

    return len(pending)


def _unpark(parent_dir: Path, parked: List[Tuple[str, str, str]]) -> List[Tuple[str, str]]:
    """Move parked entries back to a real name; return (temp, old) pairs left behind."""
    stranded = []
    for old, temp, new in parked:
        source = parent_dir / temp
        if not (_try_rename(source, parent_dir / old) or _try_rename(source, parent_dir / new)):
            stranded.append((temp, old))
    return stranded


def _try_rename(source: Path, target: Path) -> bool:
    if target.exists():
        return False
    try:
        source.rename(target)
    except OSError:
        return False
    return True
