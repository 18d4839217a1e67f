"""
Path helpers for the task initializer.

Paths are only normalized lexically so they can be shown to the user
before anything exists on disk.
"""

import os
from pathlib import Path
from typing import Union

from ..exceptions import WorkingDirectoryError


def resolve_absolute(path: Union[str, Path]) -> Path:
    """
    Return a canonical absolute form of a path without touching the filesystem.

    Relative paths are joined onto the current working directory. ``.``,
    ``..`` and redundant separators are collapsed lexically; symlinks are
    left alone and the path does not need to exist.

    Args:
        path: Absolute or relative path

    Returns:
        Normalized absolute path

    Raises:
        WorkingDirectoryError: If the current working directory cannot be determined

    Example:
        >>> resolve_absolute("/tmp/tasks/../other/./x")
        PosixPath('/tmp/other/x')
    """
    path = Path(path)

    if not path.is_absolute():
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise WorkingDirectoryError(
                f"Could not determine the current working directory: {e}"
            ) from e
        path = Path(cwd) / path

    return Path(os.path.normpath(path))
