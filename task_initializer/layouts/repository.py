"""
Layout repository lookup and first-run setup.

The repository is a directory whose immediate subdirectories are the
available layouts. Its location is resolved once per invocation and passed
to the workflows.
"""

import os
from pathlib import Path
from typing import List, Mapping, Optional, Union

from ..constants import LAYOUT_REPOSITORY_DIRNAME, LAYOUT_REPOSITORY_ENV
from ..exceptions import FileOperationError, LayoutNotFoundError
from ..utils.file_ops import list_subdirectories
from ..utils.paths import resolve_absolute


def get_layout_repository(
    override: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Resolve the layout repository location.

    Lookup order: explicit override, the TASK_INITIALIZER_HOME environment
    variable, then ~/.task_initializer.

    Args:
        override: Path given on the command line
        environ: Environment to read (defaults to os.environ)

    Returns:
        Absolute path to the layout repository (it may not exist yet)

    Example:
        >>> get_layout_repository(environ={})
        PosixPath('/home/name/.task_initializer')
    """
    if environ is None:
        environ = os.environ

    if override:
        return resolve_absolute(Path(override).expanduser())

    from_env = environ.get(LAYOUT_REPOSITORY_ENV)
    if from_env:
        return resolve_absolute(Path(from_env).expanduser())

    return Path.home() / LAYOUT_REPOSITORY_DIRNAME


def ensure_layout_repository(repository: Path) -> bool:
    """
    Create the layout repository if it does not exist yet.

    Args:
        repository: Layout repository path

    Returns:
        True if the repository was created by this call

    Raises:
        FileOperationError: If the repository cannot be created
    """
    if repository.exists():
        return False

    try:
        repository.mkdir(parents=True)
    except OSError as e:
        raise FileOperationError(
            f"Could not create the layout repository at {repository}: {e}"
        ) from e

    return True


def list_layouts(repository: Path) -> List[str]:
    """
    List the layouts available in a repository.

    Args:
        repository: Layout repository path

    Returns:
        Layout names, sorted
    """
    return list_subdirectories(repository)


def get_layout_path(repository: Path, layout: str) -> Path:
    """
    Get the directory of a named layout.

    Args:
        repository: Layout repository path
        layout: Layout name

    Returns:
        Path to the layout directory

    Raises:
        LayoutNotFoundError: If the layout is not one of the repository's subdirectories
    """
    available = list_layouts(repository)
    if layout not in available:
        raise LayoutNotFoundError(layout, available)

    return repository / layout
