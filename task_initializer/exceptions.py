"""
Custom exceptions for task initializer operations.

These exceptions provide clear error categorization for the failures that
can occur while creating or renumbering task directories.
"""

from typing import List


class TaskInitializerError(Exception):
    """Base exception for task initializer operations."""

    pass


class FileOperationError(TaskInitializerError):
    """File operation failed."""

    pass


class DestinationExistsError(FileOperationError):
    """Copy destination already exists."""

    pass


class WorkingDirectoryError(FileOperationError):
    """Current working directory could not be determined."""

    pass


class ValidationError(TaskInitializerError):
    """Validation check failed."""

    pass


class OrdinalOverflowError(ValidationError):
    """Ordinal does not fit in the fixed-width prefix."""

    pass


class LayoutNotFoundError(TaskInitializerError):
    """Requested layout is not in the layout repository."""

    def __init__(self, requested: str, available: List[str]):
        self.requested = requested
        self.available = list(available)
        choices = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f"Layout '{requested}' not found. Available layouts: {choices}"
        )
