"""
Task workflows.

Creation of new task directories from layouts and renumbering of existing
ones.
"""

from .creation import create_task
from .renumber import renumber_tasks

__all__ = ["create_task", "renumber_tasks"]
