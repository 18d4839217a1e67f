"""
Command-line interface for the task initializer.

Provides CLI parsing and command handling for task creation and renumbering.
"""

from .handlers import handle_command
from .parser import create_parser

__all__ = ["create_parser", "handle_command"]
