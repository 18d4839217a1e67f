"""
Constants used throughout the task initializer.

This module defines the ordinal patterns, separator, configuration names
and prompt strings so every workflow agrees on them.
"""

# Ordinal prefix on task directory names
ORDINAL_WIDTH = 3
ORDINAL_MAX = 10**ORDINAL_WIDTH - 1
ORDINAL_SEPARATOR = "_"
FIRST_ORDINAL = "0" * ORDINAL_WIDTH

# Names starting with exactly ORDINAL_WIDTH digits belong to the task set
TASK_PREFIX_PATTERN = rf"^\d{{{ORDINAL_WIDTH}}}"

# Renumbering accepts a decimal fraction so tasks can be slotted in between
RENUMBER_PREFIX_PATTERN = rf"^\d{{{ORDINAL_WIDTH}}}(\.\d*)?"

# User supplied names may carry any leading number, which is replaced
USER_PREFIX_PATTERN = r"^\d+(\.\d*)?"

# Layout repository
DEFAULT_LAYOUT = "default"
LAYOUT_REPOSITORY_DIRNAME = ".task_initializer"
LAYOUT_REPOSITORY_ENV = "TASK_INITIALIZER_HOME"

# Two-phase rename
RENAME_TEMP_PREFIX = "__renumber_tmp_"

# Console
CONFIRM_YES = "y"
CONFIRM_PROMPT = "Do you want to proceed with the renaming? (y/n): "
