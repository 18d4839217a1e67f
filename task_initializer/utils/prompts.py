"""
Confirmation providers for operations that need the user's go-ahead.

A provider is any callable that takes the target directory and returns
True to proceed. Workflows receive one as an argument, so tests can pass a
stub instead of reading from the console.
"""

from pathlib import Path
from typing import Callable

from ..constants import CONFIRM_PROMPT, CONFIRM_YES

ConfirmationProvider = Callable[[Path], bool]


def console_confirm(target: Path) -> bool:
    """
    Ask on the console whether to go ahead with changes to a directory.

    The caller has already shown what will change. Only ``y`` (any case)
    confirms; any other answer, or end of input, cancels.

    Args:
        target: Absolute directory about to be changed

    Returns:
        True if the user confirmed
    """
    try:
        answer = input(CONFIRM_PROMPT)
    except EOFError:
        print()
        return False

    return answer.strip().lower() == CONFIRM_YES


def always_confirm(target: Path) -> bool:
    """Provider used by --force."""
    return True
