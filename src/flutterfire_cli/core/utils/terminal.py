"""Terminal environment helpers: width, CI detection and spinners."""

import os
import shutil
from typing import Optional

from rich.console import Console
from rich.status import Status

DEFAULT_TERMINAL_WIDTH = 80

# Environment variables set by common CI providers
CI_ENV_VARS = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "RUN_ID",
    "GITHUB_ACTIONS",
)

_FALSE_VALUES = ("", "0", "false", "no")


def terminal_width() -> int:
    """Get current terminal width, defaults to 80 if there is no terminal."""
    return shutil.get_terminal_size(
        (DEFAULT_TERMINAL_WIDTH, 24)
    ).columns


def is_ci() -> bool:
    """Check whether the CLI is running under a CI provider."""
    for name in CI_ENV_VARS:
        value = os.environ.get(name)
        if value is not None and value.strip().lower() not in _FALSE_VALUES:
            return True
    return False


def spinner(message: str, console: Optional[Console] = None) -> Status:
    """Start a spinner and hand it to the caller.

    The returned status is already running. The caller owns it and must
    call ``stop()`` on it, or use it as a context manager.

    Args:
        message: Text shown next to the spinner.
        console: Console to draw on, a new one when omitted.

    Returns:
        The running rich Status.
    """
    status = Status(
        message,
        spinner="dots",
        console=console or Console(),
    )
    status.start()
    return status
