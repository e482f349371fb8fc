"""Custom exceptions for flutterfire_cli.

Provides clear, actionable error messages for failures while preparing a
project's firebase.json.
"""

from pathlib import Path
from typing import Optional, Union


class FlutterFireError(Exception):
    """Base class for all flutterfire_cli errors."""

    pass


class FirebaseJsonParseError(FlutterFireError, ValueError):
    """Raised when an existing firebase.json cannot be used as a JSON object.

    The file is left exactly as it was found; nothing is merged into a
    document that could not be parsed.
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        """Initialize with the offending path.

        Args:
            path: Location of the firebase.json that failed to parse.
            reason: Optional parser message describing what went wrong.
        """
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to parse {self.path}: expected a JSON object"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FirebaseJsonIOError(FlutterFireError, OSError):
    """Raised when firebase.json cannot be read or written."""

    action = "access"

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to {self.action} {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class FirebaseJsonReadError(FirebaseJsonIOError):
    """Raised when an existing firebase.json cannot be read."""

    action = "read"


class FirebaseJsonWriteError(FirebaseJsonIOError):
    """Raised when firebase.json cannot be written.

    Typical causes are a missing project directory or insufficient
    permissions. The write is never retried.
    """

    action = "write"
