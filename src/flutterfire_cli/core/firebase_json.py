"""Installation of the flutter block into a project's firebase.json.

The flutter block is written once per project. An existing block is never
overwritten or merged into, whatever its shape; every other top-level key
of the document is carried over untouched.
"""

import json
import logging
import math
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from .constants import (
    BUILD_CONFIGURATIONS,
    DEFAULT_CONFIG,
    FIREBASE_JSON_FILENAME,
    FIREBASE_JSON_PLATFORMS,
    FLUTTER,
    PLATFORMS,
    TARGETS,
)
from .exceptions import (
    FirebaseJsonParseError,
    FirebaseJsonReadError,
    FirebaseJsonWriteError,
)

log = logging.getLogger(__name__)


class FirebaseJsonUpdate(str, Enum):
    """What ensure_configured did to firebase.json."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def firebase_json_path(project_root: Union[str, Path]) -> Path:
    """Location of firebase.json for a project root."""
    return Path(project_root) / FIREBASE_JSON_FILENAME


def generate_flutter_map() -> Dict[str, Any]:
    """Build the default flutter block.

    Each call returns a new dict so callers are free to mutate it.

    Returns:
        ``{"flutter": {"platforms": {...}}}`` with an entry per Apple
        platform, each holding empty build configuration, target and
        default namespaces.
    """
    return {
        FLUTTER: {
            PLATFORMS: {
                platform: {
                    BUILD_CONFIGURATIONS: {},
                    TARGETS: {},
                    DEFAULT_CONFIG: {},
                }
                for platform in FIREBASE_JSON_PLATFORMS
            }
        }
    }


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(value: str) -> float:
    number = float(value)
    if math.isinf(number):
        raise ValueError(f"{value} is out of range")
    return number


def _read_document(path: Path) -> Dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FirebaseJsonParseError(path, str(e)) from e
    except OSError as e:
        raise FirebaseJsonReadError(path, e.strerror or str(e)) from e

    try:
        document = json.loads(
            content, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except ValueError as e:
        raise FirebaseJsonParseError(path, str(e)) from e

    if not isinstance(document, dict):
        raise FirebaseJsonParseError(
            path, f"top-level value is {type(document).__name__}"
        )
    return document


def _write_document(path: Path, document: Dict[str, Any]) -> None:
    # Serialize before opening so a failure never leaves a truncated file
    content = json.dumps(
        document, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FirebaseJsonWriteError(path, e.strerror or str(e)) from e


def ensure_configured(project_root: Union[str, Path]) -> FirebaseJsonUpdate:
    """Make sure the project's firebase.json carries a flutter block.

    - No firebase.json: one is written holding only the flutter block.
    - firebase.json with a non-null ``flutter`` key: nothing is written.
    - Otherwise the flutter block is added next to the existing keys.

    Args:
        project_root: Root directory of the Flutter project.

    Returns:
        Which of the three cases applied.

    Raises:
        FirebaseJsonParseError: Existing file is not a JSON object.
        FirebaseJsonReadError: Existing file could not be read.
        FirebaseJsonWriteError: File could not be written.
    """
    path = firebase_json_path(project_root)

    if not path.exists():
        log.debug(f"{path} not found, creating it")
        _write_document(path, generate_flutter_map())
        return FirebaseJsonUpdate.CREATED

    document = _read_document(path)

    if document.get(FLUTTER) is not None:
        log.debug(f"{path} already has a '{FLUTTER}' block, leaving it untouched")
        return FirebaseJsonUpdate.UNCHANGED

    log.debug(f"Adding '{FLUTTER}' block to {path}")
    _write_document(path, {**document, **generate_flutter_map()})
    return FirebaseJsonUpdate.UPDATED
