import logging
import os
import sys
from typing import Union, Optional

from rich.console import Console
from rich.logging import RichHandler


def is_rich_enabled() -> bool:
    """Check if the Rich logging handler should be used"""
    return os.environ.get("FLUTTERFIRE_RICH_UI", "false").lower() in (
        "true",
        "1",
        "yes",
    )


def get_rich_handler(stream=sys.stderr) -> logging.Handler:
    """Build a Rich logging handler writing to stream"""
    return RichHandler(
        console=Console(file=stream),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def setup_logging(
    level: Union[int, str] = logging.INFO, stream=sys.stdout, fmt: Optional[str] = None
):
    """
    Sets up the root logger with a stream handler and basic formatting.
    Uses the Rich handler when FLUTTERFIRE_RICH_UI is set, otherwise falls back to standard logging.
    Does nothing if handlers are already configured.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        if is_rich_enabled():
            handler = get_rich_handler(stream)
        else:
            if fmt is None:
                if level == logging.DEBUG:
                    fmt = "%(asctime)s | %(levelname)-5s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
                else:
                    # Default format for INFO level and above
                    fmt = "%(asctime)s | %(levelname)-5s | %(message)s"

            handler = logging.StreamHandler(stream)
            handler.setFormatter(logging.Formatter(fmt))

        root_logger.setLevel(level)
        root_logger.addHandler(handler)

    # Optionally allow log level override via env var
    env_level = os.environ.get("LOG_LEVEL")
    if env_level:
        root_logger.setLevel(env_level.upper())
