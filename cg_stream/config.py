"""Configuration constants and .env loading.

WHY: The command-line shell needs a few defaults (text encoding, which
formats to produce, how chatty logging is) that differ between machines
and pipelines. Keeping them here, overridable from the environment, means
nobody has to edit code or repeat flags to change them.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values read from os.environ with defaults. load_log_level()
turns a level name into a logging constant with a clear error.

RULES:
- CG_STREAM_ENCODING: text encoding for files read and written by the CLI
- CG_STREAM_DEFAULT_FORMATS: comma-separated formatter keys
- CG_STREAM_LOG_LEVEL: standard logging level name
- The core parser never reads configuration; only the CLI does
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

DEFAULT_ENCODING = os.getenv("CG_STREAM_ENCODING", "utf-8")
DEFAULT_FORMATS = os.getenv("CG_STREAM_DEFAULT_FORMATS", "cg")
DEFAULT_LOG_LEVEL = os.getenv("CG_STREAM_LOG_LEVEL", "WARNING")

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def default_format_keys() -> List[str]:
    """Formatter keys from CG_STREAM_DEFAULT_FORMATS, blanks removed."""
    return [key.strip() for key in DEFAULT_FORMATS.split(",") if key.strip()]


def load_log_level(name: Optional[str] = None) -> int:
    """Resolve a logging level name to its numeric value.

    WHY: A typo in CG_STREAM_LOG_LEVEL should fail loudly instead of
    silently falling back to some other level.

    RULES:
    - name=None uses CG_STREAM_LOG_LEVEL (default "WARNING")
    - Case-insensitive; surrounding whitespace ignored
    - Raises ValueError for unknown names
    """
    level_name = (name if name is not None else DEFAULT_LOG_LEVEL).strip().upper()
    if level_name not in _LOG_LEVELS:
        raise ValueError(
            "Unknown log level '{}'. Use one of: {}".format(
                level_name, ", ".join(_LOG_LEVELS)
            )
        )
    return _LOG_LEVELS[level_name]
