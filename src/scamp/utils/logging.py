from __future__ import annotations

import os
from typing import Literal

import coloredlogs  # type: ignore[import]

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

DATE_FORMAT = "%H:%M:%S"


class LogFormat:
    """Predefined log formats."""

    DETAILED = "%(asctime)s [%(name)s] %(filename)s:%(lineno)d - %(message)s"
    SIMPLE = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(level: LogLevel | None = None, verbose: bool = False) -> str:
    """Install coloredlogs; ``verbose`` forces DEBUG with source locations."""
    if verbose:
        resolved = "DEBUG"
    else:
        resolved = (level or os.environ.get("LOGLEVEL", "WARNING")).upper()

    coloredlogs.install(
        level=resolved,
        fmt=LogFormat.DETAILED if resolved == "DEBUG" else LogFormat.SIMPLE,
        datefmt=DATE_FORMAT,
    )
    return resolved
