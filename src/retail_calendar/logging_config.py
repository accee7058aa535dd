"""Logging setup for the `retail-calendar` CLI.

`main` calls `configure_logging` with the path and level read from
`RETAIL_CALENDAR_LOG_PATH` and `RETAIL_CALENDAR_LOG_LEVEL`, so every
sub-command logs to stdout and to the same log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> None:
    """Configure root logging handlers and formatting.

    Replaces any handlers installed earlier so repeated CLI invocations in
    one process do not duplicate output.

    Args:
        log_path: Log file, usually `Settings.log_path`; its parent directory
            is created if missing. None logs to stdout only.
        level: Numeric level, usually `Settings.log_level` (defaults to INFO).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
