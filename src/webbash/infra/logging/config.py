from __future__ import annotations

"""
Logging Settings.

Holds the values both hosts pass to configure_logging(): the level taken
from config.json (or '--debug'), whether stderr output is on, and the
optional rotating session log under the user data directory.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted config.json "log_level" values
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one configure_logging() call.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Write records to stderr.
        log_file: Session log path, set when "save_log" is enabled.
        max_bytes: Size at which the session log rotates.
        backup_count: Rotated session logs to keep.
        console_fmt: Format of stderr records.
        file_fmt: Format of session log records.
        datefmt: Timestamp format of session log records.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
