from __future__ import annotations

"""
Logging Settings.

Settings consumed by configure_logging plus the level-name table used to
interpret the CLI's --debug flag and user-supplied level names.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

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
    Output settings for the command line's logging.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Write records to stderr.
        log_file: Also write records to this rotating file.
        max_bytes: Log file size that triggers a rollover.
        backup_count: Rolled-over log files kept on disk.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
