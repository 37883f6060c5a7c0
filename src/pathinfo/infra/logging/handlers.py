from __future__ import annotations

"""
Logging Handler Factories.

Builds the concrete outputs fed by the queue listener and tags every
handler pathinfo creates, so reconfiguration can remove exactly those and
leave handlers installed by a host application alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Marker attribute set on handlers created by pathinfo
_HANDLER_TAG_ATTR: str = "_pathinfo_handler"


# ==============================================================================
# TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# FACTORIES
# ==============================================================================

def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.StreamHandler:
    """Tagged stderr handler; stdout stays reserved for command output."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a size-rotated log file, creating its directory when missing.

    Args:
        log_file: Destination file.
        level_int: Minimum level written to the file.
        formatter: Formatter applied to file records.
        max_bytes: Size that triggers a rollover.
        backup_count: Rolled-over files to keep.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None when the file
        cannot be opened (a warning is written to stderr instead).
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        if not os.path.isdir(parent):
            os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
