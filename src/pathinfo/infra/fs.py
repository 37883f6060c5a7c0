from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over the 'os' module used as collaborators by the path engine:
existence checks, path-length limits and environment directory queries.
Every environmental failure is absorbed into a False/None result so callers
never see OS errors.
"""

import logging
import os
import sys
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from pathinfo.domain.path_models import StructuredPath
    from pathinfo.domain.platform import PlatformConfig

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# EXISTENCE API
# -----------------------------------------------------------------------------

def file_exists(path: str) -> bool:
    """
    Check whether a regular file exists at the given location.

    Args:
        path: Absolute path string.

    Returns:
        bool: True if a file exists; False if not or if the check failed.
    """
    try:
        return os.path.isfile(path)
    except (OSError, ValueError) as e:
        logger.debug(f"File existence check failed for '{path}': {e}")
        return False


def directory_exists(path: str) -> bool:
    """
    Check whether a directory exists at the given location.

    Args:
        path: Absolute path string.

    Returns:
        bool: True if a directory exists; False if not or if the check failed.
    """
    try:
        return os.path.isdir(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Directory existence check failed for '{path}': {e}")
        return False


def path_exists(structured: "StructuredPath") -> bool:
    """
    Check a structured path against the filesystem according to its kind.

    Only valid absolute paths are queried; anything else reports False.
    """
    if not structured.is_valid or not structured.is_absolute:
        return False
    rendered = structured.path
    if rendered is None:
        return False
    if structured.has_filename:
        return file_exists(rendered)
    return directory_exists(rendered)


# -----------------------------------------------------------------------------
# LENGTH LIMITS API
# -----------------------------------------------------------------------------

def is_file_path_too_long(path: str, config: "PlatformConfig") -> Optional[bool]:
    """
    Check a file path against the platform limits.

    Returns:
        Optional[bool]: True if too long, False if acceptable, None if the
        length could not be determined.
    """
    return _is_path_too_long(path, config, config.max_file_path_length)


def is_directory_path_too_long(path: str, config: "PlatformConfig") -> Optional[bool]:
    """
    Check a directory path against the platform limits.

    Returns:
        Optional[bool]: True if too long, False if acceptable, None if the
        length could not be determined.
    """
    return _is_path_too_long(path, config, config.max_directory_path_length)


def query_host_path_limits(anchor: str) -> Tuple[Optional[int], Optional[int]]:
    """
    Ask the filesystem holding `anchor` for its PATH_MAX and NAME_MAX.

    Args:
        anchor: Existing directory used for the query.

    Returns:
        Tuple[Optional[int], Optional[int]]: (path limit, component limit);
        an entry is None when the platform does not report it.
    """
    pathconf = getattr(os, "pathconf", None)
    if pathconf is None:
        return None, None

    limits = []
    for name in ("PC_PATH_MAX", "PC_NAME_MAX"):
        try:
            value = pathconf(anchor, name)
            limits.append(value if value and value > 0 else None)
        except (OSError, ValueError) as e:
            logger.debug(f"pathconf({anchor!r}, {name}) unavailable: {e}")
            limits.append(None)
    return limits[0], limits[1]


# -----------------------------------------------------------------------------
# ENVIRONMENT QUERIES
# -----------------------------------------------------------------------------

def get_current_directory() -> Optional[str]:
    """
    Resolve the process working directory.

    Returns:
        Optional[str]: Absolute path, or None if it was removed or is unreadable.
    """
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Current directory unavailable: {e}")
        return None


def get_executing_directory() -> Optional[str]:
    """
    Resolve the directory of the running program.

    Uses the frozen executable when bundled, otherwise the main script.

    Returns:
        Optional[str]: Absolute directory path, or None if undeterminable.
    """
    try:
        if getattr(sys, "frozen", False):
            target = sys.executable
        else:
            main_module = sys.modules.get("__main__")
            target = getattr(main_module, "__file__", None) or (sys.argv[0] if sys.argv else "")
        if not target:
            return None
        return os.path.dirname(os.path.abspath(target))
    except (OSError, ValueError) as e:
        logger.debug(f"Executing directory unavailable: {e}")
        return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _measure(value: str, in_bytes: bool) -> int:
    if in_bytes:
        return len(os.fsencode(value))
    return len(value)


def _is_path_too_long(path: str, config: "PlatformConfig", limit: Optional[int]) -> Optional[bool]:
    try:
        in_bytes = config.length_in_bytes
        if limit is not None and _measure(path, in_bytes) > limit:
            return True

        component_limit = config.max_component_length
        if component_limit is not None:
            normalized = path
            for sep in config.separators:
                normalized = normalized.replace(sep, config.standard_separator)
            for component in normalized.split(config.standard_separator):
                if _measure(component, in_bytes) > component_limit:
                    return True
        return False
    except (UnicodeError, TypeError, ValueError) as e:
        logger.debug(f"Path length undeterminable for {path!r}: {e}")
        return None
