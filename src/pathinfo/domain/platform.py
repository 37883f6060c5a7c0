from __future__ import annotations

"""
Platform Configuration Domain Model.

Describes the path conventions of a target platform (separators, forbidden
characters, volume labels and length limits) as an immutable value that is
passed explicitly to the parser and resolver. Provides Windows and POSIX
presets plus a lazily-built, process-wide default matching the host.
"""

import logging
import os
import string
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Optional

from pathinfo.infra.fs import query_host_path_limits

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PLATFORM CONSTANTS
# -----------------------------------------------------------------------------

RELATIVE_ANCHOR_CHAR = "."

_CONTROL_CHARS: FrozenSet[str] = frozenset(chr(i) for i in range(0, 32))

WINDOWS_INVALID_PATH_CHARS: FrozenSet[str] = frozenset({'"', "<", ">", "|"}) | _CONTROL_CHARS
WINDOWS_INVALID_FILENAME_CHARS: FrozenSet[str] = (
    WINDOWS_INVALID_PATH_CHARS | frozenset({":", "*", "?", "\\", "/"})
)
WINDOWS_DRIVE_LETTERS: FrozenSet[str] = frozenset(string.ascii_uppercase)

# MAX_PATH and the legacy directory limit (MAX_PATH minus room for an 8.3 name)
WINDOWS_MAX_FILE_PATH = 260
WINDOWS_MAX_DIRECTORY_PATH = 248
WINDOWS_MAX_COMPONENT = 255

POSIX_INVALID_PATH_CHARS: FrozenSet[str] = frozenset({"\0"})
POSIX_INVALID_FILENAME_CHARS: FrozenSet[str] = frozenset({"\0", "/"})

# Linux PATH_MAX / NAME_MAX
POSIX_MAX_PATH = 4096
POSIX_MAX_COMPONENT = 255


# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PlatformConfig:
    """
    Immutable description of a platform's path syntax.

    Attributes:
        standard_separator: Primary directory separator.
        alternate_separator: Secondary separator; equal to the standard one
            on platforms that only know a single separator.
        volume_separator: Separator between a volume label and the rest of
            the path, or None when the platform has no volumes.
        invalid_path_chars: Characters never allowed anywhere in a path.
        invalid_filename_chars: Characters never allowed in a filename.
        relative_anchor_char: Character used by '.' and '..' segments.
        valid_volume_labels: Accepted volume labels, or None to accept any.
        max_file_path_length: Longest accepted path denoting a file.
        max_directory_path_length: Longest accepted path denoting a directory.
        max_component_length: Longest accepted single segment.
        length_in_bytes: Measure lengths in filesystem-encoded bytes instead
            of characters.
        name: Preset identifier, for diagnostics only.
    """
    standard_separator: str
    alternate_separator: str
    volume_separator: Optional[str]
    invalid_path_chars: FrozenSet[str]
    invalid_filename_chars: FrozenSet[str]
    relative_anchor_char: str = RELATIVE_ANCHOR_CHAR
    valid_volume_labels: Optional[FrozenSet[str]] = None

    max_file_path_length: Optional[int] = None
    max_directory_path_length: Optional[int] = None
    max_component_length: Optional[int] = None
    length_in_bytes: bool = False

    name: str = "custom"

    @property
    def has_alternate_separator(self) -> bool:
        """True when the alternate separator differs from the standard one."""
        return self.alternate_separator != self.standard_separator

    @property
    def separators(self) -> FrozenSet[str]:
        return frozenset({self.standard_separator, self.alternate_separator})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into plain JSON-compatible types."""
        return {
            "name": self.name,
            "standard_separator": self.standard_separator,
            "alternate_separator": self.alternate_separator,
            "volume_separator": self.volume_separator,
            "invalid_path_chars": sorted(self.invalid_path_chars),
            "invalid_filename_chars": sorted(self.invalid_filename_chars),
            "relative_anchor_char": self.relative_anchor_char,
            "valid_volume_labels": (
                sorted(self.valid_volume_labels)
                if self.valid_volume_labels is not None else None
            ),
            "max_file_path_length": self.max_file_path_length,
            "max_directory_path_length": self.max_directory_path_length,
            "max_component_length": self.max_component_length,
            "length_in_bytes": self.length_in_bytes,
        }


# -----------------------------------------------------------------------------
# PRESETS
# -----------------------------------------------------------------------------

def windows_config() -> PlatformConfig:
    """Drive-letter platform with '\\' and '/' separators."""
    return PlatformConfig(
        standard_separator="\\",
        alternate_separator="/",
        volume_separator=":",
        invalid_path_chars=WINDOWS_INVALID_PATH_CHARS,
        invalid_filename_chars=WINDOWS_INVALID_FILENAME_CHARS,
        valid_volume_labels=WINDOWS_DRIVE_LETTERS,
        max_file_path_length=WINDOWS_MAX_FILE_PATH,
        max_directory_path_length=WINDOWS_MAX_DIRECTORY_PATH,
        max_component_length=WINDOWS_MAX_COMPONENT,
        length_in_bytes=False,
        name="windows",
    )


def posix_config() -> PlatformConfig:
    """Single-separator platform without volumes."""
    return PlatformConfig(
        standard_separator="/",
        alternate_separator="/",
        volume_separator=None,
        invalid_path_chars=POSIX_INVALID_PATH_CHARS,
        invalid_filename_chars=POSIX_INVALID_FILENAME_CHARS,
        valid_volume_labels=None,
        max_file_path_length=POSIX_MAX_PATH,
        max_directory_path_length=POSIX_MAX_PATH,
        max_component_length=POSIX_MAX_COMPONENT,
        length_in_bytes=True,
        name="posix",
    )


def host_config() -> PlatformConfig:
    """
    Build the configuration matching the running interpreter's platform.

    On POSIX hosts the path limits reported by the root filesystem replace
    the built-in constants when the query succeeds.

    Returns:
        PlatformConfig: Host configuration.
    """
    if os.name == "nt":
        return windows_config()

    cfg = posix_config()
    path_max, name_max = query_host_path_limits(os.sep)
    if path_max is not None or name_max is not None:
        cfg = replace(
            cfg,
            max_file_path_length=path_max or cfg.max_file_path_length,
            max_directory_path_length=path_max or cfg.max_directory_path_length,
            max_component_length=name_max or cfg.max_component_length,
        )
    return cfg


PRESETS = {
    "windows": windows_config,
    "posix": posix_config,
    "host": host_config,
}


# -----------------------------------------------------------------------------
# PROCESS-WIDE DEFAULT
# -----------------------------------------------------------------------------

_default_config: Optional[PlatformConfig] = None
_default_lock = threading.Lock()


def get_default_config() -> PlatformConfig:
    """
    Return the process-wide host configuration, building it on first use.

    Initialization runs at most once even when several threads race on the
    first call.
    """
    global _default_config
    cfg = _default_config
    if cfg is not None:
        return cfg

    with _default_lock:
        if _default_config is None:
            _default_config = host_config()
            logger.debug(f"Default platform configuration initialized: {_default_config.name}")
        return _default_config


def reset_default_config() -> None:
    """Drop the cached default so the next access rebuilds it."""
    global _default_config
    with _default_lock:
        _default_config = None
