from __future__ import annotations

"""
pathinfo: structured parsing, validation and resolution of path strings.

Path strings are decomposed into a StructuredPath (volume, relative anchor,
directory segments and filename) under the conventions of a PlatformConfig.
"""

from .core.parser import (
    current_directory,
    executing_directory,
    parse,
    parse_directory,
    parse_file,
    parse_file_or_directory,
    relative_current_directory,
)
from .core.resolver import resolve, resolve_against
from .core.transforms import with_filename, without_filename
from .core.validator import validate_platform_config
from .domain.path_models import PathKind, RelativeAnchor, StructuredPath
from .domain.platform import (
    PlatformConfig,
    get_default_config,
    host_config,
    posix_config,
    windows_config,
)
from .infra.fs import directory_exists, file_exists, path_exists

__version__ = "1.0.0"

__all__ = [
    "PathKind",
    "PlatformConfig",
    "RelativeAnchor",
    "StructuredPath",
    "current_directory",
    "directory_exists",
    "executing_directory",
    "file_exists",
    "get_default_config",
    "host_config",
    "parse",
    "parse_directory",
    "parse_file",
    "parse_file_or_directory",
    "path_exists",
    "posix_config",
    "relative_current_directory",
    "resolve",
    "resolve_against",
    "validate_platform_config",
    "windows_config",
    "with_filename",
    "without_filename",
]
