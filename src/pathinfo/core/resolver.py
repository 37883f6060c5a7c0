from __future__ import annotations

"""
Path Resolver.

Combines a relative (or volume-less absolute) StructuredPath with an
absolute base directory into a new absolute StructuredPath. Misuse of the
contract (invalid input, base that is not an absolute directory) raises
ValueError; it is never encoded as an invalid result.
"""

import logging
from typing import Optional

from pathinfo.core.parser import parse_directory
from pathinfo.core.transforms import build_path
from pathinfo.domain.path_models import StructuredPath
from pathinfo.domain.platform import PlatformConfig

logger = logging.getLogger(__name__)


def resolve(path: StructuredPath, base: StructuredPath) -> StructuredPath:
    """
    Resolve `path` against the absolute directory `base`.

    Relative paths climb one base directory per ascend level of their
    anchor (never above the root) before their own directories are
    appended. Absolute paths keep their directories and borrow the base
    volume only when they have none. The base separator always wins.

    Args:
        path: Path to resolve.
        base: Valid absolute directory path.

    Returns:
        StructuredPath: New absolute path.

    Raises:
        ValueError: If `path` is invalid, or `base` is invalid, relative or
            carries a filename.
    """
    if not path.is_valid:
        raise ValueError("The absolute path can't be determined on an invalid path.")
    if not base.is_valid:
        raise ValueError("The provided base path is not valid.")
    if not base.is_absolute:
        raise ValueError("The provided base path must be absolute.")
    if base.has_filename:
        raise ValueError("The provided base path must be a directory.")

    if path.is_absolute:
        directories = path.directories
        volume = path.volume if path.volume is not None else base.volume
    else:
        keep = len(base.directories) - path.ascend_levels
        kept = base.directories[:keep] if keep > 0 else ()
        directories = kept + path.directories
        volume = base.volume

    resolved = build_path(
        is_valid=base.is_valid and path.is_valid,
        is_absolute=True,
        directory_separator=base.directory_separator,
        config=base.platform,
        volume=volume,
        directories=directories,
        filename=path.filename,
    )
    logger.debug(f"Resolved {path.path!r} against {base.path!r} -> {resolved.path!r}")
    return resolved


def resolve_against(
        path: StructuredPath,
        base_raw: Optional[str],
        config: Optional[PlatformConfig] = None,
) -> StructuredPath:
    """
    Resolve `path` against a base given as a raw directory string.

    Args:
        path: Path to resolve.
        base_raw: Base directory text, parsed with the directory hint.
        config: Platform for the base; defaults to the platform of `path`.

    Returns:
        StructuredPath: New absolute path.

    Raises:
        ValueError: Under the same conditions as `resolve`.
    """
    base = parse_directory(base_raw, config if config is not None else path.platform)
    return resolve(path, base)
