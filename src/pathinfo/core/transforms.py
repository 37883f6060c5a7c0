from __future__ import annotations

"""
Structured Path Construction and Transformations.

Provides the structural constructor shared by the parser and the resolver
(which re-validates length limits on absolute paths), filename validation,
and the derived views that produce new paths from existing ones.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from pathinfo.domain.path_models import RelativeAnchor, StructuredPath
from pathinfo.domain.platform import PlatformConfig
from pathinfo.infra.fs import is_directory_path_too_long, is_file_path_too_long

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# VALIDATION RULES
# -----------------------------------------------------------------------------

def is_valid_filename(filename: str, config: PlatformConfig) -> bool:
    """
    Check that a bare filename carries no separator or forbidden character.

    Args:
        filename: Candidate filename without any directory part.
        config: Target platform.

    Returns:
        bool: True if the name can be used as a filename.
    """
    forbidden = set(config.separators) | set(config.invalid_filename_chars)
    if config.volume_separator:
        forbidden.add(config.volume_separator)
    return not any(ch in forbidden for ch in filename)


def revalidate_length(path: StructuredPath) -> StructuredPath:
    """
    Invalidate an absolute path whose rendering breaks the platform limits.

    An indeterminate length check is treated as a violation.
    """
    if not path.is_valid or not path.is_absolute:
        return path

    rendered = path.path
    if rendered is None:
        too_long: Optional[bool] = None
    elif path.has_filename:
        too_long = is_file_path_too_long(rendered, path.platform)
    else:
        too_long = is_directory_path_too_long(rendered, path.platform)

    if too_long is None or too_long:
        reason = "too long" if too_long else "length undeterminable"
        logger.debug(f"Path invalidated ({reason}): {rendered!r}")
        return replace(path, is_valid=False)
    return path


# -----------------------------------------------------------------------------
# STRUCTURAL CONSTRUCTOR
# -----------------------------------------------------------------------------

def build_path(
        *,
        is_valid: bool,
        is_absolute: bool,
        directory_separator: str,
        config: PlatformConfig,
        volume: Optional[str] = None,
        relative_anchor: Optional[RelativeAnchor] = None,
        directories: Iterable[str] = (),
        filename: Optional[str] = None,
) -> StructuredPath:
    """
    Assemble a StructuredPath from already-separated components.

    Normalizes the components so the model invariants hold (volumes only on
    absolute paths, anchors only on relative ones, no empty segments, a
    valid relative path with no segments renders as './') and re-checks the
    length limit when the result is absolute.

    Returns:
        StructuredPath: New immutable path.
    """
    segments = tuple(d for d in directories if d)
    filename = filename or None

    if is_absolute or (relative_anchor is not None and relative_anchor.is_empty):
        relative_anchor = None
    if is_valid and not is_absolute and relative_anchor is not None:
        if relative_anchor.ascend_levels == 0 and (segments or filename):
            relative_anchor = None
    if is_valid and not is_absolute and relative_anchor is None and not (segments or filename):
        # an empty relative path is the current directory
        relative_anchor = RelativeAnchor(current_prefix=True)

    path = StructuredPath(
        is_valid=is_valid,
        is_absolute=is_absolute,
        directory_separator=directory_separator,
        volume=volume if is_absolute else None,
        relative_anchor=relative_anchor,
        directories=segments,
        filename=filename,
        config=config,
    )
    return revalidate_length(path)


# -----------------------------------------------------------------------------
# DERIVED VIEWS
# -----------------------------------------------------------------------------

def with_filename(path: StructuredPath, filename: Optional[str] = None) -> StructuredPath:
    """
    Return a copy of `path` whose filename is replaced.

    Args:
        path: Source path.
        filename: New filename; None or empty clears it.

    Returns:
        StructuredPath: New path differing only by its filename.

    Raises:
        ValueError: If the filename holds a separator or a forbidden character.
    """
    if filename and not is_valid_filename(filename, path.platform):
        raise ValueError(f"The specified value is not a valid filename: {filename!r}")

    return build_path(
        is_valid=path.is_valid,
        is_absolute=path.is_absolute,
        directory_separator=path.directory_separator,
        config=path.platform,
        volume=path.volume,
        relative_anchor=path.relative_anchor,
        directories=path.directories,
        filename=filename,
    )


def without_filename(path: StructuredPath) -> StructuredPath:
    """Return the directory part of `path` as a new path."""
    return with_filename(path, None)
