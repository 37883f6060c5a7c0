from __future__ import annotations

"""
Path Parser.

Turns a raw path string into a StructuredPath. Parsing never raises on bad
input: malformed strings produce a path whose ``is_valid`` flag is False,
while every field still carries a safe default.

Stages:
1. Blank input rejection.
2. Character and separator pattern validation.
3. Separator detection.
4. Absoluteness and volume extraction.
5. Relative anchor decoding.
6. Directory / filename split honoring the shape hint.
7. Length re-validation of absolute results.
"""

import logging
from typing import Optional, Tuple, Union

from pathinfo.core.anchor import scan_relative_anchor
from pathinfo.core.transforms import build_path, is_valid_filename
from pathinfo.domain.path_models import PathKind, RelativeAnchor, StructuredPath
from pathinfo.domain.platform import PlatformConfig, get_default_config
from pathinfo.infra.fs import get_current_directory, get_executing_directory

logger = logging.getLogger(__name__)

KindHint = Optional[Union[PathKind, str]]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse(
        raw: Optional[str],
        kind_hint: KindHint = None,
        config: Optional[PlatformConfig] = None,
) -> StructuredPath:
    """
    Decompose a raw path string.

    Args:
        raw: Path text; None, empty and blank strings are invalid.
        kind_hint: Required shape (file or directory), or None for either.
            A hint the string contradicts makes the result invalid.
        config: Platform conventions; defaults to the host platform.

    Returns:
        StructuredPath: Decomposed path, possibly flagged invalid.
    """
    cfg = config if config is not None else get_default_config()
    hint = PathKind(kind_hint) if kind_hint is not None else None

    if raw is None or not raw.strip():
        logger.debug("Path rejected: empty input")
        return _invalid(cfg, cfg.standard_separator)

    text = raw
    separator = detect_separator(text, cfg)

    violation = find_pattern_violation(text, cfg)
    if violation:
        logger.debug(f"Path rejected ({violation}): {text!r}")
        return _invalid(cfg, separator)

    is_absolute = is_rooted(text, cfg)

    volume: Optional[str] = None
    remainder: Optional[str] = text
    if is_absolute:
        volume, remainder, volume_ok = _extract_volume(text, separator, cfg)
        if not volume_ok:
            logger.debug(f"Path rejected (invalid volume {volume!r}): {text!r}")
            return _invalid(cfg, separator, is_absolute=True, volume=volume)

    anchor: Optional[RelativeAnchor] = None
    if not is_absolute:
        scan = scan_relative_anchor(remainder, separator, cfg.relative_anchor_char)
        anchor, remainder = scan.anchor, scan.remainder

    split = _split_segments(remainder, separator, hint, cfg)
    if split is None:
        logger.debug(f"Path rejected (malformed segment): {text!r}")
        return _invalid(cfg, separator, is_absolute=is_absolute, volume=volume)
    directories, filename = split

    # a directory hint already forced the directory shape in the split
    is_valid = True
    if hint is PathKind.FILE and filename is None:
        logger.debug(f"Path rejected (file expected, directory found): {text!r}")
        is_valid = False

    return build_path(
        is_valid=is_valid,
        is_absolute=is_absolute,
        directory_separator=separator,
        config=cfg,
        volume=volume,
        relative_anchor=anchor,
        directories=directories,
        filename=filename,
    )


def parse_file(raw: Optional[str], config: Optional[PlatformConfig] = None) -> StructuredPath:
    """Parse a path that must denote a file."""
    return parse(raw, PathKind.FILE, config)


def parse_directory(raw: Optional[str], config: Optional[PlatformConfig] = None) -> StructuredPath:
    """Parse a path that must denote a directory."""
    return parse(raw, PathKind.DIRECTORY, config)


def parse_file_or_directory(raw: Optional[str], config: Optional[PlatformConfig] = None) -> StructuredPath:
    """Parse a path of either shape."""
    return parse(raw, None, config)


def current_directory(config: Optional[PlatformConfig] = None) -> Optional[StructuredPath]:
    """
    Parse the process working directory.

    Returns:
        Optional[StructuredPath]: Directory path, or None if the working
        directory cannot be determined.
    """
    raw = get_current_directory()
    if raw is None:
        return None
    return parse_directory(raw, config)


def executing_directory(config: Optional[PlatformConfig] = None) -> Optional[StructuredPath]:
    """
    Parse the directory holding the running program.

    Returns:
        Optional[StructuredPath]: Directory path, or None if undeterminable.
    """
    raw = get_executing_directory()
    if raw is None:
        return None
    return parse_directory(raw, config)


def relative_current_directory(config: Optional[PlatformConfig] = None) -> StructuredPath:
    """Return the relative './' path."""
    cfg = config if config is not None else get_default_config()
    return parse_directory(cfg.relative_anchor_char + cfg.standard_separator, cfg)


# -----------------------------------------------------------------------------
# STAGE HELPERS
# -----------------------------------------------------------------------------

def detect_separator(text: str, config: PlatformConfig) -> str:
    """
    Pick the separator used by `text`.

    The alternate separator wins only when it appears and the standard one
    does not; otherwise the standard separator is used.
    """
    if (
            config.has_alternate_separator
            and config.alternate_separator in text
            and config.standard_separator not in text
    ):
        return config.alternate_separator
    return config.standard_separator


def find_pattern_violation(text: str, config: PlatformConfig) -> Optional[str]:
    """
    Check characters and separator patterns.

    Returns:
        Optional[str]: Reason the text is rejected, or None if acceptable.
    """
    std = config.standard_separator
    alt = config.alternate_separator

    if any(ch in config.invalid_path_chars for ch in text):
        return "invalid character"
    if std + std in text:
        return "repeated separator"
    if config.has_alternate_separator:
        if alt + alt in text:
            return "repeated separator"
        if std in text and alt in text:
            return "mixed separators"
    return None


def is_rooted(text: str, config: PlatformConfig) -> bool:
    """
    Decide whether `text` is absolute under the platform rooting rules.

    A path is rooted when it starts with a separator or begins with a
    volume label followed by the volume separator.
    """
    if text[:1] in config.separators:
        return True
    return _volume_separator_index(text, config) > 0


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _invalid(
        config: PlatformConfig,
        separator: str,
        *,
        is_absolute: bool = False,
        volume: Optional[str] = None,
) -> StructuredPath:
    return StructuredPath(
        is_valid=False,
        is_absolute=is_absolute,
        directory_separator=separator,
        volume=volume if is_absolute else None,
        config=config,
    )


def _volume_separator_index(text: str, config: PlatformConfig) -> int:
    """Index of a volume separator preceding every directory separator, else -1."""
    vs = config.volume_separator
    if not vs:
        return -1
    idx = text.find(vs)
    if idx < 0:
        return -1
    if any(sep in text[:idx] for sep in config.separators):
        return -1
    return idx


def _extract_volume(
        text: str,
        separator: str,
        config: PlatformConfig,
) -> Tuple[Optional[str], str, bool]:
    """
    Split a rooted path into its volume label and the rest.

    Returns:
        Tuple[Optional[str], str, bool]: (volume label, remaining path,
        whether the label is acceptable).
    """
    idx = _volume_separator_index(text, config)
    if idx < 0:
        return None, text, True

    label = text[:idx].upper().strip()
    rest = text[idx + len(config.volume_separator or ""):].strip()
    if not rest:
        # 'C:' denotes the volume root
        rest = separator

    if not label:
        return label, rest, False
    if config.valid_volume_labels is not None and label not in config.valid_volume_labels:
        return label, rest, False
    return label, rest, True


def _split_segments(
        remainder: Optional[str],
        separator: str,
        hint: Optional[PathKind],
        config: PlatformConfig,
) -> Optional[Tuple[Tuple[str, ...], Optional[str]]]:
    """
    Split the remaining text into directories and an optional filename.

    Returns:
        Optional[Tuple]: (directories, filename), or None if a segment is
        blank or carries the volume separator.
    """
    if remainder is None:
        return (), None

    fragments = [f for f in remainder.split(separator) if f]
    vs = config.volume_separator
    for fragment in fragments:
        if not fragment.strip() or (vs and vs in fragment):
            return None

    if not fragments:
        return (), None

    is_directory_shape = (
        remainder.endswith(separator)
        or hint is PathKind.DIRECTORY
        or not is_valid_filename(fragments[-1], config)
    )
    if is_directory_shape:
        return tuple(fragments), None
    return tuple(fragments[:-1]), fragments[-1]
