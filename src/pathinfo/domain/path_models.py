from __future__ import annotations

"""
Structured Path Domain Models.

Defines the immutable decomposition of a path string (validity, absoluteness,
volume, relative anchor, directories, filename) together with the rules used
to render it back into a string.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pathinfo.domain.platform import PlatformConfig, get_default_config

# -----------------------------------------------------------------------------
# SHAPE HINTS
# -----------------------------------------------------------------------------

class PathKind(str, Enum):
    """Expected shape of a path: a file or a directory."""
    FILE = "file"
    DIRECTORY = "directory"


# -----------------------------------------------------------------------------
# RELATIVE ANCHOR
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RelativeAnchor:
    """
    Leading './' or '../' run of a relative path.

    Attributes:
        ascend_levels: Number of parent directories to climb.
        current_prefix: Whether the path explicitly starts in the current
            directory ('./'). Only observable when no ascend level exists.
    """
    ascend_levels: int = 0
    current_prefix: bool = False

    @property
    def is_empty(self) -> bool:
        return self.ascend_levels <= 0 and not self.current_prefix

    def render(self, separator: str, anchor_char: str = ".") -> Optional[str]:
        """
        Render the anchor with the given separator.

        Returns:
            Optional[str]: '../' repeated per level, './' for a lone current
            directory marker, or None when the anchor is empty.
        """
        if self.ascend_levels > 0:
            return (anchor_char * 2 + separator) * self.ascend_levels
        if self.current_prefix:
            return anchor_char + separator
        return None


# -----------------------------------------------------------------------------
# STRUCTURED PATH
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructuredPath:
    """
    Immutable decomposition of a filesystem path.

    When ``is_valid`` is False the remaining fields only carry safe defaults
    and must not be trusted.

    Attributes:
        is_valid: Whether the source string was a well-formed path.
        is_absolute: Whether the path is rooted.
        directory_separator: Separator used by this path.
        volume: Upper-cased volume label, only on absolute paths.
        relative_anchor: Leading './' or '../' run, only on relative paths.
        directories: Directory segments from root to leaf.
        filename: Final segment when the path denotes a file.
        config: Platform the path was parsed for. Not part of equality.
    """
    is_valid: bool
    is_absolute: bool
    directory_separator: str
    volume: Optional[str] = None
    relative_anchor: Optional[RelativeAnchor] = None
    directories: Tuple[str, ...] = ()
    filename: Optional[str] = None
    config: Optional[PlatformConfig] = field(default=None, compare=False, repr=False)

    # --- Derived properties ---

    @property
    def platform(self) -> PlatformConfig:
        """Platform configuration, falling back to the host default."""
        return self.config if self.config is not None else get_default_config()

    @property
    def has_volume(self) -> bool:
        return self.volume is not None

    @property
    def has_filename(self) -> bool:
        return self.filename is not None

    @property
    def kind(self) -> PathKind:
        return PathKind.FILE if self.filename is not None else PathKind.DIRECTORY

    @property
    def ascend_levels(self) -> int:
        if self.relative_anchor is None:
            return 0
        return max(self.relative_anchor.ascend_levels, 0)

    @property
    def anchor(self) -> Optional[str]:
        """Rendered relative anchor, e.g. '../../'."""
        if self.is_absolute or self.relative_anchor is None:
            return None
        return self.relative_anchor.render(
            self.directory_separator, self.platform.relative_anchor_char
        )

    @property
    def root(self) -> Optional[str]:
        """Root of an absolute path, e.g. 'C:\\' or '/'."""
        if not self.is_absolute:
            return None
        if self.volume is not None and self.platform.volume_separator is not None:
            return self.volume + self.platform.volume_separator + self.directory_separator
        return self.directory_separator

    @property
    def path(self) -> Optional[str]:
        """
        Render the path back into a single string.

        Returns:
            Optional[str]: Rendered path, or None when nothing can be rendered.
        """
        sep = self.directory_separator
        parts = []
        if self.is_absolute:
            parts.append(self.root or sep)
        else:
            anchor = self.anchor
            if anchor is not None:
                parts.append(anchor)

        for directory in self.directories:
            parts.append(directory)
            parts.append(sep)

        if self.filename is not None:
            parts.append(self.filename)

        rendered = "".join(parts)
        if not rendered.strip():
            return None
        return rendered

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into plain JSON-compatible types."""
        return {
            "path": self.path,
            "is_valid": self.is_valid,
            "is_absolute": self.is_absolute,
            "kind": self.kind.value,
            "directory_separator": self.directory_separator,
            "volume": self.volume,
            "relative_anchor": self.anchor,
            "ascend_levels": self.ascend_levels,
            "directories": list(self.directories),
            "filename": self.filename,
            "platform": self.platform.name,
        }

    def __str__(self) -> str:
        return self.path or ""
