from __future__ import annotations

"""
Relative Anchor Scanner.

Decodes the leading './' and '../' runs of a relative path into an explicit
ascend count plus a current-directory flag, returning the unconsumed rest of
the string.
"""

from dataclasses import dataclass
from typing import Optional

from pathinfo.domain.path_models import RelativeAnchor


@dataclass(frozen=True)
class AnchorScan:
    """
    Outcome of scanning the leading anchor runs of a path.

    Attributes:
        anchor: Decoded anchor, or None when the path has no leading run.
        remainder: Text after the consumed runs, or None if nothing is left.
    """
    anchor: Optional[RelativeAnchor]
    remainder: Optional[str]


def _leading_run_length(path: str, separator: str, anchor_char: str) -> int:
    """
    Length of the anchor-character run ending at the first separator.

    Returns 0 if the text before the first separator is not made only of
    anchor characters, or if there is no separator at all.
    """
    end = path.find(separator)
    if end <= 0:
        return 0
    head = path[:end]
    if head.strip(anchor_char):
        return 0
    return end


def scan_relative_anchor(path: Optional[str], separator: str, anchor_char: str = ".") -> AnchorScan:
    """
    Consume leading anchor runs greedily, left to right.

    A run of one anchor character ('./') marks the current directory. A run
    of N characters with N != 1 ascends N - 1 levels, so '../' climbs one and
    '.../' climbs two. Once any ascend level is found, the current-directory
    marker is dropped. A current-directory marker is kept only when nothing
    follows it ('./'); in './a' it has no effect and no anchor is reported.

    Args:
        path: Relative path text, without volume.
        separator: Separator detected for the path.
        anchor_char: Anchor character of the platform.

    Returns:
        AnchorScan: Decoded anchor and the unconsumed remainder.
    """
    if path is None:
        return AnchorScan(anchor=None, remainder=None)

    ascend_levels = 0
    current_prefix = False
    found = False
    remainder: Optional[str] = path

    while remainder is not None:
        run = _leading_run_length(remainder, separator, anchor_char)
        if run == 0:
            break
        found = True
        if run == 1:
            current_prefix = True
        else:
            ascend_levels += run - 1

        remainder = remainder[run + len(separator):].strip()
        if not remainder:
            remainder = None

    if not found:
        return AnchorScan(anchor=None, remainder=remainder)

    if ascend_levels > 0:
        current_prefix = False
    elif remainder is not None:
        # './a/b' is the same relative path as 'a/b'
        return AnchorScan(anchor=None, remainder=remainder)
    return AnchorScan(
        anchor=RelativeAnchor(ascend_levels=ascend_levels, current_prefix=current_prefix),
        remainder=remainder,
    )
