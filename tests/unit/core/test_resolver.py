from __future__ import annotations

"""
Unit tests for the Path Resolver.

Verifies:
1. Ascend levels consume base directories and clamp at the root.
2. Separator and volume inheritance from the base.
3. Precondition violations raise ValueError.
"""

import pytest

from pathinfo.core.parser import parse, parse_directory, parse_file
from pathinfo.core.resolver import resolve, resolve_against


@pytest.fixture
def win_base(windows_cfg):
    return parse_directory("C:\\work\\proj\\", windows_cfg)


def test_parent_anchor_climbs_base(win_base, windows_cfg) -> None:
    """'..' consumes one base directory."""
    rel = parse(r"..\lib\x.dll", config=windows_cfg)

    out = resolve(rel, win_base)

    assert out.is_valid
    assert out.is_absolute
    assert out.relative_anchor is None
    assert out.path == r"C:\work\lib\x.dll"


def test_ascend_is_clamped_at_root(win_base, windows_cfg) -> None:
    """Ascending past the root stops at the root."""
    rel = parse(r"..\..\..\..\x", config=windows_cfg)

    assert resolve(rel, win_base).path == r"C:\x"


def test_base_separator_wins(win_base, windows_cfg) -> None:
    """The result uses the separator of the base."""
    rel = parse("sub/file.txt", config=windows_cfg)

    out = resolve(rel, win_base)

    assert out.directory_separator == "\\"
    assert out.path == r"C:\work\proj\sub\file.txt"


def test_current_anchor_resolves_to_base(win_base, windows_cfg) -> None:
    """'.\\' resolves to the base itself."""
    out = resolve(parse(".\\", config=windows_cfg), win_base)

    assert out.path == win_base.path
    assert out == win_base


def test_rooted_path_borrows_base_volume(win_base, windows_cfg) -> None:
    """A rooted path without volume takes the base volume."""
    out = resolve(parse(r"\tmp\a.txt", config=windows_cfg), win_base)

    assert out.volume == "C"
    assert out.path == r"C:\tmp\a.txt"


def test_absolute_path_keeps_own_volume(win_base, windows_cfg) -> None:
    """An absolute path with a volume keeps it."""
    out = resolve(parse("D:\\data\\", config=windows_cfg), win_base)

    assert out.volume == "D"
    assert out.path == "D:\\data\\"


def test_posix_resolution(posix_cfg) -> None:
    """Resolution works with POSIX conventions and the root base."""
    base = parse_directory("/srv/app/src", posix_cfg)

    assert resolve(parse("../lib/x.py", config=posix_cfg), base).path == "/srv/app/lib/x.py"
    assert resolve(parse("../x", config=posix_cfg), parse_directory("/", posix_cfg)).path == "/x"


def test_result_is_revalidated_for_length(windows_cfg) -> None:
    """A resolved path over the limit is invalid."""
    base = parse_directory("C:\\" + "a" * 200 + "\\", windows_cfg)
    rel = parse("b" * 100, config=windows_cfg)

    out = resolve(rel, base)

    assert base.is_valid and rel.is_valid
    assert not out.is_valid


# -----------------------------------------------------------------------------
# PRECONDITIONS
# -----------------------------------------------------------------------------

def test_invalid_path_raises(win_base, windows_cfg) -> None:
    """Resolving an invalid path raises ValueError."""
    with pytest.raises(ValueError, match="invalid path"):
        resolve(parse("a|b", config=windows_cfg), win_base)


def test_invalid_base_raises(windows_cfg) -> None:
    """An invalid base raises ValueError."""
    with pytest.raises(ValueError, match="not valid"):
        resolve(parse("a", config=windows_cfg), parse_directory("C:\\a|b\\", windows_cfg))


def test_relative_base_raises(windows_cfg) -> None:
    """A relative base raises ValueError."""
    with pytest.raises(ValueError, match="must be absolute"):
        resolve(parse("a", config=windows_cfg), parse_directory("rel\\", windows_cfg))


def test_file_base_raises(windows_cfg) -> None:
    """A base denoting a file raises ValueError."""
    with pytest.raises(ValueError, match="must be a directory"):
        resolve(parse("a", config=windows_cfg), parse_file(r"C:\x.txt", windows_cfg))


def test_resolve_against_raw_base(posix_cfg) -> None:
    """A raw base string is parsed as a directory before resolving."""
    rel = parse("docs/readme.md", config=posix_cfg)

    assert resolve_against(rel, "/home/me").path == "/home/me/docs/readme.md"
    with pytest.raises(ValueError):
        resolve_against(rel, "relative/base")
