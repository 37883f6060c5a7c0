from __future__ import annotations

"""
Integration tests for the FileSystem infrastructure layer.

Exercises existence checks against a real temporary directory, the length
limit rules of both presets and the environment directory queries.
"""

import dataclasses
import os
import sys
from pathlib import Path

import pytest

from pathinfo.core.parser import parse, parse_directory, parse_file
from pathinfo.domain.platform import host_config
from pathinfo.infra import fs
from pathinfo.infra.fs import (
    directory_exists,
    file_exists,
    get_current_directory,
    get_executing_directory,
    is_directory_path_too_long,
    is_file_path_too_long,
    path_exists,
    query_host_path_limits,
)


# -----------------------------------------------------------------------------
# EXISTENCE
# -----------------------------------------------------------------------------

def test_raw_existence_checks(tmp_path: Path) -> None:
    """File and directory checks distinguish kinds."""
    target = tmp_path / "data.txt"
    target.write_text("content", encoding="utf-8")

    assert file_exists(str(target))
    assert not file_exists(str(tmp_path))
    assert directory_exists(str(tmp_path))
    assert not directory_exists(str(target))
    assert not file_exists(str(tmp_path / "missing.txt"))


def test_existence_check_absorbs_bad_input() -> None:
    """Unusable paths report False instead of raising."""
    assert file_exists("bad\0name") is False
    assert directory_exists("bad\0name") is False


def test_structured_existence_follows_kind(tmp_path: Path) -> None:
    """Structured checks dispatch on the path kind."""
    cfg = host_config()
    target = tmp_path / "data.txt"
    target.write_text("content", encoding="utf-8")

    assert path_exists(parse_file(str(target), cfg))
    assert path_exists(parse_directory(str(tmp_path), cfg))
    assert not path_exists(parse_directory(str(target), cfg))
    assert not path_exists(parse_file(str(tmp_path / "missing.txt"), cfg))


def test_relative_and_invalid_paths_never_exist(posix_cfg) -> None:
    """Relative and invalid paths are never looked up."""
    assert not path_exists(parse("./", config=posix_cfg))
    assert not path_exists(parse("", config=posix_cfg))


# -----------------------------------------------------------------------------
# LENGTH LIMITS
# -----------------------------------------------------------------------------

def test_windows_file_limit_boundary(windows_cfg) -> None:
    """260 characters is the last accepted file length."""
    at_limit = "C:\\" + "a" * 200 + "\\" + "b" * 56

    assert len(at_limit) == 260
    assert is_file_path_too_long(at_limit, windows_cfg) is False
    assert is_file_path_too_long(at_limit + "b", windows_cfg) is True
    assert is_directory_path_too_long(at_limit, windows_cfg) is True


def test_component_limit(posix_cfg) -> None:
    """255 bytes is the last accepted component length."""
    assert is_file_path_too_long("/" + "x" * 255, posix_cfg) is False
    assert is_file_path_too_long("/" + "x" * 256, posix_cfg) is True


def test_component_limit_applies_to_both_separators(windows_cfg) -> None:
    """Components are split on either separator."""
    assert is_directory_path_too_long("C:/" + "x" * 256 + "/", windows_cfg) is True


def test_byte_length_counting(posix_cfg) -> None:
    """Byte counting sees multi-byte characters."""
    wide = "/" + "\u00e9" * 128
    by_chars = dataclasses.replace(posix_cfg, length_in_bytes=False)

    assert is_file_path_too_long(wide, posix_cfg) is True
    assert is_file_path_too_long(wide, by_chars) is False


@pytest.mark.skipif(os.name == "nt", reason="surrogates are encodable on Windows")
def test_unencodable_length_is_undeterminable(posix_cfg) -> None:
    """Unencodable paths have no measurable length."""
    assert is_file_path_too_long("/tmp/\ud800", posix_cfg) is None
    assert not parse_file("/tmp/\ud800", posix_cfg).is_valid


def test_no_limits_configured(posix_cfg) -> None:
    """Without limits nothing is too long."""
    unlimited = dataclasses.replace(
        posix_cfg, max_file_path_length=None, max_component_length=None,
    )

    assert is_file_path_too_long("/" + "x" * 10000, unlimited) is False


# -----------------------------------------------------------------------------
# HOST QUERIES
# -----------------------------------------------------------------------------

def test_query_host_limits_without_pathconf(monkeypatch) -> None:
    """Platforms without pathconf report no limits."""
    monkeypatch.delattr(os, "pathconf", raising=False)

    assert query_host_path_limits(os.sep) == (None, None)


def test_query_host_limits_failure(monkeypatch) -> None:
    """pathconf errors report no limits."""
    def failing(anchor, name):
        raise OSError("unsupported")

    monkeypatch.setattr(os, "pathconf", failing, raising=False)

    assert query_host_path_limits(os.sep) == (None, None)


def test_current_directory(monkeypatch) -> None:
    """The working directory is returned, or None once removed."""
    assert get_current_directory() == os.getcwd()

    def gone():
        raise FileNotFoundError("removed")

    monkeypatch.setattr(fs.os, "getcwd", gone)
    assert get_current_directory() is None


def test_executing_directory_for_frozen_builds(monkeypatch, tmp_path: Path) -> None:
    """Frozen builds use the executable's directory."""
    exe = tmp_path / "bin" / "tool"
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(exe))

    assert get_executing_directory() == str(tmp_path / "bin")
