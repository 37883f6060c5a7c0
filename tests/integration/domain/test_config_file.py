from __future__ import annotations

"""
Integration tests for platform configuration persistence.

Verifies forgiving JSON loading and the save/load/validate cycle.
"""

import json
from pathlib import Path

from pathinfo.core.validator import validate_platform_config
from pathinfo.domain.config import load_platform_config_file, save_platform_config_file


def test_missing_file_yields_empty_dict(tmp_path: Path) -> None:
    """A missing config file loads as {}."""
    assert load_platform_config_file(str(tmp_path / "absent.json")) == {}


def test_corrupted_file_yields_empty_dict(tmp_path: Path) -> None:
    """Invalid JSON loads as {}."""
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    assert load_platform_config_file(str(bad)) == {}


def test_non_object_file_yields_empty_dict(tmp_path: Path) -> None:
    """A JSON array loads as {}."""
    arr = tmp_path / "list.json"
    arr.write_text(json.dumps(["windows"]), encoding="utf-8")

    assert load_platform_config_file(str(arr)) == {}


def test_saved_preset_validates_back_to_itself(tmp_path: Path, windows_cfg) -> None:
    """A saved preset validates back to the same config."""
    target = tmp_path / "nested" / "windows.json"

    assert save_platform_config_file(str(target), windows_cfg.to_dict())

    raw = load_platform_config_file(str(target))
    cfg, warnings = validate_platform_config(raw, strict=True)

    assert warnings == []
    assert cfg == windows_cfg


def test_save_failure_returns_false(tmp_path: Path) -> None:
    """Saving into an unusable directory returns False."""
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    assert save_platform_config_file(str(blocker / "cfg.json"), {}) is False
