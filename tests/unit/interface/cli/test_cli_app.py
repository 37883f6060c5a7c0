from __future__ import annotations

"""
Unit tests for the CLI application controller.

Logging bootstrap is disabled so the tests never touch the root logger.
"""

import json

import pytest

from pathinfo.interface.cli import app


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(app, "configure_logging", lambda cfg, **kwargs: None)


def _summary(out: str) -> dict:
    rows = {}
    for line in out.splitlines():
        label, _, value = line.partition(":")
        rows[label] = value.strip()
    return rows


def test_valid_path_exits_zero_with_json(capsys) -> None:
    """A valid path exits 0 and prints JSON."""
    code = app.main([r"C:\Users\me\notes.txt", "-p", "windows", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == app.EXIT_VALID
    assert data["volume"] == "C"
    assert data["directories"] == ["Users", "me"]
    assert data["filename"] == "notes.txt"
    assert data["platform"] == "windows"


def test_invalid_path_exits_one(capsys) -> None:
    """An invalid path exits 1."""
    code = app.main(["C:\\a|b", "-p", "windows"])

    rows = _summary(capsys.readouterr().out)
    assert code == app.EXIT_INVALID
    assert rows["Valid"] == "no"


def test_resolution_against_base(capsys) -> None:
    """--base resolves the path before printing."""
    code = app.main(["../lib/x.py", "-p", "posix", "--base", "/srv/app/src"])

    rows = _summary(capsys.readouterr().out)
    assert code == app.EXIT_VALID
    assert rows["Path"] == "/srv/app/lib/x.py"
    assert rows["Absolute"] == "yes"
    assert rows["Kind"] == "file"


def test_relative_base_is_a_usage_error(capsys) -> None:
    """A relative base exits 2."""
    code = app.main(["x", "-p", "posix", "--base", "rel/dir"])

    assert code == app.EXIT_USAGE
    assert "must be absolute" in capsys.readouterr().err


def test_missing_path_is_a_usage_error(capsys) -> None:
    """Running without a path exits 2."""
    assert app.main(["-p", "posix"]) == app.EXIT_USAGE
    assert "path is required" in capsys.readouterr().err


def test_dump_config(capsys) -> None:
    """--dump-config prints the effective configuration."""
    code = app.main(["--dump-config", "-p", "posix"])

    data = json.loads(capsys.readouterr().out)
    assert code == app.EXIT_VALID
    assert data["name"] == "posix"
    assert data["volume_separator"] is None


def test_strict_config_failure(tmp_path, capsys) -> None:
    """A strict config error exits 2."""
    conf = tmp_path / "platform.json"
    conf.write_text(json.dumps({"preset": "amiga"}), encoding="utf-8")

    code = app.main(["x", "--config", str(conf), "--strict-config"])

    assert code == app.EXIT_USAGE
    assert "invalid platform configuration" in capsys.readouterr().err


def test_exists_flag(tmp_path, capsys) -> None:
    """--exists reports presence on disk."""
    target = tmp_path / "present.txt"
    target.write_text("x", encoding="utf-8")

    code = app.main([str(target), "-p", "host", "--file", "--exists", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == app.EXIT_VALID
    assert data["exists"] is True


def test_invalid_path_with_base_exits_one(capsys) -> None:
    """An invalid path is reported as invalid even when a base is given."""
    code = app.main(["C:\\a|b", "-p", "windows", "--base", "C:\\work\\"])

    captured = capsys.readouterr()
    assert code == app.EXIT_INVALID
    assert _summary(captured.out)["Valid"] == "no"
    assert captured.err == ""


def test_save_config_writes_effective_configuration(tmp_path, capsys) -> None:
    """--save-config writes the effective configuration without needing a path."""
    target = tmp_path / "conf" / "platform.json"

    code = app.main(["--save-config", str(target), "-p", "windows"])

    assert code == app.EXIT_VALID
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["name"] == "windows"
    assert data["volume_separator"] == ":"


def test_save_config_failure_is_a_usage_error(tmp_path, capsys) -> None:
    """An unwritable --save-config target exits 2."""
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    code = app.main(["x", "-p", "posix", "--save-config", str(blocker / "platform.json")])

    assert code == app.EXIT_USAGE
    assert "cannot write platform configuration" in capsys.readouterr().err
