"""Tests for snapshot file discovery."""

from pathlib import Path

import pytest

from tabtree import config


def test_env_var_overrides_snapshot_files(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "snap.json"
    monkeypatch.setenv(config.SNAPSHOT_ENV_VAR, str(target))
    assert config.resolve_snapshot_file() == target


def test_first_existing_snapshot_file_wins(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    missing = tmp_path / "missing.json"
    second = tmp_path / "second.json"
    third = tmp_path / "third.json"
    second.write_text("{}")
    third.write_text("{}")
    monkeypatch.delenv(config.SNAPSHOT_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "SNAPSHOT_FILES", [missing, second, third])
    assert config.resolve_snapshot_file() == second


def test_no_snapshot_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(config.SNAPSHOT_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "SNAPSHOT_FILES", [tmp_path / "missing.json"])
    assert config.resolve_snapshot_file() is None
