"""Tests for manifest discovery and path derivation helpers."""

from pathlib import Path

import pytest

from rbsc_core.paths import (
    CONFIG_FILE_NAME,
    find_config_path,
    metadata_path,
    to_lockfile_path,
)


def test_find_config_in_parent(tmp_path: Path) -> None:
    project = tmp_path / "project"
    nested = project / "lib" / "deep"
    nested.mkdir(parents=True)
    manifest = project / CONFIG_FILE_NAME
    manifest.write_text("path: vendor\n", encoding="utf-8")

    assert find_config_path(nested) == manifest.resolve()


def test_find_config_prefers_nearest(tmp_path: Path) -> None:
    inner = tmp_path / "outer" / "inner"
    inner.mkdir(parents=True)
    (tmp_path / "outer" / CONFIG_FILE_NAME).write_text("{}", encoding="utf-8")
    (inner / CONFIG_FILE_NAME).write_text("{}", encoding="utf-8")

    assert find_config_path(inner) == (inner / CONFIG_FILE_NAME).resolve()


def test_find_config_returns_none_when_absent(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b" / "c" / "d"
    nested.mkdir(parents=True)
    assert find_config_path(nested, filename="no-such-manifest-anywhere.yaml") is None


def test_find_config_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text("{}", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    monkeypatch.chdir(sub)
    assert find_config_path() == (tmp_path / CONFIG_FILE_NAME).resolve()


def test_lockfile_path_derivation() -> None:
    assert to_lockfile_path(Path("foo/bar.yaml")) == Path("foo/bar.lock.yaml")
    assert to_lockfile_path(Path("rbs_collection.yaml")) == Path("rbs_collection.lock.yaml")


def test_metadata_path_layout(tmp_path: Path) -> None:
    assert metadata_path(tmp_path, "foo", "1.0") == tmp_path / "foo" / "1.0" / ".rbs_meta.yaml"
