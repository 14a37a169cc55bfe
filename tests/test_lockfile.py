"""Tests for loading the lockfile that sits next to the manifest."""

from pathlib import Path

from rbsc_core import CollectionConfig, Lockfile, lockfile_of


def test_lockfile_of_missing_returns_none(tmp_path: Path) -> None:
    assert lockfile_of(tmp_path / "rbs_collection.yaml") is None


def test_lockfile_of_loads_derived_path(tmp_path: Path) -> None:
    config_path = tmp_path / "rbs_collection.yaml"
    config_path.write_text("path: vendor\n", encoding="utf-8")
    (tmp_path / "rbs_collection.lock.yaml").write_text(
        "path: vendor\ngems:\n  - name: rack\n    version: '3.0'\n    source:\n      type: rubygems\n",
        encoding="utf-8",
    )

    lockfile = lockfile_of(config_path)
    assert isinstance(lockfile, Lockfile)
    assert lockfile.lockfile_path == tmp_path / "rbs_collection.lock.yaml"
    assert lockfile.repo_path == tmp_path / "vendor"
    assert lockfile.gem("rack").version == "3.0"
    assert lockfile.gem("rack").source_type == "rubygems"


def test_lockfile_of_ignores_gemfile_lock_path(tmp_path: Path) -> None:
    config_path = tmp_path / "rbs_collection.yaml"
    config_path.write_text("path: vendor\ngemfile_lock_path: other.lock.yaml\n", encoding="utf-8")
    (tmp_path / "other.lock.yaml").write_text("path: vendor\n", encoding="utf-8")

    config = CollectionConfig.from_path(config_path)
    assert config.gemfile_lock_path == tmp_path / "other.lock.yaml"
    assert lockfile_of(config_path) is None
