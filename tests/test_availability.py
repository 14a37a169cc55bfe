"""Tests for the installed-collection consistency check."""

from pathlib import Path

import pytest
import yaml

from rbsc_core import AvailabilityChecker, CollectionNotAvailable, Lockfile, check_availability

GIT_SOURCE = {
    "type": "git",
    "name": "ruby/gem_rbs_collection",
    "remote": "https://github.com/ruby/gem_rbs_collection.git",
    "revision": "b4d3b346d9657543099a35a1fd20347e75b8c523",
    "repo_dir": "gems",
}


def _lockfile(root: Path, gems: list[dict]) -> Lockfile:
    return Lockfile({"path": ".gem_rbs_collection", "gems": gems}, lockfile_path=root / "rbs_collection.lock.yaml")


def _install_metadata(root: Path, gem: dict) -> Path:
    target = root / ".gem_rbs_collection" / gem["name"] / gem["version"]
    target.mkdir(parents=True, exist_ok=True)
    meta = target / ".rbs_meta.yaml"
    meta.write_text(yaml.safe_dump(gem, sort_keys=False), encoding="utf-8")
    return meta


def test_missing_install_root(tmp_path: Path) -> None:
    with pytest.raises(CollectionNotAvailable, match="rbs collection install"):
        check_availability(_lockfile(tmp_path, []))


def test_missing_metadata_file(tmp_path: Path) -> None:
    (tmp_path / ".gem_rbs_collection").mkdir()
    gem = {"name": "foo", "version": "1.0", "source": GIT_SOURCE}
    with pytest.raises(CollectionNotAvailable):
        check_availability(_lockfile(tmp_path, [gem]))


def test_mismatched_version(tmp_path: Path) -> None:
    gem = {"name": "foo", "version": "1.0", "source": GIT_SOURCE}
    meta = _install_metadata(tmp_path, gem)
    meta.write_text(yaml.safe_dump({**gem, "version": "2.0"}), encoding="utf-8")
    with pytest.raises(CollectionNotAvailable):
        check_availability(_lockfile(tmp_path, [gem]))


def test_mismatched_passthrough_field(tmp_path: Path) -> None:
    gem = {"name": "foo", "version": "1.0", "source": GIT_SOURCE}
    meta = _install_metadata(tmp_path, gem)
    meta.write_text(yaml.safe_dump({**gem, "extra": True}), encoding="utf-8")
    with pytest.raises(CollectionNotAvailable):
        check_availability(_lockfile(tmp_path, [gem]))


def test_git_gem_without_version(tmp_path: Path) -> None:
    (tmp_path / ".gem_rbs_collection").mkdir()
    gem = {"name": "foo", "source": GIT_SOURCE}
    with pytest.raises(CollectionNotAvailable):
        check_availability(_lockfile(tmp_path, [gem]))


def test_matching_metadata_passes(tmp_path: Path) -> None:
    gem = {"name": "foo", "version": "1.0", "source": GIT_SOURCE}
    _install_metadata(tmp_path, gem)
    check_availability(_lockfile(tmp_path, [gem]))


def test_non_git_gems_are_skipped(tmp_path: Path) -> None:
    (tmp_path / ".gem_rbs_collection").mkdir()
    gems = [
        {"name": "json", "version": "2.6", "source": {"type": "stdlib"}},
        {"name": "rack", "version": "3.0", "source": {"type": "rubygems"}},
        {"name": "local-gem"},
    ]
    assert AvailabilityChecker().is_available(_lockfile(tmp_path, gems))


def test_checker_reports_unavailable(tmp_path: Path) -> None:
    checker = AvailabilityChecker()
    assert checker.is_available(_lockfile(tmp_path, [])) is False
    with pytest.raises(CollectionNotAvailable):
        checker(_lockfile(tmp_path, []))
