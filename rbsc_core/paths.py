"""Path helpers for locating the manifest, its lockfile and installed gems."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_FILE_NAME = "rbs_collection.yaml"
SETTINGS_FILE_NAME = "config.toml"
LOCKFILE_SUFFIX = ".lock"
METADATA_FILENAME = ".rbs_meta.yaml"

_DEFAULT_APP_NAME = "rbs_collection"


def find_config_path(
    start_dir: Path | str | None = None,
    filename: str = CONFIG_FILE_NAME,
) -> Path | None:
    """Walk parent directories looking for ``filename``; ``None`` if absent."""
    current = (Path(start_dir) if start_dir else Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / filename
        if candidate.exists():
            return candidate
    return None


def to_lockfile_path(config_path: Path) -> Path:
    """``foo/bar.yaml`` -> ``foo/bar.lock.yaml``."""
    config_path = Path(config_path)
    return config_path.with_suffix(LOCKFILE_SUFFIX + config_path.suffix)


def gem_install_dir(repo_path: Path, name: str, version: str) -> Path:
    return repo_path / name / version


def metadata_path(repo_path: Path, name: str, version: str) -> Path:
    return gem_install_dir(repo_path, name, version) / METADATA_FILENAME


@dataclass(frozen=True)
class UserDirs:
    """Locate the per-user settings file under the platform config dir."""

    app_name: str = _DEFAULT_APP_NAME
    config_dir_override: Path | None = None

    def config_dir(self) -> Path:
        return (
            self.config_dir_override
            if self.config_dir_override
            else Path(user_config_dir(self.app_name, appauthor=False))
        )

    def settings_file(self) -> Path:
        return self.config_dir() / SETTINGS_FILE_NAME
