"""Layered settings for the collection tooling.

The user settings file is ``config.toml`` under the platform config dir::

    [collection]
    manifest = "~/src/app/rbs_collection.yaml"
    config_file = "rbs_collection.yaml"
    log_level = "INFO"

``manifest`` pins a manifest path used when ``--config`` is not given and
skips the parent-directory search.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .paths import CONFIG_FILE_NAME, SETTINGS_FILE_NAME, UserDirs

__all__ = ["SETTINGS_FILE_NAME", "SettingsResolver"]

SETTINGS_TABLE = "collection"

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, str] = {
    "config_file": CONFIG_FILE_NAME,
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "manifest": "RBS_COLLECTION_MANIFEST",
    "config_file": "RBS_COLLECTION_CONFIG",
    "log_level": "RBS_COLLECTION_LOG_LEVEL",
}


def _read_collection_table(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return {}
    table = document.get(SETTINGS_TABLE)
    if not isinstance(table, dict):
        return {}
    return {key: str(value) for key, value in table.items() if key in _ENV_KEY_MAP}


@dataclass
class SettingsResolver:
    """Resolve settings honoring CLI, env, user file and defaults, in that order."""

    user_dirs: UserDirs | None = None
    cli_overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = {k: v for k, v in (self.cli_overrides or {}).items() if v}
        self.env = os.environ if self.env is None else self.env
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults

    def resolve(self, key: str) -> str | None:
        if value := self.cli_overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if value := self._user_layer().get(key):
            return value
        return self.defaults.get(key)

    def manifest_path(self) -> Path | None:
        """Pinned manifest location, if one is configured."""
        value = self.resolve("manifest")
        if not value:
            return None
        return Path(value).expanduser()

    def _env_value(self, key: str) -> str | None:
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias) or None
        return None

    def _user_layer(self) -> dict[str, str]:
        return _read_collection_table(self.user_dirs.settings_file())
