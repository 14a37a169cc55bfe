"""Read-only access to the resolved lockfile next to the manifest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from .document import CollectionDocument
from .paths import to_lockfile_path

logger = logging.getLogger(__name__)


class Lockfile(CollectionDocument):
    """Frozen snapshot of the gems that should be installed under ``repo_path``."""

    def __init__(self, data: Mapping[str, Any] | None, *, lockfile_path: Path) -> None:
        super().__init__(data, config_path=lockfile_path)

    @property
    def lockfile_path(self) -> Path:
        return self.config_path

    @classmethod
    def load(cls, path: Path | str) -> "Lockfile":
        path = Path(path)
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return cls(data, lockfile_path=path)


def lockfile_of(config_path: Path | str) -> Lockfile | None:
    """Load the lockfile derived from ``config_path`` if it exists.

    Only the derived ``<name>.lock<ext>`` path is considered; the manifest's
    ``gemfile_lock_path`` field plays no part here.
    """
    lock_path = to_lockfile_path(Path(config_path))
    if not lock_path.is_file():
        logger.debug("no lockfile at %s", lock_path)
        return None
    return Lockfile.load(lock_path)
