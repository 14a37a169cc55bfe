"""The user-authored collection manifest (``rbs_collection.yaml``)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, TextIO

import yaml

from .document import CollectionDocument
from .gem_entry import GemEntry, coerce_gem

logger = logging.getLogger(__name__)


class CollectionConfig(CollectionDocument):
    """In-memory model of the manifest.

    Gems are mutated with :meth:`add_gem` / :meth:`remove_gem` and written back
    with :meth:`dump_to`, which drops ignored gems and sorts the rest by name.
    """

    @classmethod
    def from_path(cls, path: Path | str) -> "CollectionConfig":
        path = Path(path)
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        logger.debug("loaded collection config from %s", path)
        return cls(data, config_path=path)

    load = from_path

    def add_gem(self, entry: GemEntry | Mapping[str, Any]) -> GemEntry:
        gem = coerce_gem(entry)
        self.data.setdefault("gems", []).append(gem.data)
        return gem

    def remove_gem(self, name: str) -> bool:
        records = self.data.get("gems") or []
        kept = [record for record in records if record.get("name") != name]
        if len(kept) == len(records):
            return False
        records[:] = kept
        return True

    @property
    def gemfile_lock_path(self) -> Path | None:
        return super().gemfile_lock_path

    @gemfile_lock_path.setter
    def gemfile_lock_path(self, path: Path | str) -> None:
        relative = os.path.relpath(Path(path), self.base_dir)
        self.data["gemfile_lock_path"] = Path(relative).as_posix()

    def to_dump_data(self) -> dict[str, Any]:
        kept = [entry for entry in self.gems if not entry.ignore]
        kept.sort(key=lambda entry: entry.name)
        return {**self.data, "gems": [entry.to_dict() for entry in kept]}

    def dump_to(self, io: TextIO) -> None:
        yaml.safe_dump(self.to_dump_data(), io, sort_keys=False, allow_unicode=True)

    def save(self, path: Path | str | None = None) -> Path:
        target = Path(path) if path is not None else self.config_path
        with target.open("w", encoding="utf-8") as handle:
            self.dump_to(handle)
        logger.debug("wrote collection config to %s", target)
        return target
