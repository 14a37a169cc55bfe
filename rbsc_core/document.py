"""Behaviour shared by the manifest and the lockfile documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .gem_entry import GemEntry
from .sources import RUBYGEMS, STDLIB, Source, from_config_entry


def _ensure_mapping(data: Any, path: Path) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    raise ValueError(f"{path}: expected a mapping at the top level")


class CollectionDocument:
    """A YAML document bound to the file it was read from.

    Relative paths stored in the document (``path``, ``gemfile_lock_path``,
    local sources) are resolved against the directory of ``config_path``.
    """

    def __init__(self, data: Mapping[str, Any] | None, *, config_path: Path) -> None:
        self.config_path = Path(config_path)
        raw = _ensure_mapping(data, self.config_path)
        if raw.get("gems") is not None:
            raw["gems"] = [GemEntry.from_dict(item).data for item in raw["gems"]]
        self._data = raw
        self._sources: tuple[Source, ...] | None = None

    @property
    def base_dir(self) -> Path:
        return self.config_path.parent

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def data_path(self) -> str | None:
        value = self._data.get("path")
        return None if value is None else str(value)

    @property
    def repo_path(self) -> Path:
        if self.data_path is None:
            raise ValueError(f"{self.config_path}: 'path' is not set")
        return self.base_dir / self.data_path

    @property
    def data_sources(self) -> list[Any]:
        return self._data.get("sources") or []

    @property
    def sources(self) -> tuple[Source, ...]:
        """Declared sources in order, followed by stdlib and rubygems.

        Computed once per document; later edits to ``data_sources`` are not
        reflected.
        """
        if self._sources is None:
            declared = [from_config_entry(entry, self.base_dir) for entry in self.data_sources]
            self._sources = (*declared, STDLIB, RUBYGEMS)
        return self._sources

    @property
    def gems(self) -> list[GemEntry]:
        """Views over the records in ``data["gems"]``; edits to an entry's ``data`` persist."""
        return [GemEntry(data=item) for item in self._data.get("gems") or []]

    def gem(self, name: str) -> GemEntry | None:
        for entry in self.gems:
            if entry.name == name:
                return entry
        return None

    @property
    def gemfile_lock_path(self) -> Path | None:
        value = self._data.get("gemfile_lock_path")
        if not value:
            return None
        return self.base_dir / str(value)
