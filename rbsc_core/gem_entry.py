"""Gem records shared by the manifest, the lockfile and installed metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .sources import Source, from_config_entry


@dataclass
class GemEntry:
    """One gem record.

    The record is kept as an ordered mapping so keys the tooling does not know
    about survive a load/dump cycle. ``name``, ``version``, ``ignore`` and
    ``source`` are read through properties; equality compares every key.
    """

    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GemEntry":
        if not isinstance(data, Mapping):
            raise ValueError("gem entry must be a mapping")
        if not isinstance(data.get("name"), str):
            raise ValueError(f"gem entry requires a string 'name': {dict(data)!r}")
        return cls(data=dict(data))

    @classmethod
    def build(
        cls,
        name: str,
        *,
        version: str | None = None,
        source: Source | Mapping[str, Any] | None = None,
        ignore: bool = False,
        **extra: Any,
    ) -> "GemEntry":
        data: dict[str, Any] = {"name": name}
        if version is not None:
            data["version"] = version
        if source is not None:
            data["source"] = dict(source) if isinstance(source, Mapping) else source.to_config_entry()
        if ignore:
            data["ignore"] = True
        data.update(extra)
        return cls(data=data)

    @property
    def name(self) -> str:
        return self.data["name"]

    @property
    def version(self) -> str | None:
        value = self.data.get("version")
        return None if value is None else str(value)

    @property
    def ignore(self) -> bool:
        return bool(self.data.get("ignore"))

    @property
    def source(self) -> dict[str, Any] | None:
        return self.data.get("source")

    @property
    def source_type(self) -> str | None:
        source = self.source
        if not isinstance(source, Mapping):
            return None
        return source.get("type")

    def source_descriptor(self, base_dir: Path | None = None) -> Source | None:
        if self.source is None:
            return None
        return from_config_entry(self.source, base_dir)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)


def coerce_gem(value: GemEntry | Mapping[str, Any]) -> GemEntry:
    if isinstance(value, GemEntry):
        return value
    return GemEntry.from_dict(value)
