"""Source descriptors: where the signatures of a single gem come from."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import SourceConfigError
from .paths import METADATA_FILENAME

__all__ = [
    "Git",
    "LocalPath",
    "METADATA_FILENAME",
    "RUBYGEMS",
    "Rubygems",
    "STDLIB",
    "Source",
    "Stdlib",
    "from_config_entry",
]

DEFAULT_REPO_DIR = "gems"


@dataclass(frozen=True)
class Git:
    """A pinned revision of a signature repository."""

    name: str
    remote: str
    revision: str
    repo_dir: str = DEFAULT_REPO_DIR

    type = "git"

    def to_config_entry(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "remote": self.remote,
            "revision": self.revision,
            "repo_dir": self.repo_dir,
        }


@dataclass(frozen=True)
class LocalPath:
    """A directory declared in the manifest as a local override."""

    path: Path

    type = "local"

    def to_config_entry(self) -> dict[str, Any]:
        return {"type": self.type, "path": str(self.path)}


class _Singleton:
    type = ""
    _instance: "_Singleton | None" = None

    def __new__(cls) -> "_Singleton":
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def to_config_entry(self) -> dict[str, Any]:
        return {"type": self.type}


class Stdlib(_Singleton):
    """Signatures bundled with the tool itself."""

    type = "stdlib"


class Rubygems(_Singleton):
    """Signatures shipped inside gems published on the public registry."""

    type = "rubygems"


STDLIB = Stdlib()
RUBYGEMS = Rubygems()

Source = Union[Git, LocalPath, Stdlib, Rubygems]


def _require(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise SourceConfigError(f"source entry is missing '{key}': {dict(entry)!r}")
    return value


def from_config_entry(entry: Mapping[str, Any], base_dir: Path | None = None) -> Source:
    """Build a source from a manifest ``sources`` record.

    Records without a ``type`` are git sources. Relative ``local`` paths are
    resolved against ``base_dir`` when given.
    """
    if not isinstance(entry, Mapping):
        raise SourceConfigError(f"source entry must be a mapping, got {type(entry).__name__}")

    kind = entry.get("type") or Git.type
    if kind == Git.type:
        remote = _require(entry, "remote")
        return Git(
            name=str(entry.get("name") or remote),
            remote=remote,
            revision=_require(entry, "revision"),
            repo_dir=str(entry.get("repo_dir") or DEFAULT_REPO_DIR),
        )
    if kind == LocalPath.type:
        path = Path(_require(entry, "path"))
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        return LocalPath(path=path)
    if kind == Stdlib.type:
        return STDLIB
    if kind == Rubygems.type:
        return RUBYGEMS
    raise SourceConfigError(f"unknown source type: {kind!r}")
