"""Interface to the external lockfile generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from .config import CollectionConfig
from .errors import GeneratorNotConfigured


class LockfileGenerator(Protocol):
    def generate(
        self,
        *,
        config_path: Path,
        gemfile_lock_path: Path,
        with_lockfile: bool,
    ) -> tuple[CollectionConfig, Any]:
        """Resolve the manifest against a Gemfile.lock."""


def generate_lockfile(
    *,
    config_path: Path,
    gemfile_lock_path: Path,
    with_lockfile: bool = True,
    generator: LockfileGenerator | None = None,
) -> CollectionConfig:
    """Return the resolved config produced by ``generator``.

    With ``with_lockfile`` the generator is expected to respect the existing
    lockfile.
    """
    if generator is None:
        raise GeneratorNotConfigured("no lockfile generator configured")
    config, _ = generator.generate(
        config_path=Path(config_path),
        gemfile_lock_path=Path(gemfile_lock_path),
        with_lockfile=with_lockfile,
    )
    return config
