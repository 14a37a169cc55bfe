"""Core model for the signature collection manifest and lockfile."""

from __future__ import annotations

from .availability import AvailabilityChecker, check_availability
from .config import CollectionConfig
from .errors import (
    CollectionError,
    CollectionNotAvailable,
    ConfigNotFound,
    GeneratorNotConfigured,
    SourceConfigError,
)
from .gem_entry import GemEntry
from .generator import LockfileGenerator, generate_lockfile
from .lockfile import Lockfile, lockfile_of
from .paths import CONFIG_FILE_NAME, METADATA_FILENAME, find_config_path, to_lockfile_path
from .sources import RUBYGEMS, STDLIB, Git, LocalPath, Rubygems, Stdlib, from_config_entry

__all__ = [
    "AvailabilityChecker",
    "CONFIG_FILE_NAME",
    "CollectionConfig",
    "CollectionError",
    "CollectionNotAvailable",
    "ConfigNotFound",
    "GemEntry",
    "GeneratorNotConfigured",
    "Git",
    "LocalPath",
    "Lockfile",
    "LockfileGenerator",
    "METADATA_FILENAME",
    "RUBYGEMS",
    "Rubygems",
    "STDLIB",
    "SourceConfigError",
    "Stdlib",
    "check_availability",
    "find_config_path",
    "from_config_entry",
    "generate_lockfile",
    "lockfile_of",
    "to_lockfile_path",
]
