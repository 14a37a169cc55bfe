"""Typed errors raised by the collection core."""

from __future__ import annotations


class CollectionError(Exception):
    """Base type for collection failures."""


class CollectionNotAvailable(CollectionError):
    """Raised when the installed collection does not match the lockfile."""

    def __init__(self) -> None:
        super().__init__(
            "rbs collection is not initialized.\n"
            "Run `rbs collection install` to install RBSs from collection."
        )


class SourceConfigError(CollectionError, ValueError):
    """Raised when a source record in the manifest cannot be interpreted."""


class ConfigNotFound(CollectionError):
    """Raised when a command needs a manifest and none could be located."""


class GeneratorNotConfigured(CollectionError):
    """Raised when lockfile generation is requested without a generator."""
