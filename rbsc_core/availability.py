"""Verify that the installed collection matches the recorded gem set."""

from __future__ import annotations

import logging

import yaml

from .document import CollectionDocument
from .errors import CollectionNotAvailable
from .paths import metadata_path
from .sources import Git

logger = logging.getLogger(__name__)


def check_availability(document: CollectionDocument) -> None:
    """Raise :class:`CollectionNotAvailable` unless every git gem is installed.

    The install root must exist, and each git-sourced gem must have a metadata
    file under ``<repo_path>/<name>/<version>/`` whose content equals the gem
    record exactly. The first violation aborts the check.
    """
    repo_path = document.repo_path
    if not repo_path.is_dir():
        logger.debug("install root %s does not exist", repo_path)
        raise CollectionNotAvailable()

    for gem in document.gems:
        if gem.source_type != Git.type:
            continue
        version = gem.version
        if version is None:
            logger.debug("git gem %s has no version", gem.name)
            raise CollectionNotAvailable()
        meta_path = metadata_path(repo_path, gem.name, version)
        if not meta_path.is_file():
            logger.debug("metadata missing for %s-%s at %s", gem.name, version, meta_path)
            raise CollectionNotAvailable()
        installed = yaml.safe_load(meta_path.read_text(encoding="utf-8"))
        if installed != gem.to_dict():
            logger.debug("metadata for %s-%s does not match the lockfile", gem.name, version)
            raise CollectionNotAvailable()


class AvailabilityChecker:
    """Callable wrapper around :func:`check_availability` for CLI wiring."""

    def __call__(self, document: CollectionDocument) -> None:
        check_availability(document)

    def is_available(self, document: CollectionDocument) -> bool:
        try:
            check_availability(document)
        except CollectionNotAvailable:
            return False
        return True
