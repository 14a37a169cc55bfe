"""Command line surface for inspecting and editing the collection manifest."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rbsc_core import (
    CollectionConfig,
    CollectionError,
    ConfigNotFound,
    GemEntry,
    Git,
    LocalPath,
    check_availability,
    find_config_path,
    lockfile_of,
    to_lockfile_path,
)
from rbsc_core.settings import SettingsResolver
from rbsc_core.sources import DEFAULT_REPO_DIR

CLI_VERSION = "0.1.0"
_PREFIX = "[rbs:collection]"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rbs-collection",
        description="Inspect and edit the RBS collection manifest and lockfile.",
    )
    parser.add_argument("--version", action="version", version=f"rbs-collection v{CLI_VERSION}")
    parser.add_argument("--config", help="manifest path (skips discovery)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    check_cmd = subparsers.add_parser("check", help="verify the installed collection against the lockfile")
    check_cmd.set_defaults(func=_handle_check)

    list_cmd = subparsers.add_parser("list", help="list gems from the lockfile (or the manifest)")
    list_cmd.set_defaults(func=_handle_list)

    sources_cmd = subparsers.add_parser("sources", help="show sources in priority order")
    sources_cmd.set_defaults(func=_handle_sources)

    add = subparsers.add_parser("add", help="add a gem entry to the manifest")
    add.add_argument("name", help="gem name")
    add.add_argument("--version", dest="gem_version", help="gem version")
    origin = add.add_mutually_exclusive_group()
    origin.add_argument("--git", metavar="REMOTE", help="git repository holding the signatures")
    origin.add_argument("--local", metavar="PATH", help="local directory holding the signatures")
    add.add_argument("--revision", help="git revision (required with --git)")
    add.add_argument("--repo-dir", dest="repo_dir", help="directory inside the git repository (default: gems)")
    add.add_argument("--ignore", action="store_true", help="mark the gem as ignored")
    add.set_defaults(func=_handle_add)

    remove = subparsers.add_parser("remove", help="remove a gem entry from the manifest")
    remove.add_argument("name", help="gem name")
    remove.set_defaults(func=_handle_remove)

    paths_cmd = subparsers.add_parser("paths", help="print the resolved file locations")
    paths_cmd.set_defaults(func=_handle_paths)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = SettingsResolver(cli_overrides={"log_level": "DEBUG" if args.verbose else ""})
    configure_logging(settings.resolve("log_level") or "WARNING")
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    args.settings = settings
    try:
        return func(args)
    except CollectionError as exc:
        print(f"{_PREFIX} error: {exc}", file=sys.stderr)
        return 1


def configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.WARNING)
    for name in ("rbsc_core", "rbsc_cli"):
        package_logger = logging.getLogger(name)
        package_logger.setLevel(numeric)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[rbs] %(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _config_path(args: argparse.Namespace) -> Path:
    pinned = Path(args.config) if args.config else args.settings.manifest_path()
    if pinned is not None:
        if not pinned.is_file():
            raise ConfigNotFound(f"{pinned} does not exist")
        return pinned
    filename = args.settings.resolve("config_file")
    path = find_config_path(filename=filename)
    if path is None:
        raise ConfigNotFound(f"{filename} not found in the current directory or its parents")
    logger.debug("using manifest %s", path)
    return path


def _load_config(args: argparse.Namespace) -> CollectionConfig:
    return CollectionConfig.from_path(_config_path(args))


def _handle_check(args: argparse.Namespace) -> int:
    config_path = _config_path(args)
    lockfile = lockfile_of(config_path)
    if lockfile is None:
        print(f"{_PREFIX} no lockfile at {to_lockfile_path(config_path)}", file=sys.stderr)
        return 1
    check_availability(lockfile)
    print(f"{_PREFIX} {len(lockfile.gems)} gems available under {lockfile.repo_path}")
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    config_path = _config_path(args)
    document = lockfile_of(config_path) or CollectionConfig.from_path(config_path)
    gems = sorted(document.gems, key=lambda entry: entry.name)
    if not gems:
        print(f"{_PREFIX} no gems")
        return 0
    for gem in gems:
        version = gem.version or "-"
        descriptor = gem.source_descriptor(document.base_dir)
        source = _describe_source(descriptor) if descriptor is not None else "auto"
        marker = " (ignored)" if gem.ignore else ""
        print(f"{_PREFIX} {gem.name} {version} ({source}){marker}")
    return 0


def _handle_sources(args: argparse.Namespace) -> int:
    config = _load_config(args)
    for index, source in enumerate(config.sources, start=1):
        print(f"{_PREFIX} {index}. {_describe_source(source)}")
    return 0


def _describe_source(source: object) -> str:
    if isinstance(source, Git):
        return f"git {source.remote}@{source.revision} ({source.repo_dir})"
    if isinstance(source, LocalPath):
        return f"local {source.path}"
    return getattr(source, "type", str(source))


def _handle_add(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if config.gem(args.name) is not None:
        print(f"{_PREFIX} gem '{args.name}' already declared")
        return 1
    source: Git | LocalPath | None = None
    if args.git:
        if not args.revision:
            print(f"{_PREFIX} error: --revision is required with --git", file=sys.stderr)
            return 1
        source = Git(name=args.git, remote=args.git, revision=args.revision, repo_dir=args.repo_dir or DEFAULT_REPO_DIR)
    elif args.revision or args.repo_dir:
        print(f"{_PREFIX} error: --revision and --repo-dir require --git", file=sys.stderr)
        return 1
    elif args.local:
        # Stored relative to the manifest directory.
        local = os.path.relpath(Path(args.local).resolve(), config.base_dir.resolve())
        source = LocalPath(path=Path(local))
    config.add_gem(
        GemEntry.build(args.name, version=args.gem_version, source=source, ignore=args.ignore)
    )
    config.save()
    print(f"{_PREFIX} gem '{args.name}' added")
    return 0


def _handle_remove(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if not config.remove_gem(args.name):
        print(f"{_PREFIX} gem '{args.name}' is not declared")
        return 1
    config.save()
    print(f"{_PREFIX} gem '{args.name}' removed")
    return 0


def _handle_paths(args: argparse.Namespace) -> int:
    config = _load_config(args)
    print(f"config: {config.config_path}")
    print(f"lockfile: {to_lockfile_path(config.config_path)}")
    print(f"install: {config.repo_path if config.data_path else '-'}")
    print(f"gemfile_lock: {config.gemfile_lock_path or '-'}")
    return 0
