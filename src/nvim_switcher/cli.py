"""CLI entry point for the Neovim version switcher."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .config import resolve_config
from .exceptions import ConfigError, SwitcherError
from .paths import SwitcherPaths
from .switcher import VersionSwitcher


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
    )


def cmd_download(switcher: VersionSwitcher, args: argparse.Namespace) -> int:
    result = switcher.download(args.version)
    if result.cached:
        print(f"Version {result.version} already downloaded")
    else:
        print(f"Downloaded version {result.version} of nvim")
    return 0


def cmd_switch(switcher: VersionSwitcher, args: argparse.Namespace) -> int:
    result = switcher.switch(args.version)
    if result.changed:
        print(f"Switched to version {result.version}")
    else:
        print(f"Already using version {result.version}")
    return 0


def cmd_current(switcher: VersionSwitcher, args: argparse.Namespace) -> int:
    print(f"Current version: {switcher.current()}")
    return 0


def cmd_purge(switcher: VersionSwitcher, args: argparse.Namespace) -> int:
    switcher.purge(args.version)
    print(f"Removed version {args.version}")
    return 0


def cmd_list(switcher: VersionSwitcher, args: argparse.Namespace) -> int:
    versions = switcher.cached_versions()
    if versions:
        print("Cached versions:")
        for version in versions:
            print(f"  - {version}")
    else:
        print("No versions downloaded.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Download, cache and switch between Neovim releases")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    download = subparsers.add_parser("download", help="Download a version into the cache")
    download.add_argument("version", help="Release tag, e.g. v0.10.0")
    download.set_defaults(func=cmd_download)

    switch = subparsers.add_parser("switch", help="Make a version the active, published one")
    switch.add_argument("version", help="Release tag, e.g. v0.10.0")
    switch.set_defaults(func=cmd_switch)

    current = subparsers.add_parser("current", help="Print the currently published version")
    current.set_defaults(func=cmd_current)

    purge = subparsers.add_parser("purge", help="Delete a cached version")
    purge.add_argument("version", help="Release tag, e.g. v0.10.0")
    purge.set_defaults(func=cmd_purge)

    listing = subparsers.add_parser("list", help="List cached versions")
    listing.set_defaults(func=cmd_list)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        config = resolve_config(Path(args.config) if args.config else None)
    except (ConfigError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    paths = SwitcherPaths.from_environ(publish_root=config.publish_root)
    switcher = VersionSwitcher(paths, config)
    try:
        return args.func(switcher, args)
    except (SwitcherError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        switcher.close()


if __name__ == "__main__":
    sys.exit(main())
