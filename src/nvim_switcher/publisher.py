"""Publish an unpacked release into the user's tree as per-entry symlinks."""
from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional

from .constants import LINKED_SUBTREES, SHARED_SUBTREE
from .exceptions import PublishError

logger = logging.getLogger(__name__)


def _clear(link: Path) -> None:
    # A dangling symlink reports exists() == False, so check is_symlink first.
    if link.is_symlink() or link.is_file():
        link.unlink()
    elif link.is_dir():
        shutil.rmtree(link)


def _replace_link(link: Path, target: Path) -> Path:
    _clear(link)
    link.symlink_to(target.absolute())
    logger.debug("Linked %s -> %s", link, target)
    return link


def symlink_entries(source: Path, output: Path, version: Optional[str] = None) -> List[Path]:
    """Link every entry of ``source`` into ``output``, replacing same-named entries.

    Entries of ``output`` with no counterpart in ``source`` are left alone.
    """
    if not source.is_dir():
        raise PublishError(version, f"Missing release directory {source}")
    links: List[Path] = []
    try:
        output.mkdir(parents=True, exist_ok=True)
        for entry in sorted(source.iterdir()):
            links.append(_replace_link(output / entry.name, entry))
    except OSError as exc:
        raise PublishError(version, f"Failed to link {source} into {output}: {exc}") from exc
    return links


def prune_stale_links(output: Path, owned_root: Path, version: Optional[str] = None) -> List[Path]:
    """Remove dangling symlinks in ``output`` that point under ``owned_root``.

    Links into other locations and regular files are never touched.
    """
    removed: List[Path] = []
    if not output.is_dir() or output.is_symlink():
        return removed
    owned = owned_root.absolute()
    try:
        for entry in sorted(output.iterdir()):
            if not entry.is_symlink() or entry.exists():
                continue
            target = Path(os.readlink(entry))
            if not target.is_absolute():
                target = entry.parent / target
            if target.is_relative_to(owned):
                entry.unlink()
                logger.debug("Removed stale link %s -> %s", entry, target)
                removed.append(entry)
    except OSError as exc:
        raise PublishError(version, f"Failed to remove stale links in {output}: {exc}") from exc
    return removed


def publish(
    release_root: Path,
    publish_root: Path,
    version: Optional[str] = None,
    owned_root: Optional[Path] = None,
) -> List[Path]:
    """Link bin, lib and each share entry of ``release_root`` under ``publish_root``.

    ``owned_root`` defaults to the directory holding ``release_root``; dangling
    links into it left over from a previous release are removed afterwards.
    """
    owned = owned_root or release_root.parent
    links: List[Path] = []
    for subtree in LINKED_SUBTREES:
        links.extend(symlink_entries(release_root / subtree, publish_root / subtree, version))

    shared = release_root / SHARED_SUBTREE
    if not shared.is_dir():
        raise PublishError(version, f"Missing release directory {shared}")
    shared_output = publish_root / SHARED_SUBTREE
    for entry in sorted(shared.iterdir()):
        if entry.is_dir():
            links.extend(symlink_entries(entry, shared_output / entry.name, version))
            continue
        try:
            shared_output.mkdir(parents=True, exist_ok=True)
            links.append(_replace_link(shared_output / entry.name, entry))
        except OSError as exc:
            raise PublishError(version, f"Failed to link {entry} into {shared_output}: {exc}") from exc

    stale: List[Path] = []
    for subtree in LINKED_SUBTREES:
        stale.extend(prune_stale_links(publish_root / subtree, owned, version))
    stale.extend(prune_stale_links(shared_output, owned, version))
    shared_dirs = sorted(shared_output.iterdir()) if shared_output.is_dir() else []
    for entry in shared_dirs:
        if entry.is_dir() and not entry.is_symlink():
            stale.extend(prune_stale_links(entry, owned, version))

    logger.info("Published %d links under %s, removed %d stale", len(links), publish_root, len(stale))
    return links
