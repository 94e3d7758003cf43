"""On-disk cache of release archives and the active unpacked tree."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from .constants import ARCHIVE_PREFIX, ARCHIVE_SUFFIX
from .exceptions import SwitcherError, VersionNotFoundError
from .paths import SwitcherPaths

logger = logging.getLogger(__name__)


class ArchiveCache:
    def __init__(self, paths: SwitcherPaths):
        self.paths = paths

    @property
    def root(self) -> Path:
        return self.paths.cache_root()

    def path(self, version: str) -> Path:
        return self.paths.artifact_path(version)

    def exists(self, version: str) -> bool:
        return self.path(version).is_file()

    def drop(self, version: str) -> Path:
        path = self.path(version)
        if not path.is_file():
            raise VersionNotFoundError(version, f"Version {version} not found")
        try:
            path.unlink()
        except OSError as exc:
            raise SwitcherError(version, f"Failed to remove version: {version}") from exc
        logger.info("Removed %s", path)
        return path

    def versions(self) -> List[str]:
        found: List[str] = []
        for entry in self.root.iterdir():
            name = entry.name
            if entry.is_file() and name.startswith(ARCHIVE_PREFIX) and name.endswith(ARCHIVE_SUFFIX):
                found.append(name[len(ARCHIVE_PREFIX) : -len(ARCHIVE_SUFFIX)])
        return sorted(found)

    def reset_active(self) -> Path:
        """Remove the unpacked tree in full and hand back an empty active directory."""
        active = self.paths.active_dir()
        try:
            shutil.rmtree(active)
            active.mkdir(parents=True)
        except OSError as exc:
            raise SwitcherError(None, "Failed to remove current version") from exc
        logger.info("Cleared %s", active)
        return active
