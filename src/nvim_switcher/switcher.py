"""Compose cache, fetch, extract, publish and probe into user operations."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import requests

from .archive import extract_archive
from .cache import ArchiveCache
from .config import SwitcherConfig
from .constants import EXECUTABLE, NO_VERSION
from .exceptions import FetchError
from .fetchers import download_archive
from .models import DownloadResult, SwitchResult
from .paths import SwitcherPaths
from .probe import ExecutableResolver, VersionResolver, current_version
from .publisher import publish

logger = logging.getLogger(__name__)


class VersionSwitcher:
    def __init__(
        self,
        paths: SwitcherPaths,
        config: Optional[SwitcherConfig] = None,
        resolver: Optional[VersionResolver] = None,
        session: Optional[requests.Session] = None,
    ):
        self.paths = paths
        self.config = config or SwitcherConfig()
        self.cache = ArchiveCache(paths)
        self.resolver = resolver or ExecutableResolver(timeout=self.config.timeout)
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    @property
    def release_root(self) -> Path:
        return self.paths.active_dir() / self.config.release_folder

    # Download -------------------------------------------------------------

    def download(self, version: str) -> DownloadResult:
        if not version:
            raise FetchError(version, "Failed to download version: empty version")
        path = self.cache.path(version)
        self.paths.cache_root()
        if self.cache.exists(version):
            logger.info("Version %s already cached at %s", version, path)
            return DownloadResult(version=version, path=path, cached=True)

        url = self.config.download_url(version)
        logger.info("Pulling version %s of nvim from %s", version, url)
        download_archive(url, path, version, session=self.session, timeout=self.config.timeout)
        return DownloadResult(version=version, path=path, cached=False, url=url)

    # Switch ---------------------------------------------------------------

    def switch(self, version: str) -> SwitchResult:
        previous = self.current()
        if previous != NO_VERSION and previous == version:
            logger.info("Version %s is already active", version)
            return SwitchResult(version=version, previous=previous, changed=False)

        logger.info("Switching from %s to %s", previous, version)
        archive = self.download(version).path

        active = self.cache.reset_active()
        extract_archive(archive, active, version)
        links = publish(self.release_root, self.paths.publish_root, version)
        return SwitchResult(version=version, previous=previous, changed=True, links=links)

    # Current --------------------------------------------------------------

    def current(self) -> str:
        return current_version(self.release_root / EXECUTABLE, self.resolver)

    # Purge ----------------------------------------------------------------

    def purge(self, version: str) -> Path:
        return self.cache.drop(version)

    def cached_versions(self) -> List[str]:
        return self.cache.versions()
