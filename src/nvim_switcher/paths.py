"""Resolve the cache and publish locations from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .constants import ACTIVE_DIRNAME, ARCHIVE_PREFIX, ARCHIVE_SUFFIX, TOOL_NAME


def archive_name(version: str) -> str:
    return f"{ARCHIVE_PREFIX}{version}{ARCHIVE_SUFFIX}"


@dataclass(frozen=True)
class SwitcherPaths:
    """Filesystem roots for one invocation.

    Nothing is created on construction; ``cache_root`` and ``active_dir``
    create their directory when first asked for it.
    """

    cache_base: Path
    publish_root: Path

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        publish_root: Optional[Path] = None,
    ) -> "SwitcherPaths":
        env = os.environ if environ is None else environ
        home = Path(env.get("HOME") or Path.home())
        cache_home = env.get("XDG_CACHE_HOME")
        cache_base = Path(cache_home) if cache_home else home / ".cache"
        return cls(
            cache_base=cache_base / TOOL_NAME,
            publish_root=publish_root or home / ".local",
        )

    def cache_root(self) -> Path:
        self.cache_base.mkdir(parents=True, exist_ok=True)
        return self.cache_base

    def artifact_path(self, version: str) -> Path:
        return self.cache_base / archive_name(version)

    def active_dir(self) -> Path:
        path = self.cache_root() / ACTIVE_DIRNAME
        path.mkdir(parents=True, exist_ok=True)
        return path
