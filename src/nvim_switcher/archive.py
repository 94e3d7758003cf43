"""Unpack cached release archives."""
from __future__ import annotations

import logging
import tarfile
import zlib
from pathlib import Path

from .exceptions import ExtractError

logger = logging.getLogger(__name__)


def extract_archive(archive_path: Path, destination: Path, version: str) -> Path:
    try:
        destination.mkdir(parents=True, exist_ok=True)
        with tarfile.open(archive_path, "r:gz") as tar:
            tar.extractall(path=destination, filter="data")
    except (tarfile.TarError, zlib.error, OSError, EOFError) as exc:
        raise ExtractError(version, f"Failed to extract version {version}: {exc}") from exc
    logger.info("Extracted %s to %s", archive_path, destination)
    return destination
