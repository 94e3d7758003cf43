"""Download release archives from the remote release host."""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import requests

from .constants import DEFAULT_TIMEOUT, DOWNLOAD_CHUNK_SIZE, USER_AGENT
from .exceptions import FetchError

logger = logging.getLogger(__name__)


def _open_stream(url: str, session: requests.Session, timeout: int) -> requests.Response:
    headers = {"User-Agent": USER_AGENT}
    return session.get(url, headers=headers, timeout=timeout, stream=True)


def download_archive(
    url: str,
    destination: Path,
    version: str,
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Path:
    """Stream ``url`` into ``destination``.

    The body is written to a temporary file beside ``destination`` and only
    renamed onto it once complete, so a failed transfer never leaves a
    truncated archive under the final name.
    """
    sess = session or requests.Session()
    try:
        response = _open_stream(url, sess, timeout)
    except requests.RequestException as exc:
        raise FetchError(version, f"Failed to download version {version}: {exc}") from exc

    with response:
        if response.status_code >= 400:
            raise FetchError(version, f"Failed to download version {version}: HTTP {response.status_code}")

        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".part", dir=destination.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
            os.replace(tmp_path, destination)
        except (requests.RequestException, OSError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise FetchError(version, f"Failed to store version {version}: {exc}") from exc

    logger.info("Stored %s", destination)
    return destination
