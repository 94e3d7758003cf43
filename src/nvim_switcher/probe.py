"""Discover the active version by asking the installed executable."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .constants import DEFAULT_TIMEOUT, NO_VERSION, VERSION_FLAG
from .exceptions import ProbeError

logger = logging.getLogger(__name__)


class VersionResolver(Protocol):
    def version_output(self, executable: Path) -> bytes: ...


class ExecutableResolver:
    """Run ``<executable> --version`` and return its raw stdout."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def version_output(self, executable: Path) -> bytes:
        try:
            result = subprocess.run(
                [str(executable), VERSION_FLAG],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise ProbeError(None, f"Failed to run {executable}: {exc}") from exc
        return result.stdout


def parse_version_output(output: bytes) -> str:
    """Return the second field of the first line, e.g. ``v0.11.0-dev`` from ``NVIM v0.11.0-dev``."""
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProbeError(None, "Failed to get version: output is not valid text") from exc
    lines = text.splitlines()
    fields = lines[0].split() if lines else []
    if len(fields) < 2:
        raise ProbeError(None, "Failed to get version")
    return fields[1]


def current_version(executable: Path, resolver: VersionResolver) -> str:
    if not executable.exists():
        logger.debug("No executable at %s", executable)
        return NO_VERSION
    version = parse_version_output(resolver.version_output(executable))
    logger.debug("Probed %s: %s", executable, version)
    return version
