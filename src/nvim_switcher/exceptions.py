"""Custom exceptions raised by the switcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class SwitcherError(RuntimeError):
    version: Optional[str]
    message: str

    def __str__(self) -> str:  # type: ignore[override]
        return self.message


class FetchError(SwitcherError):
    """Raised when a release archive cannot be downloaded or stored."""


class ExtractError(SwitcherError):
    """Raised when a cached archive cannot be unpacked."""


class PublishError(SwitcherError):
    """Raised when the published symlink tree cannot be updated."""


class ProbeError(SwitcherError):
    """Raised when the active executable does not report a usable version."""


class VersionNotFoundError(SwitcherError):
    """Raised when a version is expected in the cache but is absent."""


class ConfigError(ValueError):
    """Raised when the configuration file is malformed."""
