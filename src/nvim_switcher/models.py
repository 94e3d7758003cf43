"""Dataclasses describing the outcome of switcher operations."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class DownloadResult:
    version: str
    path: Path
    cached: bool
    url: Optional[str] = None


@dataclass
class SwitchResult:
    version: str
    previous: str
    changed: bool
    links: List[Path] = field(default_factory=list)
