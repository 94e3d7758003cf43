"""Parse user configuration for the switcher."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_ASSET_NAME,
    DEFAULT_BASE_URL,
    DEFAULT_RELEASE_FOLDER,
    DEFAULT_TIMEOUT,
    TOOL_NAME,
)
from .exceptions import ConfigError


@dataclass
class SwitcherConfig:
    base_url: str = DEFAULT_BASE_URL
    asset_name: str = DEFAULT_ASSET_NAME
    release_folder: str = DEFAULT_RELEASE_FOLDER
    timeout: int = DEFAULT_TIMEOUT
    publish_root: Optional[Path] = None

    def download_url(self, version: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return f"{base}{version}/{self.asset_name}"


def _string_option(data: dict, key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Option '{key}' must be a non-empty string")
    return value


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME")
    if config_home:
        base = Path(config_home)
    else:
        base = Path(env.get("HOME") or Path.home()) / ".config"
    return base / TOOL_NAME / CONFIG_FILENAME


def load_config(path: Path) -> SwitcherConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return SwitcherConfig()
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    timeout = data.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ConfigError("Option 'timeout' must be a positive integer")

    publish_root = data.get("publish_root")
    if publish_root is not None:
        if not isinstance(publish_root, str) or not publish_root:
            raise ConfigError("Option 'publish_root' must be a non-empty string")
        publish_root = Path(publish_root).expanduser()

    return SwitcherConfig(
        base_url=_string_option(data, "base_url", DEFAULT_BASE_URL),
        asset_name=_string_option(data, "asset_name", DEFAULT_ASSET_NAME),
        release_folder=_string_option(data, "release_folder", DEFAULT_RELEASE_FOLDER),
        timeout=timeout,
        publish_root=publish_root,
    )


def resolve_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> SwitcherConfig:
    """Load an explicit config file, or the default one when it exists."""
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        return load_config(path)
    default = default_config_path(environ)
    if default.is_file():
        return load_config(default)
    return SwitcherConfig()
