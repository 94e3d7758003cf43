"""Static data for the switcher."""
from __future__ import annotations

TOOL_NAME = "nvim_switcher"

DEFAULT_BASE_URL = "https://github.com/neovim/neovim/releases/download/"
DEFAULT_ASSET_NAME = "nvim-linux64.tar.gz"
DEFAULT_RELEASE_FOLDER = "nvim-linux64"
DEFAULT_TIMEOUT = 30
USER_AGENT = "nvim-switcher/0.1"

ARCHIVE_PREFIX = "nvim-"
ARCHIVE_SUFFIX = ".tar.gz"
ACTIVE_DIRNAME = "current"
CONFIG_FILENAME = "config.yaml"

EXECUTABLE = "bin/nvim"
VERSION_FLAG = "--version"
NO_VERSION = "None"

# Subtrees of a release that are linked entry by entry into the publish root.
LINKED_SUBTREES = ("bin", "lib")
SHARED_SUBTREE = "share"

DOWNLOAD_CHUNK_SIZE = 64 * 1024
