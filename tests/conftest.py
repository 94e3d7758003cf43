import io
import tarfile
from pathlib import Path

import pytest

from nvim_switcher.config import SwitcherConfig
from nvim_switcher.paths import SwitcherPaths


RELEASE_FILES = {
    "bin/nvim": None,
    "lib/nvim/parser/c.so": b"\x7fELF parser",
    "lib/libnvim.so": b"\x7fELF lib",
    "share/nvim/runtime/filetype.lua": b"-- filetypes\n",
    "share/man/man1/nvim.1": b".TH NVIM 1\n",
    "share/applications/nvim.desktop": b"[Desktop Entry]\n",
}


def build_release_archive(path: Path, version: str, release_folder: str = "nvim-linux64", extra_files=None) -> Path:
    """Write a gzip tarball laid out like an upstream Linux release."""
    files = dict(RELEASE_FILES)
    files.update(extra_files or {})
    path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(path, "w:gz") as tar:
        for name, payload in files.items():
            if payload is None:
                payload = f"NVIM {version}\nBuild type: Release\n".encode("utf-8")
            info = tarfile.TarInfo(f"{release_folder}/{name}")
            info.size = len(payload)
            info.mode = 0o755 if name.startswith("bin/") else 0o644
            tar.addfile(info, io.BytesIO(payload))
    return path


class FileContentResolver:
    """Report the executable's file content as its version output."""

    def __init__(self):
        self.calls = []

    def version_output(self, executable):
        self.calls.append(executable)
        return Path(executable).read_bytes()


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def paths(tmp_path, home):
    return SwitcherPaths.from_environ({"HOME": str(home), "XDG_CACHE_HOME": str(tmp_path / "cache")})


@pytest.fixture
def config():
    return SwitcherConfig(base_url="https://example.invalid/releases/download/")


@pytest.fixture
def resolver():
    return FileContentResolver()


@pytest.fixture
def cached_release(paths):
    """Place a release archive for the given version in the cache."""

    def _cache(version, extra_files=None):
        return build_release_archive(paths.artifact_path(version), version, extra_files=extra_files)

    return _cache


@pytest.fixture
def http_session(mocker):
    """A requests.Session stand-in whose GET streams the given chunks."""

    def _session(status_code=200, chunks=(b"archive-bytes",), error=None):
        response = mocker.MagicMock()
        response.status_code = status_code
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        if error is not None:
            response.iter_content.side_effect = error
        else:
            response.iter_content.return_value = iter(chunks)
        session = mocker.Mock()
        session.get.return_value = response
        return session

    return _session
