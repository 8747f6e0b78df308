"""Shared test configuration and fixtures for the site content test suite."""

import io
import json
import sys
import tarfile
from pathlib import Path

import httpx
import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from sitecontent.core.config import AppConfig, GitHubConfig  # noqa: E402

API_URL = "https://api.github.test"
ASSET_URL = "https://assets.test/electron-api.json"
LOCALE_URL = "https://website.test/_data/locale.yml"


def make_tarball(files: dict[str, str], prefix: str = "electron-electron-abc123") -> bytes:
    """Build a gzipped tarball shaped like a GitHub source archive."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        dir_info = tarfile.TarInfo(prefix)
        dir_info.type = tarfile.DIRTYPE
        tar.addfile(dir_info)
        for name, content in files.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(f"{prefix}/{name}")
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


class FakeUpstream:
    """In-memory GitHub + asset host + website, served through httpx.MockTransport."""

    def __init__(self):
        self.release = {
            "tag_name": "v1.7.0",
            "name": "electron v1.7.0",
            "assets": [
                {"name": "electron-v1.7.0-linux-x64.zip", "browser_download_url": "https://assets.test/linux.zip"},
                {"name": "electron-api.json", "browser_download_url": ASSET_URL},
            ],
        }
        self.files = {
            "README.md": "# root readme",
            "docs/README.md": "# Docs",
            "docs/tutorial/quick-start.md": "# Quick Start",
            "docs/api/app.md": "# app",
            "docs/api/structures/rectangle.md": "# Rectangle",
            "docs/images/logo.png": "not markdown",
        }
        self.apis = [
            {
                "name": "app",
                "description": "Control your application's event lifecycle.",
                "methods": [
                    {"name": "quit", "description": "Try to close all windows."},
                ],
            },
        ]
        self.locale = "en:\n  title: Electron\n"
        self.requests: list[httpx.Request] = []
        self.fail: set[str] = set()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        for fragment in self.fail:
            if fragment in url:
                return httpx.Response(500, text="upstream exploded")

        if url == f"{API_URL}/repos/electron/electron/releases/latest":
            return httpx.Response(200, json=self.release)
        if url.startswith(f"{API_URL}/repos/electron/electron/releases/tags/"):
            tag = url.rsplit("/", 1)[1]
            if tag != self.release["tag_name"]:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=self.release)
        if url.startswith(f"{API_URL}/repos/electron/electron/tarball/"):
            return httpx.Response(302, headers={"Location": "https://codeload.test/electron.tar.gz"})
        if url == "https://codeload.test/electron.tar.gz":
            return httpx.Response(200, content=make_tarball(self.files))
        if url == ASSET_URL:
            return httpx.Response(200, content=json.dumps(self.apis).encode("utf-8"))
        if url == LOCALE_URL:
            return httpx.Response(200, text=self.locale)
        return httpx.Response(404, text="no route")

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> AppConfig:
        values = dict(
            github=GitHubConfig(api_url=API_URL, token="test-token", owner="electron", repo="electron"),
            release_tag=None,
            content_root=tmp_path / "content" / "en",
            website_locale_url=LOCALE_URL,
            http_timeout=5.0,
        )
        values.update(overrides)
        return AppConfig(**values)

    return _make
