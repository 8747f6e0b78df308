"""
Site content build — GitHub REST API client.

Key endpoints used:
  GET /repos/{owner}/{repo}/releases/latest      — most recent published release
  GET /repos/{owner}/{repo}/releases/tags/{tag}  — release for one tag
  GET /repos/{owner}/{repo}/tarball/{tag}        — source archive (redirects to codeload)

Every call is a single attempt. Transport errors, HTTP error statuses and
unparseable bodies all surface as FetchError.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from sitecontent.errors import FetchError
from sitecontent.github.auth import GitHubCredentials
from sitecontent.models.release import ReleaseModel
from sitecontent.utils.logging import logger


class GitHubClient:
    """Thin async wrapper around the GitHub repository endpoints we consume."""

    def __init__(
        self,
        credentials: GitHubCredentials,
        owner: str = "electron",
        repo: str = "electron",
        base_url: str = "https://api.github.com",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.credentials = credentials
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.credentials.as_headers(),
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def _get(self, path: str, what: str) -> httpx.Response:
        try:
            async with self._client() as client:
                resp = await client.get(path)
                if not resp.is_success:
                    logger.error(
                        "  GitHub %s returned %d: %s", path, resp.status_code, resp.text[:200],
                    )
                resp.raise_for_status()
                return resp
        except httpx.HTTPError as exc:
            raise FetchError(what, str(exc)) from exc

    async def _get_release(self, path: str, what: str) -> ReleaseModel:
        resp = await self._get(path, what)
        try:
            return ReleaseModel.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise FetchError(what, f"unexpected response body: {exc}") from exc

    async def get_latest_release(self) -> ReleaseModel:
        return await self._get_release(
            f"{self.repo_path}/releases/latest",
            f"latest {self.owner}/{self.repo} release",
        )

    async def get_release_by_tag(self, tag: str) -> ReleaseModel:
        return await self._get_release(
            f"{self.repo_path}/releases/tags/{tag}",
            f"{self.owner}/{self.repo} release {tag}",
        )

    async def download_tarball(self, tag: str) -> bytes:
        """Download the gzipped source archive for a tag and return raw bytes."""
        resp = await self._get(
            f"{self.repo_path}/tarball/{tag}",
            f"{self.owner}/{self.repo} source archive for {tag}",
        )
        logger.info("  Downloaded %d bytes of %s source", len(resp.content), tag)
        return resp.content
