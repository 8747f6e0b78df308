"""Unit tests for the GitHub client and release resolution."""

import httpx
import pytest

from conftest import API_URL
from sitecontent.errors import FetchError
from sitecontent.github.auth import GitHubCredentials
from sitecontent.github.client import GitHubClient
from sitecontent.pipeline.release import resolve_release


def _client(transport) -> GitHubClient:
    return GitHubClient(
        credentials=GitHubCredentials(token="secret"),
        base_url=API_URL,
        transport=transport,
    )


class TestCredentials:
    def test_headers(self):
        h = GitHubCredentials(token="abc").as_headers()
        assert h["Authorization"] == "token abc"
        assert "github" in h["Accept"]


class TestResolveRelease:
    @pytest.mark.asyncio
    async def test_latest_when_no_tag(self, upstream):
        release = await resolve_release(_client(upstream.transport()))
        assert release.tag_name == "v1.7.0"
        assert len(release.assets) == 2
        assert str(upstream.requests[0].url).endswith("/releases/latest")
        assert upstream.requests[0].headers["Authorization"] == "token secret"

    @pytest.mark.asyncio
    async def test_specific_tag(self, upstream):
        release = await resolve_release(_client(upstream.transport()), "v1.7.0")
        assert release.tag_name == "v1.7.0"
        assert str(upstream.requests[0].url).endswith("/releases/tags/v1.7.0")

    @pytest.mark.asyncio
    async def test_empty_tag_means_latest(self, upstream):
        await resolve_release(_client(upstream.transport()), "")
        assert str(upstream.requests[0].url).endswith("/releases/latest")

    @pytest.mark.asyncio
    async def test_unknown_tag(self, upstream):
        with pytest.raises(FetchError):
            await resolve_release(_client(upstream.transport()), "v0.0.1")

    @pytest.mark.asyncio
    async def test_server_error_single_attempt(self, upstream):
        upstream.fail.add("/releases/")
        with pytest.raises(FetchError):
            await resolve_release(_client(upstream.transport()))
        assert len(upstream.requests) == 1

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(FetchError):
            await resolve_release(_client(httpx.MockTransport(handler)))

    @pytest.mark.asyncio
    async def test_malformed_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"id": 1}))
        with pytest.raises(FetchError):
            await resolve_release(_client(transport))

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(FetchError):
            await resolve_release(_client(transport))
